"""Tests for the difftoml command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from difftoml.cli.__main__ import app

runner = CliRunner()


@pytest.fixture
def documents(tmp_path: Path):
    first = tmp_path / "first.toml"
    second = tmp_path / "second.toml"
    first.write_text('[server]\ntimeout = 30\nhost = "a"\n\n[only_first]\nx = 1\n')
    second.write_text('[server]\ntimeout = 60\nhost = "a"\n')
    return first, second


def test_reports_differences(documents):
    first, second = documents
    result = runner.invoke(app, [str(first), str(second)])
    assert result.exit_code == 0, result.output
    assert f"Entries only found in {first}" in result.output
    assert "only_first.x: 1" in result.output
    assert "Unequal value for key server.timeout" in result.output
    assert "<: 30" in result.output
    assert ">: 60" in result.output
    assert "server.host" not in result.output


def test_display_equal(documents):
    first, second = documents
    result = runner.invoke(app, [str(first), str(second), "-d"])
    assert result.exit_code == 0
    assert "Equal value for key server.host" in result.output


def test_exclude(documents):
    first, second = documents
    result = runner.invoke(app, [str(first), str(second), "--exclude", "only_first,timeout"])
    assert result.exit_code == 0
    assert result.output == ""


def test_exclude_from_environment(documents):
    first, second = documents
    result = runner.invoke(
        app, [str(first), str(second)], env={"DIFFTOML_EXCLUDE": "timeout"}
    )
    assert result.exit_code == 0
    assert "server.timeout" not in result.output
    assert "only_first.x" in result.output


def test_json_format(documents):
    first, second = documents
    result = runner.invoke(app, [str(first), str(second), "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["first_only"] == [{"key": ["only_first", "x"], "value": 1}]
    assert payload["unequal"] == [{"key": ["server", "timeout"], "first": 30, "second": 60}]


def test_unsupported_yaml_value(tmp_path: Path, documents):
    first, _ = documents
    yml = tmp_path / "blob.yaml"
    yml.write_text("blob: !!binary aGVsbG8=\n")
    result = runner.invoke(app, [str(first), str(yml)])
    assert result.exit_code == 1
    assert "unsupported value" in result.output
    assert not isinstance(result.exception, TypeError)


def test_bad_format(documents):
    first, second = documents
    result = runner.invoke(app, [str(first), str(second), "--format", "xml"])
    assert result.exit_code == 2


def test_missing_file(tmp_path: Path, documents):
    first, _ = documents
    result = runner.invoke(app, [str(first), str(tmp_path / "nope.toml")])
    assert result.exit_code == 1
    assert "Path does not exist" in result.output


def test_not_a_toml_file(tmp_path: Path, documents):
    first, _ = documents
    other = tmp_path / "notes.txt"
    other.write_text("hello")
    result = runner.invoke(app, [str(first), str(other)])
    assert result.exit_code == 1
    assert "Unsupported document type" in result.output


def test_mixed_formats(tmp_path: Path, documents):
    first, _ = documents
    yml = tmp_path / "second.yaml"
    yml.write_text("server:\n  timeout: 30\n  host: a\nonly_first:\n  x: 1\n")
    result = runner.invoke(app, [str(first), str(yml)])
    assert result.exit_code == 0
    assert result.output == ""
