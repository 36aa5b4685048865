"""Unit tests for the report module."""

from __future__ import annotations

import json
from datetime import date, datetime, timezone

from difftoml.core.diff import diff_documents
from difftoml.report import format_value, render_json, render_text

FIRST = {"server": {"timeout": 30, "host": "a"}, "old": True}
SECOND = {"server": {"timeout": 60, "host": "a"}, "new": [1, 2]}


class TestFormatValue:
    """Test suite for format_value function."""

    def test_scalars(self):
        assert format_value("a") == '"a"'
        assert format_value(30) == "30"
        assert format_value(1.5) == "1.5"
        assert format_value(True) == "true"
        assert format_value(None) == "null"

    def test_special_floats(self):
        assert format_value(float("inf")) == "inf"
        assert format_value(float("-inf")) == "-inf"
        assert format_value(float("nan")) == "nan"

    def test_timestamps(self):
        assert format_value(date(1979, 5, 27)) == "1979-05-27"
        assert (
            format_value(datetime(1979, 5, 27, 7, 32, tzinfo=timezone.utc))
            == "1979-05-27T07:32:00+00:00"
        )

    def test_collections(self):
        assert format_value([1, "a", False]) == '[1, "a", false]'
        assert format_value({"x": 1}) == "{ x = 1 }"
        assert format_value({}) == "{}"


class TestRenderText:
    """Test suite for render_text function."""

    def test_layout(self):
        """Test the plain layout of every section."""
        diff = diff_documents(FIRST, SECOND)
        assert render_text(diff, "a.toml", "b.toml").splitlines() == [
            "",
            "Entries only found in a.toml",
            "old: true",
            "",
            "Entries only found in b.toml",
            "new: [1, 2]",
            "",
            "Unequal value for key server.timeout",
            "<: 30",
            ">: 60",
        ]

    def test_display_equal(self):
        """Test that equal keys are only listed on request."""
        diff = diff_documents(FIRST, SECOND)
        assert "server.host" not in render_text(diff, "a", "b")
        text = render_text(diff, "a", "b", display_equal=True)
        assert text.endswith('Equal value for key server.host\n<: "a"\n>: "a"')

    def test_no_differences(self):
        diff = diff_documents(FIRST, FIRST)
        assert render_text(diff, "a", "b") == ""

    def test_color(self):
        """Test that colour adds ANSI escapes around the same text."""
        diff = diff_documents(FIRST, SECOND)
        plain = render_text(diff, "a", "b")
        colored = render_text(diff, "a", "b", color=True)
        assert "\x1b[" in colored
        assert "\x1b[" not in plain
        assert "Unequal value for key server.timeout" in colored


class TestRenderJson:
    """Test suite for render_json function."""

    def test_payload(self):
        diff = diff_documents(FIRST, SECOND)
        payload = json.loads(render_json(diff))
        assert payload == {
            "first_only": [{"key": ["old"], "value": True}],
            "second_only": [{"key": ["new"], "value": [1, 2]}],
            "unequal": [{"key": ["server", "timeout"], "first": 30, "second": 60}],
        }

    def test_payload_with_equal(self):
        diff = diff_documents(FIRST, SECOND)
        payload = json.loads(render_json(diff, display_equal=True))
        assert payload["equal"] == [{"key": ["server", "host"], "first": "a", "second": "a"}]

    def test_timestamps_serialized(self):
        diff = diff_documents({"d": date(2020, 1, 1)}, {})
        payload = json.loads(render_json(diff))
        assert payload["first_only"] == [{"key": ["d"], "value": "2020-01-01"}]

    def test_dotted_label_kept_apart(self):
        """Test that a dotted label and a nested key are both reported."""
        diff = diff_documents({"a.b": 1, "a": {"b": 2}}, {})
        payload = json.loads(render_json(diff))
        assert sorted(payload["first_only"], key=lambda e: e["key"]) == [
            {"key": ["a", "b"], "value": 2},
            {"key": ["a.b"], "value": 1},
        ]

    def test_non_finite_floats_are_strict_json(self):
        """Test that nan and inf are written as strings, not NaN/Infinity."""

        def reject(constant):
            raise ValueError(f"non-standard JSON constant {constant}")

        diff = diff_documents(
            {"x": float("nan"), "y": [float("inf")]},
            {"x": 1.0, "y": [float("-inf")]},
        )
        payload = json.loads(render_json(diff), parse_constant=reject)
        assert payload["unequal"] == [
            {"key": ["x"], "first": "nan", "second": 1.0},
            {"key": ["y"], "first": ["inf"], "second": ["-inf"]},
        ]
