"""Render a DocumentDiff as text or JSON."""

from __future__ import annotations

import json
import math
from datetime import date, datetime, time
from typing import Any, Dict, List, Mapping, Optional

import typer

from .core.types import DocumentDiff, Key, ValueDiff, ValueKind, dotted, value_kind


def format_value(value: Any) -> str:
    """Render a leaf value as a TOML-style literal."""
    kind = value_kind(value)
    if kind is ValueKind.STRING:
        return json.dumps(value, ensure_ascii=False)
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.FLOAT:
        if math.isnan(value):
            return "nan"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        return repr(value)
    if kind is ValueKind.TIMESTAMP:
        return value.isoformat()
    if kind is ValueKind.ARRAY:
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    if kind is ValueKind.TABLE:
        inner = ", ".join(f"{k} = {format_value(v)}" for k, v in value.items())
        return "{ " + inner + " }" if inner else "{}"
    if kind is ValueKind.NULL:
        return "null"
    return str(value)


def _style(text: str, color: bool, **kwargs: Any) -> str:
    return typer.style(text, **kwargs) if color else text


def _value_section(
    lines: List[str],
    title: str,
    entries: List[ValueDiff],
    color: bool,
) -> None:
    for entry in entries:
        lines.append("")
        lines.append(_style(f"{title} {dotted(entry.key)}", color, bold=True))
        lines.append(_style(f"<: {format_value(entry.first)}", color, fg=typer.colors.RED))
        lines.append(_style(f">: {format_value(entry.second)}", color, fg=typer.colors.GREEN))


def render_text(
    diff: DocumentDiff,
    first_label: str,
    second_label: str,
    display_equal: bool = False,
    color: bool = False,
) -> str:
    """Render the diff in the classic difftoml layout.

    Args:
        diff: Result of a document comparison.
        first_label: Display name of the first document.
        second_label: Display name of the second document.
        display_equal: Also list keys whose values are equal.
        color: Add ANSI colours.

    Returns:
        The report, without a trailing newline.
    """
    lines: List[str] = []
    for label, entries, fg in (
        (first_label, diff.first_only, typer.colors.RED),
        (second_label, diff.second_only, typer.colors.GREEN),
    ):
        if not entries:
            continue
        lines.append("")
        lines.append(_style(f"Entries only found in {label}", color, bold=True))
        for key, value in entries.items():
            lines.append(_style(f"{dotted(key)}: {format_value(value)}", color, fg=fg))

    _value_section(lines, "Unequal value for key", diff.unequal, color)
    if display_equal:
        _value_section(lines, "Equal value for key", diff.equal, color)
    return "\n".join(lines)


def to_jsonable(value: Any) -> Any:
    """Convert a leaf value into something strict JSON accepts."""
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, float) and not math.isfinite(value):
        return format_value(value)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    return value


def _leaves(entries: Mapping[Key, Any]) -> List[Dict[str, Any]]:
    return [{"key": list(k), "value": to_jsonable(v)} for k, v in entries.items()]


def _pairs(entries: List[ValueDiff]) -> List[Dict[str, Any]]:
    return [
        {"key": list(e.key), "first": to_jsonable(e.first), "second": to_jsonable(e.second)}
        for e in entries
    ]


def render_json(
    diff: DocumentDiff,
    display_equal: bool = False,
    indent: Optional[int] = 2,
) -> str:
    """Render the diff as JSON.

    Every section is a list of entries whose ``key`` is the list of
    key-path segments, so ``{"a.b": 1}`` and ``{"a": {"b": 1}}`` stay
    apart. Non-finite floats are written as ``"nan"``, ``"inf"`` or ``"-inf"``.
    """
    payload: Dict[str, Any] = {
        "first_only": _leaves(diff.first_only),
        "second_only": _leaves(diff.second_only),
        "unequal": _pairs(diff.unequal),
    }
    if display_equal:
        payload["equal"] = _pairs(diff.equal)
    return json.dumps(payload, indent=indent, allow_nan=False)
