"""Type definitions for the difftoml comparison engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Generic, List, Mapping, Tuple, TypeVar

T = TypeVar("T")

# Hierarchical address of one leaf, e.g. ("server", "timeout")
Key = Tuple[str, ...]


def dotted(key: Key) -> str:
    """Render a key-path in dotted form, e.g. ``server.timeout``."""
    return ".".join(key)


class ValueKind(Enum):
    """Closed set of value variants a document tree can hold."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    ARRAY = "array"
    TABLE = "table"
    # YAML/JSON only
    NULL = "null"


def value_kind(value: Any) -> ValueKind:
    """Classify a parsed value into its ``ValueKind``.

    Args:
        value: Value as produced by a TOML, YAML or JSON parser.

    Returns:
        The matching kind.

    Raises:
        TypeError: If the value is not something a config parser produces.
    """
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (datetime, date, time)):
        return ValueKind.TIMESTAMP
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.TABLE
    if value is None:
        return ValueKind.NULL
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def values_equal(first: Any, second: Any) -> bool:
    """Compare two leaf values the way the document format does.

    Values of different kinds are never equal, so ``1`` differs from
    ``true`` and from ``1.0``. Arrays compare element-wise.
    """
    kind = value_kind(first)
    if kind is not value_kind(second):
        return False
    if kind is ValueKind.ARRAY:
        return len(first) == len(second) and all(
            values_equal(a, b) for a, b in zip(first, second)
        )
    if kind is ValueKind.TABLE:
        return first.keys() == second.keys() and all(
            values_equal(first[k], second[k]) for k in first
        )
    if kind is ValueKind.FLOAT and math.isnan(first) and math.isnan(second):
        # nan != nan, but the same literal on both sides is not a difference
        return True
    return first == second


@dataclass(frozen=True)
class KeyOrigins(Generic[T]):
    """Result of partitioning two key collections.

    Attributes:
        first_only: Elements only found in the first collection.
        second_only: Elements only found in the second collection.
        both: Elements found in both collections.
    """

    first_only: Tuple[T, ...] = ()
    second_only: Tuple[T, ...] = ()
    both: Tuple[T, ...] = ()


@dataclass(frozen=True)
class ValueDiff:
    """A key present in both documents, with the value from each side."""

    key: Key
    first: Any
    second: Any

    @property
    def is_equal(self) -> bool:
        return values_equal(self.first, self.second)


@dataclass(frozen=True)
class DocumentDiff:
    """Differences between two flattened documents.

    Attributes:
        first_only: Leaves only found in the first document.
        second_only: Leaves only found in the second document.
        unequal: Keys in both documents whose values differ.
        equal: Keys in both documents with equal values.
    """

    first_only: Mapping[Key, Any] = field(default_factory=dict)
    second_only: Mapping[Key, Any] = field(default_factory=dict)
    unequal: List[ValueDiff] = field(default_factory=list)
    equal: List[ValueDiff] = field(default_factory=list)

    @property
    def has_differences(self) -> bool:
        return bool(self.first_only or self.second_only or self.unequal)
