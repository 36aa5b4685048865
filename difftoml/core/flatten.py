"""Flatten nested document trees into key-path -> leaf mappings."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Tuple

from .types import Key, ValueKind, value_kind


def iter_leaves(value: Any, parent: Key = ()) -> Iterator[Tuple[Key, Any]]:
    """Walk a document tree and yield every leaf with its key-path.

    Tables are dissolved into path segments; every other kind of value,
    arrays included, is a leaf. Empty tables yield nothing.

    Args:
        value: Document tree or subtree.
        parent: Key-path accumulated so far.

    Yields:
        Tuples of (key_path, leaf_value).
    """
    if value_kind(value) is ValueKind.TABLE:
        for label, child in value.items():
            yield from iter_leaves(child, parent + (str(label),))
    else:
        yield parent, value


def flatten(tree: Any) -> Dict[Key, Any]:
    """Flatten a document tree into a mapping from key-path to leaf value.

    >>> flatten({"a": {"b": 1, "c": {"d": 2}}})
    {('a', 'b'): 1, ('a', 'c', 'd'): 2}

    A bare leaf flattens to a single entry at the empty key-path.
    """
    return {key: leaf for key, leaf in iter_leaves(tree)}
