"""Exclusion filtering for document key-paths."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .types import Key, dotted

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Filter:
    """Substring blacklist over dotted key-paths.

    Attributes:
        exclude: Tokens; a key-path is dropped when its dotted form
            contains any of them.
    """

    exclude: Tuple[str, ...] = ()

    @staticmethod
    def from_string(spec: Optional[str]) -> Optional["Filter"]:
        """Create a Filter from a comma-separated exclusion string.

        Tokens are not trimmed. An empty token (e.g. from a trailing
        comma) matches every key.

        Args:
            spec: Exclusion string such as ``"key1,key2.key3"``.

        Returns:
            Filter instance or None if spec is None.
        """
        if spec is None:
            return None
        return Filter(exclude=tuple(spec.split(",")))


def should_include_key(key: Key, flt: Optional[Filter]) -> bool:
    """Check if a key-path survives the filter.

    Args:
        key: Key-path to test.
        flt: Filter to apply (None means include all).

    Returns:
        True if no exclusion token occurs in the dotted key, False otherwise.
    """
    if flt is None:
        return True
    key_str = dotted(key)
    return not any(token in key_str for token in flt.exclude)


def filter_keys(keys: Sequence[Key], exclude: Optional[str] = None) -> List[Key]:
    """Drop every key-path whose dotted form contains an excluded substring.

    Matching is plain substring containment, so ``key1`` also excludes
    ``containskey1inside`` and ``key2.key3`` excludes ``key2.key3.key4``.
    Order is preserved and duplicates pass through.

    Args:
        keys: Key-paths to filter.
        exclude: Comma-separated exclusion tokens, or None to keep all.

    Returns:
        The surviving key-paths.
    """
    flt = Filter.from_string(exclude)
    included = [key for key in keys if should_include_key(key, flt)]
    if len(included) != len(keys):
        logger.debug("Excluded %d of %d keys", len(keys) - len(included), len(keys))
    return included
