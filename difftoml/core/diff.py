"""Compare two document trees leaf by leaf."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .compare import compare_vectors
from .filters import filter_keys
from .flatten import flatten
from .types import DocumentDiff, Key, ValueDiff

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiffOptions:
    """Options controlling a comparison and its report.

    Attributes:
        exclude: Comma-separated exclusion tokens.
        display_equal: Also report keys whose values are equal.
        color: Colourise the text report.
        output_format: ``"text"`` or ``"json"``.
    """

    exclude: Optional[str] = None
    display_equal: bool = False
    color: bool = True
    output_format: str = "text"


def diff_flattened(
    first: Dict[Key, Any],
    second: Dict[Key, Any],
    exclude: Optional[str] = None,
) -> DocumentDiff:
    """Compare two flattened documents.

    Args:
        first: Flattened first document.
        second: Flattened second document.
        exclude: Comma-separated exclusion tokens applied to both sides.

    Returns:
        DocumentDiff with every entry sorted by key-path.
    """
    first_keys = filter_keys(list(first), exclude)
    second_keys = filter_keys(list(second), exclude)
    origins = compare_vectors(first_keys, second_keys)

    unequal: List[ValueDiff] = []
    equal: List[ValueDiff] = []
    for key in sorted(origins.both):
        entry = ValueDiff(key=key, first=first[key], second=second[key])
        if entry.is_equal:
            equal.append(entry)
        else:
            unequal.append(entry)

    logger.debug("%d unequal and %d equal shared keys", len(unequal), len(equal))
    return DocumentDiff(
        first_only={key: first[key] for key in sorted(origins.first_only)},
        second_only={key: second[key] for key in sorted(origins.second_only)},
        unequal=unequal,
        equal=equal,
    )


def diff_documents(
    first: Any,
    second: Any,
    exclude: Optional[str] = None,
) -> DocumentDiff:
    """Flatten two document trees and compare them.

    Args:
        first: Parsed first document.
        second: Parsed second document.
        exclude: Comma-separated exclusion tokens applied to both sides.

    Returns:
        DocumentDiff describing the differences.
    """
    return diff_flattened(flatten(first), flatten(second), exclude)
