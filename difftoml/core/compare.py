"""Partition two key collections into first-only, second-only and shared."""

from __future__ import annotations

import logging
from typing import Hashable, List, Sequence, TypeVar

from .errors import AsymmetricComparison
from .types import KeyOrigins

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def compare_vectors(first: Sequence[T], second: Sequence[T]) -> KeyOrigins[T]:
    """Partition the elements of two sequences.

    Works for any hashable element type, key-paths being the usual one.
    Each output keeps the order of the sequence it was drawn from;
    ``both`` follows the order of ``first``.

    Args:
        first: Elements of the first collection.
        second: Elements of the second collection.

    Returns:
        KeyOrigins with first_only, second_only and both.

    Raises:
        AsymmetricComparison: If the shared elements seen from ``first``
            differ from those seen from ``second``.
    """
    first_index = set(first)
    second_index = set(second)

    in_first_only: List[T] = []
    in_both: List[T] = []
    for element in first:
        if element in second_index:
            in_both.append(element)
        else:
            in_first_only.append(element)

    in_second_only: List[T] = []
    in_both_wrt_second: List[T] = []
    for element in second:
        if element in first_index:
            in_both_wrt_second.append(element)
        else:
            in_second_only.append(element)

    if set(in_both) != set(in_both_wrt_second):
        raise AsymmetricComparison(
            f"Asymmetric comparison: {len(in_both)} shared elements seen from "
            f"the first collection, {len(in_both_wrt_second)} from the second"
        )

    logger.debug(
        "Partitioned keys: %d first only, %d second only, %d shared",
        len(in_first_only),
        len(in_second_only),
        len(in_both),
    )
    return KeyOrigins(
        first_only=tuple(in_first_only),
        second_only=tuple(in_second_only),
        both=tuple(in_both),
    )
