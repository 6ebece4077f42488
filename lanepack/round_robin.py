"""Round-robin placement into a fixed number of columns.

The trial walks intervals in input order with a rotating column pointer, so
load spreads across columns instead of piling into the lowest indexes.
``minimal_columns`` probes increasing column counts until a trial fits.
"""

from collections.abc import Hashable, Sequence
from typing import Any

from lanepack.interval import Interval


def _place(
    columns: list[list[Interval[Any, Any]]],
    interval: Interval[Any, Any],
    pointer: int,
) -> tuple[bool, int]:
    """Try each column once starting at ``pointer``; return (placed, pointer).

    The pointer advances after every candidate examined, placed or not.
    """
    n = len(columns)
    for _ in range(n):
        column = columns[pointer % n]
        pointer += 1
        if not column or column[-1].end <= interval.start:
            column.append(interval)
            return True, pointer
    return False, pointer


def round_robin_trial(
    intervals: Sequence[Interval[Any, Any]], n: int
) -> list[list[Hashable]] | None:
    """Pack ``intervals`` into exactly ``n`` columns, or return None.

    Intervals are taken in input order (no sorting). A single pointer is
    shared across all intervals rather than reset for each one.

    Args:
        intervals: Intervals to place
        n: Number of columns, must be positive

    Returns:
        ``n`` lists of ids in column order, or None if some interval
        found no compatible column

    Raises:
        ValueError: If ``n <= 0``
    """
    if n <= 0:
        raise ValueError(f"Column count must be greater than 0, got {n}")

    columns: list[list[Interval[Any, Any]]] = [[] for _ in range(n)]
    pointer = 0
    for interval in intervals:
        placed, pointer = _place(columns, interval, pointer)
        if not placed:
            return None
    return [[ivl.id for ivl in column] for column in columns]


def minimal_columns(
    intervals: Sequence[Interval[Any, Any]],
) -> list[list[Hashable]]:
    """Smallest round-robin packing, trying n = 1, 2, ... len(intervals).

    The last trial always fits (one interval per column), so the search
    terminates for any non-empty input. Empty input yields no columns.
    """
    for n in range(1, len(intervals) + 1):
        columns = round_robin_trial(intervals, n)
        if columns is not None:
            return columns
    return []
