"""Descriptive metrics over a set of intervals.

None of these feed back into placement decisions.
"""

import logging
from collections.abc import Sequence
from typing import Any

from lanepack.interval import Interval
from lanepack.util import to_number

logger = logging.getLogger(__name__)


def total_duration(intervals: Sequence[Interval[Any, Any]]) -> float:
    """Sum of ``end - start`` over all intervals."""
    return sum(to_number(ivl.end) - to_number(ivl.start) for ivl in intervals)


def span(intervals: Sequence[Interval[Any, Any]]) -> float:
    """Distance from the earliest start to the latest end (0 if empty)."""
    if not intervals:
        return 0.0
    first = min(to_number(ivl.start) for ivl in intervals)
    last = max(to_number(ivl.end) for ivl in intervals)
    return last - first


def efficiency(intervals: Sequence[Interval[Any, Any]], total_columns: int) -> float:
    """Fraction of the ``span x total_columns`` rectangle covered by intervals.

    Returns 0.0 when there are no columns, the span is empty, or the
    endpoints are ordered values with no numeric reading (``"09:00"``,
    tuples, custom objects).

    Example:
        >>> efficiency([Interval(id="x", start=0, end=5)], 1)
        1.0
    """
    if total_columns <= 0 or not intervals:
        return 0.0
    try:
        capacity = span(intervals) * total_columns
        used = total_duration(intervals)
    except (TypeError, ValueError) as exc:
        logger.debug("Efficiency not measurable, reporting 0.0: %s", exc)
        return 0.0
    if capacity <= 0:
        return 0.0
    return used / capacity


def max_overlap(intervals: Sequence[Interval[Any, Any]]) -> int:
    """Maximum number of ``[start, end)`` ranges that contain a common point.

    Ends sort before starts at equal coordinates, so touching intervals do
    not count as overlapping and zero-length intervals contribute nothing.
    """
    events: list[tuple[Any, int]] = []
    for ivl in intervals:
        events.append((ivl.start, 1))
        events.append((ivl.end, -1))
    # (x, -1) sorts before (x, 1)
    events.sort()

    depth = 0
    deepest = 0
    for _, delta in events:
        depth += delta
        deepest = max(deepest, depth)
    return deepest
