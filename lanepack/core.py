import heapq
import logging
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, replace
from time import perf_counter
from typing import Any, Generic, TypeVar

from lanepack.interval import Interval
from lanepack.metrics import efficiency, max_overlap
from lanepack.options import PackOptions
from lanepack.properties import SORT_KEYS, SortKey, duration
from lanepack.round_robin import minimal_columns

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class PackingMetadata:
    """Strategy name, elapsed seconds and input size of one ``pack`` call."""

    strategy: str
    elapsed: float
    input_size: int


@dataclass(frozen=True)
class PackingResult(Generic[T]):
    """Outcome of one ``pack`` call.

    Attributes:
        columns: Interval ids per column, in placement order
        total_columns: Number of columns
        efficiency: Share of the span x columns area covered by placed intervals
        metadata: Strategy name, elapsed seconds and input size
        unplaced: Ids greedy packing could not fit under ``max_columns``
    """

    columns: tuple[tuple[T, ...], ...]
    total_columns: int
    efficiency: float
    metadata: PackingMetadata
    unplaced: tuple[T, ...] = ()

    def as_lists(self) -> list[list[T]]:
        return [list(column) for column in self.columns]


def _first_fit_by_start(
    ordered: Sequence[Interval[Any, Any]], max_columns: int | None
) -> tuple[list[list[Any]], list[Any]]:
    """First-fit over start-sorted intervals in O(n log n).

    With starts non-decreasing, a column whose tail ended by one start stays
    usable for every later start, so freed columns move from ``busy`` to
    ``free`` once and the lowest free index is the first-fit choice.
    """
    columns: list[list[Any]] = []
    unplaced: list[Any] = []
    busy: list[tuple[Any, int]] = []  # (tail end, column index)
    free: list[int] = []

    for interval in ordered:
        while busy and busy[0][0] <= interval.start:
            heapq.heappush(free, heapq.heappop(busy)[1])

        if free:
            index = heapq.heappop(free)
        elif max_columns is None or len(columns) < max_columns:
            index = len(columns)
            columns.append([])
        else:
            unplaced.append(interval.id)
            continue

        columns[index].append(interval.id)
        heapq.heappush(busy, (interval.end, index))

    return columns, unplaced


def _first_fit_scan(
    ordered: Sequence[Interval[Any, Any]], max_columns: int | None
) -> tuple[list[list[Any]], list[Any]]:
    """First-fit for orderings other than by start: scan every column tail."""
    columns: list[list[Any]] = []
    tails: list[Interval[Any, Any]] = []
    unplaced: list[Any] = []

    for interval in ordered:
        for index, tail in enumerate(tails):
            if tail.end <= interval.start:
                columns[index].append(interval.id)
                tails[index] = interval
                break
        else:
            if max_columns is None or len(columns) < max_columns:
                columns.append([interval.id])
                tails.append(interval)
            else:
                unplaced.append(interval.id)

    return columns, unplaced


def greedy(
    intervals: Sequence[Interval[Any, Any]],
    sort_by: SortKey = "start",
    max_columns: int | None = None,
) -> tuple[list[list[Any]], list[Any]]:
    """Place each interval into the first compatible column, in creation order.

    Intervals are stably sorted by ``sort_by`` first. A column is compatible
    when its last interval ends at or before the new start. When
    ``max_columns`` columns exist and none is compatible, the interval is
    returned in the unplaced list instead of a column.

    Returns:
        (columns of ids, unplaced ids)
    """
    ordered = sorted(intervals, key=SORT_KEYS[sort_by])
    if sort_by == "start":
        return _first_fit_by_start(ordered, max_columns)
    return _first_fit_scan(ordered, max_columns)


def _busy_time(interval: Interval[Any, Any]) -> float:
    """Length used for load balancing; 0.0 for endpoints with no numeric reading."""
    try:
        return duration.apply(interval)
    except (TypeError, ValueError):
        return 0.0


def balanced(
    intervals: Sequence[Interval[Any, Any]], sort_by: SortKey = "start"
) -> list[list[Any]]:
    """Spread intervals over as many columns as the overlap depth requires.

    Each interval, in ``sort_by`` order, goes to the compatible column with
    the least accumulated busy time (lowest index on ties). A new column is
    opened only when none is compatible, which can happen with zero-length
    intervals or non-start orderings. Endpoints that cannot be measured count
    as zero load, which reduces the choice to the lowest compatible index.
    """
    ordered = sorted(intervals, key=SORT_KEYS[sort_by])
    depth = max_overlap(ordered)
    columns: list[list[Any]] = [[] for _ in range(depth)]
    tails: list[Interval[Any, Any] | None] = [None] * depth
    loads: list[float] = [0.0] * depth

    for interval in ordered:
        candidates = [
            index
            for index, tail in enumerate(tails)
            if tail is None or tail.end <= interval.start
        ]
        if candidates:
            index = min(candidates, key=lambda i: loads[i])
        else:
            index = len(columns)
            columns.append([])
            tails.append(None)
            loads.append(0.0)

        columns[index].append(interval.id)
        tails[index] = interval
        loads[index] += _busy_time(interval)

    return columns


def pack(
    intervals: Iterable[Interval[Any, Any]],
    options: PackOptions | None = None,
    **overrides: Any,
) -> PackingResult[Any]:
    """Assign intervals to non-overlapping columns.

    Intervals in the same column never overlap; an interval starting exactly
    when another ends may share its column. The input is not re-validated
    (see ``validate``) and is never mutated.

    Args:
        intervals: Objects with ``id``, ``start`` and ``end``
        options: Packing configuration (defaults to ``PackOptions()``)
        **overrides: Individual ``PackOptions`` fields to replace

    Returns:
        PackingResult with column ids, count, efficiency and metadata

    Example:
        >>> result = pack(
        ...     [Interval(id="a", start=0, end=5), Interval(id="b", start=5, end=10)]
        ... )
        >>> result.as_lists()
        [['a', 'b']]
    """
    started = perf_counter()
    items = list(intervals)
    options = replace(options or PackOptions(), **overrides)

    if options.allow_overlap:
        logger.debug("allow_overlap is accepted but has no effect")
    if options.max_columns is not None and options.strategy != "greedy":
        logger.debug(
            "max_columns=%d ignored by %s strategy", options.max_columns, options.strategy
        )

    unplaced: list[Any] = []
    if options.strategy == "optimized":
        columns = minimal_columns(items)
    elif options.strategy == "balanced":
        columns = balanced(items, options.sort_by)
    else:
        columns, unplaced = greedy(items, options.sort_by, options.max_columns)

    placed = items
    if unplaced:
        skipped = set(unplaced)
        placed = [item for item in items if item.id not in skipped]
        logger.warning(
            "%d interval(s) left unplaced at max_columns=%d: %r",
            len(unplaced),
            options.max_columns,
            unplaced,
        )

    result = PackingResult(
        columns=tuple(tuple(column) for column in columns),
        total_columns=len(columns),
        efficiency=efficiency(placed, len(columns)),
        metadata=PackingMetadata(
            strategy=options.strategy,
            elapsed=perf_counter() - started,
            input_size=len(items),
        ),
        unplaced=tuple(unplaced),
    )
    logger.debug(
        "Packed %d interval(s) into %d column(s) with %s strategy",
        len(items),
        result.total_columns,
        options.strategy,
    )
    return result
