"""Pack arbitrary records by mapping them to intervals and back."""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from lanepack.core import pack
from lanepack.interval import Interval
from lanepack.options import PackOptions

R = TypeVar("R")


def pack_by(
    records: Iterable[R],
    to_interval: Callable[[R], Interval[Any, Any]],
    options: PackOptions | None = None,
    **overrides: Any,
) -> list[list[R]]:
    """Pack records using ``to_interval`` and return the records per column.

    Each record is converted once. Ids in the packing that do not map back
    to a record are skipped.

    Example:
        >>> meetings = [{"name": "standup", "at": 9, "until": 10}]
        >>> pack_by(meetings, lambda m: Interval(id=m["name"], start=m["at"], end=m["until"]))
        [[{'name': 'standup', 'at': 9, 'until': 10}]]
    """
    pairs = [(record, to_interval(record)) for record in records]
    by_id = {interval.id: record for record, interval in pairs}
    result = pack([interval for _, interval in pairs], options, **overrides)
    return [
        [by_id[ident] for ident in column if ident in by_id]
        for column in result.columns
    ]
