from typing import Any, Generic, Literal, TypeAlias

from typing_extensions import override

from lanepack.interval import Interval, K
from lanepack.util import to_number

SortKey: TypeAlias = Literal["start", "end", "duration"]


class Property(Generic[K]):
    """A value read off an interval, usable as a sort key."""

    def apply(self, event: Interval[Any, K]) -> Any:
        raise NotImplementedError

    def __call__(self, event: Interval[Any, K]) -> Any:
        return self.apply(event)


class Start(Property[K]):
    @override
    def apply(self, event: Interval[Any, K]) -> K:
        return event.start


class End(Property[K]):
    @override
    def apply(self, event: Interval[Any, K]) -> K:
        return event.end


class Duration(Property[Any]):
    """Length of the interval as a float, whatever the endpoint type."""

    @override
    def apply(self, event: Interval[Any, Any]) -> float:
        return to_number(event.end) - to_number(event.start)


start: Start[Any] = Start()
end: End[Any] = End()
duration: Duration = Duration()

SORT_KEYS: dict[SortKey, Property[Any]] = {
    "start": start,
    "end": end,
    "duration": duration,
}
