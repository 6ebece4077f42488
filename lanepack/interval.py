from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K")


@dataclass(frozen=True, kw_only=True)
class Interval(Generic[T, K]):
    """A labelled span placed by the packers.

    ``end < start`` is allowed to exist so that ``validate`` can report it;
    the packers use the endpoints as given.
    """

    id: T
    start: K
    end: K

    @property
    def duration(self) -> Any:
        return self.end - self.start  # pyright: ignore[reportOperatorIssue]

    def __str__(self) -> str:
        """Human-friendly string showing id and range."""
        return f"Interval({self.id!r}: {self.start}→{self.end})"
