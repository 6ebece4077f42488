from dataclasses import dataclass
from typing import Literal, TypeAlias, get_args

from lanepack.properties import SortKey

Strategy: TypeAlias = Literal["greedy", "optimized", "balanced"]


@dataclass(frozen=True, kw_only=True)
class PackOptions:
    """Configuration for a single ``pack`` call.

    Attributes:
        strategy: Column-selection policy
        max_columns: Upper bound on columns (greedy only); None for no limit
        sort_by: Placement order for greedy and balanced packing
        allow_overlap: Accepted for compatibility; currently has no effect
    """

    strategy: Strategy = "greedy"
    max_columns: int | None = None
    sort_by: SortKey = "start"
    allow_overlap: bool = False

    def __post_init__(self) -> None:
        if self.strategy not in get_args(Strategy):
            valid = ", ".join(get_args(Strategy))
            raise ValueError(
                f"Unknown strategy {self.strategy!r}. Valid strategies: {valid}"
            )
        if self.sort_by not in get_args(SortKey):
            valid = ", ".join(get_args(SortKey))
            raise ValueError(f"Unknown sort_by {self.sort_by!r}. Valid keys: {valid}")
        if self.max_columns is not None and (
            isinstance(self.max_columns, bool)
            or not isinstance(self.max_columns, int)
            or self.max_columns <= 0
        ):
            raise ValueError(
                f"max_columns must be a positive integer or None, got {self.max_columns!r}\n"
                f"Example: PackOptions(max_columns=3)"
            )
