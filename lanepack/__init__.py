from .core import PackingMetadata, PackingResult, balanced, greedy, pack
from .interval import Interval
from .mapping import pack_by
from .metrics import efficiency, max_overlap, span, total_duration
from .options import PackOptions
from .properties import Property, duration, end, start
from .round_robin import minimal_columns, round_robin_trial
from .validation import InvalidIntervalsError, ValidationError, ensure_valid, validate

__all__ = [
    "Interval",
    "PackOptions",
    "PackingResult",
    "PackingMetadata",
    "pack",
    "pack_by",
    "greedy",
    "balanced",
    "round_robin_trial",
    "minimal_columns",
    "validate",
    "ensure_valid",
    "ValidationError",
    "InvalidIntervalsError",
    "efficiency",
    "max_overlap",
    "span",
    "total_duration",
    "Property",
    "start",
    "end",
    "duration",
]
