"""Input validation for interval packing.

``validate`` reports every problem it finds and never raises on bad data;
callers decide whether to abort or pack anyway.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

ErrorKind: TypeAlias = Literal["INVALID_INTERVAL", "NEGATIVE_DURATION", "MISSING_FIELD"]

REQUIRED_FIELDS = ("id", "start", "end")

_MISSING = object()


@dataclass(frozen=True)
class ValidationError:
    """A problem found with one input item.

    Attributes:
        kind: Error category
        message: Human-readable description
        index: Position of the offending item in the input
    """

    kind: ErrorKind
    message: str
    index: int


class InvalidIntervalsError(ValueError):
    """Raised by ``ensure_valid`` when validation finds any error."""

    def __init__(self, errors: list[ValidationError]):
        self.errors: list[ValidationError] = errors
        lines = [f"  [{e.index}] {e.kind}: {e.message}" for e in errors]
        super().__init__(
            f"{len(errors)} invalid interval(s):\n" + "\n".join(lines)
        )


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        value = item.get(name, _MISSING)
    else:
        value = getattr(item, name, _MISSING)
    return _MISSING if value is None else value


def _has_shape(item: Any) -> bool:
    if item is None or isinstance(item, (str, bytes, int, float, bool)):
        return False
    if isinstance(item, Mapping):
        return True
    return any(hasattr(item, name) for name in REQUIRED_FIELDS)


def _check_item(item: Any, index: int) -> list[ValidationError]:
    if not _has_shape(item):
        return [
            ValidationError(
                "INVALID_INTERVAL",
                f"Expected an interval with id/start/end, got {type(item).__name__}: {item!r}",
                index,
            )
        ]

    values = {name: _field(item, name) for name in REQUIRED_FIELDS}
    errors = [
        ValidationError("MISSING_FIELD", f"Missing required field {name!r}", index)
        for name, value in values.items()
        if value is _MISSING
    ]
    if errors:
        return errors

    start, end = values["start"], values["end"]
    # NaN is the only value not equal to itself
    if start != start or end != end:
        return [ValidationError("INVALID_INTERVAL", "Endpoint is NaN", index)]
    try:
        negative = end < start
    except TypeError:
        return [
            ValidationError(
                "INVALID_INTERVAL",
                f"Endpoints are not comparable: start={start!r}, end={end!r}",
                index,
            )
        ]
    if negative:
        return [
            ValidationError(
                "NEGATIVE_DURATION",
                f"End ({end!r}) is before start ({start!r})",
                index,
            )
        ]
    return []


def validate(items: Iterable[Any]) -> list[ValidationError]:
    """Check raw intervals and return all errors found, in input order.

    Items may be ``Interval`` objects, mappings with ``id``/``start``/``end``
    keys, or any object with those attributes. The input is not modified.

    Example:
        >>> validate([{"id": "a", "start": 5, "end": 1}])
        [ValidationError(kind='NEGATIVE_DURATION', message='End (1) is before start (5)', index=0)]
    """
    errors: list[ValidationError] = []
    seen: set[Any] = set()

    for index, item in enumerate(items):
        item_errors = _check_item(item, index)
        errors.extend(item_errors)
        if any(e.kind != "NEGATIVE_DURATION" for e in item_errors):
            continue

        ident = _field(item, "id")
        try:
            duplicate = ident in seen
        except TypeError:
            errors.append(
                ValidationError(
                    "INVALID_INTERVAL",
                    f"Interval id must be hashable, got {type(ident).__name__}",
                    index,
                )
            )
            continue
        if duplicate:
            errors.append(
                ValidationError("INVALID_INTERVAL", f"Duplicate id {ident!r}", index)
            )
        else:
            seen.add(ident)

    return errors


def ensure_valid(items: Iterable[Any]) -> None:
    """Raise ``InvalidIntervalsError`` if ``validate`` reports anything."""
    errors = validate(items)
    if errors:
        raise InvalidIntervalsError(errors)
