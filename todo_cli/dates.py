"""
TODO CLI - Civil datetimes
==========================
Due dates are typed as wall-clock times without a zone and pinned to the
local UTC offset when they are used.
"""

from datetime import datetime

from .errors import InvalidDateTimeError

DISPLAY_FORMAT = "%Y-%m-%d %H:%M"
ACCEPTED_FORMATS = "YYYY-MM-DD, YYYY-MM-DD HH:MM or YYYY-MM-DDTHH:MM"


def parse_civil_datetime(text: str) -> datetime:
    """Parse a date or date+time without a zone. A bare date means midnight."""
    try:
        value = datetime.fromisoformat(text.strip())
    except ValueError:
        raise ValueError(
            f"Invalid date/time '{text}'. Use {ACCEPTED_FORMATS}."
        ) from None
    if value.tzinfo is not None:
        raise ValueError(
            f"Invalid date/time '{text}'. Leave out the UTC offset; "
            f"the local timezone is applied."
        )
    return value


def resolve_local(value: datetime) -> datetime:
    """
    Pin a civil datetime to the local timezone.

    Both folds are tried. The result must be a single instant whose local
    wall time is the input; times skipped by a spring-forward jump or
    repeated by a fall-back raise InvalidDateTimeError.
    """
    if value.tzinfo is not None:
        return value

    try:
        candidates = {value.replace(fold=fold).astimezone() for fold in (0, 1)}
    except (OverflowError, ValueError, OSError) as e:
        raise InvalidDateTimeError(value) from e
    valid = [c for c in candidates if c.replace(tzinfo=None) == value]
    if len(valid) != 1:
        raise InvalidDateTimeError(value)
    return valid[0]


def format_local(value: datetime) -> str:
    return value.astimezone().strftime(DISPLAY_FORMAT)
