"""Date helpers for workout filtering."""

from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Optional, Union

from ..exceptions import InvalidInputError


class Timeframe(str, Enum):
    """Look-back windows for volume analysis."""
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    ALL = "all"


DateLike = Union[str, date, datetime, None]


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with API timestamps."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_date_bound(value: DateLike, end_of_day: bool = False) -> Optional[datetime]:
    """
    Parse an ISO date or datetime into an aware datetime.

    A bare date ("2024-01-31") becomes the start of that day, or its last
    instant when ``end_of_day`` is set, so an end bound includes the whole day.

    Raises:
        InvalidInputError: If the string is not ISO formatted
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return ensure_aware(value)

    if isinstance(value, date):
        bound = time.max if end_of_day else time.min
        return datetime.combine(value, bound, tzinfo=timezone.utc)

    text = str(value).strip()
    if not text:
        return None

    try:
        if len(text) == 10:
            day = date.fromisoformat(text)
            bound = time.max if end_of_day else time.min
            return datetime.combine(day, bound, tzinfo=timezone.utc)
        return ensure_aware(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        raise InvalidInputError(
            f"Invalid ISO date: {text!r}",
            field="endDate" if end_of_day else "startDate",
        ) from None


def is_within_range(
    moment: datetime,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> bool:
    """Inclusive range check; a missing bound is open."""
    moment = ensure_aware(moment)
    if start is not None and moment < start:
        return False
    if end is not None and moment > end:
        return False
    return True


def get_start_date_for_timeframe(
    timeframe: Union[Timeframe, str],
    now: Optional[datetime] = None,
) -> Optional[datetime]:
    """
    Start of the look-back window ending at ``now``.

    Returns None for Timeframe.ALL (no lower bound).
    """
    timeframe = Timeframe(timeframe)
    now = ensure_aware(now or datetime.now(timezone.utc))

    if timeframe == Timeframe.ALL:
        return None
    if timeframe == Timeframe.WEEK:
        return now - timedelta(days=7)
    if timeframe == Timeframe.MONTH:
        return _shift_months(now, -1)
    if timeframe == Timeframe.QUARTER:
        return _shift_months(now, -3)
    return _shift_months(now, -12)


def _shift_months(moment: datetime, months: int) -> datetime:
    """Shift by calendar months, clamping the day to the target month."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = moment.day
    while True:
        try:
            return moment.replace(year=year, month=month, day=day)
        except ValueError:
            day -= 1
