"""
Recetario API - Calorie History Aggregation.

Folds per-plan calorie totals into a continuous day-by-day series. The same
algorithm serves the fixed 7-day window and the full history up to today:

1. consolidate plan totals by UTC calendar day (duplicate days add up),
2. pick the day range,
3. emit one row per day, 0 where nothing was planned.

A user without any plan gets an empty series.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple, Union
import re

from recetario.utils.dates import to_utc_day, utc_today
from recetario.utils.errors import ValidationError

WINDOW_DAYS = 7
MINUTES_PER_DAY = 24 * 60

_ISO_DAY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class DayRange:
    """Inclusive range of calendar days."""

    start: date
    end: date


@dataclass(frozen=True)
class DailyCalories:
    """Calorie total of one calendar day."""

    day: date
    total_calories: int


def consolidate(plan_totals: Iterable[Tuple[Union[datetime, date], int]]) -> Dict[date, int]:
    """
    Sum plan totals per UTC calendar day.

    Args:
        plan_totals: ``(plan_date, kcal_total)`` pairs.

    Returns:
        Dict[date, int]: Total kcal per day.
    """
    totals: Dict[date, int] = {}
    for plan_date, kcal in plan_totals:
        day = to_utc_day(plan_date)
        totals[day] = totals.get(day, 0) + int(kcal or 0)
    return totals


def fill_days(totals: Dict[date, int], day_range: DayRange) -> List[DailyCalories]:
    """One row per day of ``day_range``, ascending, 0 for missing days."""
    rows = []
    day = day_range.start
    while day <= day_range.end:
        rows.append(DailyCalories(day=day, total_calories=totals.get(day, 0)))
        day += timedelta(days=1)
    return rows


def aggregate(
    plan_totals: Iterable[Tuple[Union[datetime, date], int]],
    day_range: Optional[DayRange] = None,
    today: Optional[date] = None,
) -> List[DailyCalories]:
    """
    Build the calorie series for a user's plans.

    Args:
        plan_totals: ``(plan_date, kcal_total)`` pairs of every plan of the user.
        day_range: Fixed range to report. ``None`` means full history, from
            the first planned day to ``today``.
        today: Current UTC day, defaults to now.

    Returns:
        List[DailyCalories]: Continuous series, or ``[]`` without plans.
    """
    totals = consolidate(plan_totals)
    if not totals:
        return []

    if day_range is None:
        day_range = DayRange(start=min(totals), end=today or utc_today())

    return fill_days(totals, day_range)


def parse_timezone_offset(raw: Optional[str]) -> int:
    """
    Parse a client UTC offset in minutes (positive = behind UTC).

    Raises:
        ValidationError: If the value is not an integer or spans a full day.
    """
    if raw is None or raw.strip() == "":
        return 0
    try:
        offset = int(raw.strip())
    except ValueError:
        raise ValidationError("timezoneOffset must be an integer number of minutes")
    if abs(offset) >= MINUTES_PER_DAY:
        raise ValidationError("timezoneOffset is out of range")
    return offset


def resolve_week_window(start_date: Optional[str], timezone_offset: Optional[str] = None) -> DayRange:
    """
    Resolve the 7-day window starting at the client's local midnight.

    ``start_date`` is a ``YYYY-MM-DD`` day in the client's zone. Its local
    midnight is converted to UTC and the window covers that UTC day and the
    six following ones. Rows are labelled with UTC days, so for clients ahead
    of UTC the first row carries the day before ``start_date``.

    Raises:
        ValidationError: On a missing or malformed date or offset.

    Example:
        >>> resolve_week_window("2024-01-01", "300")
        DayRange(start=datetime.date(2024, 1, 1), end=datetime.date(2024, 1, 7))
    """
    if not start_date:
        raise ValidationError("startDate is required")
    if not _ISO_DAY_RE.match(start_date):
        raise ValidationError("startDate must use the YYYY-MM-DD format")
    try:
        local_day = date.fromisoformat(start_date)
    except ValueError:
        raise ValidationError("startDate is not a valid date")

    offset = parse_timezone_offset(timezone_offset)
    client_zone = timezone(-timedelta(minutes=offset))
    local_midnight = datetime.combine(local_day, time.min, tzinfo=client_zone)

    try:
        start = local_midnight.astimezone(timezone.utc).date()
        end = start + timedelta(days=WINDOW_DAYS - 1)
    except OverflowError:
        raise ValidationError("startDate is out of range")
    return DayRange(start=start, end=end)
