"""Birth-date validation and age arithmetic.

``validate`` reports every problem with a day/month/year triple as a
field-keyed message; ``compute`` turns a triple that passed validation into
an ``AgeResult``.  Both take the current date as an argument rather than
reading the clock, so a caller captures ``now`` once and uses it for the
whole validate-then-compute cycle.
"""

import calendar
import datetime
import logging

from age_engine.models import DAY, GENERAL, MONTH, YEAR, AgeResult, ValidationResult

logger: logging.Logger = logging.getLogger(__name__)

MIN_YEAR: int = 1900

DAY_ERROR: str = "Enter a valid day (1-31)"
MONTH_ERROR: str = "Enter a valid month (1-12)"
YEAR_ERROR: str = "Enter a valid year ({min_year}-{current_year})"
NONEXISTENT_DATE_ERROR: str = "This date does not exist"
FUTURE_DATE_ERROR: str = "Birth date cannot be in the future"


def _as_date(now: datetime.date) -> datetime.date:
    # datetime is a date subclass but does not compare with plain dates
    if isinstance(now, datetime.datetime):
        return now.date()
    return now


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def days_in_previous_month(on: datetime.date) -> int:
    """Length of the month before ``on``'s month (December of the prior year for January)."""
    if on.month == 1:
        return days_in_month(on.year - 1, 12)
    return days_in_month(on.year, on.month - 1)


def birthday_in_year(birth: datetime.date, year: int) -> datetime.date:
    """Return the birthday of ``birth`` observed in ``year``.

    A 29 February birthday falls on 1 March in non-leap years.
    """
    try:
        return birth.replace(year=year)
    except ValueError:
        return datetime.date(year, 3, 1)


def format_long_date(d: datetime.date) -> str:
    """Format ``d`` as ``Weekday, Month D, YYYY`` (e.g. ``Tuesday, March 14, 2025``)."""
    return f"{calendar.day_name[d.weekday()]}, {calendar.month_name[d.month]} {d.day}, {d.year}"


def validate(
    day: int | None,
    month: int | None,
    year: int | None,
    now: datetime.date,
    min_year: int = MIN_YEAR,
) -> ValidationResult:
    """Validate a birth-date triple against the current date.

    Args:
        day: Day of month, or ``None`` when the field was empty or not numeric.
        month: Month number, or ``None`` when the field was empty or not numeric.
        year: Four-digit year, or ``None`` when the field was empty or not numeric.
        now: The current date.  A ``datetime`` is reduced to its date.
        min_year: Earliest accepted birth year.

    Returns:
        A mapping of field name (``day``, ``month``, ``year``, ``general``) to
        error message.  The mapping is empty when the input is valid.
    """
    today = _as_date(now)
    errors: ValidationResult = {}

    if day is None or not 1 <= day <= 31:
        errors[DAY] = DAY_ERROR
    if month is None or not 1 <= month <= 12:
        errors[MONTH] = MONTH_ERROR
    if year is None or not min_year <= year <= today.year:
        errors[YEAR] = YEAR_ERROR.format(min_year=min_year, current_year=today.year)

    if errors:
        return errors

    try:
        birth = datetime.date(year, month, day)
    except ValueError:
        errors[DAY] = NONEXISTENT_DATE_ERROR
        return errors

    if birth > today:
        errors[GENERAL] = FUTURE_DATE_ERROR
    return errors


def compute(day: int, month: int, year: int, now: datetime.date) -> AgeResult:
    """Compute the age breakdown for a birth date that passed ``validate``.

    Args:
        day: Day of month of the birth date.
        month: Month of the birth date.
        year: Year of the birth date.
        now: The current date.  A ``datetime`` is reduced to its date.

    Returns:
        A new ``AgeResult``.

    Raises:
        ValueError: If the triple is not a real calendar date.
    """
    today = _as_date(now)
    birth = datetime.date(year, month, day)

    years = today.year - birth.year
    months = today.month - birth.month
    days = today.day - birth.day

    if days < 0:
        months -= 1
        days += days_in_previous_month(today)
        if days < 0:
            # Birth day is past the end of the previous month; the month
            # anniversary fell on that month's last day.
            days = today.day

    if months < 0:
        years -= 1
        months += 12

    total_days = (today - birth).days

    next_birthday = birthday_in_year(birth, today.year)
    if next_birthday < today:
        next_birthday = birthday_in_year(birth, today.year + 1)
    days_until = (next_birthday - today).days

    logger.debug(
        "compute result: %d total days, %d days until next birthday",
        total_days,
        days_until,
    )
    return AgeResult(
        years=years,
        months=months,
        days=days,
        total_days=total_days,
        days_until_next_birthday=days_until,
        next_birthday=format_long_date(next_birthday),
        next_birthday_date=next_birthday,
    )
