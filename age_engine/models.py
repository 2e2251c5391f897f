"""Value objects passed between the form, the engine and the renderer.

``BirthDateInput`` is rebuilt from the raw form text on every validation
pass; ``AgeResult`` is produced once per successful computation.  Both are
frozen so a result handed to the renderer cannot drift from what the engine
computed.
"""

import datetime
import re

from pydantic import BaseModel, ConfigDict, Field

DAY: str = "day"
MONTH: str = "month"
YEAR: str = "year"
GENERAL: str = "general"

FIELD_NAMES: tuple[str, ...] = (DAY, MONTH, YEAR)

# Field name -> message.  Empty means the input is valid.
ValidationResult = dict[str, str]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_field(text: str | None) -> int | None:
    """Parse one raw form field into an integer.

    Returns ``None`` for empty or non-numeric text so that the engine can
    report the field as invalid instead of raising.
    """
    if text is None:
        return None
    stripped = text.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        return None
    return int(stripped)


class BirthDateInput(BaseModel):
    """The day/month/year triple as typed, parsed to integers."""

    model_config = ConfigDict(frozen=True)

    day: int | None = None
    month: int | None = None
    year: int | None = None

    @classmethod
    def from_text(cls, day: str | None, month: str | None, year: str | None) -> "BirthDateInput":
        return cls(day=parse_field(day), month=parse_field(month), year=parse_field(year))


class AgeResult(BaseModel):
    """Age breakdown and next-birthday statistics for one birth date.

    Attributes:
        years: Whole years lived.
        months: Whole months since the last birthday (0-11).
        days: Days since the last month anniversary.
        total_days: Whole days elapsed since the birth date.
        days_until_next_birthday: Days until the next birthday, 0 on the day.
        next_birthday: The next birthday as ``Weekday, Month D, YYYY``.
        next_birthday_date: The calendar date behind ``next_birthday``.
    """

    model_config = ConfigDict(frozen=True)

    years: int = Field(..., ge=0)
    months: int = Field(..., ge=0, le=11)
    days: int = Field(..., ge=0, le=31)
    total_days: int = Field(..., ge=0)
    days_until_next_birthday: int = Field(..., ge=0, le=365)
    next_birthday: str
    next_birthday_date: datetime.date
