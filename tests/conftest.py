"""Shared pytest fixtures for the age-engine test suite.

Fixtures defined here are available to all test modules (unit, integration,
evaluation) without any import.

The form fixtures inject a frozen clock so that every assertion about ages
and birthday countdowns is independent of the day the suite runs.
"""

import datetime

import pytest

from age_engine import AgeForm


# ---------------------------------------------------------------------------
# Date fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_today() -> datetime.date:
    """The "current" date used by the frozen-clock fixtures."""
    return datetime.date(2024, 6, 20)


@pytest.fixture
def leap_year_birthday() -> datetime.date:
    """A valid leap-day birth date (1996 is a leap year)."""
    return datetime.date(1996, 2, 29)


# ---------------------------------------------------------------------------
# Form fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def frozen_form(fixed_today: datetime.date) -> AgeForm:
    """An ``AgeForm`` whose clock always returns ``fixed_today``."""
    return AgeForm(clock=lambda: fixed_today, min_year=1900)


@pytest.fixture
def filled_form(frozen_form: AgeForm) -> AgeForm:
    """A frozen-clock form holding the birth date 15/06/1990."""
    frozen_form.set_field("day", "15")
    frozen_form.set_field("month", "6")
    frozen_form.set_field("year", "1990")
    return frozen_form
