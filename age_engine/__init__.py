"""age_engine - birth-date validation and calendar-accurate age arithmetic.

Public API
----------
validate
    Check a day/month/year triple and return field-keyed error messages.
compute
    Turn a validated triple into an ``AgeResult``.
AgeForm
    Two-state form controller (idle / result) with submit and reset.

Example
-------
>>> import datetime
>>> from age_engine import compute, validate
>>> today = datetime.date(2024, 6, 20)
>>> validate(15, 6, 1990, today)
{}
>>> compute(15, 6, 1990, today).years
34
"""

from age_engine.engine import compute, validate
from age_engine.form import AgeForm, FormState
from age_engine.models import AgeResult, BirthDateInput, ValidationResult

__all__: list[str] = [
    "AgeForm",
    "AgeResult",
    "BirthDateInput",
    "FormState",
    "ValidationResult",
    "compute",
    "validate",
]
