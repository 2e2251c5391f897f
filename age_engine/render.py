"""Plain-text rendering of the age form."""

from age_engine.form import AgeForm, FormState
from age_engine.models import DAY, GENERAL, MONTH, YEAR, AgeResult, ValidationResult

_ERROR_LABELS: tuple[tuple[str, str], ...] = (
    (DAY, "Day"),
    (MONTH, "Month"),
    (YEAR, "Year"),
    (GENERAL, "Error"),
)


def render_idle() -> str:
    return "Ready to Calculate\nEnter your birth date to see your age details"


def render_errors(errors: ValidationResult) -> str:
    """One ``Label: message`` line per error, in field order."""
    return "\n".join(
        f"{label}: {errors[key]}" for key, label in _ERROR_LABELS if key in errors
    )


def render_result(result: AgeResult) -> str:
    if result.days_until_next_birthday == 0:
        countdown = "Today!"
    else:
        countdown = f"{result.days_until_next_birthday} days"
    return "\n".join(
        [
            "Your Age Details",
            f"  Years:  {result.years}",
            f"  Months: {result.months}",
            f"  Days:   {result.days}",
            f"Total Days Lived: {result.total_days:,}",
            f"Next Birthday: {countdown}",
            f"Next Birthday Date: {result.next_birthday}",
        ]
    )


def render_form(form: AgeForm) -> str:
    """Render the result panel for ``form``'s current state."""
    if form.state is FormState.RESULT:
        return render_result(form.result)
    return render_idle()
