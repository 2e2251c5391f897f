"""Form controller for the age calculator.

``AgeForm`` owns the three raw text fields, the error mapping from the last
submission and the last successful ``AgeResult``.  It has two observable
states: IDLE (no result) and RESULT.  A submission that fails validation
replaces the error mapping but leaves the state and result untouched;
``reset`` always returns to IDLE.

Every submission emits one structured audit record on the ``audit``
logger.  The record carries which fields failed, never the birth date
itself.
"""

import datetime
import enum
import json
import logging
import time
import uuid
from typing import Callable

from age_engine.config import settings
from age_engine.engine import compute, validate
from age_engine.models import FIELD_NAMES, AgeResult, BirthDateInput, ValidationResult

logger: logging.Logger = logging.getLogger(__name__)
audit_logger: logging.Logger = logging.getLogger("audit")


class FormState(str, enum.Enum):
    IDLE = "idle"
    RESULT = "result"


class AgeForm:
    """Birth-date form with submit and reset actions.

    Args:
        clock: Returns the current date.  Read once per submission.
        min_year: Earliest accepted birth year.  Defaults to
            ``settings.min_birth_year``.
    """

    def __init__(
        self,
        clock: Callable[[], datetime.date] = datetime.date.today,
        min_year: int | None = None,
    ) -> None:
        self._clock = clock
        self.min_year: int = settings.min_birth_year if min_year is None else min_year
        self.day: str = ""
        self.month: str = ""
        self.year: str = ""
        self.errors: ValidationResult = {}
        self.result: AgeResult | None = None

    @property
    def state(self) -> FormState:
        return FormState.IDLE if self.result is None else FormState.RESULT

    def set_field(self, name: str, text: str) -> None:
        """Replace the raw text of ``day``, ``month`` or ``year``."""
        if name not in FIELD_NAMES:
            raise ValueError(f"Unknown form field {name!r}; expected one of {FIELD_NAMES}.")
        setattr(self, name, text)

    def submit(self, session_id: str | None = None, user_id: str | None = None) -> bool:
        """Validate the fields and, if they are valid, compute a new result.

        Args:
            session_id: Optional caller-supplied session identifier.  A new UUID
                is generated when not provided.
            user_id: Optional identifier of the user submitting the form.
                Defaults to ``"system"`` when not provided.

        Returns:
            True when the input was valid and ``result`` was replaced.
        """
        sid = session_id or str(uuid.uuid4())
        uid = user_id or "system"
        start = time.monotonic()
        status = "success"
        errors: ValidationResult = {}
        try:
            now = self._clock()
            entry = BirthDateInput.from_text(self.day, self.month, self.year)
            errors = validate(entry.day, entry.month, entry.year, now, min_year=self.min_year)
            self.errors = errors
            if errors:
                status = "invalid"
                return False
            self.result = compute(entry.day, entry.month, entry.year, now)
            return True
        except Exception:  # noqa: BLE001 - re-raised immediately; finally block records audit status
            status = "error"
            raise
        finally:
            latency_ms = round((time.monotonic() - start) * 1000, 2)
            audit_logger.info(
                json.dumps(
                    {
                        "session_id": sid,
                        "user_id": uid,
                        "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
                        "latency_ms": latency_ms,
                        "status": status,
                        "error_fields": sorted(errors),
                    }
                )
            )

    def reset(self) -> None:
        """Clear the fields, the errors and the result."""
        self.day = ""
        self.month = ""
        self.year = ""
        self.errors = {}
        self.result = None
        logger.debug("Form reset")
