"""Entry point for the age calculator CLI.

Run with:
    python main.py

The script configures structured logging, prompts the user for the day,
month and year of their birth, validates the input, and prints their age
in years, months and days together with next-birthday statistics.
"""

import json
import logging
import os
import sys

from age_engine import AgeForm
from age_engine.render import render_errors, render_result


def _configure_logging() -> None:
    """Configure logging format based on the LOG_FORMAT environment variable.

    Set LOG_FORMAT=json for structured JSON output.
    Any other value (or absent) falls back to human-readable plaintext.
    """
    log_format = os.environ.get("LOG_FORMAT", "text").lower()

    if log_format == "json":
        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload: dict = {
                    "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                # Merge any extra fields passed via logger.info(..., extra={...})
                for key, value in record.__dict__.items():
                    if key not in logging.LogRecord.__dict__ and not key.startswith("_"):
                        payload[key] = value
                return json.dumps(payload, default=str)

        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def run() -> None:
    """Configure logging, prompt for a birth date, and print the age details.

    Exits with code 1 when the input fails validation so that callers
    (shell scripts, CI jobs, etc.) can detect failure cleanly.  The error
    messages are printed one per line before exiting.
    """
    _configure_logging()

    form = AgeForm()

    print("Welcome to the Age Calculator!")
    form.set_field("day", input("Day (DD): "))
    form.set_field("month", input("Month (MM): "))
    form.set_field("year", input("Year (YYYY): "))

    if not form.submit():
        print(render_errors(form.errors))
        sys.exit(1)

    print(render_result(form.result))


if __name__ == "__main__":
    run()
