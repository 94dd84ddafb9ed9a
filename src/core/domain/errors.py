"""Input validation errors.

Each error maps to the process exit code the CLI terminates with.
"""

from __future__ import annotations


class QuotaInputError(Exception):
    """Base class for a rejected quota argument."""

    exit_code: int = 1
    headline: str = ""
    hint: str = ""
    show_value: bool = True

    def __init__(self, value: str | None = None) -> None:
        self.value = value
        super().__init__(f"ERROR {self.exit_code}: {self.headline}")


class MissingQuota(QuotaInputError):
    exit_code = 1
    headline = "No quota size provided."
    hint = "Please provide a quota size."
    show_value = False


class InvalidFormat(QuotaInputError):
    exit_code = 2
    headline = "Invalid quota size provided."
    hint = "Please provide a valid quota size."


class MissingUnit(QuotaInputError):
    exit_code = 3
    headline = "Invalid size unit or no size unit provided."
    hint = "Please provide the quota size in MB or GB."
