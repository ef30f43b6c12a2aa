from __future__ import annotations
from typing import Dict


class CaldaysError(Exception):
    """Base error."""


class CalendarValidationError(CaldaysError, ValueError):
    """Raised when calendar options fail validation. Carries every offending key."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        detail = ", ".join(f"{k}: {v}" for k, v in sorted(self.errors.items()))
        super().__init__(f"Invalid calendar options [{detail}]")


class DomainError(CaldaysError, ValueError):
    """A date component lies outside the calendar's valid range."""


class CalendarExistsError(CaldaysError, KeyError):
    """Raised when a calendar name is registered twice."""


class UnknownCalendarError(CaldaysError, KeyError):
    """Raised when a calendar name is neither built in nor registered."""
