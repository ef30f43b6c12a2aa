"""caldays public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    calendar_info,
    convert,
    from_date,
    get_calendar,
    iso_week_of_year,
    list_calendars,
    new_calendar,
    reset_registry,
    to_date,
)
from .config import configure, get_config, reset_config
from .core.errors import (
    CaldaysError,
    CalendarExistsError,
    CalendarValidationError,
    DomainError,
    UnknownCalendarError,
)
from .core.types import CalendarDate, DateRange, NotDefined, WeekYear
from .engines.calendar import Calendar
from .logging import configure_logging, get_logger

__all__ = [
    "calendar_info",
    "convert",
    "from_date",
    "get_calendar",
    "iso_week_of_year",
    "list_calendars",
    "new_calendar",
    "reset_registry",
    "to_date",
    "configure",
    "get_config",
    "reset_config",
    "CaldaysError",
    "CalendarExistsError",
    "CalendarValidationError",
    "DomainError",
    "UnknownCalendarError",
    "CalendarDate",
    "DateRange",
    "NotDefined",
    "WeekYear",
    "Calendar",
    "configure_logging",
    "get_logger",
]
