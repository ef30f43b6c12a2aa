from __future__ import annotations
import threading
from typing import Dict, List, Optional, Protocol, Tuple

from ..logging import get_logger
from .errors import CalendarExistsError, UnknownCalendarError
from .types import CalendarSpec

logger = get_logger(__name__)


class CalendarVariant(Protocol):
    spec: CalendarSpec

    @property
    def name(self) -> str: ...

    def valid_date(self, year: int, month: int, day: int) -> bool: ...
    def date_to_iso_days(self, year: int, month: int, day: int) -> int: ...
    def date_from_iso_days(self, iso_days: int) -> Tuple[int, int, int]: ...


class CalendarRegistry:
    """
    Name -> calendar mapping. Starts empty unless seeded.

    Registration is first-writer-wins: a name can be registered once and a
    later attempt raises CalendarExistsError, even with an identical
    configuration, so a name never changes meaning under an existing
    reference. Reads are plain dict lookups and take no lock.
    """
    def __init__(self, calendars: Optional[Dict[str, CalendarVariant]] = None, *, reserved: Tuple[str, ...] = ()):
        self._calendars: Dict[str, CalendarVariant] = dict(calendars or {})
        self._reserved = frozenset(reserved)
        self._lock = threading.Lock()

    def get(self, name: str) -> CalendarVariant:
        try:
            return self._calendars[name]
        except KeyError:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {self.list()}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._calendars

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: CalendarVariant) -> None:
        with self._lock:
            if name in self._reserved or name in self._calendars:
                logger.warning("calendar_rejected", calendar=name, reason="name already registered")
                raise CalendarExistsError(f"Calendar '{name}' already exists and cannot be redefined.")
            # copy-on-write: readers keep the dict they already hold
            calendars = dict(self._calendars)
            calendars[name] = calendar
            self._calendars = calendars
        logger.info("calendar_registered", calendar=name, cycle=calendar.spec.cycle)
