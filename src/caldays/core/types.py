from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, NamedTuple, Optional, Tuple

Cycle = Literal["month", "week"]
LeapRule = Literal["gregorian", "julian"]
YearLabel = Literal["beginning", "ending"]


@dataclass(frozen=True)
class CalendarId:
    family: Literal["builtin", "custom"]
    name: str
    version: str = "1"


@dataclass(frozen=True)
class CalendarDate:
    """A date value. For week calendars `month` is the week and `day` the day of week."""
    year: int
    month: int
    day: int
    calendar: str

    def ymd(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class DateRange:
    first: CalendarDate
    last: CalendarDate


class WeekYear(NamedTuple):
    year: int
    week: int


@dataclass(frozen=True)
class NotDefined:
    """Returned (never raised) when a calendar does not model a query."""
    calendar: str
    operation: str

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class MonthCycleParams:
    leap_rule: LeapRule = "gregorian"
    year_zero: bool = True
    month_of_year: int = 1
    year_label: YearLabel = "beginning"
    epoch_offset: int = 0

    def __post_init__(self) -> None:
        if self.leap_rule not in ("gregorian", "julian"):
            raise ValueError("leap_rule must be 'gregorian' or 'julian'")
        if not (1 <= self.month_of_year <= 12):
            raise ValueError("month_of_year must be in 1..12")
        if self.year_label not in ("beginning", "ending"):
            raise ValueError("year_label must be 'beginning' or 'ending'")


@dataclass(frozen=True)
class WeekCycleParams:
    weeks_in_month: Tuple[int, ...] = (4, 4, 5)
    month_of_year: int = 1
    epoch_offset: int = 0

    def __post_init__(self) -> None:
        if not self.weeks_in_month or any(w <= 0 for w in self.weeks_in_month):
            raise ValueError("weeks_in_month must be a non-empty sequence of positive ints")
        if sum(self.weeks_in_month) != 13:
            raise ValueError("weeks_in_month must sum to 13 weeks per quarter")
        if not (1 <= self.month_of_year <= 12):
            raise ValueError("month_of_year must be in 1..12")


@dataclass(frozen=True)
class WeekRuleParams:
    first_day: int = 1
    min_days: int = 4

    def __post_init__(self) -> None:
        if not (1 <= self.first_day <= 7):
            raise ValueError("first_day must be in 1..7")
        if not (1 <= self.min_days <= 7):
            raise ValueError("min_days must be in 1..7")


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar."""
    id: CalendarId
    cycle: Cycle
    cycle_params: MonthCycleParams | WeekCycleParams
    week_rule: Optional[WeekRuleParams] = WeekRuleParams()
    locale_ref: Optional[str] = None
    meta: dict = field(default_factory=dict, compare=False)
