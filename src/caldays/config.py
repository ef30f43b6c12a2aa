"""Module-level configuration for caldays defaults."""

import threading
from dataclasses import dataclass


@dataclass
class CaldaysConfig:
    """Defaults applied when a calendar definition omits week options.

    They are read once, when a calendar is built; a built calendar never
    consults them again.
    """

    default_first_day: int = 1  # Monday
    default_min_days: int = 4  # ISO-8601


# Module-level singleton
_config: CaldaysConfig | None = None
_config_lock = threading.Lock()


def get_config() -> CaldaysConfig:
    """Get the global caldays configuration singleton."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = CaldaysConfig()
    return _config


def configure(
    default_first_day: int | None = None,
    default_min_days: int | None = None,
) -> None:
    """Configure default week options for calendars defined afterwards.

    Args:
        default_first_day: Weekday a week starts on, 1 = Monday ... 7 = Sunday.
        default_min_days: Days of the new year the first week must hold, 1..7.

    Example:
        from caldays import configure, new_calendar

        # US convention for calendars that do not say otherwise
        configure(default_first_day=7, default_min_days=1)
        cal = new_calendar("us_fiscal", "month", month_of_year=10, year_label="ending")
    """
    for key, value in (("default_first_day", default_first_day), ("default_min_days", default_min_days)):
        if value is not None and not (isinstance(value, int) and 1 <= value <= 7):
            raise ValueError(f"{key} must be an integer in 1..7, got {value!r}")

    config = get_config()
    with _config_lock:
        if default_first_day is not None:
            config.default_first_day = default_first_day
        if default_min_days is not None:
            config.default_min_days = default_min_days


def reset_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _config
    with _config_lock:
        _config = CaldaysConfig()
