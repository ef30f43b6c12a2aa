"""Pytest configuration and shared fixtures."""

import pytest

import caldays
from caldays import reset_config, reset_registry


@pytest.fixture(autouse=True)
def reset_calendar_state():
    """Reset the calendar registry and config before and after each test.

    Both are module-level singletons that persist across tests.
    """
    reset_registry()
    reset_config()
    yield
    reset_registry()
    reset_config()


@pytest.fixture
def gregorian():
    return caldays.get_calendar("gregorian")


@pytest.fixture
def julian():
    return caldays.get_calendar("julian")


@pytest.fixture
def iso_week():
    return caldays.get_calendar("iso_week")
