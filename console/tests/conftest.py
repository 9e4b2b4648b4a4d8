"""
Console test configuration.

Screens run against a ManualScheduler so simulated delays are driven by
advancing a virtual clock instead of sleeping.
"""

import itertools

import pytest

from console.config import Settings
from console.kernel.notifications import MemoryNotifier
from console.kernel.timers import ManualScheduler


class FastSettings(Settings):
    DASHBOARD_DELAY = 1.5
    REPORT_DELAY = 2.0
    LOGIN_DELAY = 2.0
    DEMO_EMAIL = "test@example.com"
    DEMO_PASSWORD = "password"


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def notifier():
    return MemoryNotifier()


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id_{next(counter)}"


@pytest.fixture
def settings():
    return FastSettings()
