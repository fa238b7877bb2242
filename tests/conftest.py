"""Shared fixtures."""

import pytest

from devpulse.db import InMemoryArticleStore

from tests.helpers.clock import ManualMsClock, StepClock


@pytest.fixture
def store() -> InMemoryArticleStore:
    """Empty in-memory article store."""
    return InMemoryArticleStore()


@pytest.fixture
def clock() -> StepClock:
    """Clock advancing one second per call."""
    return StepClock()


@pytest.fixture
def ms_clock() -> ManualMsClock:
    """Manually advanced millisecond clock."""
    return ManualMsClock()
