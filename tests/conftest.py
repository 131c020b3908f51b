"""Shared fixtures for MyRide Explorer tests."""

from zoneinfo import ZoneInfo

import pytest

from tests.factories import DENVER


@pytest.fixture
def denver() -> ZoneInfo:
    """Viewer timezone used throughout the tests."""
    return DENVER
