"""Pytest configuration and shared fixtures."""
import pytest
from datetime import datetime, timedelta, timezone
from business_logic.date_inspector import DateInspector


@pytest.fixture
def inspector():
    """Fixture providing a DateInspector that reads naive input as UTC."""
    return DateInspector(naive_tz=timezone.utc)


@pytest.fixture
def plus_two_inspector():
    """Fixture providing a DateInspector that reads naive input as UTC+02:00."""
    return DateInspector(naive_tz=timezone(timedelta(hours=2)))


@pytest.fixture
def sample_instant():
    """Fixture providing 2016-01-26T13:48:02Z."""
    return datetime(2016, 1, 26, 13, 48, 2, tzinfo=timezone.utc)
