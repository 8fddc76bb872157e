"""Shared test fixtures for calendarperiods tests."""

import pytest
from datetime import date

from calendarperiods.period import periodapi, periodnormalize, periodrange
from calendarperiods.period.periodnormalize import get_timezone
from calendarperiods.period.periodtranslate import set_translator


FROZEN_TODAY = date(2024, 3, 15)  # a Friday


@pytest.fixture
def frozen_today(monkeypatch):
    """Fixture pinning "today" to FROZEN_TODAY in every timezone.

    Timezone names are still validated, so unknown names keep raising.

    Example:
        def test_last_week(frozen_today):
            period = factory("day", "last7")
            assert period.get_date_end() == frozen_today
    """
    def _today_in(timezone=None):
        get_timezone(timezone)
        return FROZEN_TODAY

    for module in (periodnormalize, periodrange, periodapi):
        monkeypatch.setattr(module, "today_in", _today_in)
    return FROZEN_TODAY


@pytest.fixture(autouse=True)
def default_translator():
    """Restore the English catalog after tests that install a translator."""
    yield
    set_translator(None)


@pytest.fixture
def anchor():
    """Fixed anchor date for relative windows."""
    return FROZEN_TODAY
