"""
Shared fixtures: an in-memory enum source with the scheduler code sets.
"""
import pytest

from report_scheduler.app.services.code_sources import CodeMapSource, StaticCodeMapSource
from report_scheduler.app.validators.scheduled_report import ScheduledReportEntityValidator

CODE_MAPS = {
    "codes/srofrequency": {
        "": "Select frequency",
        "Hourly": "Hourly",
        "Daily": "Daily",
        "Weekly": "Weekly",
        "Bi-Monthly": "Bi-Monthly",
        "Monthly": "Monthly",
        "Quarterly": "Quarterly",
        "Semi-Annually": "Semi-Annually",
        "Yearly": "Yearly",
        },
    "codes/srofrequencyopt": {
        "hour_of_day": "Hour of day",
        "weekdays_only": "Weekdays only",
        "day_of_week": "Day of week",
        "day_of_month": "Day of month",
        "week_of_month": "Week of month",
        "month_of_year": "Month of year",
        },
    "codes/srohourofday": {str(h): f"{h:02d}:00" for h in range(24)},
    "codes/srodow": {
        "Mon": "Monday",
        "Tue": "Tuesday",
        "Wed": "Wednesday",
        "Thu": "Thursday",
        "Fri": "Friday",
        "Sat": "Saturday",
        "Sun": "Sunday",
        },
    "codes/srowom": {"1": "First", "2": "Second", "3": "Third", "4": "Fourth", "Last": "Last"},
    "codes/sromoy": {str(m): f"Month {m}" for m in range(1, 13)},
    }


class CountingCodeMapSource(CodeMapSource):
    """Static source that records every endpoint it is asked for."""

    def __init__(self, code_maps):
        self._inner = StaticCodeMapSource(code_maps)
        self.calls = []

    def get_code_map(self, endpoint):
        self.calls.append(endpoint)
        return self._inner.get_code_map(endpoint)


@pytest.fixture
def code_source():
    return CountingCodeMapSource(CODE_MAPS)


@pytest.fixture
def validator(code_source):
    return ScheduledReportEntityValidator(code_source=code_source)


@pytest.fixture
def code_maps():
    """A copy of the scheduler code sets, safe to modify."""
    return {endpoint: dict(codes) for endpoint, codes in CODE_MAPS.items()}
