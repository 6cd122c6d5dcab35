"""
Period rules.

For every frequency, the regex patterns `period` and `period_option` must
match (unanchored search). An empty pattern set means the input must be
absent.

Weekly + MTD is special-cased by the validator: period_option must then be
empty and is not pattern-checked.
"""
from types import MappingProxyType
from typing import Any, Mapping

from report_scheduler.app.schemas.scheduler_options import Frequency, PeriodRule

MTD = "MTD"
YTD = "YTD"

PERIOD_OPTION_PATTERNS = ("CAL", "CAL F", "LST", r"LSD \d+")

EMPTY_PERIOD_RULE = PeriodRule()

PERIOD_RULES: Mapping[str, PeriodRule] = MappingProxyType({
    Frequency.HOURLY: EMPTY_PERIOD_RULE,
    Frequency.DAILY: PeriodRule(
        period=("Today", r"\d+ Days", r"\d+ Weeks"),
        ),
    Frequency.WEEKLY: PeriodRule(
        period=(r"\d+ Weeks", MTD, YTD),
        period_option=PERIOD_OPTION_PATTERNS,
        ),
    Frequency.BI_MONTHLY: EMPTY_PERIOD_RULE,
    Frequency.MONTHLY: PeriodRule(
        period=(r"\d+ Months", YTD),
        period_option=PERIOD_OPTION_PATTERNS,
        ),
    Frequency.QUARTERLY: PeriodRule(
        period=(r"\d+ Quarters", YTD),
        period_option=PERIOD_OPTION_PATTERNS,
        ),
    Frequency.SEMI_ANNUALLY: EMPTY_PERIOD_RULE,
    Frequency.YEARLY: PeriodRule(
        period_option=("CAL", "CAL F"),
        ),
    })


def get_period_rule(frequency: Any) -> PeriodRule:
    """Period rule of a frequency; frequencies missing from the table allow neither input."""
    if not isinstance(frequency, str):
        return EMPTY_PERIOD_RULE
    try:
        return PERIOD_RULES[Frequency(frequency)]
    except ValueError:
        return EMPTY_PERIOD_RULE
