"""
Scheduler options schemas.

The `scheduler_options` field of a scheduled report is a JSON document:

    {
        "frequency": "Monthly",
        "frequency_option": {"week_of_month": "1", "day_of_week": "Mon"},
        "period": "3 Months",
        "period_option": "CAL"
    }

**Domain Coverage**:
- Frequency: the recurrence cadences the rule tables know about
- SchedulerOptions: decoded payload (fields kept raw for the validator)
- OptionShape: one allowed field set of `frequency_option`
- PeriodRule: allowed `period` / `period_option` patterns of a frequency

**Design Notes**:
- Which frequencies are legal is data (the srofrequency code set), the
  Frequency enum only names the rows of the rule tables
- SchedulerOptions fields are typed Any on purpose: the validator reports
  wrong types as validation errors instead of pydantic rejecting the payload
"""
from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

# Allowed-value specs starting with this prefix reference a code-set endpoint
ENDPOINT_PREFIX = "endpoint:"


class Frequency(str, Enum):
    """Recurrence cadence of a scheduled report."""
    HOURLY = "Hourly"
    DAILY = "Daily"
    WEEKLY = "Weekly"
    BI_MONTHLY = "Bi-Monthly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    SEMI_ANNUALLY = "Semi-Annually"
    YEARLY = "Yearly"


class SchedulerOptions(BaseModel):
    """
    Decoded scheduler options.

    Unknown top-level keys are ignored. Use `decode()` to build one from the
    raw encoded value.
    """
    model_config = ConfigDict(extra="ignore")

    frequency: Any = Field(None, description="Recurrence cadence (e.g., Weekly)")
    frequency_option: Any = Field(None, description="Cadence-specific object (e.g., {day_of_week: 'Mon'})")
    period: Any = Field(None, description="Covered date range (e.g., '2 Weeks', MTD)")
    period_option: Any = Field(None, description="Range qualifier (e.g., CAL, 'LSD 5')")

    @classmethod
    def decode(cls, raw: Any) -> Optional[SchedulerOptions]:
        """
        Decode the raw encoded value.

        Args:
            raw: JSON text (str, bytes or bytearray)

        Returns:
            SchedulerOptions, or None when the value is absent, not JSON, or
            does not decode to a non-empty object

        Examples:
            >>> SchedulerOptions.decode('{"frequency": "Daily"}').frequency
            'Daily'
            >>> SchedulerOptions.decode('[1, 2]') is None
            True
        """
        if not isinstance(raw, (str, bytes, bytearray)) or not raw:
            return None
        try:
            decoded = json.loads(raw)
        except (ValueError, RecursionError):
            return None
        if not decoded or not isinstance(decoded, dict):
            return None
        return cls.model_validate(decoded)


class OptionShape(BaseModel):
    """
    One allowed shape of `frequency_option`.

    `options` maps each required field name to its allowed values: either a
    literal tuple or an "endpoint:<code set>" reference resolved at
    validation time.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    options: Dict[str, Union[str, Tuple[Any, ...]]] = Field(..., description="Field name -> allowed values spec")

    @property
    def field_names(self) -> frozenset:
        return frozenset(self.options)

    def matches(self, field_names: Iterable[str]) -> bool:
        """True if the given field names are exactly this shape's (nothing extra, nothing missing)."""
        return self.field_names == frozenset(field_names)


class PeriodRule(BaseModel):
    """
    Allowed `period` and `period_option` patterns for one frequency.

    An empty tuple means the corresponding input must be absent.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    period: Tuple[str, ...] = Field((), description="Regex patterns for period")
    period_option: Tuple[str, ...] = Field((), description="Regex patterns for period_option")
