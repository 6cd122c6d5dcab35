"""
Pydantic schemas for the report scheduler.

**Organization by Domain**:
- common.py: Validation error records (EntityValidationError, ErrorKind)
- scheduler_options.py: Decoded scheduler options payload and the rule
  descriptors (OptionShape, PeriodRule) used by the rule tables

**Design Notes**:
- All models use Pydantic v2
- Rule descriptors are frozen: the rule tables are data, not code
"""
from report_scheduler.app.schemas.common import (
    EntityValidationError,
    ErrorKind,
    )
from report_scheduler.app.schemas.scheduler_options import (
    ENDPOINT_PREFIX,
    Frequency,
    OptionShape,
    PeriodRule,
    SchedulerOptions,
    )

__all__ = [
    "ENDPOINT_PREFIX",
    "EntityValidationError",
    "ErrorKind",
    "Frequency",
    "OptionShape",
    "PeriodRule",
    "SchedulerOptions",
    ]
