"""
Scheduled report validation.

A scheduled report carries a JSON `scheduler_options` field. Validation runs
in stages and stops at the first failing one, so only that stage's errors
are reported:

1. decode the JSON document
2. `frequency` must be in the srofrequency code set
3. `frequency_option` must match one of the frequency's shapes
   (see frequency_option_rules)
4. `period` / `period_option` must match the frequency's patterns
   (see period_rules)
"""
from typing import Any, Optional, Sequence

from report_scheduler.app.logging_config import get_logger
from report_scheduler.app.schemas.common import ErrorKind
from report_scheduler.app.schemas.scheduler_options import Frequency, SchedulerOptions
from report_scheduler.app.services.code_set_cache import CodeSetCache
from report_scheduler.app.services.code_sources import CodeMapSource, get_default_code_source
from report_scheduler.app.services.frequency_option_rules import (
    FREQUENCY_ENDPOINT,
    FREQUENCY_OPTION_ENDPOINT,
    get_option_shapes,
    match_shape,
    resolve_allowed_values,
    )
from report_scheduler.app.services.period_rules import MTD, get_period_rule
from report_scheduler.app.services.validator_registry import register_validator
from report_scheduler.app.utils.validation_utils import split_codes, value_in_set
from report_scheduler.app.validators.entity_validator import (
    EM_CANT_DECODE,
    EM_EMPTY,
    EM_INVALID,
    EM_OBJECT,
    EntityValidator,
    ErrorCollector,
    FieldValidator,
    )

logger = get_logger(__name__)

SCHEDULER_OPTIONS = "scheduler_options"


class SchedulerOptionsValidator(FieldValidator):
    """Validates the encoded `scheduler_options` value of a scheduled report."""

    field_name = SCHEDULER_OPTIONS

    def __init__(self, codes: CodeSetCache, errors: Optional[ErrorCollector] = None):
        super().__init__(errors)
        self.codes = codes

    def validate(self, value: Any) -> bool:
        return self.validate_scheduler_options(value)

    def validate_scheduler_options(self, value: Any) -> bool:
        options = SchedulerOptions.decode(value)
        if options is None:
            self.errors.add(EM_CANT_DECODE, SCHEDULER_OPTIONS, ErrorKind.MISSING_OR_UNDECODABLE)
            return False

        # Wrapped so a list-valued frequency is one (invalid) code, not a list of codes
        frequency = options.frequency
        valid_frequencies = self.codes.lookup(FREQUENCY_ENDPOINT)
        if not self.errors.is_value_in_set([frequency], valid_frequencies, f"{SCHEDULER_OPTIONS}.frequency"):
            return False

        if not self.validate_frequency_option(frequency, options.frequency_option):
            return False

        if not self.validate_period_and_options(frequency, options.period, options.period_option):
            return False

        logger.debug("Scheduler options valid", frequency=frequency)
        return True

    def validate_frequency_option(self, frequency: str, frequency_option: Any) -> bool:
        field_name = f"{SCHEDULER_OPTIONS}.frequency_option"

        # No shapes (e.g. Bi-Monthly): the option must be absent
        if not get_option_shapes(frequency):
            if frequency_option:
                self.errors.add(EM_EMPTY, field_name, ErrorKind.EXPECTED_EMPTY)
                return False
            return True

        if not isinstance(frequency_option, dict):
            self.errors.add(EM_OBJECT, field_name, ErrorKind.EXPECTED_OBJECT)
            return False

        # Unknown option names are rejected before shape matching
        if not self.errors.is_value_in_set(
            list(frequency_option.keys()),
            self.codes.lookup(FREQUENCY_OPTION_ENDPOINT),
            field_name
            ):
            return False

        shape = match_shape(frequency, frequency_option.keys())
        if shape is None:
            self.errors.add(EM_INVALID, field_name, ErrorKind.SHAPE_MISMATCH)
            return False

        for option_name, option_value in frequency_option.items():
            allowed = resolve_allowed_values(shape, option_name, self.codes.lookup)
            if not allowed:
                self.errors.add(EM_INVALID, field_name, ErrorKind.GENERIC_INVALID)
                return False
            if not self._check_values(frequency, allowed, option_value, field_name):
                return False

        return True

    def validate_period_and_options(self, frequency: str, period: Any, period_option: Any) -> bool:
        rule = get_period_rule(frequency)
        period_field = f"{SCHEDULER_OPTIONS}.period"
        period_option_field = f"{SCHEDULER_OPTIONS}.period_option"

        if not rule.period and period:
            self.errors.add(EM_EMPTY, period_field, ErrorKind.EXPECTED_EMPTY)
            return False

        if not rule.period_option and period_option:
            self.errors.add(EM_EMPTY, period_option_field, ErrorKind.EXPECTED_EMPTY)
            return False

        if rule.period and not self.errors.is_regexp_value_in_set(period, rule.period, period_field):
            return False

        # Weekly month-to-date takes no period option at all
        if frequency == Frequency.WEEKLY and period == MTD:
            if period_option:
                self.errors.add(EM_EMPTY, period_option_field, ErrorKind.EXPECTED_EMPTY)
                return False
            return True

        if rule.period_option and not self.errors.is_regexp_value_in_set(
            period_option,
            rule.period_option,
            period_option_field
            ):
            return False

        return True

    def _check_values(self, frequency: str, allowed: Sequence[Any], option_value: Any, field_name: str) -> bool:
        # Weekly options hold a comma-separated list of codes, all of which must be valid
        if frequency == Frequency.WEEKLY:
            if not value_in_set(split_codes(option_value), allowed):
                self.errors.add(EM_INVALID, field_name, ErrorKind.NOT_IN_ALLOWED_SET)
                return False
            return True

        return self.errors.is_value_in_set(option_value, allowed, field_name)


@register_validator
class ScheduledReportEntityValidator(EntityValidator):
    """Validator for scheduled report entities (checks `scheduler_options` only)."""

    entity_name = "scheduled_report"

    def __init__(self, code_source: Optional[CodeMapSource] = None):
        super().__init__()
        self.codes = CodeSetCache(code_source if code_source is not None else get_default_code_source())
        self.register_field_validator(SchedulerOptionsValidator(self.codes, self.errors))

    def validate_scheduler_options(self, value: Any) -> bool:
        """Validate a raw `scheduler_options` value on its own."""
        return self._field_validators[SCHEDULER_OPTIONS].validate(value)
