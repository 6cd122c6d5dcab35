"""
Generic entity validation.

ARCHITECTURE
============
- ErrorCollector: ordered list of EntityValidationError plus the two
  membership checks that record an "in set" error on failure
- FieldValidator: strategy validating one field of an entity
- EntityValidator: field name -> FieldValidator mapping; validate(model)
  visits every field of the model, runs its strategy if one is registered,
  and keeps going after a failing field

Validators never raise on invalid input. The boolean result is the only
control-flow signal; get_errors() is for rendering.

A validator instance holds mutable state (errors, code-set cache). Use one
instance per validation request.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel

from report_scheduler.app.logging_config import get_logger
from report_scheduler.app.schemas.common import EntityValidationError, ErrorKind
from report_scheduler.app.utils.validation_utils import (
    format_set,
    pattern_value_in_set,
    value_in_set,
    )

logger = get_logger(__name__)

# Error messages
EM_IN_SET = "Value should be in the set {%s}."
EM_CANT_DECODE = "Can't decode value. Invalid format."
EM_OBJECT = "The value should be an object."
EM_EMPTY = "The value should be empty."
EM_INVALID = "Invalid value."


class ErrorCollector:
    """Accumulates validation errors in recording order."""

    def __init__(self):
        self._errors: List[EntityValidationError] = []

    def add(self, message: str, field_name: str, kind: ErrorKind, code: int = -1) -> None:
        error = EntityValidationError(message=message, field=field_name, code=code, kind=kind)
        self._errors.append(error)
        logger.debug("Validation error recorded", field=field_name, kind=kind.value, message=message)

    @property
    def errors(self) -> List[EntityValidationError]:
        return list(self._errors)

    def clear(self) -> None:
        self._errors.clear()

    def is_value_in_set(self, value: Any, allowed: Iterable[Any], field_name: str) -> bool:
        """Every candidate of value must be in allowed; records EM_IN_SET otherwise."""
        allowed = list(allowed)
        if not value_in_set(value, allowed):
            self.add(EM_IN_SET % format_set(allowed), field_name, ErrorKind.NOT_IN_ALLOWED_SET)
            return False
        return True

    def is_regexp_value_in_set(self, value: Any, patterns: Iterable[str], field_name: str) -> bool:
        """At least one candidate must match at least one pattern; records EM_IN_SET otherwise."""
        patterns = list(patterns)
        if not pattern_value_in_set(value, patterns):
            self.add(EM_IN_SET % format_set(patterns), field_name, ErrorKind.NOT_IN_ALLOWED_SET)
            return False
        return True


class FieldValidator(ABC):
    """Validates the value of one entity field."""

    field_name: str = ""

    def __init__(self, errors: Optional[ErrorCollector] = None):
        self.errors = errors if errors is not None else ErrorCollector()

    @abstractmethod
    def validate(self, value: Any) -> bool:
        raise NotImplementedError

    def get_errors(self) -> List[EntityValidationError]:
        return self.errors.errors


class EntityValidator:
    """
    Dispatches entity fields to their registered FieldValidator.

    Subclasses register their strategies in __init__ and are registered with
    the EntityValidatorRegistry under `entity_name`.
    """

    entity_name: str = ""

    def __init__(self):
        self.errors = ErrorCollector()
        self.current_model: Optional[Mapping[str, Any]] = None
        self._field_validators: Dict[str, FieldValidator] = {}

    def register_field_validator(self, validator: FieldValidator) -> None:
        """Register a strategy under its field name (replacing any previous one)."""
        if not validator.field_name:
            raise ValueError("Field validator must define a field_name attribute")
        self._field_validators[validator.field_name] = validator

    @property
    def field_names(self) -> List[str]:
        return list(self._field_validators)

    def validate(self, model: Mapping[str, Any] | BaseModel) -> bool:
        """
        Validate every field of the model that has a registered strategy.

        Fields without a strategy are accepted as they are. A failing field
        does not stop the remaining fields from being checked.

        Args:
            model: Field name -> value mapping, or a pydantic model

        Returns:
            True if every checked field passed
        """
        if isinstance(model, BaseModel):
            model = model.model_dump()
        self.current_model = model

        result = True
        for field_name, field_value in model.items():
            validator = self._field_validators.get(field_name)
            if validator is not None and not validator.validate(field_value):
                result = False

        logger.debug(
            "Entity validated",
            entity=self.entity_name,
            valid=result,
            error_count=len(self.errors.errors)
            )
        return result

    def get_errors(self) -> List[EntityValidationError]:
        return self.errors.errors

    def clear_errors(self) -> None:
        self.errors.clear()
