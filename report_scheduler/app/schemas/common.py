"""
Common schemas shared by all entity validators.

**Domain Coverage**:
- ErrorKind: abstract classification of a validation failure
- EntityValidationError: one recorded failure (message, field, code)

**Design Notes**:
- Errors are records, never raised: the boolean result of a validator is the
  only control-flow signal, the error list is for rendering
- `code` is kept for callers that map errors to numbers; nothing assigns
  distinct codes yet, so it defaults to -1
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """
    Abstract kind of a validation failure (independent of message text).

    - MISSING_OR_UNDECODABLE: payload absent or not parseable
    - NOT_IN_ALLOWED_SET: value not in the expected code set, literal list or pattern set
    - SHAPE_MISMATCH: option field names match none of the allowed shapes
    - EXPECTED_EMPTY: value populated where the rule requires it absent
    - EXPECTED_OBJECT: value should be a structured object
    - GENERIC_INVALID: rule could not be resolved or applied
    """
    MISSING_OR_UNDECODABLE = "MISSING_OR_UNDECODABLE"
    NOT_IN_ALLOWED_SET = "NOT_IN_ALLOWED_SET"
    SHAPE_MISMATCH = "SHAPE_MISMATCH"
    EXPECTED_EMPTY = "EXPECTED_EMPTY"
    EXPECTED_OBJECT = "EXPECTED_OBJECT"
    GENERIC_INVALID = "GENERIC_INVALID"


class EntityValidationError(BaseModel):
    """A single validation failure, in recording order."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    message: str = Field(..., description="Rendered message (fixed templates)")
    field: str = Field(..., description="Dotted field path, e.g. scheduler_options.frequency")
    code: int = Field(-1, description="Numeric error code (-1 when unassigned)")
    kind: ErrorKind = Field(ErrorKind.GENERIC_INVALID, description="Abstract failure kind")
