"""
Error codes and exceptions for form validation.
Field-level failures are returned as data; the exceptions here are only raised
for programming errors or when a caller explicitly asks for one.
"""
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .engine import ValidationResult


class ErrorCode(str, Enum):
    """Kinds of field validation failures."""
    REQUIRED = "required"
    INVALID_TYPE = "invalid_type"
    LENGTH_OUT_OF_RANGE = "length_out_of_range"
    PATTERN_MISMATCH = "pattern_mismatch"
    NUMERIC_BOUND_VIOLATION = "numeric_bound_violation"
    ARRAY_CARDINALITY_VIOLATION = "array_cardinality_violation"
    ELEMENT_REFINEMENT_FAILED = "element_refinement_failed"
    INVALID_ENUM_MEMBER = "invalid_enum_member"
    INVALID_FORMAT = "invalid_format"


class StorefrontFormsError(Exception):
    """Base class for all package exceptions."""


class SchemaDefinitionError(StorefrontFormsError):
    """Raised when a schema is declared with conflicting fields."""


class UnknownSchemaError(StorefrontFormsError, KeyError):
    """Raised when a schema name is not registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown form schema: {self.name!r}"


class FormValidationError(StorefrontFormsError):
    """Raised by ValidationResult.raise_for_errors() for a rejected record."""

    def __init__(self, result: "ValidationResult"):
        self.result = result
        fields = ", ".join(result.errors)
        super().__init__(f"{result.form} form is invalid: {fields}")
