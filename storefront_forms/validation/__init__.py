"""
Generic form validation engine.
Schemas are declared as ordered field definitions; each field carries a list
of constraint descriptors that one engine evaluates uniformly.
"""

from .constraints import (
    Constraint,
    Every,
    ExactItems,
    IsEmail,
    IsUUID,
    Matches,
    MaxItems,
    MaxLength,
    MinItems,
    MinLength,
    MinValue,
    OneOf,
    filled,
)
from .engine import Schema, ValidationResult, get_schema, register, registered_schemas, validate
from .errors import (
    ErrorCode,
    FormValidationError,
    SchemaDefinitionError,
    StorefrontFormsError,
    UnknownSchemaError,
)
from .fields import FieldError, FieldKind, FieldSpec

__all__ = [
    # Engine
    "Schema",
    "ValidationResult",
    "validate",
    "register",
    "get_schema",
    "registered_schemas",

    # Fields
    "FieldSpec",
    "FieldKind",
    "FieldError",

    # Constraints
    "Constraint",
    "MinLength",
    "MaxLength",
    "Matches",
    "IsEmail",
    "IsUUID",
    "OneOf",
    "MinValue",
    "MinItems",
    "MaxItems",
    "ExactItems",
    "Every",
    "filled",

    # Errors
    "ErrorCode",
    "StorefrontFormsError",
    "SchemaDefinitionError",
    "UnknownSchemaError",
    "FormValidationError",
]
