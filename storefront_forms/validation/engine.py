"""
Schema definition and the validation engine.

A record is validated field by field in declaration order. Every failing
constraint of a field is collected; one field's failures never stop the
evaluation of the next field.
"""
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from .errors import ErrorCode, FormValidationError, SchemaDefinitionError, UnknownSchemaError
from .fields import FieldError, FieldSpec

logger = logging.getLogger(__name__)

_registry: Dict[str, "Schema"] = {}


class Schema:
    """Named, ordered and immutable set of field definitions."""

    def __init__(self, name: str, fields: Iterable[FieldSpec]):
        self.name = name
        self.fields: Tuple[FieldSpec, ...] = tuple(fields)

        seen = set()
        for spec in self.fields:
            if spec.name in seen:
                raise SchemaDefinitionError(f"Duplicate field {spec.name!r} in schema {name!r}")
            seen.add(spec.name)

    @property
    def field_names(self) -> List[str]:
        return [spec.name for spec in self.fields]

    def validate(self, record: Mapping) -> "ValidationResult":
        return validate(self, record)

    def __repr__(self):
        return f"Schema({self.name!r}, fields={self.field_names})"


class ValidationResult(BaseModel):
    """Outcome of validating one record against one schema."""
    form: str = Field(..., description="Name of the schema the record was validated against")
    data: Optional[Dict[str, Any]] = Field(None, description="Normalized record, set only when valid")
    errors: Dict[str, List[FieldError]] = Field(default_factory=dict, description="Failures by field")

    @property
    def ok(self) -> bool:
        return not self.errors

    def messages(self) -> Dict[str, List[str]]:
        """Failure messages by field, in constraint order."""
        return {
            field: [error.message for error in field_errors]
            for field, field_errors in self.errors.items()
        }

    def codes(self, field: str) -> List[ErrorCode]:
        return [error.code for error in self.errors.get(field, [])]

    def raise_for_errors(self) -> Dict[str, Any]:
        """
        Return the normalized record.

        Raises:
            FormValidationError: If the record was rejected
        """
        if not self.ok:
            raise FormValidationError(self)
        return self.data


def register(schema: Schema) -> Schema:
    """Make ``schema`` resolvable by name."""
    if schema.name in _registry and _registry[schema.name] is not schema:
        raise SchemaDefinitionError(f"Schema {schema.name!r} is already registered")
    _registry[schema.name] = schema
    return schema


def get_schema(name: str) -> Schema:
    try:
        schema = _registry[name]
    except KeyError:
        raise UnknownSchemaError(name) from None
    logger.debug("Resolved form schema %s", name)
    return schema


def registered_schemas() -> Dict[str, Schema]:
    return dict(_registry)


def validate(schema: Union[Schema, str], record: Mapping) -> ValidationResult:
    """
    Validate ``record`` against ``schema``.

    Args:
        schema: Schema instance or registered schema name
        record: Submitted form values keyed by field name

    Returns:
        ValidationResult holding either the normalized record or the field errors

    Raises:
        UnknownSchemaError: If ``schema`` is a name that is not registered
        TypeError: If ``record`` is not a mapping
    """
    if isinstance(schema, str):
        schema = get_schema(schema)
    if not isinstance(record, Mapping):
        raise TypeError(f"record must be a mapping, got {type(record).__name__}")

    data: Dict[str, Any] = {}
    errors: Dict[str, List[FieldError]] = {}

    for spec in schema.fields:
        value = record.get(spec.name)
        if value is None:
            if spec.has_default:
                value = spec.make_default()
            elif spec.optional:
                continue
            else:
                errors[spec.name] = [FieldError(code=ErrorCode.REQUIRED, message=spec.required_message)]
                continue

        value, failures = spec.evaluate(value)
        if failures:
            errors[spec.name] = failures
        else:
            data[spec.name] = value

    if errors:
        return ValidationResult(form=schema.name, errors=errors)
    return ValidationResult(form=schema.name, data=data)
