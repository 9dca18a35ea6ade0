"""
Field definitions for form schemas.
"""
import copy
from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple, Type, Union

from pydantic import BaseModel, ValidationError

from .constraints import Constraint, IsUUID, OneOf, is_finite_number
from .errors import ErrorCode

_MISSING = object()


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UUID = "uuid"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"


_TYPE_MESSAGES = {
    FieldKind.STRING: "{label} must be a valid string.",
    FieldKind.UUID: "{label} must be a valid string.",
    FieldKind.ENUM: "{label} must be a valid string.",
    FieldKind.NUMBER: "{label} must be a number.",
    FieldKind.BOOLEAN: "{label} must be true or false.",
    FieldKind.ARRAY: "{label} must be a list of valid entries.",
    FieldKind.OBJECT: "{label} must be a valid object.",
}


class FieldError(BaseModel):
    """A single violated constraint."""
    code: ErrorCode
    message: str


class FieldSpec:
    """
    A named, typed slot in a form record.

    Args:
        name: Key of the field in the submitted record
        kind: Value kind checked before any constraint runs
        constraints: Constraints evaluated in order, all of them
        label: Human name used in generated messages
        default: Value substituted when the field is absent
        optional: Whether absence is allowed when there is no default
        item: Element kind of an array field, ``FieldKind.STRING`` or a model class
        model: Model class of an object field
        choices: Allowed values of an enum field
        type_message: Message emitted when the value has the wrong kind
    """

    def __init__(
        self,
        name: str,
        kind: FieldKind,
        *constraints: Constraint,
        label: Optional[str] = None,
        default: Any = _MISSING,
        optional: bool = False,
        item: Union[FieldKind, Type[BaseModel], None] = None,
        model: Optional[Type[BaseModel]] = None,
        choices: Optional[Iterable[str]] = None,
        type_message: Optional[str] = None,
        format_message: Optional[str] = None,
    ):
        self.name = name
        self.kind = kind
        self.label = label or name
        self.default = default
        self.optional = optional
        self.item = item
        self.model = model
        self.type_message = type_message or _TYPE_MESSAGES[kind].format(label=self.label)

        implicit: List[Constraint] = []
        if kind is FieldKind.UUID:
            implicit.append(IsUUID(format_message or f"{self.label} must be a valid UUID."))
        elif kind is FieldKind.ENUM:
            if choices is None:
                raise ValueError(f"Enum field {name!r} needs choices")
            allowed = [getattr(choice, "value", choice) for choice in choices]
            implicit.append(OneOf(allowed, format_message or (
                f"{self.label} must be one of: {', '.join(allowed)}."
            )))
        if kind is FieldKind.ARRAY and item is None:
            raise ValueError(f"Array field {name!r} needs an item kind")
        if kind is FieldKind.OBJECT and model is None:
            raise ValueError(f"Object field {name!r} needs a model")

        self.constraints: Tuple[Constraint, ...] = tuple(implicit) + constraints

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING

    @property
    def required_message(self) -> str:
        return f"{self.label} is required."

    def make_default(self) -> Any:
        return copy.deepcopy(self.default)

    def coerce(self, value: Any) -> Any:
        """
        Check the value's kind and return its normalized form.

        Raises:
            ValueError: If the value does not have this field's kind
        """
        kind = self.kind
        if kind in (FieldKind.STRING, FieldKind.UUID, FieldKind.ENUM):
            if not isinstance(value, str):
                raise ValueError(self.type_message)
            if kind is FieldKind.ENUM:
                return getattr(value, "value", value)
            return value
        if kind is FieldKind.NUMBER:
            if not is_finite_number(value):
                raise ValueError(self.type_message)
            return float(value)
        if kind is FieldKind.BOOLEAN:
            if not isinstance(value, bool):
                raise ValueError(self.type_message)
            return value
        if kind is FieldKind.OBJECT:
            return self._coerce_object(self.model, value)
        if not isinstance(value, (list, tuple)):
            raise ValueError(self.type_message)
        if self.item is FieldKind.STRING:
            if not all(isinstance(element, str) for element in value):
                raise ValueError(self.type_message)
            return list(value)
        return [self._coerce_object(self.item, element) for element in value]

    def _coerce_object(self, model: Type[BaseModel], value: Any) -> dict:
        if not isinstance(value, Mapping):
            raise ValueError(self.type_message)
        try:
            instance = model.model_validate(dict(value))
        except ValidationError:
            raise ValueError(self.type_message) from None
        return instance.model_dump(exclude_none=True)

    def evaluate(self, value: Any) -> Tuple[Any, List[FieldError]]:
        """Coerce ``value`` and run every constraint against it."""
        try:
            value = self.coerce(value)
        except ValueError as exc:
            return value, [FieldError(code=ErrorCode.INVALID_TYPE, message=str(exc))]

        failures = [
            FieldError(code=constraint.code, message=constraint.message)
            for constraint in self.constraints
            if not constraint.check(value)
        ]
        return value, failures

    def __repr__(self):
        return f"FieldSpec({self.name!r}, {self.kind.value})"
