"""
Constraint descriptors for form fields.

A constraint pairs a predicate with the message shown to the user when the
predicate fails. Constraints receive the value after the field's kind check,
so a string constraint always sees a ``str`` and an array constraint a ``list``.
"""
import math
import re
import uuid
from typing import Any, Callable, Iterable

from email_validator import EmailNotValidError, validate_email

from .errors import ErrorCode


class Constraint:
    """Base class for a single field constraint."""

    code: ErrorCode = ErrorCode.INVALID_FORMAT

    def __init__(self, message: str):
        self.message = message

    def check(self, value: Any) -> bool:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r})"


# String constraints

class MinLength(Constraint):
    code = ErrorCode.LENGTH_OUT_OF_RANGE

    def __init__(self, limit: int, message: str):
        super().__init__(message)
        self.limit = limit

    def check(self, value: str) -> bool:
        return len(value) >= self.limit


class MaxLength(Constraint):
    code = ErrorCode.LENGTH_OUT_OF_RANGE

    def __init__(self, limit: int, message: str):
        super().__init__(message)
        self.limit = limit

    def check(self, value: str) -> bool:
        return len(value) <= self.limit


class Matches(Constraint):
    """The whole string must match ``pattern``."""
    code = ErrorCode.PATTERN_MISMATCH

    def __init__(self, pattern: str, message: str):
        super().__init__(message)
        self.pattern = re.compile(pattern)

    def check(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None


class IsEmail(Constraint):
    def check(self, value: str) -> bool:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True


class IsUUID(Constraint):
    """Canonical hyphenated UUID, e.g. ``123e4567-e89b-12d3-a456-426614174000``."""

    def check(self, value: str) -> bool:
        if len(value) != 36:
            return False
        try:
            uuid.UUID(value)
        except ValueError:
            return False
        return value.count("-") == 4


class OneOf(Constraint):
    code = ErrorCode.INVALID_ENUM_MEMBER

    def __init__(self, allowed: Iterable[str], message: str):
        super().__init__(message)
        self.allowed = frozenset(allowed)

    def check(self, value: str) -> bool:
        return value in self.allowed


# Numeric constraints

class MinValue(Constraint):
    code = ErrorCode.NUMERIC_BOUND_VIOLATION

    def __init__(self, limit: float, message: str, exclusive: bool = False):
        super().__init__(message)
        self.limit = limit
        self.exclusive = exclusive

    def check(self, value: float) -> bool:
        if self.exclusive:
            return value > self.limit
        return value >= self.limit


# Array constraints

class MinItems(Constraint):
    code = ErrorCode.ARRAY_CARDINALITY_VIOLATION

    def __init__(self, limit: int, message: str):
        super().__init__(message)
        self.limit = limit

    def check(self, value: list) -> bool:
        return len(value) >= self.limit


class MaxItems(Constraint):
    code = ErrorCode.ARRAY_CARDINALITY_VIOLATION

    def __init__(self, limit: int, message: str):
        super().__init__(message)
        self.limit = limit

    def check(self, value: list) -> bool:
        return len(value) <= self.limit


class ExactItems(Constraint):
    code = ErrorCode.ARRAY_CARDINALITY_VIOLATION

    def __init__(self, length: int, message: str):
        super().__init__(message)
        self.length = length

    def check(self, value: list) -> bool:
        return len(value) == self.length


class Every(Constraint):
    """
    Refinement over array elements.
    Fails once for the whole field if ``predicate`` is false for any element.
    """
    code = ErrorCode.ELEMENT_REFINEMENT_FAILED

    def __init__(self, predicate: Callable[[Any], bool], message: str):
        super().__init__(message)
        self.predicate = predicate

    def check(self, value: list) -> bool:
        return all(self.predicate(item) for item in value)


def filled(*keys: str) -> Callable[[dict], bool]:
    """Predicate: every named key of an element holds a non-empty string."""
    def predicate(item: dict) -> bool:
        return all(isinstance(item.get(key), str) and len(item[key]) > 0 for key in keys)
    return predicate


def is_finite_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False
