"""
Store form schema.
"""
from typing import Any, Mapping

from ..models import ImageRef, StoreStatus
from ..validation import (
    ExactItems,
    FieldKind,
    FieldSpec,
    IsEmail,
    Matches,
    MaxLength,
    MinLength,
    Schema,
    ValidationResult,
    register,
)
from .category import slug_field

STORE_NAME_PATTERN = r"(?!.*(?:[-_& ]){2,})[a-zA-Z0-9_ &-]+"
PHONE_PATTERN = r"\+?[0-9]+"

StoreFormSchema = register(Schema("store", (
    FieldSpec(
        "name", FieldKind.STRING,
        MinLength(2, "Store name must be at least 2 characters long."),
        MaxLength(50, "Store name cannot exceed 50 characters."),
        Matches(
            STORE_NAME_PATTERN,
            "Only letters, numbers, space, hyphen, and underscore are allowed in the store name, "
            "and consecutive occurrences of hyphens, underscores, or spaces are not permitted.",
        ),
        label="Store name",
    ),
    FieldSpec(
        "description", FieldKind.STRING,
        MinLength(30, "Store description must be at least 30 characters long."),
        MaxLength(500, "Store description cannot exceed 500 characters."),
        label="Store description",
    ),
    FieldSpec("email", FieldKind.STRING, IsEmail("Invalid email format."), label="Email"),
    FieldSpec(
        "phone", FieldKind.STRING,
        Matches(PHONE_PATTERN, "Invalid phone number format."),
        label="Phone number",
    ),
    FieldSpec("logo", FieldKind.ARRAY, ExactItems(1, "Choose a logo image."), item=ImageRef, label="Logo"),
    FieldSpec("cover", FieldKind.ARRAY, ExactItems(1, "Choose a cover image."), item=ImageRef, label="Cover"),
    slug_field("Store", "store"),
    FieldSpec("featured", FieldKind.BOOLEAN, default=False, optional=True, label="Featured"),
    FieldSpec("status", FieldKind.STRING, default=StoreStatus.PENDING.value, optional=True, label="Status"),
)))


def validate_store_form(record: Mapping[str, Any]) -> ValidationResult:
    return StoreFormSchema.validate(record)
