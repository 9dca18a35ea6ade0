"""
Category and subcategory form schemas.
"""
from typing import Any, Mapping

from ..models import ImageRef
from ..validation import (
    ExactItems,
    FieldKind,
    FieldSpec,
    Matches,
    MaxLength,
    MinLength,
    Schema,
    ValidationResult,
    register,
)

NAME_PATTERN = r"[a-zA-Z0-9\s'&-]+"
# Letters, digits, hyphen and underscore; no two separators in a row.
SLUG_PATTERN = r"(?!.*(?:[-_ ]){2,})[a-zA-Z0-9_-]+"


def slug_field(label: str, noun: str) -> FieldSpec:
    """URL slug field shared by categories, subcategories and stores."""
    return FieldSpec(
        "url", FieldKind.STRING,
        MinLength(2, f"{label} url must be at least 2 characters long."),
        MaxLength(50, f"{label} url cannot exceed 50 characters."),
        Matches(
            SLUG_PATTERN,
            f"Only letters, numbers, hyphen, and underscore are allowed in the {noun} url, "
            "and consecutive occurrences of hyphens, underscores, or spaces are not permitted.",
        ),
        label=f"{label} url",
    )


def _category_fields(label: str, noun: str, image_message: str):
    return (
        FieldSpec(
            "name", FieldKind.STRING,
            MinLength(2, f"{label} name must be at least 2 characters long."),
            MaxLength(50, f"{label} name cannot exceed 50 characters."),
            Matches(NAME_PATTERN, f"Only letters, numbers, and spaces are allowed in the {noun} name."),
            label=f"{label} name",
        ),
        FieldSpec(
            "image", FieldKind.ARRAY,
            ExactItems(1, image_message),
            item=ImageRef,
            label=f"{label} image",
        ),
        slug_field(label, noun),
        FieldSpec("featured", FieldKind.BOOLEAN, default=False, label="Featured"),
    )


CategoryFormSchema = register(Schema(
    "category",
    _category_fields("Category", "category", "Choose a category image."),
))

SubCategoryFormSchema = register(Schema(
    "subcategory",
    _category_fields("SubCategory", "subCategory", "Choose only one subCategory image")
    + (FieldSpec("categoryId", FieldKind.UUID, label="Category"),),
))


def validate_category_form(record: Mapping[str, Any]) -> ValidationResult:
    return CategoryFormSchema.validate(record)


def validate_subcategory_form(record: Mapping[str, Any]) -> ValidationResult:
    return SubCategoryFormSchema.validate(record)
