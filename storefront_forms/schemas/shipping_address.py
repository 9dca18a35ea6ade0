"""
Shipping address form schema.
"""
from typing import Any, Mapping

from ..validation import (
    FieldKind,
    FieldSpec,
    Matches,
    MaxLength,
    MinLength,
    Schema,
    ValidationResult,
    register,
)
from .store import PHONE_PATTERN

PERSON_NAME_PATTERN = r"[a-zA-Z]+"


def _bounded(name: str, label: str, low: int, high: int, *extra) -> FieldSpec:
    return FieldSpec(
        name, FieldKind.STRING,
        MinLength(low, f"{label} should be at least {low} characters long."),
        MaxLength(high, f"{label} cannot exceed {high} characters."),
        *extra,
        label=label,
    )


ShippingAddressSchema = register(Schema("shipping_address", (
    FieldSpec(
        "countryId", FieldKind.UUID,
        label="Country",
    ),
    _bounded(
        "firstName", "First name", 2, 50,
        Matches(PERSON_NAME_PATTERN, "No special characters are allowed in name."),
    ),
    _bounded(
        "lastName", "Last name", 2, 50,
        Matches(PERSON_NAME_PATTERN, "No special characters are allowed in name."),
    ),
    FieldSpec(
        "phone", FieldKind.STRING,
        Matches(PHONE_PATTERN, "Invalid phone number format."),
        label="Phone number",
        type_message="Phone number must be a string.",
    ),
    _bounded("address1", "Address line 1", 5, 100),
    FieldSpec(
        "address2", FieldKind.STRING,
        MaxLength(100, "Address line 2 cannot exceed 100 characters."),
        optional=True,
        label="Address line 2",
    ),
    _bounded("state", "State", 2, 50),
    _bounded("city", "City", 2, 50),
    _bounded("zip_code", "Zip code", 2, 10),
    FieldSpec("default", FieldKind.BOOLEAN, default=False, label="Default address"),
)))


def validate_shipping_address(record: Mapping[str, Any]) -> ValidationResult:
    return ShippingAddressSchema.validate(record)
