"""
Input validation for the marketplace forms: categories, subcategories,
stores, products and shipping addresses.
"""
from .validation import (
    ErrorCode,
    FieldError,
    FormValidationError,
    Schema,
    StorefrontFormsError,
    UnknownSchemaError,
    ValidationResult,
    get_schema,
    registered_schemas,
    validate,
)
from .schemas import (
    CategoryFormSchema,
    SubCategoryFormSchema,
    StoreFormSchema,
    ProductFormSchema,
    ShippingAddressSchema,
    validate_category_form,
    validate_subcategory_form,
    validate_store_form,
    validate_product_form,
    validate_shipping_address
)

__version__ = "1.0.0"

__all__ = [
    "ErrorCode",
    "FieldError",
    "FormValidationError",
    "Schema",
    "StorefrontFormsError",
    "UnknownSchemaError",
    "ValidationResult",
    "get_schema",
    "registered_schemas",
    "validate",
    "CategoryFormSchema",
    "SubCategoryFormSchema",
    "StoreFormSchema",
    "ProductFormSchema",
    "ShippingAddressSchema",
    "validate_category_form",
    "validate_subcategory_form",
    "validate_store_form",
    "validate_product_form",
    "validate_shipping_address"
]
