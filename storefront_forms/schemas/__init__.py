"""
Schemas package for the marketplace forms.
Each form is a module-level Schema constant with one validate operation.
"""

# Form schemas
from .category import (
    CategoryFormSchema,
    SubCategoryFormSchema,
    validate_category_form,
    validate_subcategory_form
)
from .store import StoreFormSchema, validate_store_form
from .product import ProductFormSchema, validate_product_form
from .shipping_address import ShippingAddressSchema, validate_shipping_address

# Error response schemas
from .common import ValidationErrorDetail, ValidationErrorResponse

__all__ = [
    # Form schemas
    "CategoryFormSchema",
    "SubCategoryFormSchema",
    "StoreFormSchema",
    "ProductFormSchema",
    "ShippingAddressSchema",

    # Operations
    "validate_category_form",
    "validate_subcategory_form",
    "validate_store_form",
    "validate_product_form",
    "validate_shipping_address",

    # Error response schemas
    "ValidationErrorDetail",
    "ValidationErrorResponse"
]
