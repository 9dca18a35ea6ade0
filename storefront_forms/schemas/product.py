"""
Product form schema.
A product is submitted together with its first variant, so the form carries
both product-level and variant-level fields.
"""
from typing import Any, Mapping

from ..models import (
    ColorEntry,
    CountryOption,
    ImageRef,
    QuestionEntry,
    ShippingFeeMethod,
    SizeEntry,
    SpecEntry,
)
from ..validation import (
    Every,
    ExactItems,
    FieldKind,
    FieldSpec,
    MaxItems,
    MaxLength,
    MinItems,
    MinLength,
    MinValue,
    Schema,
    ValidationResult,
    filled,
    register,
)


def _sizes_filled(size: dict) -> bool:
    return len(size["size"]) > 0 and size["price"] > 0 and size["quantity"] > 0


def _spec_list(name: str, noun: str) -> FieldSpec:
    return FieldSpec(
        name, FieldKind.ARRAY,
        MinItems(1, f"Please provide at least one {noun}."),
        Every(filled("name", "value"), f"All {noun}s inputs must be filled correctly."),
        item=SpecEntry,
        label=noun.capitalize(),
    )


ProductFormSchema = register(Schema("product", (
    FieldSpec(
        "name", FieldKind.STRING,
        MinLength(2, "Product name should be at least 2 characters long."),
        MaxLength(200, "Product name cannot exceed 200 characters."),
        label="Product name",
    ),
    FieldSpec(
        "description", FieldKind.STRING,
        MinLength(200, "Product description should be at least 200 characters long."),
        label="Product description",
    ),
    FieldSpec(
        "variantName", FieldKind.STRING,
        MinLength(2, "Product variant name should be at least 2 characters long."),
        MaxLength(100, "Product variant name cannot exceed 100 characters."),
        label="Product variant name",
    ),
    FieldSpec("variantDescription", FieldKind.STRING, optional=True, label="Product variant description"),
    FieldSpec(
        "images", FieldKind.ARRAY,
        MinItems(3, "Please upload at least 3 images for the product."),
        MaxItems(6, "You can upload up to 6 images for the product."),
        item=ImageRef,
        label="Product images",
    ),
    FieldSpec(
        "variantImage", FieldKind.ARRAY,
        ExactItems(1, "Choose a product variant image."),
        item=ImageRef,
        label="Product variant image",
    ),
    FieldSpec("categoryId", FieldKind.UUID, label="Category"),
    FieldSpec("subCategoryId", FieldKind.UUID, label="SubCategory"),
    FieldSpec("offerTagId", FieldKind.UUID, optional=True, label="Offer tag"),
    FieldSpec(
        "brand", FieldKind.STRING,
        MinLength(2, "Product brand should be at least 2 characters long."),
        MaxLength(50, "Product brand cannot exceed 50 characters."),
        label="Product brand",
    ),
    FieldSpec(
        "sku", FieldKind.STRING,
        MinLength(6, "Product SKU should be at least 6 characters long."),
        MaxLength(50, "Product SKU cannot exceed 50 characters."),
        label="Product SKU",
    ),
    FieldSpec(
        "weight", FieldKind.NUMBER,
        MinValue(0.01, "Please provide a valid product weight."),
        label="Product weight",
    ),
    FieldSpec(
        "keywords", FieldKind.ARRAY,
        MinItems(5, "Please provide at least 5 keywords."),
        MaxItems(10, "You can provide up to 10 keywords."),
        item=FieldKind.STRING,
        label="Keywords",
    ),
    FieldSpec(
        "colors", FieldKind.ARRAY,
        MinItems(1, "Please provide at least one color."),
        Every(filled("color"), "All color inputs must be filled."),
        item=ColorEntry,
        label="Colors",
    ),
    FieldSpec(
        "sizes", FieldKind.ARRAY,
        MinItems(1, "Please provide at least one size."),
        Every(lambda size: size["quantity"] >= 1, "Quantity must be greater than 0."),
        Every(lambda size: size["price"] >= 0.01, "Price must be greater than 0."),
        Every(lambda size: size["discount"] >= 0, "Discount cannot be negative."),
        Every(_sizes_filled, "All size inputs must be filled correctly."),
        item=SizeEntry,
        label="Sizes",
    ),
    _spec_list("product_specs", "product spec"),
    _spec_list("variant_specs", "product variant spec"),
    FieldSpec(
        "questions", FieldKind.ARRAY,
        MinItems(1, "Please provide at least one product question."),
        Every(filled("question", "answer"), "All product question inputs must be filled correctly."),
        item=QuestionEntry,
        label="Questions",
    ),
    FieldSpec("isSale", FieldKind.BOOLEAN, default=False, label="Sale"),
    FieldSpec("saleEndDate", FieldKind.STRING, optional=True, label="Sale end date"),
    FieldSpec(
        "freeShippingForAllCountries", FieldKind.BOOLEAN,
        default=False,
        label="Free shipping for all countries",
    ),
    FieldSpec(
        "freeShippingCountriesIds", FieldKind.ARRAY,
        Every(filled("label", "value"), "Each country must have a valid name and ID."),
        default=[],
        item=CountryOption,
        label="Free shipping countries",
    ),
    FieldSpec(
        "shippingFeeMethod", FieldKind.ENUM,
        choices=ShippingFeeMethod,
        label="Shipping fee method",
    ),
)))


def validate_product_form(record: Mapping[str, Any]) -> ValidationResult:
    return ProductFormSchema.validate(record)
