"""
Models package for the data-model contracts the form schemas depend on.
"""
from .enums import ShippingFeeMethod, StoreStatus
from .elements import (
    ElementModel,
    ImageRef,
    ColorEntry,
    SizeEntry,
    SpecEntry,
    QuestionEntry,
    CountryOption
)

__all__ = [
    # Enums
    "ShippingFeeMethod",
    "StoreStatus",

    # Element models
    "ElementModel",
    "ImageRef",
    "ColorEntry",
    "SizeEntry",
    "SpecEntry",
    "QuestionEntry",
    "CountryOption"
]
