"""
Element models for array fields of the marketplace forms.
These define the shape of each entry; content rules such as "must not be
empty" are declared on the form schemas.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ElementModel(BaseModel):
    """Strict base: no string-to-number coercion, finite numbers only, unknown keys dropped."""
    model_config = ConfigDict(strict=True, extra="ignore", allow_inf_nan=False)


class ImageRef(ElementModel):
    """Uploaded image reference."""
    url: str = Field(..., description="Image URL")


class ColorEntry(ElementModel):
    color: str = Field(..., description="Color name or code")


class SizeEntry(ElementModel):
    """Size variant with its own stock and pricing."""
    size: str = Field(..., description="Size label")
    quantity: float = Field(..., description="Units in stock")
    price: float = Field(..., description="Unit price")
    discount: float = Field(0, description="Discount percentage")


class SpecEntry(ElementModel):
    """Product or variant specification as a name/value pair."""
    name: str = Field(..., description="Specification name")
    value: str = Field(..., description="Specification value")


class QuestionEntry(ElementModel):
    question: str = Field(..., description="Question text")
    answer: str = Field(..., description="Answer text")


class CountryOption(ElementModel):
    """Country picked from a select input."""
    id: Optional[str] = Field(None, description="Country ID")
    label: str = Field(..., description="Country name")
    value: str = Field(..., description="Country ID as submitted by the select input")
