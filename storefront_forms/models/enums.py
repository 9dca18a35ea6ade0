"""
Enumerations shared with the marketplace data model.
"""
from enum import Enum


class ShippingFeeMethod(str, Enum):
    """How a product's shipping fee is computed."""
    ITEM = "ITEM"
    WEIGHT = "WEIGHT"
    FIXED = "FIXED"


class StoreStatus(str, Enum):
    """Moderation status of a store."""
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    BANNED = "BANNED"
    DISABLED = "DISABLED"
