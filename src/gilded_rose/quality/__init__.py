"""Core domain: how item quality changes from one day to the next."""
from gilded_rose.quality.domain import (
    MAX_QUALITY,
    MIN_QUALITY,
    Item,
    ItemState,
    Variant,
    apply_daily_update,
    check_days,
)

__all__ = [
    "MAX_QUALITY",
    "MIN_QUALITY",
    "Item",
    "ItemState",
    "Variant",
    "apply_daily_update",
    "check_days",
]
