"""Cart preview: the client-side basket of windows and its price estimate.

The server re-prices every booking; the cart only previews what the pricing
engine will charge. A stored cart that fails validation is discarded whole.
"""

import json
from dataclasses import asdict, dataclass, replace
from typing import Any, Self

from storefront.domain.errors import ValidationError
from storefront.domain.pricing import (
    NO_DISCOUNT_LABEL,
    VAT_PERCENTAGE,
    PricingBreakdown,
    price_subtotal,
)
from storefront.logging_utils import get_storefront_logger

logger = get_storefront_logger("cart")

DEFAULT_CURRENCY = "GBP"

_STRING_FIELDS = ("window_id", "campaign_id", "campaign_name", "date", "start_time", "end_time", "currency")
_MINIMUMS = {
    "slots_to_book": 1,
    "price_per_slot": 0,
    "max_available": 1,
    "adverts_per_slot": 0,
}
_WIRE_NAMES = {
    "window_id": "windowId",
    "campaign_id": "campaignId",
    "campaign_name": "campaignName",
    "date": "date",
    "start_time": "startTime",
    "end_time": "endTime",
    "slots_to_book": "slotsToBook",
    "price_per_slot": "pricePerSlot",
    "currency": "currency",
    "max_available": "maxAvailable",
    "adverts_per_slot": "advertsPerSlot",
}


@dataclass(frozen=True)
class CartItem:
    window_id: str
    campaign_id: str
    campaign_name: str
    date: str
    start_time: str
    end_time: str
    slots_to_book: int
    price_per_slot: int
    currency: str
    max_available: int
    adverts_per_slot: int

    def __post_init__(self) -> None:
        for name in _STRING_FIELDS:
            if not isinstance(getattr(self, name), str):
                raise ValidationError(f"{_WIRE_NAMES[name]} must be a string")
        for name, minimum in _MINIMUMS.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{_WIRE_NAMES[name]} must be an integer")
            if value < minimum:
                raise ValidationError(f"{_WIRE_NAMES[name]} must be at least {minimum}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        if not isinstance(data, dict):
            raise ValidationError("Cart item must be an object")
        missing = [wire for wire in _WIRE_NAMES.values() if wire not in data]
        if missing:
            raise ValidationError(f"Cart item is missing {', '.join(missing)}")
        return cls(**{name: data[wire] for name, wire in _WIRE_NAMES.items()})

    def to_dict(self) -> dict[str, Any]:
        return {_WIRE_NAMES[name]: value for name, value in asdict(self).items()}

    @property
    def line_subtotal(self) -> int:
        return self.price_per_slot * self.slots_to_book


class Cart:
    """Ordered cart lines keyed by window id."""

    def __init__(self, items: list[CartItem] | None = None) -> None:
        self._items: list[CartItem] = list(items or [])

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, item: CartItem) -> None:
        for index, existing in enumerate(self._items):
            if existing.window_id == item.window_id:
                slots = min(item.max_available, existing.slots_to_book + item.slots_to_book)
                self._items[index] = replace(existing, slots_to_book=slots)
                return
        self._items.append(item)

    def remove_item(self, window_id: str) -> None:
        self._items = [item for item in self._items if item.window_id != window_id]

    def update_item_slots(self, window_id: str, slots: int) -> None:
        self._items = [
            replace(item, slots_to_book=min(item.max_available, max(1, slots)))
            if item.window_id == window_id
            else item
            for item in self._items
        ]

    def clear(self) -> None:
        self._items = []

    def total_slots(self) -> int:
        return sum(item.slots_to_book for item in self._items)

    def subtotal(self) -> int:
        return sum(item.line_subtotal for item in self._items)

    def pricing(self) -> PricingBreakdown:
        """Preview pricing with the tier chosen from all slots in the cart."""
        if not self._items:
            return PricingBreakdown(
                subtotal=0,
                discount_percentage=0,
                discount_applied=0,
                subtotal_after_discount=0,
                vat_percentage=VAT_PERCENTAGE,
                vat_amount=0,
                total=0,
                currency=DEFAULT_CURRENCY,
                tier=NO_DISCOUNT_LABEL,
            )
        return price_subtotal(self.subtotal(), self.total_slots(), self._items[0].currency)

    def to_json(self) -> str:
        return json.dumps([item.to_dict() for item in self._items])

    @classmethod
    def from_json(cls, raw: str | None) -> "Cart":
        """Restore a stored cart; any invalid content yields an empty cart."""
        if not raw:
            return cls()
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValidationError("Stored cart must be a list")
            return cls([CartItem.from_dict(entry) for entry in data])
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Invalid cart data, clearing cart: %s", exc)
            return cls()
