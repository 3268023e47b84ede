"""Pricing engine: volume discount tiers and VAT on integer minor units."""

from dataclasses import dataclass

VAT_PERCENTAGE = 20


@dataclass(frozen=True)
class DiscountTier:
    min_slots: int
    max_slots: int | None
    percentage: int
    label: str

    def matches(self, slots: int) -> bool:
        if slots < self.min_slots:
            return False
        return self.max_slots is None or slots <= self.max_slots


# Evaluated in order, first match wins.
DISCOUNT_TIERS = (
    DiscountTier(min_slots=6, max_slots=None, percentage=20, label="20%"),
    DiscountTier(min_slots=4, max_slots=5, percentage=15, label="15%"),
    DiscountTier(min_slots=2, max_slots=3, percentage=10, label="10%"),
)
NO_DISCOUNT_LABEL = "none"


@dataclass(frozen=True)
class PricingBreakdown:
    subtotal: int
    discount_percentage: int
    discount_applied: int
    subtotal_after_discount: int
    vat_percentage: int
    vat_amount: int
    total: int
    currency: str
    tier: str


def percentage_of(amount: int, percentage: int) -> int:
    """Round-half-up share of a non-negative integer amount."""
    return (amount * percentage + 50) // 100


def select_tier(slots: int) -> DiscountTier | None:
    return next((tier for tier in DISCOUNT_TIERS if tier.matches(slots)), None)


def price_subtotal(subtotal: int, slots: int, currency: str) -> PricingBreakdown:
    """Apply the tier for ``slots`` and VAT to an already computed subtotal."""
    if slots < 1:
        raise ValueError("slots must be at least 1")
    if subtotal < 0:
        raise ValueError("subtotal cannot be negative")

    tier = select_tier(slots)
    discount_percentage = tier.percentage if tier else 0
    discount_applied = percentage_of(subtotal, discount_percentage)
    subtotal_after_discount = subtotal - discount_applied
    vat_amount = percentage_of(subtotal_after_discount, VAT_PERCENTAGE)

    return PricingBreakdown(
        subtotal=subtotal,
        discount_percentage=discount_percentage,
        discount_applied=discount_applied,
        subtotal_after_discount=subtotal_after_discount,
        vat_percentage=VAT_PERCENTAGE,
        vat_amount=vat_amount,
        total=subtotal_after_discount + vat_amount,
        currency=currency,
        tier=tier.label if tier else NO_DISCOUNT_LABEL,
    )


def calculate_pricing(
    slots_booked: int, price_minor_per_slot: int, currency: str
) -> PricingBreakdown:
    """Return the full price breakdown for booking ``slots_booked`` slots.

    Pure and deterministic. Raises ValueError for fewer than one slot or a
    negative unit price; callers validate input before reaching here.
    """
    if price_minor_per_slot < 0:
        raise ValueError("price_minor_per_slot cannot be negative")
    return price_subtotal(slots_booked * price_minor_per_slot, slots_booked, currency)
