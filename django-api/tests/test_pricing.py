"""Unit tests for the pricing engine.

Run with: pytest tests/test_pricing.py -v
"""

import pytest

from storefront.domain.pricing import (
    VAT_PERCENTAGE,
    calculate_pricing,
    percentage_of,
    price_subtotal,
)


class TestTierBoundaries:
    """Breakdowns at each tier boundary for a 1000 minor-unit slot."""

    def test_single_slot_has_no_discount(self):
        """One slot gets no discount and 20% VAT."""
        breakdown = calculate_pricing(1, 1000, "GBP")
        assert breakdown.tier == "none"
        assert breakdown.discount_percentage == 0
        assert breakdown.discount_applied == 0
        assert breakdown.vat_amount == 200
        assert breakdown.total == 1200

    def test_two_slots_get_ten_percent(self):
        """Two slots land in the 10% tier."""
        breakdown = calculate_pricing(2, 1000, "GBP")
        assert breakdown.tier == "10%"
        assert breakdown.subtotal == 2000
        assert breakdown.discount_applied == 200
        assert breakdown.subtotal_after_discount == 1800
        assert breakdown.vat_amount == 360
        assert breakdown.total == 2160

    def test_four_slots_get_fifteen_percent(self):
        """Four slots land in the 15% tier."""
        breakdown = calculate_pricing(4, 1000, "GBP")
        assert breakdown.tier == "15%"
        assert breakdown.subtotal == 4000
        assert breakdown.discount_applied == 600
        assert breakdown.subtotal_after_discount == 3400
        assert breakdown.vat_amount == 680
        assert breakdown.total == 4080

    def test_six_slots_get_twenty_percent(self):
        """Six slots land in the 20% tier."""
        breakdown = calculate_pricing(6, 1000, "GBP")
        assert breakdown.tier == "20%"
        assert breakdown.subtotal == 6000
        assert breakdown.discount_applied == 1200
        assert breakdown.subtotal_after_discount == 4800
        assert breakdown.vat_amount == 960
        assert breakdown.total == 5760

    @pytest.mark.parametrize(
        "slots,tier",
        [(1, "none"), (2, "10%"), (3, "10%"), (4, "15%"), (5, "15%"), (6, "20%"), (50, "20%")],
    )
    def test_tier_bands_do_not_overlap(self, slots, tier):
        """Each slot count maps to exactly one band."""
        assert calculate_pricing(slots, 1000, "GBP").tier == tier


class TestPricingProperties:
    """Invariants of the breakdown."""

    @pytest.mark.parametrize("slots", range(1, 20))
    @pytest.mark.parametrize("price", [1, 99, 1000, 12345])
    def test_total_never_drops_when_adding_a_slot(self, slots, price):
        """A larger order is never cheaper in absolute terms."""
        smaller = calculate_pricing(slots, price, "GBP")
        larger = calculate_pricing(slots + 1, price, "GBP")
        assert larger.total >= smaller.total

    @pytest.mark.parametrize("slots", range(1, 21))
    def test_breakdown_adds_up(self, slots):
        """Totals are consistent integer sums."""
        breakdown = calculate_pricing(slots, 1337, "GBP")
        assert breakdown.subtotal == slots * 1337
        assert breakdown.subtotal_after_discount == breakdown.subtotal - breakdown.discount_applied
        assert breakdown.total == breakdown.subtotal_after_discount + breakdown.vat_amount
        assert breakdown.vat_percentage == VAT_PERCENTAGE
        assert all(
            isinstance(value, int)
            for value in (
                breakdown.subtotal,
                breakdown.discount_applied,
                breakdown.subtotal_after_discount,
                breakdown.vat_amount,
                breakdown.total,
            )
        )

    def test_zero_price_yields_zero_breakdown_with_tier(self):
        """A free slot still reports its tier."""
        breakdown = calculate_pricing(4, 0, "GBP")
        assert breakdown.total == 0
        assert breakdown.discount_applied == 0
        assert breakdown.vat_amount == 0
        assert breakdown.tier == "15%"
        assert breakdown.discount_percentage == 15

    def test_currency_is_passed_through(self):
        assert calculate_pricing(1, 500, "EUR").currency == "EUR"


class TestRounding:
    """Round-half-up on integer minor units."""

    def test_half_rounds_up(self):
        """0.5 of a minor unit rounds up, not to even."""
        assert percentage_of(5, 10) == 1
        assert percentage_of(25, 10) == 3

    def test_below_half_rounds_down(self):
        assert percentage_of(4, 10) == 0

    def test_discount_rounds_half_up(self):
        """3 slots at 1005: 10% of 3015 is 301.5, charged as 302."""
        breakdown = calculate_pricing(3, 1005, "GBP")
        assert breakdown.subtotal == 3015
        assert breakdown.discount_applied == 302
        assert breakdown.subtotal_after_discount == 2713
        assert breakdown.vat_amount == 543
        assert breakdown.total == 3256

    def test_fifteen_percent_half_rounds_up(self):
        """15% of 10 minor units is 1.5, charged as 2."""
        breakdown = price_subtotal(10, 4, "GBP")
        assert breakdown.discount_applied == 2
        assert breakdown.subtotal_after_discount == 8
        assert breakdown.vat_amount == 2
        assert breakdown.total == 10


class TestInvalidInput:
    """Caller errors raise ValueError."""

    def test_zero_slots_rejected(self):
        with pytest.raises(ValueError):
            calculate_pricing(0, 1000, "GBP")

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            calculate_pricing(1, -1, "GBP")

    def test_price_subtotal_uses_slot_count_for_tier(self):
        """Tier comes from slots, VAT from the given subtotal."""
        breakdown = price_subtotal(3000, 4, "GBP")
        assert breakdown.tier == "15%"
        assert breakdown.discount_applied == 450
        assert breakdown.total == 3060
