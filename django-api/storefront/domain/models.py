"""Domain models representing the storefront's inventory state.

These are pure domain objects with no API input rules. They are immutable:
stores replace an entity with an updated copy instead of mutating it.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from storefront.domain.value_objects import (
    BookingId,
    CampaignId,
    CampaignWindowId,
    Capacity,
    Money,
    is_clock_time,
)


class CampaignStatus(StrEnum):
    ACTIVE = "active"
    PAUSED = "paused"


class BookingStatus(StrEnum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Campaign:
    """A named advertising placement grouping, typically a location."""

    id: CampaignId
    name: str
    status: CampaignStatus
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class CampaignWindow:
    """One bookable date/time block of slots belonging to a Campaign.

    ``campaign_name`` is a copy of the owning campaign's name taken at write
    time; renaming a campaign does not cascade to its windows.
    """

    id: CampaignWindowId
    campaign_id: CampaignId
    campaign_name: str
    date: date
    start_time: str
    end_time: str
    slots_available: int
    booked_slots: int
    price_minor: int
    currency: str
    status: CampaignStatus
    created_at: datetime
    updated_at: datetime
    adverts_per_slot: int = 1

    def __post_init__(self) -> None:
        Capacity(self.slots_available)
        Capacity(self.adverts_per_slot)
        if not 0 <= self.booked_slots <= self.slots_available:
            raise ValueError(
                f"booked_slots must be between 0 and {self.slots_available}, "
                f"got {self.booked_slots}"
            )
        if not (is_clock_time(self.start_time) and is_clock_time(self.end_time)):
            raise ValueError(
                f"Invalid window times {self.start_time!r}-{self.end_time!r}"
            )
        Money(self.price_minor, self.currency)

    @property
    def available_slots(self) -> int:
        return self.slots_available - self.booked_slots

    @property
    def price(self) -> Money:
        return Money(self.price_minor, self.currency)

    @property
    def identity_key(self) -> tuple[CampaignId, date, str, str]:
        return (self.campaign_id, self.date, self.start_time, self.end_time)


@dataclass(frozen=True)
class ContactDetails:
    """Booking contact, already sanitized (see storefront.domain.sanitize)."""

    name: str
    email: str
    phone: str


@dataclass(frozen=True)
class Booking:
    """A confirmed purchase of slots on one window.

    Monetary fields are integer minor units copied from the pricing breakdown.
    """

    id: BookingId
    campaign_window_id: CampaignWindowId
    slots_booked: int
    contact: ContactDetails
    subtotal: int
    discount_applied: int
    subtotal_after_discount: int
    vat_amount: int
    vat_percentage: int
    total: int
    currency: str
    status: BookingStatus
    reference: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if self.slots_booked < 1:
            raise ValueError("A booking must reserve at least one slot")

    @property
    def total_money(self) -> Money:
        return Money(self.total, self.currency)
