"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. The store is the single
owner of campaigns, windows and bookings; nothing else mutates them.
"""

import datetime
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Any

from storefront.domain import (
    Booking,
    BookingId,
    Campaign,
    CampaignId,
    CampaignWindow,
    CampaignWindowId,
)


@dataclass(frozen=True)
class WindowFilters:
    """Optional window filters. Times compare as HH:MM strings."""

    date: datetime.date | None = None
    campaign_id: CampaignId | None = None
    start_time: str | None = None
    end_time: str | None = None


class InventoryStore(ABC):
    """Interface for campaign inventory and booking persistence."""

    @abstractmethod
    def create_campaign(self, campaign: Campaign) -> Campaign:
        """Store a new campaign. Raises DuplicateCampaignError if the name is taken."""
        ...

    @abstractmethod
    def get_campaign(self, campaign_id: CampaignId) -> Campaign | None:
        ...

    @abstractmethod
    def get_campaign_by_name(self, name: str) -> Campaign | None:
        ...

    @abstractmethod
    def get_all_campaigns(self) -> list[Campaign]:
        ...

    @abstractmethod
    def update_campaign(self, campaign_id: CampaignId, **changes: Any) -> Campaign | None:
        """Apply changes and bump updated_at. Return None if the campaign is absent.

        Renaming does not cascade to the campaign's windows.
        """
        ...

    @abstractmethod
    def create_campaign_window(self, window: CampaignWindow) -> CampaignWindow:
        ...

    @abstractmethod
    def get_campaign_window(self, window_id: CampaignWindowId) -> CampaignWindow | None:
        ...

    @abstractmethod
    def update_campaign_window(
        self, window_id: CampaignWindowId, **changes: Any
    ) -> CampaignWindow | None:
        """Apply changes and bump updated_at. Return None if the window is absent.

        booked_slots cannot be changed here; only bookings move it.
        """
        ...

    @abstractmethod
    def find_campaign_window(
        self, campaign_id: CampaignId, window_date: date, start_time: str, end_time: str
    ) -> CampaignWindow | None:
        """Exact match on the (campaign, date, start, end) identity key."""
        ...

    @abstractmethod
    def get_campaign_windows(self, filters: WindowFilters | None = None) -> list[CampaignWindow]:
        """Return windows ordered by (date, start_time) ascending."""
        ...

    @abstractmethod
    def archive_campaign_windows(self, except_ids: Iterable[CampaignWindowId]) -> int:
        """Pause every active window not in except_ids and return how many changed."""
        ...

    @abstractmethod
    def create_booking(self, booking: Booking) -> Booking:
        """Reserve the booking's slots and store it in one step.

        Raises:
            CampaignWindowNotFoundError: If the booking's window does not exist.
            InsufficientSlotsError: If the window cannot hold the booking.
        """
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        ...

    @abstractmethod
    def get_all_bookings(self) -> list[Booking]:
        ...

    @abstractmethod
    def get_bookings_by_window(self, window_id: CampaignWindowId) -> list[Booking]:
        ...

    @abstractmethod
    def clear_all(self) -> None:
        """Remove every campaign, window and booking."""
        ...
