"""In-memory implementation of the InventoryStore.

All reads and writes go through one re-entrant lock, so a booking's capacity
check and its increment of booked_slots happen in the same critical section
even if requests are served from several threads.
"""

import threading
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Any

from storefront.domain import (
    Booking,
    BookingId,
    Campaign,
    CampaignId,
    CampaignStatus,
    CampaignWindow,
    CampaignWindowId,
)
from storefront.domain.errors import (
    CampaignWindowNotFoundError,
    DuplicateCampaignError,
    InsufficientSlotsError,
)
from storefront.stores.interfaces import InventoryStore, WindowFilters


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryInventoryStore(InventoryStore):
    """Process-local inventory. Construct one per process (or per test)."""

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock
        self._lock = threading.RLock()
        self._campaigns: dict[CampaignId, Campaign] = {}
        self._campaign_ids_by_name: dict[str, CampaignId] = {}
        self._windows: dict[CampaignWindowId, CampaignWindow] = {}
        self._bookings: dict[BookingId, Booking] = {}

    def create_campaign(self, campaign: Campaign) -> Campaign:
        with self._lock:
            if campaign.name in self._campaign_ids_by_name:
                raise DuplicateCampaignError(campaign.name)
            self._campaigns[campaign.id] = campaign
            self._campaign_ids_by_name[campaign.name] = campaign.id
            return campaign

    def get_campaign(self, campaign_id: CampaignId) -> Campaign | None:
        with self._lock:
            return self._campaigns.get(campaign_id)

    def get_campaign_by_name(self, name: str) -> Campaign | None:
        with self._lock:
            campaign_id = self._campaign_ids_by_name.get(name)
            return self._campaigns.get(campaign_id) if campaign_id else None

    def get_all_campaigns(self) -> list[Campaign]:
        with self._lock:
            return list(self._campaigns.values())

    def update_campaign(self, campaign_id: CampaignId, **changes: Any) -> Campaign | None:
        with self._lock:
            campaign = self._campaigns.get(campaign_id)
            if campaign is None:
                return None
            new_name = changes.get("name", campaign.name)
            if new_name != campaign.name:
                if new_name in self._campaign_ids_by_name:
                    raise DuplicateCampaignError(new_name)
                del self._campaign_ids_by_name[campaign.name]
                self._campaign_ids_by_name[new_name] = campaign_id
            updated = replace(campaign, **changes, updated_at=self._clock())
            self._campaigns[campaign_id] = updated
            return updated

    def create_campaign_window(self, window: CampaignWindow) -> CampaignWindow:
        with self._lock:
            self._windows[window.id] = window
            return window

    def get_campaign_window(self, window_id: CampaignWindowId) -> CampaignWindow | None:
        with self._lock:
            return self._windows.get(window_id)

    def update_campaign_window(
        self, window_id: CampaignWindowId, **changes: Any
    ) -> CampaignWindow | None:
        if "booked_slots" in changes:
            raise ValueError("booked_slots only changes through bookings")
        with self._lock:
            window = self._windows.get(window_id)
            if window is None:
                return None
            updated = replace(window, **changes, updated_at=self._clock())
            self._windows[window_id] = updated
            return updated

    def find_campaign_window(
        self, campaign_id: CampaignId, window_date: date, start_time: str, end_time: str
    ) -> CampaignWindow | None:
        key = (campaign_id, window_date, start_time, end_time)
        with self._lock:
            return next(
                (window for window in self._windows.values() if window.identity_key == key),
                None,
            )

    def get_campaign_windows(self, filters: WindowFilters | None = None) -> list[CampaignWindow]:
        with self._lock:
            windows = list(self._windows.values())

        if filters is not None:
            if filters.date is not None:
                windows = [w for w in windows if w.date == filters.date]
            if filters.campaign_id is not None:
                windows = [w for w in windows if w.campaign_id == filters.campaign_id]
            if filters.start_time is not None:
                windows = [w for w in windows if w.start_time >= filters.start_time]
            if filters.end_time is not None:
                windows = [w for w in windows if w.end_time <= filters.end_time]

        return sorted(windows, key=lambda w: (w.date, w.start_time))

    def archive_campaign_windows(self, except_ids: Iterable[CampaignWindowId]) -> int:
        keep = set(except_ids)
        archived = 0
        with self._lock:
            for window_id, window in list(self._windows.items()):
                if window_id in keep or window.status != CampaignStatus.ACTIVE:
                    continue
                self.update_campaign_window(window_id, status=CampaignStatus.PAUSED)
                archived += 1
        return archived

    def create_booking(self, booking: Booking) -> Booking:
        with self._lock:
            self._adjust_booked_slots(booking.campaign_window_id, booking.slots_booked)
            self._bookings[booking.id] = booking
            return booking

    def _adjust_booked_slots(self, window_id: CampaignWindowId, delta: int) -> CampaignWindow:
        """Move booked_slots by delta, refusing to leave 0..slots_available.

        Callers must hold the lock. A slot release would pass a negative delta.
        """
        window = self._windows.get(window_id)
        if window is None:
            raise CampaignWindowNotFoundError()
        if delta > window.available_slots:
            raise InsufficientSlotsError(window.available_slots)
        if window.booked_slots + delta < 0:
            raise ValueError("Cannot release more slots than are booked")
        updated = replace(
            window,
            booked_slots=window.booked_slots + delta,
            updated_at=self._clock(),
        )
        self._windows[window_id] = updated
        return updated

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        with self._lock:
            return self._bookings.get(booking_id)

    def get_all_bookings(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings.values())

    def get_bookings_by_window(self, window_id: CampaignWindowId) -> list[Booking]:
        with self._lock:
            return [b for b in self._bookings.values() if b.campaign_window_id == window_id]

    def clear_all(self) -> None:
        with self._lock:
            self._campaigns.clear()
            self._campaign_ids_by_name.clear()
            self._windows.clear()
            self._bookings.clear()
