"""Read-only views over the inventory for browsing campaigns and windows."""

import math
from dataclasses import dataclass
from datetime import date

from storefront.domain import (
    Campaign,
    CampaignId,
    CampaignWindow,
    CampaignWindowId,
)
from storefront.domain.errors import CampaignWindowNotFoundError, ValidationError
from storefront.domain.value_objects import is_clock_time
from storefront.stores.interfaces import InventoryStore

PAGE_SIZE = 20


@dataclass(frozen=True)
class WindowQuery:
    """Listing filters as sent by the caller.

    ``time`` is a "HH:MM-HH:MM" range; a window matches when it starts at or
    after the first bound and ends at or before the second.
    """

    date: str | None = None
    time: str | None = None
    location: str | None = None
    page: int = 1


@dataclass(frozen=True)
class CampaignGroup:
    campaign: Campaign | None
    windows: tuple[CampaignWindow, ...]


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int
    pages: int


@dataclass(frozen=True)
class WindowPage:
    data: tuple[CampaignGroup, ...]
    pagination: Pagination


@dataclass(frozen=True)
class WindowDetail:
    window: CampaignWindow
    campaign: Campaign | None
    available_slots: int


class QueryService:
    """Service for catalog browsing."""

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def list_windows(self, query: WindowQuery) -> WindowPage:
        """Return windows of any status grouped by campaign, one page at a time.

        Raises:
            ValidationError: If the page, date or time range is malformed.
        """
        if query.page < 1:
            raise ValidationError("page must be at least 1")

        windows = self._store.get_campaign_windows()

        if query.date:
            wanted = _parse_date(query.date)
            windows = [w for w in windows if w.date == wanted]

        if query.location:
            needle = query.location.lower()
            windows = [w for w in windows if needle in w.campaign_name.lower()]

        if query.time:
            start_time, end_time = _parse_time_range(query.time)
            windows = [
                w for w in windows if w.start_time >= start_time and w.end_time <= end_time
            ]

        total = len(windows)
        offset = (query.page - 1) * PAGE_SIZE
        page_windows = windows[offset:offset + PAGE_SIZE]

        grouped: dict[CampaignId, list[CampaignWindow]] = {}
        for window in page_windows:
            grouped.setdefault(window.campaign_id, []).append(window)

        groups = tuple(
            CampaignGroup(campaign=self._store.get_campaign(campaign_id), windows=tuple(items))
            for campaign_id, items in grouped.items()
        )
        return WindowPage(
            data=groups,
            pagination=Pagination(
                page=query.page,
                limit=PAGE_SIZE,
                total=total,
                pages=math.ceil(total / PAGE_SIZE),
            ),
        )

    def get_window_detail(self, campaign_id: str, window_id: str) -> WindowDetail:
        """Return a window with its campaign.

        Raises:
            CampaignWindowNotFoundError: If the window is absent or belongs to
                a different campaign than campaign_id.
        """
        try:
            parsed_campaign_id = CampaignId.from_string(campaign_id)
            parsed_window_id = CampaignWindowId.from_string(window_id)
        except (TypeError, ValueError, AttributeError):
            raise CampaignWindowNotFoundError() from None

        window = self._store.get_campaign_window(parsed_window_id)
        if window is None or window.campaign_id != parsed_campaign_id:
            raise CampaignWindowNotFoundError()

        return WindowDetail(
            window=window,
            campaign=self._store.get_campaign(parsed_campaign_id),
            available_slots=window.available_slots,
        )


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError("date must be an ISO date (YYYY-MM-DD)") from None


def _parse_time_range(value: str) -> tuple[str, str]:
    parts = [part.strip() for part in value.split("-")]
    if len(parts) != 2 or not all(is_clock_time(part) for part in parts):
        raise ValidationError("time must be a range like 18:00-24:00")
    return parts[0], parts[1]
