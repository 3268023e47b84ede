"""Seed loader - loads the fixed catalog into the inventory store.

Modes:
- upsert: find-or-create each campaign by name and each window by its
  (campaign, date, start, end) key; matching windows get fresh capacity and price.
- replace: upsert, then pause every active window this run did not touch.
- reset (flag, any mode): wipe the store first.
"""

import re
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import asdict, dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import StrEnum
from typing import Any, Self

from storefront.domain import (
    Campaign,
    CampaignId,
    CampaignStatus,
    CampaignWindow,
    CampaignWindowId,
    Capacity,
)
from storefront.domain.errors import ValidationError
from storefront.domain.value_objects import END_OF_DAY, is_clock_time
from storefront.logging_utils import get_storefront_logger
from storefront.seed.catalog import SEED_DATA, SEED_VERSION
from storefront.services.audit import AuditEventType, AuditLog
from storefront.stores.interfaces import InventoryStore
from storefront.stores.memory_store import utc_now

logger = get_storefront_logger("seed_loader")

SEED_CURRENCY = "GBP"
PRICE_NOISE = re.compile(r"[^\d.]")


class SeedMode(StrEnum):
    UPSERT = "upsert"
    REPLACE = "replace"


@dataclass(frozen=True)
class SeedRow:
    """One catalog row converted to inventory terms."""

    campaign: str
    date: date
    start_time: str
    end_time: str
    slots_available: int
    adverts_per_slot: int
    price_minor: int

    @classmethod
    def parse(cls, raw: Mapping[str, Any]) -> Self:
        """Build a row from catalog strings, failing on the first bad field."""
        campaign = str(raw.get("campaign", "")).strip()
        if not campaign:
            raise ValidationError("Seed row is missing a campaign name")

        start_time, end_time = _parse_time_range(str(raw.get("time", "")))
        return cls(
            campaign=campaign,
            date=_parse_catalog_date(str(raw.get("date", ""))),
            start_time=start_time,
            end_time=end_time,
            slots_available=_parse_count(raw.get("slotsAvailable"), "slotsAvailable"),
            adverts_per_slot=_parse_count(raw.get("advertsPerSlot"), "advertsPerSlot"),
            price_minor=parse_price_minor(str(raw.get("pricePerSlot", ""))),
        )


@dataclass(frozen=True)
class SeedResult:
    rows_total: int
    created: int
    updated: int
    archived: int
    duration_ms: int
    seed_version: str


def parse_price_minor(value: str) -> int:
    """Convert "£1,150.50"-style prices to integer minor units."""
    try:
        major = Decimal(PRICE_NOISE.sub("", value))
    except InvalidOperation:
        raise ValidationError(f"Invalid price {value!r}") from None
    return int((major * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _parse_catalog_date(value: str) -> date:
    parts = value.strip().split("/")
    try:
        day, month, year = (int(part) for part in parts)
        if year < 100:
            year += 2000
        return date(year, month, day)
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}, expected DD/MM/YY") from None


def _parse_time_range(value: str) -> tuple[str, str]:
    parts = [part.strip() for part in value.split("-")]
    if len(parts) != 2:
        raise ValidationError(f"Invalid time range {value!r}, expected HH:MM-HH:MM")
    start_time, end_time = parts
    if end_time == "00:00":
        end_time = END_OF_DAY
    if not (is_clock_time(start_time) and is_clock_time(end_time)):
        raise ValidationError(f"Invalid time range {value!r}, expected HH:MM-HH:MM")
    return start_time, end_time


def _parse_count(value: Any, name: str) -> int:
    try:
        return Capacity(int(str(value).strip())).value
    except ValueError:
        raise ValidationError(f"{name} must be a non-negative whole number") from None


class SeedLoader:
    """Loads SEED_DATA (or a supplied catalog) into an InventoryStore."""

    def __init__(
        self,
        store: InventoryStore,
        audit_log: AuditLog,
        catalog: Sequence[Mapping[str, Any]] = SEED_DATA,
        seed_version: str = SEED_VERSION,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._audit = audit_log
        self._catalog = catalog
        self._seed_version = seed_version
        self._clock = clock

    def run(
        self,
        mode: SeedMode = SeedMode.UPSERT,
        reset: bool = False,
        client_ip: str = "unknown",
    ) -> SeedResult:
        """Apply the catalog to the store.

        Raises:
            ValidationError: If any catalog row is malformed. Rows are parsed
                before the store is touched, so a bad catalog changes nothing.
        """
        mode = SeedMode(mode)
        started = time.monotonic()
        event_type = _audit_type(mode, reset)
        rows = [SeedRow.parse(raw) for raw in self._catalog]

        self._audit.log(
            event_type,
            {
                "mode": mode.value,
                "reset": reset,
                "seedVersion": self._seed_version,
                "totalRows": len(rows),
            },
            success=True,
            ip=client_ip,
        )

        if reset:
            self._store.clear_all()
            logger.warning("Store cleared before seeding", extra={"operation": "run"})

        created = updated = archived = 0
        touched: list[CampaignWindowId] = []
        for row in rows:
            campaign = self._find_or_create_campaign(row.campaign)
            window, was_created = self._upsert_window(campaign, row)
            touched.append(window.id)
            if was_created:
                created += 1
            else:
                updated += 1

        if mode == SeedMode.REPLACE:
            archived = self._store.archive_campaign_windows(touched)

        result = SeedResult(
            rows_total=len(rows),
            created=created,
            updated=updated,
            archived=archived,
            duration_ms=int((time.monotonic() - started) * 1000),
            seed_version=self._seed_version,
        )
        self._audit.log(
            event_type,
            {**asdict(result), "success": True},
            success=True,
            ip=client_ip,
        )
        logger.info(
            "Seed %s finished: %s created, %s updated, %s archived",
            mode.value,
            created,
            updated,
            archived,
            extra={"operation": "run"},
        )
        return result

    def _find_or_create_campaign(self, name: str) -> Campaign:
        campaign = self._store.get_campaign_by_name(name)
        if campaign is not None:
            return self._store.update_campaign(campaign.id, status=CampaignStatus.ACTIVE)
        now = self._clock()
        return self._store.create_campaign(
            Campaign(
                id=CampaignId.new(),
                name=name,
                status=CampaignStatus.ACTIVE,
                created_at=now,
                updated_at=now,
            )
        )

    def _upsert_window(self, campaign: Campaign, row: SeedRow) -> tuple[CampaignWindow, bool]:
        existing = self._store.find_campaign_window(
            campaign.id, row.date, row.start_time, row.end_time
        )
        if existing is not None:
            slots_available = row.slots_available
            if slots_available < existing.booked_slots:
                logger.warning(
                    "Window %s has %s booked slots; keeping capacity above catalog value %s",
                    existing.id,
                    existing.booked_slots,
                    row.slots_available,
                    extra={"operation": "run"},
                )
                slots_available = existing.booked_slots
            updated = self._store.update_campaign_window(
                existing.id,
                slots_available=slots_available,
                adverts_per_slot=row.adverts_per_slot,
                price_minor=row.price_minor,
                currency=SEED_CURRENCY,
                status=CampaignStatus.ACTIVE,
            )
            return updated, False

        now = self._clock()
        window = CampaignWindow(
            id=CampaignWindowId.new(),
            campaign_id=campaign.id,
            campaign_name=campaign.name,
            date=row.date,
            start_time=row.start_time,
            end_time=row.end_time,
            slots_available=row.slots_available,
            booked_slots=0,
            price_minor=row.price_minor,
            currency=SEED_CURRENCY,
            status=CampaignStatus.ACTIVE,
            created_at=now,
            updated_at=now,
            adverts_per_slot=row.adverts_per_slot,
        )
        return self._store.create_campaign_window(window), True


def _audit_type(mode: SeedMode, reset: bool) -> AuditEventType:
    if reset:
        return AuditEventType.SEED_RESET
    if mode == SeedMode.REPLACE:
        return AuditEventType.SEED_REPLACE
    return AuditEventType.SEED_UPSERT
