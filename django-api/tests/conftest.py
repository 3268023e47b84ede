"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, timezone

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from storefront.container import build_storefront
from storefront.domain import (
    Campaign,
    CampaignId,
    CampaignStatus,
    CampaignWindow,
    CampaignWindowId,
)
from storefront.services import AuditLog, BookingService, QueryService
from storefront.stores import InMemoryInventoryStore

FROZEN_NOW = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)

VALID_CONTACT = {
    "name": "Ada Lovelace",
    "email": "Ada@Example.com",
    "phone": "+44 (0)1273 123456",
}


def frozen_clock() -> datetime:
    return FROZEN_NOW


@pytest.fixture
def store() -> InMemoryInventoryStore:
    return InMemoryInventoryStore(clock=frozen_clock)


@pytest.fixture
def audit_log() -> AuditLog:
    return AuditLog(clock=frozen_clock)


@pytest.fixture
def booking_service(store, audit_log) -> BookingService:
    return BookingService(
        store,
        audit_log,
        clock=frozen_clock,
        reference_generator=lambda: "SC-TEST0001",
    )


@pytest.fixture
def query_service(store) -> QueryService:
    return QueryService(store)


@pytest.fixture
def make_campaign(store):
    def _make(name: str = "BRIGHTON") -> Campaign:
        existing = store.get_campaign_by_name(name)
        if existing is not None:
            return existing
        return store.create_campaign(
            Campaign(
                id=CampaignId.new(),
                name=name,
                status=CampaignStatus.ACTIVE,
                created_at=FROZEN_NOW,
                updated_at=FROZEN_NOW,
            )
        )

    return _make


@pytest.fixture
def make_window(store, make_campaign):
    def _make(
        campaign_name: str = "BRIGHTON",
        window_date: date = date(2025, 3, 7),
        start_time: str = "18:00",
        end_time: str = "24:00",
        slots_available: int = 10,
        price_minor: int = 1000,
        currency: str = "GBP",
        status: CampaignStatus = CampaignStatus.ACTIVE,
    ) -> CampaignWindow:
        campaign = make_campaign(campaign_name)
        return store.create_campaign_window(
            CampaignWindow(
                id=CampaignWindowId.new(),
                campaign_id=campaign.id,
                campaign_name=campaign.name,
                date=window_date,
                start_time=start_time,
                end_time=end_time,
                slots_available=slots_available,
                booked_slots=0,
                price_minor=price_minor,
                currency=currency,
                status=status,
                created_at=FROZEN_NOW,
                updated_at=FROZEN_NOW,
            )
        )

    return _make


@pytest.fixture
def storefront(monkeypatch):
    """A fresh Storefront installed as the app-wide instance for this test."""
    instance = build_storefront()
    monkeypatch.setattr(apps.get_app_config("storefront"), "storefront", instance)
    return instance


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def admin_token(settings) -> str:
    token = "test-admin-token"
    settings.STOREFRONT = {**settings.STOREFRONT, "ADMIN_TOKEN": token}
    return token


@pytest.fixture
def contact() -> dict:
    return dict(VALID_CONTACT)
