"""Integration tests for the storefront RPC endpoints.

Requests go through Django and DRF against a fresh in-memory storefront.
Run with: pytest tests/test_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from storefront.handlers.security import FixedWindowRateLimiter
from storefront.services import AuditEventType, SeedMode
from storefront.services.seed_loader import SeedLoader

TEN_SLOT_CATALOG = (
    {"campaign": "ALPHA", "date": "01/04/25", "time": "08:00-10:00", "slotsAvailable": "10", "advertsPerSlot": "2", "pricePerSlot": "£10.00"},
)


@pytest.fixture
def seeded(storefront):
    storefront.seed_loader.run(mode=SeedMode.UPSERT)
    return storefront


def first_window(storefront):
    return storefront.store.get_campaign_windows()[0]


class TestCampaignsGetAll:
    """Tests for GET /api/trpc/campaigns.getAll"""

    url = "/api/trpc/campaigns.getAll"

    def test_lists_seeded_windows(self, api_client: APIClient, seeded):
        """Given a seeded store, returns the first page grouped by campaign."""
        response = api_client.get(self.url)

        assert response.status_code == 200
        body = response.json()
        assert body["pagination"] == {"page": 1, "limit": 20, "total": 44, "pages": 3}
        assert sum(len(group["windows"]) for group in body["data"]) == 20
        window = body["data"][0]["windows"][0]
        assert set(window) >= {
            "id", "campaignId", "campaignName", "date", "startTime", "endTime",
            "slotsAvailable", "bookedSlots", "priceMinor", "currency", "priceDisplay", "status",
        }
        assert window["status"] == "active"

    def test_archived_windows_stay_listed(self, api_client: APIClient, seeded):
        """Windows paused by a replace seed are still listed, marked paused."""
        seeded.store.archive_campaign_windows(set())

        body = api_client.get(self.url).json()

        assert body["pagination"]["total"] == 44
        statuses = {w["status"] for group in body["data"] for w in group["windows"]}
        assert statuses == {"paused"}

    def test_empty_store(self, api_client: APIClient, storefront):
        """Given no windows, returns an empty page."""
        body = api_client.get(self.url).json()
        assert body["data"] == []
        assert body["pagination"]["total"] == 0

    def test_filters(self, api_client: APIClient, seeded):
        """Date, location and time filters combine."""
        response = api_client.get(
            self.url, {"date": "2025-03-15", "location": "brighton", "time": "20:00-24:00"}
        )

        body = response.json()
        assert body["pagination"]["total"] == 1
        window = body["data"][0]["windows"][0]
        assert window["campaignName"] == "BRIGHTON"
        assert window["endTime"] == "24:00"
        assert window["priceMinor"] == 115000
        assert window["priceDisplay"] == "£1,150.00"
        assert body["data"][0]["campaign"]["name"] == "BRIGHTON"

    @pytest.mark.parametrize("params", [{"page": "0"}, {"date": "yesterday"}, {"time": "late"}])
    def test_bad_query(self, api_client: APIClient, storefront, params):
        """Malformed filters return BAD_REQUEST."""
        response = api_client.get(self.url, params)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"


class TestCampaignsGetWindow:
    """Tests for GET /api/trpc/campaigns.getWindow"""

    url = "/api/trpc/campaigns.getWindow"

    def test_returns_window(self, api_client: APIClient, seeded):
        window = first_window(seeded)
        response = api_client.get(
            self.url, {"campaignId": str(window.campaign_id), "windowId": str(window.id)}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["window"]["id"] == str(window.id)
        assert body["campaign"]["id"] == str(window.campaign_id)
        assert body["availableSlots"] == window.slots_available

    def test_not_found(self, api_client: APIClient, seeded):
        window = first_window(seeded)
        response = api_client.get(
            self.url, {"campaignId": str(window.campaign_id), "windowId": "not-a-uuid"}
        )

        assert response.status_code == 404
        assert response.json() == {
            "error": {"code": "NOT_FOUND", "message": "Campaign window not found"}
        }

    def test_missing_params(self, api_client: APIClient, storefront):
        response = api_client.get(self.url)
        assert response.status_code == 400
        assert set(response.json()["error"]["fields"]) == {"campaignId", "windowId"}


class TestBookingsCreate:
    """Tests for POST /api/trpc/bookings.create"""

    url = "/api/trpc/bookings.create"

    def post(self, api_client, window_id, slots, contact, **extra):
        return api_client.post(
            self.url,
            {"windowId": window_id, "slotsBooked": slots, "contact": contact},
            format="json",
            **extra,
        )

    def test_books_then_rejects_oversell(self, api_client: APIClient, storefront, contact):
        """Booking 4 of 10, then 7, reports the 6 that remain and changes nothing."""
        SeedLoader(
            storefront.store,
            storefront.audit_log,
            catalog=TEN_SLOT_CATALOG,
        ).run()
        window = first_window(storefront)

        response = self.post(api_client, str(window.id), 4, contact)
        assert response.status_code == 200
        body = response.json()
        assert body["tier"] == "15%"
        assert body["breakdown"]["total"] == 4080
        assert body["booking"]["slotsBooked"] == 4
        assert body["booking"]["status"] == "confirmed"
        assert body["booking"]["reference"].startswith("SC-")
        assert body["booking"]["totalDisplay"] == "£40.80"
        assert body["booking"]["contact"]["email"] == "ada@example.com"

        response = self.post(api_client, str(window.id), 7, contact)
        assert response.status_code == 409
        assert response.json() == {
            "error": {
                "code": "CONFLICT",
                "message": "Not enough slots available. Only 6 slots remaining.",
                "availableSlots": 6,
            }
        }
        assert storefront.store.get_campaign_window(window.id).booked_slots == 4

    def test_client_ip_is_audited(self, api_client: APIClient, seeded, contact):
        window = first_window(seeded)
        self.post(api_client, str(window.id), 1, contact, HTTP_X_FORWARDED_FOR="203.0.113.9")
        assert seeded.audit_log.get_logs(limit=1)[0].ip == "203.0.113.9"

    @pytest.mark.parametrize(
        "field,value,message",
        [("email", "not-an-email", "Invalid email format"), ("phone", "123", "Phone number too short")],
    )
    def test_invalid_contact(self, api_client: APIClient, seeded, contact, field, value, message):
        window = first_window(seeded)
        response = self.post(api_client, str(window.id), 1, {**contact, field: value})

        assert response.status_code == 400
        assert response.json()["error"] == {"code": "BAD_REQUEST", "message": message}
        assert seeded.store.get_all_bookings() == []

    def test_zero_slots_fails_input_validation(self, api_client: APIClient, seeded, contact):
        window = first_window(seeded)
        before = len(seeded.audit_log.get_logs())

        response = self.post(api_client, str(window.id), 0, contact)

        assert response.status_code == 400
        assert "slotsBooked" in response.json()["error"]["fields"]
        events = seeded.audit_log.get_logs()
        assert len(events) == before + 1
        assert events[-1].type == AuditEventType.BOOKING_FAILURE
        assert events[-1].details == {
            "windowId": str(window.id),
            "slotsBooked": 0,
            "reason": "invalid_input",
            "error": "Invalid fields: slotsBooked",
        }

    def test_missing_contact_field_is_audited(self, api_client: APIClient, seeded, contact):
        """A body the input serializer rejects still leaves one failure record."""
        window = first_window(seeded)
        del contact["name"]
        before = len(seeded.audit_log.get_logs())

        response = self.post(
            api_client, str(window.id), 1, contact, HTTP_X_FORWARDED_FOR="198.51.100.4"
        )

        assert response.status_code == 400
        assert "contact" in response.json()["error"]["fields"]
        events = seeded.audit_log.get_logs()
        assert len(events) == before + 1
        assert events[-1].success is False
        assert events[-1].ip == "198.51.100.4"
        assert events[-1].details["reason"] == "invalid_input"
        assert seeded.store.get_all_bookings() == []

    def test_unknown_window(self, api_client: APIClient, storefront, contact):
        response = self.post(api_client, "3f1c6f3e-2b1d-4c56-9d2e-8f7a6b5c4d3e", 1, contact)
        assert response.status_code == 404


class TestAdminSeed:
    """Tests for POST /api/trpc/admin.seed"""

    url = "/api/trpc/admin.seed"

    def test_requires_authorization(self, api_client: APIClient, storefront, admin_token):
        response = api_client.post(self.url, {}, format="json")
        assert response.status_code == 401
        assert response.json()["error"] == {
            "code": "UNAUTHORIZED",
            "message": "Missing admin authorization",
        }

    def test_wrong_token(self, api_client: APIClient, storefront, admin_token):
        response = api_client.post(
            self.url, {}, format="json", HTTP_AUTHORIZATION="Bearer not-the-token"
        )
        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid admin authorization"

    def test_unconfigured_token_is_internal_error(self, api_client: APIClient, storefront, settings):
        settings.STOREFRONT = {**settings.STOREFRONT, "ADMIN_TOKEN": ""}
        response = api_client.post(
            self.url, {}, format="json", HTTP_AUTHORIZATION="Bearer anything"
        )
        assert response.status_code == 500
        assert response.json() == {
            "error": {"code": "INTERNAL_SERVER_ERROR", "message": "Internal server error"}
        }

    def test_seeds_catalog(self, api_client: APIClient, storefront, admin_token):
        response = api_client.post(
            self.url, {}, format="json", HTTP_AUTHORIZATION=f"Bearer {admin_token}"
        )

        assert response.status_code == 200
        body = response.json()
        assert body["mode"] == "upsert"
        assert body["reset"] is False
        assert body["rows_total"] == 44
        assert body["created"] == 44
        assert len(storefront.store.get_campaign_windows()) == 44

    def test_replace_mode(self, api_client: APIClient, storefront, admin_token):
        storefront.seed_loader.run()
        response = api_client.post(
            self.url,
            {"mode": "replace"},
            format="json",
            HTTP_AUTHORIZATION=f"Bearer {admin_token}",
        )
        body = response.json()
        assert body["mode"] == "replace"
        assert body["updated"] == 44
        assert body["archived"] == 0

    def test_unknown_mode(self, api_client: APIClient, storefront, admin_token):
        response = api_client.post(
            self.url,
            {"mode": "merge"},
            format="json",
            HTTP_AUTHORIZATION=f"Bearer {admin_token}",
        )
        assert response.status_code == 400

    def test_rate_limited_per_ip(self, api_client: APIClient, storefront, admin_token):
        storefront.admin_rate_limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60)
        headers = {"HTTP_AUTHORIZATION": f"Bearer {admin_token}"}

        first = api_client.post(self.url, {}, format="json", REMOTE_ADDR="10.0.0.1", **headers)
        second = api_client.post(self.url, {}, format="json", REMOTE_ADDR="10.0.0.1", **headers)
        other_ip = api_client.post(self.url, {}, format="json", REMOTE_ADDR="10.0.0.2", **headers)

        assert first.status_code == 200
        assert second.status_code == 429
        assert second.json()["error"]["code"] == "TOO_MANY_REQUESTS"
        assert other_ip.status_code == 200

    def test_unauthorized_requests_do_not_use_quota(self, api_client: APIClient, storefront, admin_token):
        storefront.admin_rate_limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60)

        api_client.post(self.url, {}, format="json")
        response = api_client.post(
            self.url, {}, format="json", HTTP_AUTHORIZATION=f"Bearer {admin_token}"
        )
        assert response.status_code == 200
