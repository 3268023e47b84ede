"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to storefront_exception_handler
- Never contain business logic

Each view exposes one RPC-style procedure under /api/trpc/<procedure>.
"""

from collections.abc import Mapping

from django.apps import apps
from rest_framework import serializers
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from storefront.conf import StorefrontSettings
from storefront.handlers.security import extract_client_ip, validate_admin_token
from storefront.handlers.serializers import (
    AdminSeedInputSerializer,
    BookingCreateInputSerializer,
    BookingResultSerializer,
    CampaignListInputSerializer,
    SeedResultSerializer,
    WindowDetailSerializer,
    WindowLookupInputSerializer,
    WindowPageSerializer,
)
from storefront.services import SeedMode, WindowQuery


class StorefrontAPIView(APIView):
    """Resolves the process-wide Storefront unless one is injected via as_view()."""

    storefront = None

    def get_storefront(self):
        if self.storefront is not None:
            return self.storefront
        return apps.get_app_config("storefront").storefront


class CampaignListView(StorefrontAPIView):
    """Handler for GET /api/trpc/campaigns.getAll"""

    def get(self, request: Request) -> Response:
        params = CampaignListInputSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data

        page = self.get_storefront().query_service.list_windows(
            WindowQuery(
                date=data.get("date") or None,
                time=data.get("time") or None,
                location=data.get("location") or None,
                page=data["page"],
            )
        )
        return Response(WindowPageSerializer(page).data)


class CampaignWindowView(StorefrontAPIView):
    """Handler for GET /api/trpc/campaigns.getWindow"""

    def get(self, request: Request) -> Response:
        params = WindowLookupInputSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        detail = self.get_storefront().query_service.get_window_detail(
            params.validated_data["campaignId"],
            params.validated_data["windowId"],
        )
        return Response(WindowDetailSerializer(detail).data)


class BookingCreateView(StorefrontAPIView):
    """Handler for POST /api/trpc/bookings.create"""

    def post(self, request: Request) -> Response:
        booking_service = self.get_storefront().booking_service
        client_ip = extract_client_ip(request)

        payload = BookingCreateInputSerializer(data=request.data)
        if not payload.is_valid():
            raw = request.data if isinstance(request.data, Mapping) else {}
            booking_service.record_invalid_input(
                window_id=raw.get("windowId"),
                slots_booked=raw.get("slotsBooked"),
                error="Invalid fields: " + ", ".join(sorted(payload.errors)),
                client_ip=client_ip,
            )
            raise serializers.ValidationError(payload.errors)
        data = payload.validated_data

        result = booking_service.create_booking(
            window_id=data["windowId"],
            slots_booked=data["slotsBooked"],
            contact=data["contact"],
            client_ip=client_ip,
        )
        return Response(BookingResultSerializer(result).data)


class AdminSeedView(StorefrontAPIView):
    """Handler for POST /api/trpc/admin.seed (bearer token, rate limited per IP)"""

    def post(self, request: Request) -> Response:
        storefront = self.get_storefront()
        client_ip = extract_client_ip(request)

        validate_admin_token(
            request.headers.get("Authorization"),
            StorefrontSettings.from_django_settings().admin_token,
        )
        storefront.admin_rate_limiter.check(client_ip)

        payload = AdminSeedInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        mode = SeedMode(payload.validated_data["mode"])
        reset = payload.validated_data["reset"]

        result = storefront.seed_loader.run(mode=mode, reset=reset, client_ip=client_ip)
        return Response(
            {**SeedResultSerializer(result).data, "mode": mode.value, "reset": reset}
        )
