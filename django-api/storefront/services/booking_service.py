"""Booking service - validates and commits bookings against a window.

Order of checks is fixed: contact sanitization, window lookup, capacity,
pricing, commit. Every attempt leaves exactly one audit event, whatever the
outcome, and a failed attempt never changes inventory.
"""

import secrets
import string
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from storefront.domain import (
    Booking,
    BookingId,
    BookingStatus,
    CampaignWindow,
    CampaignWindowId,
    PricingBreakdown,
    calculate_pricing,
)
from storefront.domain.errors import (
    CampaignWindowNotFoundError,
    InsufficientSlotsError,
    ValidationError,
)
from storefront.domain.sanitize import sanitize_contact
from storefront.logging_utils import get_storefront_logger
from storefront.services.audit import AuditEventType, AuditLog
from storefront.stores.interfaces import InventoryStore
from storefront.stores.memory_store import utc_now

logger = get_storefront_logger("booking_service")

REFERENCE_PREFIX = "SC-"
REFERENCE_ALPHABET = string.ascii_uppercase + string.digits
REFERENCE_LENGTH = 8


def generate_reference() -> str:
    """Human-facing booking code, e.g. SC-7QK2M9XA."""
    return REFERENCE_PREFIX + "".join(
        secrets.choice(REFERENCE_ALPHABET) for _ in range(REFERENCE_LENGTH)
    )


@dataclass(frozen=True)
class BookingResult:
    booking: Booking
    tier: str
    breakdown: PricingBreakdown


class BookingService:
    """Service for creating bookings."""

    def __init__(
        self,
        store: InventoryStore,
        audit_log: AuditLog,
        clock: Callable[[], datetime] = utc_now,
        reference_generator: Callable[[], str] = generate_reference,
    ) -> None:
        self._store = store
        self._audit = audit_log
        self._clock = clock
        self._generate_reference = reference_generator

    def create_booking(
        self,
        window_id: str,
        slots_booked: int,
        contact: Mapping[str, Any],
        client_ip: str = "unknown",
    ) -> BookingResult:
        """Book slots on a window.

        Raises:
            ValidationError: If slots_booked < 1 or the contact fails sanitization.
            CampaignWindowNotFoundError: If the window does not exist.
            InsufficientSlotsError: If fewer than slots_booked slots remain.
        """
        audit = {"windowId": window_id, "slotsBooked": slots_booked}
        try:
            if isinstance(slots_booked, bool) or not isinstance(slots_booked, int) or slots_booked < 1:
                raise ValidationError("slotsBooked must be a whole number of at least 1")
            sanitized_contact = sanitize_contact(contact)
        except ValidationError as exc:
            self._record_failure(audit, "invalid_input", client_ip, error=exc.message)
            raise

        window = self._resolve_window(window_id)
        if window is None:
            self._record_failure(audit, "window_not_found", client_ip)
            raise CampaignWindowNotFoundError()

        if slots_booked > window.available_slots:
            self._record_failure(
                audit, "insufficient_slots", client_ip, availableSlots=window.available_slots
            )
            raise InsufficientSlotsError(window.available_slots)

        breakdown = calculate_pricing(slots_booked, window.price_minor, window.currency)
        now = self._clock()
        booking = Booking(
            id=BookingId.new(),
            campaign_window_id=window.id,
            slots_booked=slots_booked,
            contact=sanitized_contact,
            subtotal=breakdown.subtotal,
            discount_applied=breakdown.discount_applied,
            subtotal_after_discount=breakdown.subtotal_after_discount,
            vat_amount=breakdown.vat_amount,
            vat_percentage=breakdown.vat_percentage,
            total=breakdown.total,
            currency=window.currency,
            status=BookingStatus.CONFIRMED,
            reference=self._generate_reference(),
            created_at=now,
            updated_at=now,
        )

        try:
            self._store.create_booking(booking)
        except InsufficientSlotsError as exc:
            self._record_failure(
                audit, "insufficient_slots", client_ip, availableSlots=exc.available_slots
            )
            raise
        except CampaignWindowNotFoundError:
            self._record_failure(audit, "window_not_found", client_ip)
            raise

        self._audit.log(
            AuditEventType.BOOKING_SUCCESS,
            {
                **audit,
                "bookingId": str(booking.id),
                "campaignName": window.campaign_name,
                "total": booking.total,
                "reference": booking.reference,
            },
            success=True,
            ip=client_ip,
        )
        logger.info(
            "Booked %s slot(s) on window %s as %s",
            slots_booked,
            window.id,
            booking.reference,
            extra={"operation": "create_booking"},
        )
        return BookingResult(booking=booking, tier=breakdown.tier, breakdown=breakdown)

    def record_invalid_input(
        self,
        window_id: Any,
        slots_booked: Any,
        error: str,
        client_ip: str = "unknown",
    ) -> None:
        """Audit a booking request rejected before it reached create_booking."""
        self._record_failure(
            {"windowId": window_id, "slotsBooked": slots_booked},
            "invalid_input",
            client_ip,
            error=error,
        )

    def _resolve_window(self, window_id: str) -> CampaignWindow | None:
        try:
            parsed = CampaignWindowId.from_string(window_id)
        except (TypeError, ValueError, AttributeError):
            return None
        return self._store.get_campaign_window(parsed)

    def _record_failure(
        self, audit: dict[str, Any], reason: str, client_ip: str, **extra: Any
    ) -> None:
        self._audit.log(
            AuditEventType.BOOKING_FAILURE,
            {**audit, "reason": reason, **extra},
            success=False,
            ip=client_ip,
        )
        logger.warning(
            "Booking rejected for window %s: %s",
            audit["windowId"],
            reason,
            extra={"operation": "create_booking"},
        )
