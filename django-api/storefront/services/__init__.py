from storefront.services.audit import AuditEvent, AuditEventType, AuditLog
from storefront.services.booking_service import BookingResult, BookingService
from storefront.services.query_service import QueryService, WindowQuery
from storefront.services.seed_loader import SeedLoader, SeedMode, SeedResult

__all__ = [
    "AuditEvent",
    "AuditEventType",
    "AuditLog",
    "BookingResult",
    "BookingService",
    "QueryService",
    "WindowQuery",
    "SeedLoader",
    "SeedMode",
    "SeedResult",
]
