"""Wiring of the storefront: one store shared by every service.

Built once when Django starts (see StorefrontAppConfig.ready) and handed to the
views; tests build their own isolated instance.
"""

from dataclasses import dataclass

from storefront.handlers.security import FixedWindowRateLimiter
from storefront.services import AuditLog, BookingService, QueryService, SeedLoader
from storefront.stores import InMemoryInventoryStore, InventoryStore


@dataclass
class Storefront:
    store: InventoryStore
    audit_log: AuditLog
    booking_service: BookingService
    query_service: QueryService
    seed_loader: SeedLoader
    admin_rate_limiter: FixedWindowRateLimiter


def build_storefront(
    store: InventoryStore | None = None,
    audit_log_capacity: int = 1000,
    admin_rate_limit_requests: int = 20,
    admin_rate_limit_window_seconds: int = 60,
) -> Storefront:
    store = store if store is not None else InMemoryInventoryStore()
    audit_log = AuditLog(capacity=audit_log_capacity)
    return Storefront(
        store=store,
        audit_log=audit_log,
        booking_service=BookingService(store, audit_log),
        query_service=QueryService(store),
        seed_loader=SeedLoader(store, audit_log),
        admin_rate_limiter=FixedWindowRateLimiter(
            max_requests=admin_rate_limit_requests,
            window_seconds=admin_rate_limit_window_seconds,
        ),
    )
