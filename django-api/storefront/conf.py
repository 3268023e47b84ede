"""App settings read from the ``STOREFRONT`` dict in Django settings."""

from dataclasses import dataclass
from typing import Any, Self

from django.conf import settings


@dataclass(frozen=True)
class StorefrontSettings:
    admin_token: str = ""
    admin_rate_limit_requests: int = 20
    admin_rate_limit_window_seconds: int = 60
    audit_log_capacity: int = 1000
    seed_on_startup: bool = False

    @classmethod
    def from_django_settings(cls) -> Self:
        values: dict[str, Any] = getattr(settings, "STOREFRONT", {})
        return cls(
            admin_token=values.get("ADMIN_TOKEN") or "",
            admin_rate_limit_requests=int(values.get("ADMIN_RATE_LIMIT_REQUESTS", 20)),
            admin_rate_limit_window_seconds=int(values.get("ADMIN_RATE_LIMIT_WINDOW_SECONDS", 60)),
            audit_log_capacity=int(values.get("AUDIT_LOG_CAPACITY", 1000)),
            seed_on_startup=bool(values.get("SEED_ON_STARTUP", False)),
        )
