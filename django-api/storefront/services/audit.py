"""Audit trail for booking attempts and seed runs.

Kept separate from operational logging: events are held in a bounded in-memory
ring for inspection and also written to the ``storefront.audit`` logger.
"""

from collections import deque
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

from storefront.logging_utils import get_storefront_logger
from storefront.stores.memory_store import utc_now

logger = get_storefront_logger("audit")

SENSITIVE_KEYS = ("password", "token", "secret", "authorization", "apikey")
REDACTED = "[REDACTED]"
DEFAULT_CAPACITY = 1000


class AuditEventType(StrEnum):
    SEED_UPSERT = "seed_upsert"
    SEED_REPLACE = "seed_replace"
    SEED_RESET = "seed_reset"
    BOOKING_SUCCESS = "booking_success"
    BOOKING_FAILURE = "booking_failure"


@dataclass(frozen=True)
class AuditEvent:
    timestamp: datetime
    type: AuditEventType
    success: bool
    ip: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


def redact(details: Mapping[str, Any]) -> dict[str, Any]:
    """Mask values whose key names look like credentials."""
    return {
        key: REDACTED if any(s in key.lower() for s in SENSITIVE_KEYS) else value
        for key, value in details.items()
    }


class AuditLog:
    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._events: deque[AuditEvent] = deque(maxlen=capacity)
        self._clock = clock

    def log(
        self,
        event_type: AuditEventType,
        details: Mapping[str, Any],
        success: bool = True,
        ip: str | None = None,
    ) -> AuditEvent:
        event = AuditEvent(
            timestamp=self._clock(),
            type=event_type,
            success=success,
            ip=ip,
            details=redact(details),
        )
        self._events.append(event)
        logger.info(
            "[AUDIT] %s - %s ip=%s details=%s",
            event_type.value,
            "SUCCESS" if success else "FAILURE",
            ip,
            event.details,
        )
        return event

    def get_logs(self, limit: int = 100) -> list[AuditEvent]:
        return list(self._events)[-limit:] if limit > 0 else []

    def get_logs_by_type(self, event_type: AuditEventType, limit: int = 100) -> list[AuditEvent]:
        matching = [event for event in self._events if event.type == event_type]
        return matching[-limit:] if limit > 0 else []

    def clear(self) -> None:
        self._events.clear()
        logger.info("[AUDIT] Audit logs cleared")
