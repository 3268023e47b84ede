"""
Admin access control for the storefront API.

- Bearer token compared against the configured ADMIN_TOKEN
- Per-IP fixed window rate limiting
- Client IP extraction for audit tags
"""

import hmac
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from storefront.domain.errors import (
    ConfigurationError,
    RateLimitExceededError,
    UnauthorizedError,
)
from storefront.logging_utils import get_storefront_logger

logger = get_storefront_logger("security")

BEARER_PREFIX = "bearer "
UNKNOWN_IP = "unknown"


def extract_client_ip(request) -> str:
    """First X-Forwarded-For hop, then X-Real-IP, then the socket address."""
    forwarded = request.headers.get("X-Forwarded-For", "")
    first = forwarded.split(",")[0].strip()
    if first:
        return first
    real_ip = request.headers.get("X-Real-IP", "").strip()
    if real_ip:
        return real_ip
    return request.META.get("REMOTE_ADDR") or UNKNOWN_IP


def validate_admin_token(authorization: str | None, admin_token: str) -> None:
    """Check an Authorization header against the configured admin secret.

    Raises:
        ConfigurationError: If no admin token is configured.
        UnauthorizedError: If the header is missing, malformed or wrong.
    """
    if not admin_token or not admin_token.strip():
        logger.error("ADMIN_TOKEN is not configured")
        raise ConfigurationError("Admin security not configured")

    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        raise UnauthorizedError("Missing admin authorization")

    provided = authorization[len(BEARER_PREFIX):].strip()
    if not provided or not hmac.compare_digest(provided.encode(), admin_token.encode()):
        raise UnauthorizedError("Invalid admin authorization")


@dataclass
class _Window:
    started_at: float
    count: int


class FixedWindowRateLimiter:
    """
    Fixed window counter per client key.

    A key's window opens on its first request and resets once more than
    window_seconds have passed since it opened. Keys never share state.
    """

    def __init__(
        self,
        max_requests: int = 20,
        window_seconds: float = 60,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def check(self, key: str) -> None:
        """Count one request for key.

        Raises:
            RateLimitExceededError: If key already used its quota in this window.
        """
        now = self._clock()
        with self._lock:
            self._evict_expired(now)
            current = self._windows.get(key)
            if current is None:
                self._windows[key] = _Window(started_at=now, count=1)
                return
            if current.count >= self.max_requests:
                logger.warning(
                    "Rate limit violation: %s made more than %s requests in %ss",
                    key,
                    self.max_requests,
                    self.window_seconds,
                )
                raise RateLimitExceededError()
            current.count += 1

    def tracked_keys(self) -> int:
        """Number of keys with a window still held in memory."""
        with self._lock:
            return len(self._windows)

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _evict_expired(self, now: float) -> None:
        # Callers must hold the lock.
        expired = [
            key
            for key, window in self._windows.items()
            if now - window.started_at > self.window_seconds
        ]
        for key in expired:
            del self._windows[key]
