"""
Logging utilities for the storefront.

Provides a standardized logger with:
- Component-based prefixes
- Operation context tracking
- Input sanitization against log injection
"""

import logging
from typing import Any

LOG_NAMESPACE = "storefront"


def _sanitize_log_input(value: Any) -> Any:
    """Replace newlines and carriage returns in string log input."""
    if isinstance(value, str):
        return value.replace("\n", " ").replace("\r", " ")
    return value


class StorefrontLogger(logging.LoggerAdapter):
    """Logger adapter adding component and operation prefixes.

    Example:
        logger = StorefrontLogger("booking_service")
        logger.info("Booking committed", extra={"operation": "create_booking"})
        # Output: [storefront][component=booking_service][op=create_booking] Booking committed
    """

    def __init__(self, component: str, extra: dict[str, Any] | None = None):
        base_logger = logging.getLogger(f"{LOG_NAMESPACE}.{component}")
        merged_extra = {"component": component}
        if extra:
            merged_extra.update(extra)
        super().__init__(base_logger, merged_extra)

    def process(self, msg, kwargs):
        msg = _sanitize_log_input(msg)
        extra = kwargs.pop("extra", {})

        component = _sanitize_log_input(self.extra.get("component", LOG_NAMESPACE))
        operation = extra.get("operation") or self.extra.get("operation")

        prefix_parts = [f"[storefront][component={component}]"]
        if operation:
            prefix_parts.append(f"[op={_sanitize_log_input(operation)}]")

        prefixed = "".join(prefix_parts) + f" {msg}"
        kwargs["extra"] = {**self.extra, **extra}
        return prefixed, kwargs

    def log(self, level, msg, *args, **kwargs):
        if not self.isEnabledFor(level):
            return
        msg, kwargs = self.process(msg, kwargs)
        clean_args = tuple(_sanitize_log_input(arg) for arg in args)
        self.logger.log(level, msg, *clean_args, **kwargs)


def get_storefront_logger(component: str, extra: dict[str, Any] | None = None) -> StorefrontLogger:
    """Get a logger instance for a storefront component.

    Example:
        logger = get_storefront_logger("seed_loader")
        logger.info("Seed finished", extra={"operation": "run"})
    """
    return StorefrontLogger(component, extra)
