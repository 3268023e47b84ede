"""Domain error codes for the storefront."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Domain error codes."""

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"
    TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict, compare=False)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when caller input is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.BAD_REQUEST, message=message)


class CampaignNotFoundError(DomainError):
    """Raised when a campaign is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message="Campaign not found",
        )


class CampaignWindowNotFoundError(DomainError):
    """Raised when a campaign window is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message="Campaign window not found",
        )


class InsufficientSlotsError(DomainError):
    """Raised when a booking asks for more slots than remain on a window."""

    def __init__(self, available_slots: int) -> None:
        super().__init__(
            code=ErrorCode.CONFLICT,
            message=(
                f"Not enough slots available. Only {available_slots} slots remaining."
            ),
            details={"availableSlots": available_slots},
        )

    @property
    def available_slots(self) -> int:
        return self.details["availableSlots"]


class DuplicateCampaignError(DomainError):
    """Raised when a campaign name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.CONFLICT,
            message=f"Campaign {name!r} already exists",
        )


class UnauthorizedError(DomainError):
    def __init__(self, message: str = "Missing admin authorization") -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message=message)


class RateLimitExceededError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_REQUESTS,
            message="Admin rate limit exceeded",
        )


class ConfigurationError(DomainError):
    """Raised when the server is misconfigured. Never shown verbatim to callers."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INTERNAL_SERVER_ERROR, message=message)
