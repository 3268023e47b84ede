"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Self
from uuid import UUID, uuid4

CLOCK_TIME_PATTERN = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")
END_OF_DAY = "24:00"
CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")
CURRENCY_SYMBOLS = {"GBP": "£", "EUR": "€", "USD": "$"}


@dataclass(frozen=True)
class EntityId:
    """UUID-backed identifier. Subclasses never compare equal to each other."""

    value: UUID

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class CampaignId(EntityId):
    """Unique identifier for a Campaign."""


class CampaignWindowId(EntityId):
    """Unique identifier for a CampaignWindow."""


class BookingId(EntityId):
    """Unique identifier for a Booking."""


@dataclass(frozen=True)
class Money:
    """Amount in minor currency units (pence, cents)."""

    amount_minor: int
    currency: str

    def __post_init__(self) -> None:
        if self.amount_minor < 0:
            raise ValueError("Money amount cannot be negative")
        if not CURRENCY_PATTERN.match(self.currency):
            raise ValueError(f"Invalid currency code: {self.currency!r}")

    @property
    def major(self) -> Decimal:
        return (Decimal(self.amount_minor) / 100).quantize(Decimal("0.01"))

    def format(self) -> str:
        symbol = CURRENCY_SYMBOLS.get(self.currency)
        if symbol is None:
            return f"{self.currency} {self.major:,.2f}"
        return f"{symbol}{self.major:,.2f}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


def is_clock_time(value: str) -> bool:
    """HH:MM on a 24-hour clock, with "24:00" accepted as the end-of-day sentinel."""
    return value == END_OF_DAY or bool(CLOCK_TIME_PATTERN.match(value))
