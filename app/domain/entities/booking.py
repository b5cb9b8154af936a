from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PaymentMethod(str, Enum):
    online = "Online"
    cash = "Cash"


@dataclass(frozen=True)
class Coordinates:
    lat: float | None = None
    lon: float | None = None

    @property
    def is_complete(self) -> bool:
        return self.lat is not None and self.lon is not None


@dataclass(frozen=True)
class BookingRequest:
    # Values are rendered as given; only presence is checked.
    name: str | int | float | None
    phone: str | int | float | None
    pickup: str | int | float | None
    duration: int | float | str | None
    payment_method: str | None = None
    coordinates: Coordinates | None = None

    @property
    def payment(self) -> PaymentMethod:
        """Only the exact value "Online" selects online payment; anything else is cash."""
        if self.payment_method == PaymentMethod.online.value:
            return PaymentMethod.online
        return PaymentMethod.cash
