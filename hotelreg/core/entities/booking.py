from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from hotelreg.core.entities.guest import Guest


class BookingStatus(str, Enum):
    ACTIVE = "ACTIVE"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True, slots=True)
class Booking:
    booking_id: int
    hotel_name: str
    guests: tuple[Guest, ...]
    duration_nights: int
    total_price: Decimal
    breakfast_included: bool

    @property
    def guest_count(self) -> int:
        return len(self.guests)

    def summary(self) -> str:
        breakfast = "yes" if self.breakfast_included else "no"
        return (
            f"Booking #{self.booking_id}, Hotel: {self.hotel_name}, Guests: {self.guest_count}, "
            f"Nights: {self.duration_nights}, Breakfast: {breakfast}, Total: {self.total_price}"
        )
