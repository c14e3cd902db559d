from __future__ import annotations

from abc import ABC, abstractmethod

from hotelreg.core.entities.booking import Booking
from hotelreg.core.entities.guest import Guest


class BookingRepository(ABC):
    """
    Storage for the active bookings together with their id set and booked-guest set.

    The three collections are one unit: implementations keep the ids and guests in step
    with the bookings on every add/remove.
    """

    @abstractmethod
    def get(self, booking_id: int) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def add(self, booking: Booking) -> None:
        """Append a booking and register its id and guests."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, booking_id: int) -> Booking | None:
        """Drop a booking, returning it, or None if the id is not active."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> tuple[Booking, ...]:
        """Active bookings in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def active_ids(self) -> frozenset[int]:
        raise NotImplementedError

    @abstractmethod
    def booked_guests(self) -> frozenset[Guest]:
        raise NotImplementedError
