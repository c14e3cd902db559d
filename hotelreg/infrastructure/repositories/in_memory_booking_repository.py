from __future__ import annotations

from hotelreg.core.entities.booking import Booking
from hotelreg.core.entities.guest import Guest
from hotelreg.core.repositories.booking_repository import BookingRepository


class InMemoryBookingRepository(BookingRepository):
    """Process-memory implementation; contents vanish with the process."""

    def __init__(self) -> None:
        self._bookings: list[Booking] = []
        self._active_ids: set[int] = set()
        self._booked_guests: set[Guest] = set()

    def get(self, booking_id: int) -> Booking | None:
        if booking_id not in self._active_ids:
            return None
        for booking in self._bookings:
            if booking.booking_id == booking_id:
                return booking
        return None

    def add(self, booking: Booking) -> None:
        self._bookings.append(booking)
        self._active_ids.add(booking.booking_id)
        self._booked_guests.update(booking.guests)

    def remove(self, booking_id: int) -> Booking | None:
        booking = self.get(booking_id)
        if booking is None:
            return None

        self._active_ids.discard(booking_id)
        self._bookings = [b for b in self._bookings if b.booking_id != booking_id]

        # Rebuild from the remaining bookings rather than subtracting the removed guests
        self._booked_guests = {guest for b in self._bookings for guest in b.guests}
        return booking

    def list_all(self) -> tuple[Booking, ...]:
        return tuple(self._bookings)

    def active_ids(self) -> frozenset[int]:
        return frozenset(self._active_ids)

    def booked_guests(self) -> frozenset[Guest]:
        return frozenset(self._booked_guests)
