from __future__ import annotations

from enum import Enum
from typing import Iterable

from hotelreg.core.entities.guest import Guest


class ReservationErrorKind(str, Enum):
    DUPLICATE_IDENTIFIER = "DUPLICATE_IDENTIFIER"
    GUEST_ALREADY_BOOKED = "GUEST_ALREADY_BOOKED"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_PARAMETERS = "INVALID_PARAMETERS"


class ReservationError(Exception):
    """
    Base of every failure the registry reports. Callers branch on `kind`.

    The registry state is untouched whenever one of these is raised.
    """
    kind: ReservationErrorKind


class DuplicateIdentifierError(ReservationError):
    kind = ReservationErrorKind.DUPLICATE_IDENTIFIER

    def __init__(self, booking_id: int) -> None:
        super().__init__(f"Booking id {booking_id} is already in use")
        self.booking_id = booking_id


class GuestAlreadyBookedError(ReservationError):
    kind = ReservationErrorKind.GUEST_ALREADY_BOOKED

    def __init__(self, guests: Iterable[Guest]) -> None:
        self.guests = tuple(guests)
        names = ", ".join(repr(g.name) for g in self.guests)
        super().__init__(f"Guest(s) already hold an active booking: {names}")


class BookingNotFoundError(ReservationError):
    kind = ReservationErrorKind.BOOKING_NOT_FOUND

    def __init__(self, booking_id: int) -> None:
        super().__init__(f"Booking not found: {booking_id}")
        self.booking_id = booking_id


class InvalidParametersError(ReservationError):
    kind = ReservationErrorKind.INVALID_PARAMETERS

    def __init__(self, problems: Iterable[str]) -> None:
        self.problems = list(problems)
        super().__init__("Invalid booking parameters: " + "; ".join(self.problems))
