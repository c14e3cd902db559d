from __future__ import annotations

import logging
import threading
from decimal import Decimal, InvalidOperation
from typing import Iterator, Sequence

from hotelreg.core.entities.booking import Booking, BookingStatus
from hotelreg.core.entities.guest import Guest
from hotelreg.core.errors import (
    BookingNotFoundError,
    DuplicateIdentifierError,
    GuestAlreadyBookedError,
    InvalidParametersError,
)
from hotelreg.core.repositories.booking_repository import BookingRepository

logger = logging.getLogger(__name__)

DEFAULT_BREAKFAST_SURCHARGE = Decimal("1.25")

PriceLike = Decimal | int | float | str


def to_decimal(value: PriceLike) -> Decimal:
    """
    Floats go through str() so 20.50 becomes Decimal("20.5") and not its binary expansion.
    Raises ValueError on anything that is not a finite number.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a price: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        result = Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Not a price: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Not a price: {value!r}")
    return result


def _is_booking_id(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def calculate_total_price(
    *,
    guest_count: int,
    duration_nights: int,
    base_price: Decimal,
    breakfast_included: bool,
    breakfast_surcharge: Decimal = DEFAULT_BREAKFAST_SURCHARGE,
) -> Decimal:
    factor = breakfast_surcharge if breakfast_included else Decimal(1)
    return guest_count * duration_nights * base_price * factor


class ReservationRegistry:
    """
    Owns the active bookings and enforces:
      - booking ids are unique, increasing from 1, and never reissued after a cancellation
      - no guest appears in two active bookings at the same time

    create_booking/cancel_booking either fully apply or raise a ReservationError
    leaving the registry exactly as it was. A rejected create does not advance the id
    counter, so a store shared with another registry that already holds the next id
    makes every later create fail with DuplicateIdentifierError.

    Booking ids are plain ints; bools, floats and other types are never found.
    """

    def __init__(
        self,
        *,
        booking_repo: BookingRepository,
        breakfast_surcharge: PriceLike = DEFAULT_BREAKFAST_SURCHARGE,
    ) -> None:
        surcharge = to_decimal(breakfast_surcharge)
        if surcharge < 1:
            raise ValueError(f"breakfast_surcharge must be >= 1, got {surcharge}")

        self._booking_repo = booking_repo
        self._breakfast_surcharge = surcharge
        self._id_counter = 0
        self._lock = threading.Lock()

    @property
    def breakfast_surcharge(self) -> Decimal:
        return self._breakfast_surcharge

    @property
    def active_ids(self) -> frozenset[int]:
        return self._booking_repo.active_ids()

    @property
    def booked_guests(self) -> frozenset[Guest]:
        return self._booking_repo.booked_guests()

    def __len__(self) -> int:
        return len(self._booking_repo.active_ids())

    def __contains__(self, booking_id: object) -> bool:
        return _is_booking_id(booking_id) and booking_id in self._booking_repo.active_ids()

    def __iter__(self) -> Iterator[Booking]:
        return iter(self._booking_repo.list_all())

    # -----------------------------
    # Commands
    # -----------------------------
    def create_booking(
        self,
        hotel_name: str,
        guests: Sequence[Guest],
        duration_nights: int,
        base_price: PriceLike,
        breakfast_included: bool,
    ) -> Booking:
        guests = tuple(guests)
        price = self._validate(hotel_name, guests, duration_nights, base_price)

        with self._lock:
            booking_id = self._id_counter + 1
            if booking_id in self._booking_repo.active_ids():
                logger.warning("Rejected booking: id %s already in use", booking_id)
                raise DuplicateIdentifierError(booking_id)

            booked = self._booking_repo.booked_guests()
            conflicting = [guest for guest in guests if guest in booked]
            if conflicting:
                logger.warning(
                    "Rejected booking at %r: %d guest(s) already booked",
                    hotel_name,
                    len(conflicting),
                )
                raise GuestAlreadyBookedError(conflicting)

            booking = Booking(
                booking_id=booking_id,
                hotel_name=hotel_name,
                guests=guests,
                duration_nights=duration_nights,
                total_price=self.price_for(
                    guest_count=len(guests),
                    duration_nights=duration_nights,
                    base_price=price,
                    breakfast_included=breakfast_included,
                ),
                breakfast_included=breakfast_included,
            )
            self._booking_repo.add(booking)
            self._id_counter = booking_id

        logger.info(
            "Created booking %s at %r for %d guest(s), total %s",
            booking.booking_id,
            booking.hotel_name,
            booking.guest_count,
            booking.total_price,
        )
        return booking

    def cancel_booking(self, booking_id: int) -> Booking:
        """Remove an active booking and return it. Its guests become bookable again."""
        with self._lock:
            booking = self._booking_repo.remove(booking_id) if _is_booking_id(booking_id) else None
            if booking is None:
                logger.warning("Rejected cancellation: booking %s not found", booking_id)
                raise BookingNotFoundError(booking_id)

        logger.info("Cancelled booking %s", booking_id)
        return booking

    # -----------------------------
    # Queries
    # -----------------------------
    def price_for(
        self,
        *,
        guest_count: int,
        duration_nights: int,
        base_price: PriceLike,
        breakfast_included: bool,
    ) -> Decimal:
        return calculate_total_price(
            guest_count=guest_count,
            duration_nights=duration_nights,
            base_price=to_decimal(base_price),
            breakfast_included=breakfast_included,
            breakfast_surcharge=self._breakfast_surcharge,
        )

    def get_booking(self, booking_id: int) -> Booking:
        booking = self._booking_repo.get(booking_id) if _is_booking_id(booking_id) else None
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def status_of(self, booking_id: int) -> BookingStatus:
        if not _is_booking_id(booking_id):
            raise BookingNotFoundError(booking_id)
        if booking_id in self._booking_repo.active_ids():
            return BookingStatus.ACTIVE
        # Ids are only consumed by successful creations, so every id up to the counter was issued
        if 1 <= booking_id <= self._id_counter:
            return BookingStatus.CANCELLED
        raise BookingNotFoundError(booking_id)

    def list_bookings(self) -> tuple[Booking, ...]:
        return self._booking_repo.list_all()

    def list_summaries(self) -> list[str]:
        return [booking.summary() for booking in self._booking_repo.list_all()]

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _validate(
        hotel_name: str,
        guests: tuple[Guest, ...],
        duration_nights: int,
        base_price: PriceLike,
    ) -> Decimal:
        """Collect every parameter problem, then raise once. Returns base_price as a Decimal."""
        problems: list[str] = []

        if not isinstance(hotel_name, str) or not hotel_name:
            problems.append("hotel_name must be a non-empty string")
        if not guests:
            problems.append("guests must not be empty")
        if isinstance(duration_nights, bool) or not isinstance(duration_nights, int) or duration_nights < 1:
            problems.append("duration_nights must be an int >= 1")

        price: Decimal | None = None
        try:
            price = to_decimal(base_price)
        except ValueError:
            problems.append("base_price must be a number")
        else:
            if price < 0:
                problems.append("base_price must be >= 0")

        if problems:
            logger.warning("Rejected booking: %s", "; ".join(problems))
            raise InvalidParametersError(problems)
        return price
