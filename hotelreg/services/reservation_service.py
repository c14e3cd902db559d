from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from hotelreg.core.entities.booking import Booking
from hotelreg.core.entities.guest import Guest
from hotelreg.core.errors import ReservationError, ReservationErrorKind
from hotelreg.core.use_cases.reservation_registry import ReservationRegistry
from hotelreg.infrastructure.config import Settings
from hotelreg.infrastructure.repositories.in_memory_booking_repository import InMemoryBookingRepository
from hotelreg.schemas.models import BookingRequest, BookingSummary, CancelStep, GuestIn, Scenario

logger = logging.getLogger(__name__)


def _default_settings() -> Settings:
    from hotelreg.infrastructure.config import settings
    return settings


def build_registry(config: Settings | None = None) -> ReservationRegistry:
    config = config or _default_settings()
    return ReservationRegistry(
        booking_repo=InMemoryBookingRepository(),
        breakfast_surcharge=config.breakfast_surcharge,
    )


def _to_core_guest(body: GuestIn) -> Guest:
    return Guest(name=body.name, age=body.age, height_cm=body.height_cm)


def _to_summary(booking: Booking) -> BookingSummary:
    return BookingSummary(
        booking_id=booking.booking_id,
        hotel_name=booking.hotel_name,
        guest_count=booking.guest_count,
        duration_nights=booking.duration_nights,
        breakfast_included=booking.breakfast_included,
        total_price=booking.total_price,
    )


def create_booking_service(body: BookingRequest, registry: ReservationRegistry) -> BookingSummary:
    """
    Translate a BookingRequest into a registry call.

    Raises the registry's ReservationError subclasses unchanged.
    """
    booking = registry.create_booking(
        hotel_name=body.hotel_name,
        guests=[_to_core_guest(g) for g in body.guests],
        duration_nights=body.duration_nights,
        base_price=body.base_price,
        breakfast_included=body.breakfast_included,
    )
    return _to_summary(booking)


def cancel_booking_service(booking_id: int, registry: ReservationRegistry) -> BookingSummary:
    return _to_summary(registry.cancel_booking(booking_id))


def list_bookings_service(registry: ReservationRegistry) -> list[BookingSummary]:
    return [_to_summary(b) for b in registry.list_bookings()]


def load_scenario(path: str | Path) -> Scenario:
    """
    Read a YAML scenario file. Malformed YAML or a schema mismatch raises.
    """
    with Path(path).open(encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return Scenario.model_validate(raw)


@dataclass(frozen=True, slots=True)
class StepOutcome:
    index: int
    action: str
    description: str | None
    booking: BookingSummary | None = None
    error_kind: ReservationErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def run_scenario(scenario: Scenario, registry: ReservationRegistry) -> list[StepOutcome]:
    """
    Apply every step in order. A domain failure is recorded as the step's outcome and
    the run moves on to the next step.
    """
    outcomes: list[StepOutcome] = []
    for index, step in enumerate(scenario.steps, start=1):
        try:
            if isinstance(step, CancelStep):
                booking = cancel_booking_service(step.booking_id, registry)
            else:
                booking = create_booking_service(scenario.booking_request(step), registry)
        except ReservationError as e:
            logger.debug("Step %d failed with %s", index, e.kind.value)
            outcomes.append(
                StepOutcome(
                    index=index,
                    action=step.action,
                    description=step.description,
                    error_kind=e.kind,
                    message=str(e),
                )
            )
            continue

        outcomes.append(
            StepOutcome(index=index, action=step.action, description=step.description, booking=booking)
        )
    return outcomes
