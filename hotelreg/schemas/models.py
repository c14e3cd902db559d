from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator

# Schemas only shape and coerce input. Domain rules (non-empty hotel, nights >= 1, ...)
# are left to the registry so it can report them with its own error kinds.


class GuestIn(BaseModel):
    name: str
    age: int
    height_cm: int


class BookingRequest(BaseModel):
    hotel_name: str
    guests: list[GuestIn]
    duration_nights: int
    base_price: Decimal
    breakfast_included: bool = False


class BookingSummary(BaseModel):
    booking_id: int
    hotel_name: str
    guest_count: int
    duration_nights: int
    breakfast_included: bool
    total_price: Decimal


class CreateStep(BaseModel):
    action: Literal["create"]
    description: str | None = None
    hotel_name: str
    guests: list[str]
    duration_nights: int
    base_price: Decimal
    breakfast_included: bool = False


class CancelStep(BaseModel):
    action: Literal["cancel"]
    description: str | None = None
    booking_id: int


Step = Annotated[Union[CreateStep, CancelStep], Field(discriminator="action")]


class Scenario(BaseModel):
    """
    A demo run: named guests, then create/cancel steps applied in order.
    Create steps refer to guests by their key in `guests`.
    """
    guests: dict[str, GuestIn] = Field(default_factory=dict)
    steps: list[Step] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_guest_references(self) -> "Scenario":
        for index, step in enumerate(self.steps, start=1):
            if isinstance(step, CreateStep):
                unknown = [key for key in step.guests if key not in self.guests]
                if unknown:
                    raise ValueError(f"step {index} refers to unknown guest(s): {', '.join(unknown)}")
        return self

    def booking_request(self, step: CreateStep) -> BookingRequest:
        return BookingRequest(
            hotel_name=step.hotel_name,
            guests=[self.guests[key] for key in step.guests],
            duration_nights=step.duration_nights,
            base_price=step.base_price,
            breakfast_included=step.breakfast_included,
        )
