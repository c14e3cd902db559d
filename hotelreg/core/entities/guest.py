from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Guest:
    """
    A person who can be listed on a booking. Equal guests are the same person.
    """
    name: str
    age: int
    height_cm: int
