"""Coordinates on the delivery grid."""

from __future__ import annotations

import random
from dataclasses import dataclass

from delivery.errors import ValueIsOutOfRangeError

MIN_X = 1
MAX_X = 10
MIN_Y = 1
MAX_Y = 10


@dataclass(frozen=True)
class Location:
    """An immutable point on the grid; both coordinates lie within bounds."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not MIN_X <= self.x <= MAX_X:
            raise ValueIsOutOfRangeError("x", self.x, MIN_X, MAX_X)
        if not MIN_Y <= self.y <= MAX_Y:
            raise ValueIsOutOfRangeError("y", self.y, MIN_Y, MAX_Y)

    def distance_to(self, other: Location) -> int:
        """Return the Manhattan distance to another location."""
        if not isinstance(other, Location):
            raise TypeError("target location must be a Location")
        return abs(self.x - other.x) + abs(self.y - other.y)


def create_random() -> Location:
    """Return a location with uniformly chosen coordinates."""
    return Location(random.randint(MIN_X, MAX_X), random.randint(MIN_Y, MAX_Y))