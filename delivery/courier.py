"""Couriers and the storage places they carry orders in."""

from __future__ import annotations

import copy
import uuid

from delivery.errors import DomainError, ObjectNotFoundError, ValueIsRequiredError
from delivery.location import Location
from delivery.order import Order

_NIL_UUID = uuid.UUID(int=0)


class NoFreeStoragePlaceError(DomainError):
    """No storage place of the courier can hold the order."""

    def __init__(self, message: str = "no free storage place") -> None:
        super().__init__(message)


class CannotStoreOrderError(DomainError):
    """A storage place is occupied or too small for the order."""

    def __init__(
        self,
        message: str = "cannot store order: place is not empty or volume too large",
    ) -> None:
        super().__init__(message)


class StoragePlace:
    """A bag or box that holds at most one order of limited volume."""

    def __init__(self, name: str, total_volume: int) -> None:
        if not name:
            raise ValueIsRequiredError("name")
        if total_volume <= 0:
            raise ValueIsRequiredError("totalVolume")
        self._id = uuid.uuid4()
        self._name = name
        self._total_volume = total_volume
        self._order_id: uuid.UUID | None = None

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def total_volume(self) -> int:
        return self._total_volume

    @property
    def order_id(self) -> uuid.UUID | None:
        return self._order_id

    @property
    def is_empty(self) -> bool:
        return self._order_id is None

    def can_store(self, order_volume: int) -> bool:
        """Tell whether an order of this volume fits into the empty place."""
        if order_volume <= 0:
            return False
        return self.is_empty and order_volume <= self._total_volume

    def store_order(self, order_id: uuid.UUID, order_volume: int) -> None:
        """Put an order into the place."""
        if order_id is None or order_id == _NIL_UUID:
            raise ValueIsRequiredError("orderId")
        if order_volume <= 0:
            raise ValueIsRequiredError("volume")
        if not self.can_store(order_volume):
            raise CannotStoreOrderError()
        self._order_id = order_id

    def remove_order(self) -> None:
        """Empty the place."""
        self._order_id = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StoragePlace):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"StoragePlace(name={self._name!r}, total_volume={self._total_volume}, "
            f"order_id={self._order_id})"
        )


class Courier:
    """A courier moving on the grid; two couriers are equal when their ids are."""

    def __init__(self, name: str, speed: int, location: Location) -> None:
        if not name:
            raise ValueIsRequiredError("name")
        if speed <= 0:
            raise ValueIsRequiredError("speed")
        if location is None:
            raise ValueIsRequiredError("location")
        self._id = uuid.uuid4()
        self._name = name
        self._speed = speed
        self._location = location
        self._storage_places: list[StoragePlace] = []

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def location(self) -> Location:
        return self._location

    @property
    def storage_places(self) -> tuple[StoragePlace, ...]:
        """Snapshots of the courier's storage places."""
        return tuple(copy.copy(place) for place in self._storage_places)

    def add_storage_place(self, name: str, total_volume: int) -> None:
        """Give the courier another storage place."""
        self._storage_places.append(StoragePlace(name, total_volume))

    def can_take_order(self, order: Order) -> bool:
        """Tell whether some storage place can hold the order."""
        if order is None:
            raise ValueIsRequiredError("order")
        return any(place.can_store(order.volume) for place in self._storage_places)

    def take_order(self, order: Order) -> None:
        """Store the order in the first place that can hold it."""
        if order is None:
            raise ValueIsRequiredError("order")
        for place in self._storage_places:
            if place.can_store(order.volume):
                place.store_order(order.id, order.volume)
                return
        raise NoFreeStoragePlaceError()

    def complete_order(self, order: Order) -> None:
        """Free the storage place that holds the order."""
        if order is None:
            raise ValueIsRequiredError("order")
        for place in self._storage_places:
            if place.order_id is not None and place.order_id == order.id:
                place.remove_order()
                return
        raise ObjectNotFoundError("order", order.id)

    def steps_to(self, target: Location) -> float:
        """Return the time, in steps, needed to reach the target."""
        if target is None:
            raise ValueIsRequiredError("target")
        return self._location.distance_to(target) / self._speed

    def step_towards(self, target: Location) -> None:
        """Move one cell towards the target, along x first and then along y."""
        if target is None:
            raise ValueIsRequiredError("target")
        x, y = self._location.x, self._location.y
        if x < target.x:
            x += 1
        elif x > target.x:
            x -= 1
        elif y < target.y:
            y += 1
        elif y > target.y:
            y -= 1
        self._location = Location(x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Courier):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Courier(name={self._name!r}, speed={self._speed}, location={self._location})"