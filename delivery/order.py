"""The order aggregate and its lifecycle."""

from __future__ import annotations

import uuid
from enum import Enum

from delivery.errors import DomainError, ValueIsRequiredError
from delivery.location import Location


class OrderStatus(str, Enum):
    """Lifecycle stage of an order."""

    EMPTY = ""
    CREATED = "Created"
    ASSIGNED = "Assigned"
    COMPLETED = "Completed"

    @property
    def is_empty(self) -> bool:
        return self is OrderStatus.EMPTY

    def __str__(self) -> str:
        return self.value


class OrderStateError(DomainError):
    """An operation is not allowed in the order's current status."""


class Order:
    """A delivery order; two orders are equal when their ids are equal."""

    def __init__(self, order_id: uuid.UUID, location: Location, volume: int) -> None:
        if order_id is None or order_id == uuid.UUID(int=0):
            raise ValueIsRequiredError("orderID")
        if location is None:
            raise ValueIsRequiredError("location")
        if volume <= 0:
            raise ValueIsRequiredError("volume")
        self._id = order_id
        self._location = location
        self._volume = volume
        self._courier_id: uuid.UUID | None = None
        self._status = OrderStatus.CREATED

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def courier_id(self) -> uuid.UUID | None:
        return self._courier_id

    @property
    def location(self) -> Location:
        return self._location

    @property
    def volume(self) -> int:
        return self._volume

    @property
    def status(self) -> OrderStatus:
        return self._status

    def assign_courier(self, courier_id: uuid.UUID) -> None:
        """Attach a courier and move the order to Assigned."""
        if self._status is not OrderStatus.CREATED:
            raise OrderStateError("order must be in Created status to assign courier")
        self._courier_id = courier_id
        self._status = OrderStatus.ASSIGNED

    def complete(self) -> None:
        """Mark an assigned order as completed."""
        if self._status is not OrderStatus.ASSIGNED:
            raise OrderStateError("only assigned orders can be completed")
        self._status = OrderStatus.COMPLETED

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Order(id={self._id}, status={self._status.value!r})"