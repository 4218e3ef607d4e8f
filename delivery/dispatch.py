"""Choosing the courier that delivers an order."""

from __future__ import annotations

from collections.abc import Sequence

from delivery.courier import Courier
from delivery.errors import DomainError, ValueIsRequiredError
from delivery.order import Order, OrderStatus


class SuitableCourierNotFoundError(DomainError):
    """No courier has room for the order."""

    def __init__(self, message: str = "suitable courier was not found") -> None:
        super().__init__(message)


class OrderAlreadyAssignedError(DomainError):
    """The order is no longer waiting for a courier."""

    def __init__(self, message: str = "order is already assigned") -> None:
        super().__init__(message)


class DispatchService:
    """Assigns orders to the fastest courier able to carry them."""

    def dispatch(self, order: Order, couriers: Sequence[Courier]) -> Courier:
        """Assign the order to the best courier and return that courier."""
        if order is None:
            raise ValueIsRequiredError("order")
        if order.status is not OrderStatus.CREATED:
            raise OrderAlreadyAssignedError()
        if not couriers:
            raise ValueIsRequiredError("couriers")

        best = self._find_best_courier(order, couriers)
        best.take_order(order)
        order.assign_courier(best.id)
        return best

    @staticmethod
    def _find_best_courier(order: Order, couriers: Sequence[Courier]) -> Courier:
        available = [c for c in couriers if c is not None and c.can_take_order(order)]
        if not available:
            raise SuitableCourierNotFoundError()
        return min(available, key=lambda c: c.steps_to(order.location))