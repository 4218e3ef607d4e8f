import uuid

import pytest

from delivery.courier import Courier
from delivery.dispatch import (
    DispatchService,
    OrderAlreadyAssignedError,
    SuitableCourierNotFoundError,
)
from delivery.errors import ValueIsRequiredError
from delivery.location import Location
from delivery.order import Order, OrderStatus


def make_courier(name, x, y, volume=10, speed=1):
    c = Courier(name, speed, Location(x, y))
    c.add_storage_place("Сумка", volume)
    return c


def test_dispatch_picks_nearest_courier():
    courier1 = make_courier("Pedestrian 1", 1, 1)
    courier2 = make_courier("Pedestrian 2", 2, 2)
    courier3 = make_courier("Pedestrian 3", 3, 3)
    couriers = [courier1, courier2, courier3]
    order = Order(uuid.uuid4(), Location(2, 2), 5)

    winner = DispatchService().dispatch(order, couriers)

    assert winner is courier2
    assert courier2.storage_places[0].order_id == order.id
    assert order.status is OrderStatus.ASSIGNED
    assert order.courier_id == courier2.id
    assert courier1.storage_places[0].is_empty
    assert courier3.storage_places[0].is_empty


def test_dispatch_skips_couriers_without_room():
    near = make_courier("Near", 2, 2, volume=3)
    far = make_courier("Far", 9, 9)
    order = Order(uuid.uuid4(), Location(2, 2), 5)

    assert DispatchService().dispatch(order, [near, far]) is far


def test_dispatch_prefers_faster_courier():
    slow = make_courier("Slow", 1, 1, speed=1)
    fast = make_courier("Fast", 1, 1, speed=2)
    order = Order(uuid.uuid4(), Location(5, 5), 5)

    assert DispatchService().dispatch(order, [slow, fast]) is fast


def test_dispatch_tie_goes_to_first():
    first = make_courier("First", 1, 3)
    second = make_courier("Second", 3, 1)
    order = Order(uuid.uuid4(), Location(2, 2), 5)

    assert DispatchService().dispatch(order, [first, second]) is first


def test_dispatch_requires_order():
    with pytest.raises(ValueIsRequiredError, match="order"):
        DispatchService().dispatch(None, [make_courier("A", 1, 1)])


def test_dispatch_requires_couriers():
    order = Order(uuid.uuid4(), Location(2, 2), 5)
    with pytest.raises(ValueIsRequiredError, match="couriers"):
        DispatchService().dispatch(order, [])
    assert order.status is OrderStatus.CREATED


def test_dispatch_rejects_assigned_order():
    order = Order(uuid.uuid4(), Location(2, 2), 5)
    order.assign_courier(uuid.uuid4())
    with pytest.raises(OrderAlreadyAssignedError):
        DispatchService().dispatch(order, [make_courier("A", 1, 1)])


def test_dispatch_no_suitable_courier():
    order = Order(uuid.uuid4(), Location(2, 2), 50)
    with pytest.raises(SuitableCourierNotFoundError):
        DispatchService().dispatch(order, [make_courier("A", 1, 1)])
    assert order.courier_id is None