# delivery

A courier dispatch domain model with a small HTTP health-check service.
The model covers orders, couriers with storage places, and locations on a
10×10 grid. The dispatch service picks the fastest courier that can carry a
given order.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Domain model

- `delivery.location.Location(x, y)` is an immutable point on the grid. Both
  coordinates must lie between 1 and 10. Other values raise
  `ValueIsOutOfRangeError`. `distance_to(other)` returns the Manhattan
  distance. `delivery.location.create_random()` returns a random valid
  location.
- `delivery.order.Order(order_id, location, volume)` needs a non-nil UUID and
  a positive volume. Its `status` is an `OrderStatus` and starts at
  `CREATED`. `assign_courier(courier_id)` moves the order to `ASSIGNED`, and
  `complete()` moves it from `ASSIGNED` to `COMPLETED`. A transition that the
  current status does not allow raises `OrderStateError`. Two orders are equal
  when their ids are equal.
- `delivery.courier.StoragePlace(name, total_volume)` holds at most one order.
  It has the methods `can_store(volume)`, `store_order(order_id, volume)` and
  `remove_order()`, and the property `is_empty`. Storing into an occupied or
  too small place raises `CannotStoreOrderError`.
- `delivery.courier.Courier(name, speed, location)` gets storage places through
  `add_storage_place(name, total_volume)`. Its `storage_places` property
  returns copies of them.
  - `can_take_order(order)` tells whether some empty place is big enough.
  - `take_order(order)` stores the order in the first such place, or raises
    `NoFreeStoragePlaceError`.
  - `complete_order(order)` frees the place that holds the order, or raises
    `ObjectNotFoundError`.
  - `steps_to(target)` returns the distance divided by the speed.
  - `step_towards(target)` moves the courier one cell, along x first and then
    along y.
- `delivery.dispatch.DispatchService().dispatch(order, couriers)` takes an
  order in `CREATED` status and considers the couriers that can take it. Among
  them it chooses the one with the smallest `steps_to` the order's location;
  on a tie the earliest in the list wins. It stores the order with that
  courier, assigns the courier to the order and returns the courier. It raises
  `OrderAlreadyAssignedError` for an order that is no longer in `CREATED`
  status. It raises `ValueIsRequiredError` for an empty courier list, and
  `SuitableCourierNotFoundError` when no courier has room.

## Errors

Every exception in the package derives from `delivery.errors.DomainError`.
`delivery.errors` defines these:

- `ValueIsRequiredError` (also a `ValueError`)
- `ValueIsOutOfRangeError` (also a `ValueError`)
- `ValueIsInvalidError` (also a `ValueError`)
- `ObjectNotFoundError` (also a `LookupError`)
- `VersionIsInvalidError`

The other modules define the rest: `OrderStateError`,
`NoFreeStoragePlaceError`, `CannotStoreOrderError`,
`SuitableCourierNotFoundError` and `OrderAlreadyAssignedError`.

## Example

```python
import uuid

from delivery.courier import Courier
from delivery.dispatch import DispatchService
from delivery.location import Location
from delivery.order import Order, OrderStatus

courier = Courier("Pedestrian", 1, Location(2, 2))
courier.add_storage_place("Bag", 10)

order = Order(uuid.uuid4(), Location(3, 3), 5)
winner = DispatchService().dispatch(order, [courier])
assert winner is courier
assert order.status is OrderStatus.ASSIGNED
assert order.courier_id == courier.id
```

## Configuration

`delivery.config.load_config(env_file=".env")` reads the settings into a
frozen `Config`. It raises `FileNotFoundError` if the file does not exist.
A variable set in the process environment takes precedence over the file.
Settings that are set nowhere become empty strings. The variables are:

```
HTTP_PORT=8080
DB_HOST=localhost
DB_PORT=5432
DB_USER=user
DB_PASSWORD=password
DB_NAME=delivery
DB_SSLMODE=disable
GEO_SERVICE_GRPC_HOST=localhost:5004
KAFKA_HOST=localhost:9092
KAFKA_CONSUMER_GROUP=delivery
KAFKA_BASKET_CONFIRMED_TOPIC=basket.confirmed
KAFKA_ORDER_CHANGED_TOPIC=order.changed
```

`delivery.config.CompositionRoot(config)` builds the service objects.
`new_dispatch_service()` returns a `DispatchService`.

## Running the service

Start the service with:

```
delivery
```

By default it loads `.env` from the working directory. The `--env-file PATH`
option names another file. If the file is missing, the command exits with
status 1. The service listens on all interfaces at `HTTP_PORT`. `GET /health`
answers `200 Healthy`, and any other GET path answers 404 with
`{"message": "Not Found"}`. Press Ctrl+C to stop it.

`delivery.app.create_server(root, port)` returns the unstarted
`ThreadingHTTPServer` that uses `delivery.app.HealthHandler`.

## What it does not do

The HTTP service answers only the health probe. It has no endpoints for
orders, couriers or dispatching. Nothing is stored: orders and couriers live
only in memory. The database, Kafka and geo-service settings are read into
`Config`, but no part of the package connects to those systems.