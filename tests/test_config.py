import uuid

import pytest

from delivery.config import CompositionRoot, Config, load_config
from delivery.courier import Courier
from delivery.location import Location
from delivery.order import Order, OrderStatus

_ALL_NAMES = [
    "HTTP_PORT",
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "DB_SSLMODE",
    "GEO_SERVICE_GRPC_HOST",
    "KAFKA_HOST",
    "KAFKA_CONSUMER_GROUP",
    "KAFKA_BASKET_CONFIRMED_TOPIC",
    "KAFKA_ORDER_CHANGED_TOPIC",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ALL_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_load_config_reads_file(tmp_path, clean_env):
    env = tmp_path / ".env"
    env.write_text(
        "HTTP_PORT=8082\n"
        "DB_HOST=localhost\n"
        "DB_SSLMODE=disable\n"
        "KAFKA_ORDER_CHANGED_TOPIC=order.status.changed\n",
        encoding="utf-8",
    )
    config = load_config(env)
    assert config.http_port == "8082"
    assert config.db_host == "localhost"
    assert config.db_ssl_mode == "disable"
    assert config.kafka_order_changed_topic == "order.status.changed"


def test_missing_keys_are_empty(tmp_path, clean_env):
    env = tmp_path / ".env"
    env.write_text("HTTP_PORT=8082\n", encoding="utf-8")
    config = load_config(env)
    assert config.db_name == ""
    assert config.kafka_host == ""
    assert config == Config(http_port="8082")


def test_process_environment_takes_precedence(tmp_path, clean_env):
    env = tmp_path / ".env"
    env.write_text("HTTP_PORT=8082\nDB_USER=file_user\n", encoding="utf-8")
    clean_env.setenv("DB_USER", "env_user")
    config = load_config(env)
    assert config.db_user == "env_user"
    assert config.http_port == "8082"


def test_missing_env_file(tmp_path, clean_env):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.env")


def test_composition_root_builds_working_dispatch_service():
    root = CompositionRoot(Config(http_port="8082"))
    service = root.new_dispatch_service()

    courier = Courier("Pedestrian", 1, Location(1, 1))
    courier.add_storage_place("bag", 10)
    order = Order(uuid.uuid4(), Location(3, 3), 5)

    assert service.dispatch(order, [courier]) is courier
    assert order.status is OrderStatus.ASSIGNED
    assert root.config.http_port == "8082"