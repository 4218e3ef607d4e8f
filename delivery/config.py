"""Service settings and the object graph built from them."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

from dotenv import dotenv_values

from delivery.dispatch import DispatchService

# Settings whose variable name is not simply the field name in upper case.
_ENV_NAME_OVERRIDES = {
    "db_ssl_mode": "DB_SSLMODE",
}


def _env_name(field_name: str) -> str:
    return _ENV_NAME_OVERRIDES.get(field_name, field_name.upper())


@dataclass(frozen=True)
class Config:
    """Settings of the delivery service; unset values are empty strings."""

    http_port: str = ""
    db_host: str = ""
    db_port: str = ""
    db_user: str = ""
    db_password: str = ""
    db_name: str = ""
    db_ssl_mode: str = ""
    geo_service_grpc_host: str = ""
    kafka_host: str = ""
    kafka_consumer_group: str = ""
    kafka_basket_confirmed_topic: str = ""
    kafka_order_changed_topic: str = ""


def load_config(env_file: str | os.PathLike[str] = ".env") -> Config:
    """Read settings from an env file; process variables take precedence."""
    path = Path(env_file)
    if not path.is_file():
        raise FileNotFoundError(f"error loading env file: {path}")
    file_values = dotenv_values(path)

    def lookup(name: str) -> str:
        if name in os.environ:
            return os.environ[name]
        return file_values.get(name) or ""

    return Config(**{f.name: lookup(_env_name(f.name)) for f in fields(Config)})


@dataclass
class CompositionRoot:
    """Builds the service objects of the application."""

    config: Config

    def new_dispatch_service(self) -> DispatchService:
        return DispatchService()