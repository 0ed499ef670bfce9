"""Schema registry access exports."""

from .registry_client import (
    ConfluentSchemaRegistryApi,
    RegistryClientProtocol,
    SchemaRegistryApi,
    build_client_config,
)
from .registry_errors import NOT_FOUND_STATUS, RegistryError, SchemaDecodeError

__all__ = [
    "NOT_FOUND_STATUS",
    "RegistryError",
    "SchemaDecodeError",
    "SchemaRegistryApi",
    "RegistryClientProtocol",
    "ConfluentSchemaRegistryApi",
    "build_client_config",
]
