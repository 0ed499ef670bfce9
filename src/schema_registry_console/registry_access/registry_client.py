"""Schema registry client wrapper service."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol

from confluent_kafka.schema_registry import SchemaRegistryClient
from confluent_kafka.schema_registry.error import SchemaRegistryError
from schema_registry_console.configuration.runtime_settings import RegistrySettings

from .registry_errors import RegistryError, SchemaDecodeError

_LOGGER = logging.getLogger("schema_registry_console.registry")
_LOGGER.addHandler(logging.NullHandler())

# Schema types whose stored text is a JSON document. Avro is the registry default.
_JSON_SCHEMA_TYPES = frozenset({"AVRO", "JSON"})


class SchemaRegistryApi(Protocol):
    """Registry capabilities used by the console commands."""

    def get_latest_definition(self, schema_name: str) -> Any: ...

    def get_definition_by_version(self, schema_name: str, version: int) -> str: ...

    def get_all_versions(self, schema_name: str) -> list[int]: ...

    def get_all_schema_names(self) -> list[str]: ...


class _RegisteredSchemaProtocol(Protocol):
    """Subset of the registered schema API required by the wrapper."""

    @property
    def schema(self) -> Any: ...


class RegistryClientProtocol(Protocol):
    """Protocol implemented by both the confluent client and fake clients."""

    def get_latest_version(self, subject_name: str) -> _RegisteredSchemaProtocol: ...

    def get_version(self, subject_name: str, version: int) -> _RegisteredSchemaProtocol: ...

    def get_versions(self, subject_name: str) -> list[int]: ...

    def get_subjects(self) -> list[str]: ...


class ConfluentSchemaRegistryApi:
    """Registry API backed by the confluent-kafka schema registry client.

    Every ``SchemaRegistryError`` raised by the client is re-raised as
    ``RegistryError`` with the HTTP status code preserved. Transport errors are
    left untouched.
    """

    def __init__(
        self,
        registry_settings: RegistrySettings,
        client: RegistryClientProtocol | None = None,
    ) -> None:
        self._settings = registry_settings
        self._client = client or SchemaRegistryClient(build_client_config(registry_settings))

    def get_latest_definition(self, schema_name: str) -> Any:
        """Return the decoded definition of the newest version of ``schema_name``."""
        _LOGGER.debug("Fetching latest schema for subject %s", schema_name)
        with _translated_registry_errors():
            registered = self._client.get_latest_version(schema_name)
        return _decode_json_schema(schema_name, registered.schema)

    def get_definition_by_version(self, schema_name: str, version: int) -> str:
        """Return the stored schema text of one version of ``schema_name``."""
        _LOGGER.debug("Fetching schema for subject %s version %d", schema_name, version)
        with _translated_registry_errors():
            registered = self._client.get_version(schema_name, version)
        return registered.schema.schema_str

    def get_all_versions(self, schema_name: str) -> list[int]:
        _LOGGER.debug("Listing versions for subject %s", schema_name)
        with _translated_registry_errors():
            return list(self._client.get_versions(schema_name))

    def get_all_schema_names(self) -> list[str]:
        _LOGGER.debug("Listing subjects at %s", self._settings.url)
        with _translated_registry_errors():
            return list(self._client.get_subjects())


def build_client_config(registry_settings: RegistrySettings) -> dict[str, Any]:
    """Map registry settings onto confluent schema registry client configuration keys."""
    config: dict[str, Any] = {
        "url": registry_settings.url,
        "timeout": registry_settings.timeout_seconds,
    }
    if registry_settings.username:
        config["basic.auth.user.info"] = (
            f"{registry_settings.username}:{registry_settings.password or ''}"
        )
    ssl = registry_settings.ssl
    for key, value in (
        ("ssl.ca.location", ssl.ca_location),
        ("ssl.certificate.location", ssl.certificate_location),
        ("ssl.key.location", ssl.key_location),
    ):
        if value:
            config[key] = value
    return config


def _decode_json_schema(schema_name: str, schema: Any) -> Any:
    schema_type = getattr(schema, "schema_type", None) or "AVRO"
    if schema_type not in _JSON_SCHEMA_TYPES:
        raise SchemaDecodeError(
            f"Schema {schema_name} is a {schema_type} schema; "
            "only AVRO and JSON schemas can be written as JSON."
        )
    try:
        return json.loads(schema.schema_str)
    except json.JSONDecodeError as exc:
        raise SchemaDecodeError(f"Schema {schema_name} is not valid JSON: {exc}") from exc


@contextmanager
def _translated_registry_errors() -> Iterator[None]:
    try:
        yield
    except SchemaRegistryError as exc:
        _LOGGER.debug(
            "Registry call failed with HTTP status %s: %s",
            exc.http_status_code,
            exc.error_message,
        )
        raise RegistryError(exc.error_message, exc.http_status_code) from exc
