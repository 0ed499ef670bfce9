"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import RegistrySettings, SSLSettings

DEFAULT_TIMEOUT_SECONDS = 10

# Placeholders written by `generate-config`.
_REQUIRED_PLACEHOLDER = "<REQUIRED>"
_OPTIONAL_PLACEHOLDER = "<OPTIONAL>"


class ConfigurationError(Exception):
    """Raised when the registry configuration is invalid or incomplete."""


def load_registry_settings(
    config_path: Path | str | None = None,
    *,
    url: str | None = None,
    username: str | None = None,
    password: str | None = None,
) -> RegistrySettings:
    """Resolve registry settings from an optional config file and explicit overrides.

    Explicit values (command-line options or their environment variables) take
    precedence over the values found in the configuration file.
    """
    section: Mapping[str, Any] = {}
    source_path: Path | None = None
    if config_path is not None:
        source_path = Path(config_path)
        section = _read_registry_section(source_path)

    resolved_url = _optional_string(url, "--registry-url") or _optional_string(
        section.get("url"), "schema_registry.url"
    )
    if not resolved_url:
        raise ConfigurationError(
            "Schema registry URL is required (use --registry-url, "
            "KAFKA_SCHEMA_REGISTRY_URL or schema_registry.url)."
        )
    resolved_username = _optional_string(username, "--username") or _optional_string(
        section.get("username"), "schema_registry.username"
    )
    resolved_password = _optional_string(password, "--password") or _optional_string(
        section.get("password"), "schema_registry.password"
    )
    if resolved_password and not resolved_username:
        raise ConfigurationError("A registry password requires a registry username.")

    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS), "schema_registry.timeout_seconds"
    )
    return RegistrySettings(
        url=resolved_url,
        username=resolved_username,
        password=resolved_password,
        timeout_seconds=timeout_seconds,
        ssl=_parse_ssl_section(section.get("ssl")),
        source_path=source_path,
    )


def _read_registry_section(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    section = parsed.get("schema_registry")
    if section is None:
        return {}
    return _require_mapping(section, "schema_registry")


def _parse_ssl_section(value: Any) -> SSLSettings:
    if value is None:
        return SSLSettings()
    section = _require_mapping(value, "schema_registry.ssl")
    return SSLSettings(
        ca_location=_optional_string(section.get("ca_location"), "ssl.ca_location"),
        certificate_location=_optional_string(
            section.get("certificate_location"), "ssl.certificate_location"
        ),
        key_location=_optional_string(section.get("key_location"), "ssl.key_location"),
    )


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped == _REQUIRED_PLACEHOLDER:
        raise ConfigurationError(
            f"{field_name} still holds the {_REQUIRED_PLACEHOLDER} placeholder."
        )
    if stripped == _OPTIONAL_PLACEHOLDER:
        return None
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
