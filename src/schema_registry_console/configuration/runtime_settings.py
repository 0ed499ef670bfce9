"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SSLSettings:
    """TLS material used when talking to the schema registry."""

    ca_location: str | None = None
    certificate_location: str | None = None
    key_location: str | None = None


@dataclass(frozen=True)
class RegistrySettings:
    """Schema registry connectivity configuration."""

    url: str
    username: str | None = None
    password: str | None = None
    timeout_seconds: int = 10
    ssl: SSLSettings = field(default_factory=SSLSettings)
    source_path: Path | None = None
