"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-registry.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Connection configuration for schema-registry-console.
# Replace every <REQUIRED> placeholder before fetching schemas.
# Remove <OPTIONAL> entries your registry does not need.
# --registry-url, --username and --password (or their KAFKA_SCHEMA_REGISTRY_*
# environment variables) override the values below.

schema_registry:
  url: "<REQUIRED>"
  username: "<OPTIONAL>"
  password: "<OPTIONAL>"
  # Request timeout in seconds (positive integer, default 10).
  timeout_seconds: 10
  ssl:
    ca_location: "<OPTIONAL>"
    certificate_location: "<OPTIONAL>"
    key_location: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML connection configuration with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder connection configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
