"""Mapping of registry and file-write results onto command outcomes.

Only two failures are modeled: a registry ``404`` for the requested schema and
a local write failure. Every other registry error propagates unchanged so that
infrastructure problems surface with their original message instead of a
generic console line.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from schema_registry_console.registry_access.registry_errors import RegistryError
from schema_registry_console.schema_files.schema_file_writer import (
    SchemaFileWriteError,
    serialize_schema_definition,
    write_schema_file,
)

from .outcome_models import CommandOutcome


def fetch_schema_to_file(
    fetch_definition: Callable[[], Any],
    *,
    schema_name: str,
    output_path: Path | str,
    encode_as_json: bool,
) -> CommandOutcome:
    """Fetch one schema definition and persist it to ``output_path``.

    ``encode_as_json`` selects JSON encoding for decoded definitions; without it
    the fetched text is written unchanged.

    Raises:
      RegistryError: If the registry fails with any status other than 404.
    """
    try:
        definition = fetch_definition()
    except RegistryError as exc:
        return outcome_for_registry_error(exc, schema_name)
    return write_definition(definition, output_path, encode_as_json=encode_as_json)


def fetch_listing(fetch_items: Callable[[], Iterable[object]]) -> CommandOutcome:
    """Fetch a registry listing and render it one item per line, in registry order."""
    return CommandOutcome.listed(fetch_items())


def outcome_for_registry_error(error: RegistryError, schema_name: str) -> CommandOutcome:
    """Return the not-found outcome for a 404, re-raise ``error`` otherwise."""
    if not error.is_not_found:
        raise error
    return CommandOutcome.not_found(schema_name)


def write_definition(
    definition: Any, output_path: Path | str, *, encode_as_json: bool
) -> CommandOutcome:
    content = serialize_schema_definition(definition, encode_as_json=encode_as_json)
    try:
        write_schema_file(output_path, content)
    except SchemaFileWriteError:
        return CommandOutcome.write_failed(output_path)
    return CommandOutcome.written(output_path)
