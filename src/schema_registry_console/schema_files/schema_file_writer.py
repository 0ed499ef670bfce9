"""Schema file serialization and writing service."""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

_LOGGER = logging.getLogger("schema_registry_console.schema_files")
_LOGGER.addHandler(logging.NullHandler())


class SchemaFileWriteError(Exception):
    """Raised when a schema definition cannot be written to its destination."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Was unable to write schema to {path}: {reason}")
        self.path = path


def serialize_schema_definition(definition: Any, *, encode_as_json: bool) -> str:
    """Return the on-disk text of a schema definition.

    With ``encode_as_json`` the definition is encoded as compact JSON whatever its
    type, so a primitive schema such as ``"string"`` keeps its quotes. Otherwise
    the definition must already be the stored schema text and is returned unchanged.
    """
    if encode_as_json:
        return json.dumps(definition, separators=(",", ":"))
    if not isinstance(definition, str):
        raise TypeError(f"Raw schema text must be a string, got {type(definition).__name__}.")
    return definition


def write_schema_file(output_path: Path | str, content: str) -> Path:
    """Write serialized schema text to ``output_path``.

    The text goes to a temporary file next to the destination which then
    replaces it, so a failed write leaves an existing file untouched.

    Raises:
      SchemaFileWriteError: If the destination is a directory or cannot be written.
    """
    destination = Path(output_path)
    if destination.is_dir():
        _LOGGER.warning("Writing schema to %s failed: destination is a directory", destination)
        raise SchemaFileWriteError(output_path, "destination is a directory")
    temporary_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=destination.parent,
            prefix=f".{destination.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temporary_path = Path(handle.name)
            handle.write(content)
        _copy_permissions(destination, temporary_path)
        os.replace(temporary_path, destination)
    except OSError as exc:
        if temporary_path is not None:
            temporary_path.unlink(missing_ok=True)
        _LOGGER.warning("Writing schema to %s failed: %s", destination, exc)
        raise SchemaFileWriteError(output_path, str(exc)) from exc
    return destination


def _copy_permissions(destination: Path, temporary_path: Path) -> None:
    # Temporary files are created 0600; keep the mode a plain write would give.
    if destination.exists():
        shutil.copymode(destination, temporary_path)
        return
    current_umask = os.umask(0)
    os.umask(current_umask)
    temporary_path.chmod(0o666 & ~current_umask)
