"""Schema file serialization and writing tests."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
import schema_registry_console.schema_files.schema_file_writer as schema_file_writer_module
from schema_registry_console.schema_files import (
    SchemaFileWriteError,
    serialize_schema_definition,
    write_schema_file,
)


def test_serialize_encodes_mappings_as_compact_json() -> None:
    assert serialize_schema_definition({"a": "b"}, encode_as_json=True) == '{"a":"b"}'


def test_serialize_keeps_nested_structure() -> None:
    definition = {
        "type": "record",
        "name": "Order",
        "namespace": "com.example",
        "fields": [
            {"name": "id", "type": "long"},
            {"name": "note", "type": ["null", "string"], "default": None},
        ],
    }

    encoded = serialize_schema_definition(definition, encode_as_json=True)

    assert json.loads(encoded) == definition


@pytest.mark.parametrize(
    ("definition", "expected"),
    [
        ("string", '"string"'),
        (["null", "string"], '["null","string"]'),
    ],
)
def test_serialize_encodes_primitive_and_union_schemas_as_json(
    definition: object, expected: str
) -> None:
    assert serialize_schema_definition(definition, encode_as_json=True) == expected


def test_serialize_returns_text_unchanged() -> None:
    raw_text = '{ "type": "string" }\n'

    assert serialize_schema_definition(raw_text, encode_as_json=False) is raw_text


def test_serialize_rejects_structures_as_raw_text() -> None:
    with pytest.raises(TypeError):
        serialize_schema_definition({"a": "b"}, encode_as_json=False)


def test_write_schema_file_replaces_existing_contents(tmp_path: Path) -> None:
    destination = tmp_path / "schema.avsc"
    destination.write_text("old contents that are longer", encoding="utf-8")

    written = write_schema_file(destination, "{}")

    assert written == destination
    assert destination.read_text(encoding="utf-8") == "{}"
    assert [path.name for path in tmp_path.iterdir()] == ["schema.avsc"]


def test_write_schema_file_keeps_mode_of_existing_file(tmp_path: Path) -> None:
    destination = tmp_path / "schema.avsc"
    destination.write_text("{}", encoding="utf-8")
    destination.chmod(0o640)

    write_schema_file(destination, '{"type":"string"}')

    assert destination.stat().st_mode & 0o777 == 0o640


def test_write_schema_file_rejects_directories(tmp_path: Path) -> None:
    with pytest.raises(SchemaFileWriteError, match="destination is a directory") as exc_info:
        write_schema_file(tmp_path, "{}")

    assert exc_info.value.path == tmp_path
    assert list(tmp_path.iterdir()) == []


def test_write_schema_file_wraps_os_errors(tmp_path: Path) -> None:
    destination = tmp_path / "missing-dir" / "schema.avsc"

    with pytest.raises(SchemaFileWriteError) as exc_info:
        write_schema_file(destination, "{}")

    assert isinstance(exc_info.value.__cause__, OSError)
    assert not destination.exists()


def test_failed_write_leaves_existing_file_untouched(tmp_path: Path, monkeypatch) -> None:
    destination = tmp_path / "schema.avsc"
    destination.write_text('{"type":"int"}', encoding="utf-8")

    def _failing_replace(source: os.PathLike, target: os.PathLike) -> None:
        raise OSError("No space left on device")

    monkeypatch.setattr(schema_file_writer_module.os, "replace", _failing_replace)

    with pytest.raises(SchemaFileWriteError, match="No space left on device"):
        write_schema_file(destination, '{"type":"string"}')

    assert destination.read_text(encoding="utf-8") == '{"type":"int"}'
    assert [path.name for path in tmp_path.iterdir()] == ["schema.avsc"]
