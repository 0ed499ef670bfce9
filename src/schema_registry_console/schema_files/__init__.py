"""Schema file exports."""

from .schema_file_writer import (
    SchemaFileWriteError,
    serialize_schema_definition,
    write_schema_file,
)

__all__ = ["SchemaFileWriteError", "serialize_schema_definition", "write_schema_file"]
