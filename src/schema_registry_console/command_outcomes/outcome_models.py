"""Command outcome entities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class OutcomeKind(str, Enum):
    """Modeled result of one console command."""

    WRITTEN = "written"
    LISTED = "listed"
    NOT_FOUND = "not_found"
    WRITE_FAILED = "write_failed"


@dataclass(frozen=True)
class CommandOutcome:
    """Console line and process exit code produced by one command."""

    kind: OutcomeKind
    message: str
    exit_code: int

    @staticmethod
    def written(path: Path | str) -> CommandOutcome:
        return CommandOutcome(
            kind=OutcomeKind.WRITTEN,
            message=f"Schema successfully written to {path}.",
            exit_code=0,
        )

    @staticmethod
    def listed(items: Iterable[object]) -> CommandOutcome:
        return CommandOutcome(
            kind=OutcomeKind.LISTED,
            message="\n".join(str(item) for item in items),
            exit_code=0,
        )

    @staticmethod
    def not_found(schema_name: str) -> CommandOutcome:
        return CommandOutcome(
            kind=OutcomeKind.NOT_FOUND,
            message=f"Schema {schema_name} does not exist",
            exit_code=1,
        )

    @staticmethod
    def write_failed(path: Path | str) -> CommandOutcome:
        return CommandOutcome(
            kind=OutcomeKind.WRITE_FAILED,
            message=f"Was unable to write schema to {path}.",
            exit_code=1,
        )
