"""Command outcome exports."""

from .outcome_mapper import (
    fetch_listing,
    fetch_schema_to_file,
    outcome_for_registry_error,
    write_definition,
)
from .outcome_models import CommandOutcome, OutcomeKind

__all__ = [
    "CommandOutcome",
    "OutcomeKind",
    "fetch_listing",
    "fetch_schema_to_file",
    "outcome_for_registry_error",
    "write_definition",
]
