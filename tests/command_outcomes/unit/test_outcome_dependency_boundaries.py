"""Boundary tests for command_outcomes internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_outcome_core_does_not_import_console_or_kafka_libraries() -> None:
    outcomes_dir = _project_root() / "src" / "schema_registry_console" / "command_outcomes"
    core_modules = (
        outcomes_dir / "outcome_models.py",
        outcomes_dir / "outcome_mapper.py",
    )
    forbidden_import_fragments = (
        "import click",
        "from click",
        "confluent_kafka",
        "schema_registry_console.registry_access.registry_client",
    )

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
