"""Load, save and validate schema-set JSON files; the packaged default set."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

from aml_synth.errors import SchemaConfigError
from aml_synth.logging_config import get_logger
from aml_synth.schemas import ROOT_SCHEMAS, SchemaSet

logger = get_logger(__name__)

DEFAULT_SCHEMAS_RESOURCE = "default_schemas.json"


def _parse(data: Any, source: str) -> SchemaSet:
    if not isinstance(data, dict):
        raise SchemaConfigError(f"{source}: schema set must be a JSON object keyed by schema name")
    schema_set = SchemaSet.from_mapping(data)
    for name, ref in schema_set.missing_references():
        logger.warning("%s: schema %s references undefined nested schema %s", source, name, ref)
    return schema_set


def default_schema_set() -> SchemaSet:
    """Schema set shipped with the package."""
    text = resources.files("aml_synth").joinpath(DEFAULT_SCHEMAS_RESOURCE).read_text("utf-8")
    return _parse(json.loads(text), DEFAULT_SCHEMAS_RESOURCE)


def load_schema_set(path: str | Path | None = None) -> SchemaSet:
    """Load a schema set from JSON; None means the packaged defaults."""
    if path is None:
        return default_schema_set()
    p = Path(path)
    try:
        with open(p, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaConfigError(f"{p}: invalid JSON: {e}") from e
    return _parse(data, str(p))


def save_schema_set(schema_set: SchemaSet, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(schema_set.to_mapping(), f, indent=2, ensure_ascii=False)
    return p


def validation_report(schema_set: SchemaSet) -> list[str]:
    """Human-readable problems that do not prevent loading (missing roots or references)."""
    problems = [
        f"root schema {name!r} is not defined" for name in ROOT_SCHEMAS if name not in schema_set
    ]
    problems.extend(
        f"schema {name!r} references undefined nested schema {ref!r}"
        for name, ref in schema_set.missing_references()
    )
    return problems
