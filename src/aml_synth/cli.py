"""Typer CLI: generate, violation, rules, pool-status, pool-clear, validate-schemas, field-types."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from aml_synth.config import get_config
from aml_synth.engine import SyntheticDataEngine
from aml_synth.errors import GenerationError
from aml_synth.logging_config import setup_logging
from aml_synth.schema_store import load_schema_set, validation_report
from aml_synth.schemas import FieldType
from aml_synth.violations.catalog import CATEGORY_LABELS, rules_by_category

app = typer.Typer(help="AML synthetic data generator CLI")


def _engine(config_path: str | None = None) -> SyntheticDataEngine:
    config = get_config(config_path)
    setup_logging(config.get("app", {}).get("log_level", "INFO"))
    try:
        return SyntheticDataEngine.from_config(config)
    except GenerationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e


def _emit(payload: Any, output: str | None = None) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    if output:
        p = Path(output)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"Wrote {p}", err=True)
    else:
        typer.echo(text)


@app.command()
def generate(
    data_type: str = typer.Argument(
        ..., help="Schema to generate (customer, account, transaction, sanction, trade, credit)"
    ),
    amount: int = typer.Option(1, "--amount", "-n", min=1, help="Number of records"),
    commit: bool = typer.Option(
        True, "--commit/--no-commit", help="Add generated customers/accounts to the pools"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Write JSON to this file"),
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
) -> None:
    """Generate records for one schema and print them as JSON."""
    engine = _engine(config)
    try:
        records = engine.generate(data_type, amount=amount, commit=commit)
    except (GenerationError, ValueError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e
    _emit(records, output)


@app.command()
def violation(
    code: str = typer.Argument(..., help="Rule code, e.g. CASH_THRESHOLD or TBML-001"),
    quantity: int = typer.Option(1, "--quantity", "-q", help="Number of batches (clamped)"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write JSON to this file"),
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
) -> None:
    """Generate records engineered to trip one detection rule."""
    engine = _engine(config)
    try:
        scenario = engine.compose_violation(code, quantity)
    except GenerationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e
    _emit(scenario.to_json_dict(), output)


@app.command()
def rules(
    category: str | None = typer.Option(
        None, "--category", help="Only this category: transaction, sanction or trade"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the catalog as JSON"),
) -> None:
    """List the rule catalog grouped by category."""
    if category is not None and category not in CATEGORY_LABELS:
        typer.echo(f"Unknown category: {category}", err=True)
        raise typer.Exit(1)
    grouped = rules_by_category()
    if category is not None:
        label = CATEGORY_LABELS[category]  # type: ignore[index]
        grouped = {label: grouped[label]}
    if as_json:
        _emit({label: [r.model_dump(by_alias=True) for r in rs] for label, rs in grouped.items()})
        return
    for label, rs in grouped.items():
        typer.echo(f"{label} ({len(rs)})")
        for r in rs:
            typer.echo(f"  {r.code:<28} {r.severity:<8} {r.name}")


@app.command("pool-status")
def pool_status(
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
) -> None:
    """Show customer and account pool sizes."""
    engine = _engine(config)
    for name, status in engine.pool_status().items():
        typer.echo(f"{name}: {status['size']}" + (" (empty)" if status["empty"] else ""))


@app.command("pool-clear")
def pool_clear(
    customers: bool = typer.Option(True, "--customers/--keep-customers", help="Clear customers"),
    accounts: bool = typer.Option(True, "--accounts/--keep-accounts", help="Clear accounts"),
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
) -> None:
    """Empty the identity pools (and their snapshots)."""
    engine = _engine(config)
    engine.clear_pools(customers=customers, accounts=accounts)
    typer.echo("Pools cleared.")


@app.command("validate-schemas")
def validate_schemas(
    path: str | None = typer.Argument(None, help="Schema-set JSON (default: configured set)"),
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
) -> None:
    """Parse a schema set and report problems; exit 1 if it cannot be loaded."""
    cfg = get_config(config)
    setup_logging(cfg.get("app", {}).get("log_level", "INFO"))
    target = path or (cfg.get("schemas") or {}).get("path")
    try:
        schema_set = load_schema_set(target)
    except (GenerationError, OSError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e
    problems = validation_report(schema_set)
    typer.echo(f"{len(schema_set.schemas)} schemas loaded from {target or 'packaged defaults'}.")
    for problem in problems:
        typer.echo(f"  warning: {problem}")


@app.command("field-types")
def field_types() -> None:
    """List every supported field type tag."""
    for ft in FieldType:
        typer.echo(ft.value)


if __name__ == "__main__":
    app()
