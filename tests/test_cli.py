"""CLI smoke tests (typer CliRunner against a temporary config and pool files)."""

import json
from pathlib import Path

from typer.testing import CliRunner

from aml_synth.cli import app
from aml_synth.schemas import FieldType

runner = CliRunner()


def _invoke(*args: str):
    return runner.invoke(app, list(args))


def test_generate_writes_json_and_commits(config_path: str, tmp_path: Path) -> None:
    out = tmp_path / "out" / "customers.json"
    result = _invoke("generate", "customer", "-n", "3", "-o", str(out), "-c", config_path)
    assert result.exit_code == 0, result.output
    records = json.loads(out.read_text(encoding="utf-8"))
    assert len(records) == 3

    status = _invoke("pool-status", "-c", config_path)
    assert status.exit_code == 0, status.output
    assert f"customers: {len({r['customerId'] for r in records})}" in status.output
    assert "accounts: 0 (empty)" in status.output


def test_generate_no_commit(config_path: str, tmp_path: Path) -> None:
    out = tmp_path / "one.json"
    result = _invoke("generate", "customer", "--no-commit", "-o", str(out), "-c", config_path)
    assert result.exit_code == 0, result.output
    assert isinstance(json.loads(out.read_text(encoding="utf-8")), dict)
    assert "customers: 0 (empty)" in _invoke("pool-status", "-c", config_path).output


def test_generate_fails_on_empty_pool(config_path: str) -> None:
    result = _invoke("generate", "transaction", "-c", config_path)
    assert result.exit_code == 1
    assert "generate customers first" in result.output


def test_generate_unknown_schema(config_path: str) -> None:
    result = _invoke("generate", "wallet", "-c", config_path)
    assert result.exit_code == 1
    assert "'wallet' is not defined" in result.output


def test_violation_flow(config_path: str, tmp_path: Path) -> None:
    missing = _invoke("violation", "CASH_THRESHOLD", "-c", config_path)
    assert missing.exit_code == 1
    assert "Customer pool is empty. Please generate customers first." in missing.output

    assert _invoke("generate", "customer", "-n", "2", "-c", config_path).exit_code == 0
    out = tmp_path / "scenario.json"
    result = _invoke("violation", "STRUCTURING", "-q", "2", "-o", str(out), "-c", config_path)
    assert result.exit_code == 0, result.output
    scenario = json.loads(out.read_text(encoding="utf-8"))
    assert scenario["rule"]["code"] == "STRUCTURING"
    assert scenario["dataType"] == "transaction"
    assert scenario["recordCount"] == len(scenario["records"]) == 6
    # no account pool yet: random account plus an advisory note
    assert scenario["note"].startswith("(Note: No accounts in pool")


def test_violation_unknown_rule(config_path: str) -> None:
    result = _invoke("violation", "NOPE", "-c", config_path)
    assert result.exit_code == 1
    assert "Unknown rule code: NOPE" in result.output


def test_pool_clear(config_path: str) -> None:
    _invoke("generate", "customer", "-n", "2", "-c", config_path)
    _invoke("generate", "account", "-c", config_path)
    result = _invoke("pool-clear", "--keep-customers", "-c", config_path)
    assert result.exit_code == 0
    status = _invoke("pool-status", "-c", config_path).output
    assert "accounts: 0 (empty)" in status
    assert "customers: 0" not in status
    _invoke("pool-clear", "-c", config_path)
    assert "customers: 0 (empty)" in _invoke("pool-status", "-c", config_path).output


def test_rules_listing() -> None:
    result = _invoke("rules")
    assert result.exit_code == 0
    assert "Transaction Monitoring (49)" in result.output
    assert "Sanction Screening (6)" in result.output
    assert "Trade-Based ML (TBML) (58)" in result.output

    sanction = _invoke("rules", "--category", "sanction", "--json")
    assert sanction.exit_code == 0
    payload = json.loads(sanction.stdout)
    assert list(payload) == ["Sanction Screening"]
    assert len(payload["Sanction Screening"]) == 6

    assert _invoke("rules", "--category", "wire").exit_code == 1


def test_validate_schemas(tmp_path: Path) -> None:
    ok = _invoke("validate-schemas")
    assert ok.exit_code == 0
    assert "loaded from packaged defaults" in ok.output

    partial = tmp_path / "partial.json"
    partial.write_text(
        json.dumps(
            {"customer": {"fields": [{"name": "kyc", "type": "nestedObject", "schema": "ghost"}]}}
        )
    )
    warn = _invoke("validate-schemas", str(partial))
    assert warn.exit_code == 0
    assert "references undefined nested schema 'ghost'" in warn.output

    cyclic = tmp_path / "cyclic.json"
    cyclic.write_text(
        json.dumps({"a": {"fields": [{"name": "a", "type": "nestedObject", "schema": "a"}]}})
    )
    bad = _invoke("validate-schemas", str(cyclic))
    assert bad.exit_code == 1
    assert "cycle" in bad.output


def test_field_types() -> None:
    result = _invoke("field-types")
    assert result.exit_code == 0
    assert result.stdout.split() == [ft.value for ft in FieldType]
