"""Tests for config loading."""

from pathlib import Path

import pytest

from aml_synth.config import (
    _deep_merge,
    _default_config,
    get_config,
    validate_generation_config,
)


def test_default_config() -> None:
    cfg = _default_config()
    assert cfg["app"]["log_level"] == "INFO"
    assert cfg["generation"]["country_weights"] == {"BD": 0.7, "US": 0.3}
    assert cfg["generation"]["match_weights"] == {"exact": 0.3, "partial": 0.3, "fuzzy": 0.4}
    assert cfg["violations"]["max_quantity"] == 100
    assert cfg["violations"]["require_account_pool"] is False


def test_deep_merge() -> None:
    base = {"a": 1, "b": {"x": 1, "y": 2}}
    override = {"b": {"y": 3}, "c": 4}
    out = _deep_merge(base, override)
    assert out["a"] == 1
    assert out["b"]["x"] == 1
    assert out["b"]["y"] == 3
    assert out["c"] == 4


def test_get_config_with_file(config_path: str) -> None:
    cfg = get_config(config_path)
    assert cfg["generation"]["seed"] == 1234
    assert cfg["violations"]["max_quantity"] == 5
    assert cfg["pools"]["customer_path"].endswith("customers.json")
    # keys absent from the file keep their defaults
    assert cfg["app"]["name"] == "aml-synth"


def test_local_yaml_overrides_default(config_path: str) -> None:
    local = Path(config_path).parent / "local.yaml"
    local.write_text("violations:\n  max_quantity: 7\n")
    cfg = get_config(config_path)
    assert cfg["violations"]["max_quantity"] == 7
    assert cfg["generation"]["seed"] == 1234


def test_env_overrides(config_path: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AML_SYNTH_SEED", "99")
    monkeypatch.setenv("AML_SYNTH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("AML_SYNTH_SCHEMAS_PATH", "/tmp/schemas.json")
    cfg = get_config(config_path)
    assert cfg["generation"]["seed"] == 99
    assert cfg["app"]["log_level"] == "DEBUG"
    assert cfg["schemas"]["path"] == "/tmp/schemas.json"


def test_missing_file_falls_back_to_defaults(tmp_path) -> None:
    cfg = get_config(str(tmp_path / "nope.yaml"))
    assert cfg["generation"]["customer_id_min"] == 100000


def test_config_rejects_weights_not_summing_to_one(tmp_path) -> None:
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        """
generation:
  country_weights: { BD: 0.8, US: 0.3 }
"""
    )
    with pytest.raises(ValueError, match="country_weights must sum to 1.0"):
        get_config(str(cfg_path))


def test_config_rejects_negative_weight() -> None:
    cfg = _default_config()
    cfg["generation"]["match_weights"] = {"exact": 1.2, "partial": -0.2, "fuzzy": 0.0}
    with pytest.raises(ValueError, match="negative"):
        validate_generation_config(cfg)


def test_config_rejects_missing_strategy() -> None:
    cfg = _default_config()
    cfg["generation"]["match_weights"] = {"exact": 0.5, "fuzzy": 0.5}
    with pytest.raises(ValueError, match="missing weights"):
        validate_generation_config(cfg)


def test_config_rejects_empty_id_space() -> None:
    cfg = _default_config()
    cfg["generation"]["customer_id_min"] = 500
    cfg["generation"]["customer_id_max"] = 100
    with pytest.raises(ValueError, match="must not exceed"):
        validate_generation_config(cfg)


def test_config_rejects_bad_match_rate_and_quantity() -> None:
    cfg = _default_config()
    cfg["generation"]["nationality_match_rate"] = 1.5
    with pytest.raises(ValueError, match="nationality_match_rate"):
        validate_generation_config(cfg)
    cfg = _default_config()
    cfg["violations"]["max_quantity"] = 0
    with pytest.raises(ValueError, match="max_quantity"):
        validate_generation_config(cfg)
