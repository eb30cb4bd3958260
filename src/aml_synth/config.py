"""Configuration loading from YAML + environment overrides."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

WEIGHT_TOLERANCE = 1e-6


def _load_yaml(path: str | Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class AppSettings(BaseSettings):
    """App-level settings with env override."""

    model_config = SettingsConfigDict(
        env_prefix="AML_SYNTH_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    config_path: str = Field(default="config/default.yaml", alias="AML_SYNTH_CONFIG_PATH")
    log_level: str | None = Field(default=None, alias="AML_SYNTH_LOG_LEVEL")
    seed: int | None = Field(default=None, alias="AML_SYNTH_SEED")
    schemas_path: str | None = Field(default=None, alias="AML_SYNTH_SCHEMAS_PATH")


def _check_weights(name: str, weights: dict[str, Any], required: frozenset[str]) -> None:
    missing = required - set(weights)
    if missing:
        raise ValueError(f"{name} is missing weights for {sorted(missing)}")
    values = [float(v) for v in weights.values()]
    if any(v < 0 for v in values):
        raise ValueError(f"{name} must not contain negative weights")
    if abs(sum(values) - 1.0) > WEIGHT_TOLERANCE:
        raise ValueError(f"{name} must sum to 1.0 (got {sum(values):.4f})")


def validate_generation_config(config: dict[str, Any]) -> None:
    """Raise ValueError if probability tables or the customer id-space are unusable."""
    gen = config.get("generation") or {}
    _check_weights(
        "generation.country_weights",
        gen.get("country_weights") or {},
        frozenset({"BD", "US"}),
    )
    _check_weights(
        "generation.match_weights",
        gen.get("match_weights") or {},
        frozenset({"exact", "partial", "fuzzy"}),
    )
    rate = float(gen.get("nationality_match_rate", 0.6))
    if not 0.0 <= rate <= 1.0:
        raise ValueError("generation.nationality_match_rate must be between 0 and 1")
    lo = int(gen.get("customer_id_min", 100000))
    hi = int(gen.get("customer_id_max", 999999))
    if lo > hi:
        raise ValueError(
            f"generation.customer_id_min ({lo}) must not exceed customer_id_max ({hi})"
        )
    violations = config.get("violations") or {}
    if int(violations.get("max_quantity", 100)) < 1:
        raise ValueError("violations.max_quantity must be at least 1")


def get_config(config_path: str | None = None) -> dict[str, Any]:
    """Load merged config from YAML and apply env overrides via AppSettings."""
    settings = AppSettings()
    path = config_path or settings.config_path
    base = _default_config()
    if Path(path).exists():
        base = _deep_merge(base, _load_yaml(path))
        local_path = Path(path).parent / "local.yaml"
        if local_path.exists():
            base = _deep_merge(base, _load_yaml(local_path))
    if settings.log_level:
        base.setdefault("app", {})["log_level"] = settings.log_level
    if settings.seed is not None:
        base.setdefault("generation", {})["seed"] = settings.seed
    if settings.schemas_path:
        base.setdefault("schemas", {})["path"] = settings.schemas_path
    validate_generation_config(base)
    return base


def _default_config() -> dict[str, Any]:
    return {
        "app": {"name": "aml-synth", "log_level": "INFO"},
        "schemas": {"path": None},
        "pools": {
            "customer_path": "data/pools/customer-id-pool.json",
            "account_path": "data/pools/account-id-pool.json",
            "account_id_field": "accountNumber",
        },
        "generation": {
            "seed": None,
            "customer_id_min": 100000,
            "customer_id_max": 999999,
            "country_weights": {"BD": 0.7, "US": 0.3},
            "match_weights": {"exact": 0.3, "partial": 0.3, "fuzzy": 0.4},
            "nationality_match_rate": 0.6,
        },
        "violations": {"max_quantity": 100, "require_account_pool": False},
    }
