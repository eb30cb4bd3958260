"""Pytest fixtures: sample config, seeded random sources, in-memory pools."""

from __future__ import annotations

import random
from pathlib import Path

import pytest
from faker import Faker

from aml_synth.config import get_config
from aml_synth.engine import SyntheticDataEngine
from aml_synth.generation import FieldValueGenerator, LocaleProvider, SchemaResolver
from aml_synth.pool import AccountPool, CustomerPool, MemoryStorage
from aml_synth.schema_store import default_schema_set
from aml_synth.schemas import CustomerPoolEntry, SchemaSet

SEED = 1234


@pytest.fixture
def config_path(tmp_path: Path) -> str:
    """Return path to a temporary config dir with default.yaml."""
    cfg_dir = tmp_path / "config"
    cfg_dir.mkdir()
    pools_dir = (tmp_path / "pools").as_posix()
    (cfg_dir / "default.yaml").write_text(
        f"""
app:
  log_level: INFO
pools:
  customer_path: "{pools_dir}/customers.json"
  account_path: "{pools_dir}/accounts.json"
  account_id_field: accountNumber
generation:
  seed: {SEED}
  customer_id_min: 100000
  customer_id_max: 999999
  country_weights: {{ BD: 0.7, US: 0.3 }}
  match_weights: {{ exact: 0.3, partial: 0.3, fuzzy: 0.4 }}
  nationality_match_rate: 0.6
violations:
  max_quantity: 5
  require_account_pool: false
"""
    )
    return str(cfg_dir / "default.yaml")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)


@pytest.fixture
def faker() -> Faker:
    fake = Faker("en_US")
    fake.seed_instance(SEED)
    return fake


@pytest.fixture
def bd_customer() -> CustomerPoolEntry:
    return CustomerPoolEntry(
        customer_id=500123,
        customer_name_eng="Rahim Uddin",
        customer_name_ben="রহিম উদ্দিন",
        date_of_birth="1985-06-15",
        nationality="Bangladesh",
        country="BD",
    )


@pytest.fixture
def customer_pool(rng: random.Random) -> CustomerPool:
    return CustomerPool(MemoryStorage(), rng)


@pytest.fixture
def account_pool(rng: random.Random) -> AccountPool:
    return AccountPool(MemoryStorage(), rng)


@pytest.fixture
def seeded_pools(
    customer_pool: CustomerPool, account_pool: AccountPool, bd_customer: CustomerPoolEntry
) -> tuple[CustomerPool, AccountPool]:
    """One BD customer and two accounts already in the pools."""
    customer_pool.upsert(bd_customer)
    account_pool.upsert(["12345678", "87654321"])
    return customer_pool, account_pool


@pytest.fixture
def schema_set() -> SchemaSet:
    return default_schema_set()


@pytest.fixture
def generator(
    customer_pool: CustomerPool,
    account_pool: AccountPool,
    rng: random.Random,
    faker: Faker,
) -> FieldValueGenerator:
    return FieldValueGenerator(LocaleProvider(rng, faker), customer_pool, account_pool, rng, faker)


@pytest.fixture
def resolver(
    schema_set: SchemaSet,
    generator: FieldValueGenerator,
    customer_pool: CustomerPool,
    rng: random.Random,
) -> SchemaResolver:
    return SchemaResolver(schema_set, generator, customer_pool, rng)


@pytest.fixture
def engine(config_path: str) -> SyntheticDataEngine:
    """Engine from the sample config, pools held in memory."""
    return SyntheticDataEngine.from_config(
        get_config(config_path),
        customer_storage=MemoryStorage(),
        account_storage=MemoryStorage(),
    )
