"""Composition root: wires config, random sources, pools, resolver and composer."""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from faker import Faker

from aml_synth.errors import SchemaConfigError
from aml_synth.generation import (
    FieldValueGenerator,
    GenerationContext,
    LocaleProvider,
    Probabilities,
    SchemaResolver,
    random_sources,
)
from aml_synth.generation.locales import country_from_nationality
from aml_synth.logging_config import get_logger
from aml_synth.pool import AccountPool, CustomerPool, JsonFileStorage, PoolStorage
from aml_synth.schema_store import load_schema_set
from aml_synth.schemas import CustomerPoolEntry, SchemaSet, ViolationScenario
from aml_synth.violations.composer import DEFAULT_MAX_QUANTITY, ViolationComposer

logger = get_logger(__name__)

DEFAULT_ACCOUNT_ID_FIELD = "accountNumber"


def customer_entry(record: Mapping[str, Any]) -> CustomerPoolEntry:
    """Map a generated customer record to its pool entry."""
    raw_id = record.get("customerId")
    try:
        customer_id = int(raw_id)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError(f"customerId must be an integer, got {raw_id!r}") from None
    if isinstance(raw_id, float) and not raw_id.is_integer():
        raise ValueError(f"customerId must be an integer, got {raw_id!r}")
    nationality = record.get("nationality")
    return CustomerPoolEntry(
        customer_id=customer_id,
        customer_name_eng=record.get("customerNameEng"),
        customer_name_ben=record.get("customerNameBen"),
        date_of_birth=record.get("dob") or record.get("dateOfBirth"),
        nationality=nationality,
        country=country_from_nationality(nationality),
    )


class SyntheticDataEngine:
    """Normal record generation, pool commits and violation scenarios behind one object."""

    def __init__(
        self,
        schema_set: SchemaSet,
        customer_pool: CustomerPool,
        account_pool: AccountPool,
        rng: random.Random,
        faker: Faker,
        probabilities: Probabilities | None = None,
        customer_id_range: tuple[int, int] = (100000, 999999),
        account_id_field: str = DEFAULT_ACCOUNT_ID_FIELD,
        max_quantity: int = DEFAULT_MAX_QUANTITY,
        require_account_pool: bool = False,
    ) -> None:
        self.schema_set = schema_set
        self.customer_pool = customer_pool
        self.account_pool = account_pool
        self.rng = rng
        self.faker = faker
        self.probabilities = probabilities or Probabilities()
        self.account_id_field = account_id_field
        locale = LocaleProvider(rng, faker, self.probabilities)
        self.generator = FieldValueGenerator(
            locale,
            customer_pool,
            account_pool,
            rng,
            faker,
            self.probabilities,
            customer_id_range,
        )
        self.resolver = SchemaResolver(
            schema_set, self.generator, customer_pool, rng, self.probabilities
        )
        self.composer = ViolationComposer(
            customer_pool,
            account_pool,
            rng,
            faker,
            max_quantity=max_quantity,
            require_account_pool=require_account_pool,
        )

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any],
        customer_storage: PoolStorage | None = None,
        account_storage: PoolStorage | None = None,
        schema_set: SchemaSet | None = None,
    ) -> SyntheticDataEngine:
        """Build an engine from a merged config dict and load both pools.

        Storage defaults to the JSON files named under `pools`; tests pass MemoryStorage.
        """
        gen = config.get("generation") or {}
        pools = config.get("pools") or {}
        violations = config.get("violations") or {}
        rng, faker = random_sources(gen.get("seed"))
        if schema_set is None:
            schema_set = load_schema_set((config.get("schemas") or {}).get("path"))
        customer_pool = CustomerPool(
            customer_storage or JsonFileStorage(Path(pools["customer_path"])), rng
        )
        account_pool = AccountPool(
            account_storage or JsonFileStorage(Path(pools["account_path"])), rng
        )
        customer_pool.load()
        account_pool.load()
        return cls(
            schema_set,
            customer_pool,
            account_pool,
            rng,
            faker,
            probabilities=Probabilities.from_config(config),
            customer_id_range=(
                int(gen.get("customer_id_min", 100000)),
                int(gen.get("customer_id_max", 999999)),
            ),
            account_id_field=pools.get("account_id_field", DEFAULT_ACCOUNT_ID_FIELD),
            max_quantity=int(violations.get("max_quantity", DEFAULT_MAX_QUANTITY)),
            require_account_pool=bool(violations.get("require_account_pool", False)),
        )

    # -- normal generation ---------------------------------------------------

    def generate_record(
        self, data_type: str, context: GenerationContext | None = None
    ) -> dict[str, Any]:
        return self.resolver.resolve_named(data_type, context)

    def generate(
        self, data_type: str, amount: int = 1, commit: bool = True
    ) -> dict[str, Any] | list[dict[str, Any]]:
        """One record for amount 1, else a list.

        Customer and account records are added to their pools unless commit=False.
        """
        if amount < 1:
            raise ValueError("amount must be at least 1")
        if data_type not in self.schema_set:
            raise SchemaConfigError(f"Schema {data_type!r} is not defined")
        records = [self.generate_record(data_type) for _ in range(amount)]
        if commit and data_type == "customer":
            self.commit_customers(records)
        elif commit and data_type == "account":
            self.commit_accounts(records)
        logger.info("Generated %d %s record(s)", len(records), data_type)
        return records[0] if amount == 1 else records

    def commit_customers(self, records: Iterable[Mapping[str, Any]]) -> int:
        """Upsert generated customer records into the customer pool; return its new size."""
        entries = [customer_entry(r) for r in records]
        return self.customer_pool.upsert(entries)

    def commit_accounts(self, records: Iterable[Mapping[str, Any]]) -> int:
        """Add each record's account id field to the account pool; return its new size."""
        ids = [
            str(r[self.account_id_field])
            for r in records
            if r.get(self.account_id_field) is not None
        ]
        return self.account_pool.upsert(ids)

    # -- violations and pools ------------------------------------------------

    def compose_violation(self, code: str, quantity: int = 1) -> ViolationScenario:
        return self.composer.compose(code, quantity)

    def pool_status(self) -> dict[str, dict[str, Any]]:
        return {
            "customers": {
                "size": self.customer_pool.size(),
                "empty": self.customer_pool.is_empty(),
            },
            "accounts": {"size": self.account_pool.size(), "empty": self.account_pool.is_empty()},
        }

    def clear_pools(self, customers: bool = True, accounts: bool = True) -> None:
        if customers:
            self.customer_pool.clear()
        if accounts:
            self.account_pool.clear()
        logger.info("Cleared pools (customers=%s, accounts=%s)", customers, accounts)
