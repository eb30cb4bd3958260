"""Violation scenario composer: rule code -> records engineered to trip that rule."""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import UTC, datetime

from faker import Faker

from aml_synth.errors import PoolExhaustedError
from aml_synth.logging_config import get_logger
from aml_synth.pool import ACCOUNT_POOL_EMPTY, AccountPool, CustomerPool
from aml_synth.schemas import Rule, ViolationScenario
# builder modules register themselves in SCENARIO_BUILDERS on import
from aml_synth.violations import sanction, trade, transaction  # noqa: F401
from aml_synth.violations.catalog import RULE_CATALOG, get_rule
from aml_synth.violations.records import SCENARIO_BUILDERS, Actor, Built, RecordFactory

logger = get_logger(__name__)

CUSTOMER_POOL_REQUIRED = "Customer pool is empty. Please generate customers first."
RANDOM_ACCOUNT_NOTE = (
    "(Note: No accounts in pool; using random account number. "
    "Generate accounts first for accurate matching.)"
)
DEFAULT_MAX_QUANTITY = 100


class ViolationComposer:
    """Builds ViolationScenario objects from the catalog and the identity pools."""

    def __init__(
        self,
        customer_pool: CustomerPool,
        account_pool: AccountPool,
        rng: random.Random,
        faker: Faker,
        max_quantity: int = DEFAULT_MAX_QUANTITY,
        require_account_pool: bool = False,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.customer_pool = customer_pool
        self.account_pool = account_pool
        self.rng = rng
        self.faker = faker
        self.max_quantity = max_quantity
        self.require_account_pool = require_account_pool
        self.clock = clock or (lambda: datetime.now(UTC))
        missing = [r.code for r in RULE_CATALOG if r.code not in SCENARIO_BUILDERS]
        if missing:
            raise RuntimeError(f"No scenario builder for rules: {', '.join(missing)}")

    def compose(self, code: str, quantity: int = 1) -> ViolationScenario:
        """Generate `quantity` batches (clamped to 1..max_quantity) for rule `code`.

        Raises UnknownRuleError for codes outside the catalog and PoolExhaustedError
        when the customer pool (or, if required, the account pool) is empty.
        """
        rule = get_rule(code)
        count = max(1, min(self.max_quantity, int(quantity or 1)))
        batches = [self._compose_once(rule) for _ in range(count)]
        records = [r for b in batches for r in b.records]
        explanation = batches[0].explanation
        if count > 1:
            explanation = (
                f"Generated {count} batches ({len(records)} total records). {explanation}"
            )
        note = batches[0].note.strip() or None
        logger.info("Composed %s scenario: %d batches, %d records", code, count, len(records))
        return ViolationScenario(
            rule=rule,
            data_type=rule.data_type,
            records=records,
            record_count=len(records),
            explanation=explanation,
            note=note,
        )

    def _compose_once(self, rule: Rule) -> Built:
        actor, account_note = self._actor()
        factory = RecordFactory(self.rng, self.faker, self.clock())
        built = SCENARIO_BUILDERS[rule.code](factory, actor)
        built.note = " ".join(part for part in (account_note, built.note) if part)
        return built

    def _actor(self) -> tuple[Actor, str]:
        if self.customer_pool.is_empty():
            logger.warning("Violation requested with an empty customer pool")
            raise PoolExhaustedError("customer", CUSTOMER_POOL_REQUIRED)
        customer = self.customer_pool.draw_random()
        note = ""
        if not self.account_pool.is_empty():
            account = self.account_pool.draw_random()
        elif self.require_account_pool:
            raise PoolExhaustedError("account", ACCOUNT_POOL_EMPTY)
        else:
            account = str(self.rng.randint(10_000_000, 99_999_999))
            note = RANDOM_ACCOUNT_NOTE
        actor = Actor(
            customer=customer,
            account=account,
            customers=tuple(self.customer_pool.values()),
            accounts=tuple(self.account_pool.values()),
        )
        return actor, note
