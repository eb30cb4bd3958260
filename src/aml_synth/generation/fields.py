"""Field value generator: one handler per FieldType.

The handler table is checked against FieldType at construction, so adding a
type tag without a handler fails immediately instead of falling through to a
default value.
"""

from __future__ import annotations

import random
import re
import string
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, Protocol

from faker import Faker

from aml_synth.errors import UnknownFieldTypeError
from aml_synth.generation.context import GenerationContext
from aml_synth.generation.locales import LocaleProvider
from aml_synth.generation.matching import apply_fuzzy_name, partial_dob, share_percentages
from aml_synth.generation.probabilities import MatchStrategy, Probabilities
from aml_synth.logging_config import get_logger
from aml_synth.pool import AccountPool, CustomerPool
from aml_synth.schemas import (
    DEFAULT_MAX_ITEMS,
    DEFAULT_MIN_ITEMS,
    CustomerPoolEntry,
    FieldDefinition,
    FieldType,
    Schema,
)

logger = get_logger(__name__)

HS_CODES = (
    "8471.30", "6204.62", "8703.23", "2710.19", "8517.12",
    "8542.31", "0901.11", "5208.12", "7108.12", "3004.90",
)  # fmt: skip
PORTS = (
    "Shanghai", "Singapore", "Rotterdam", "Antwerp", "Hamburg", "Los Angeles", "Chittagong",
    "Dubai", "Hong Kong", "Busan", "Mumbai", "Colombo", "Felixstowe", "Jeddah", "Yokohama",
)  # fmt: skip

# Nested fields whose items carry a share that must total 100 across the array.
SHARE_PERCENTAGE_FIELDS = ("nomineeSharePercentage", "sharePercentage")

DEFAULT_STRING_COUNT = 3
DEFAULT_COUNTRY_COUNT = 2
DEFAULT_NAME_COUNT = 3

_EMAIL_STRIP = re.compile(r"[^a-zA-Z0-9@.]")
_ALNUM_UPPER = string.ascii_uppercase + string.digits


class NestedResolver(Protocol):
    """What nested field types need from the schema resolver."""

    def lookup(self, schema_name: str) -> Schema | None: ...

    def resolve(
        self, schema: Schema, context: GenerationContext | None = None
    ) -> dict[str, Any]: ...


Handler = Callable[[FieldDefinition, GenerationContext, NestedResolver], Any]


class FieldValueGenerator:
    """Produce one well-typed value for a field under the current context."""

    def __init__(
        self,
        locale: LocaleProvider,
        customer_pool: CustomerPool,
        account_pool: AccountPool,
        rng: random.Random,
        faker: Faker,
        probabilities: Probabilities | None = None,
        customer_id_range: tuple[int, int] = (100000, 999999),
    ) -> None:
        self.locale = locale
        self.customer_pool = customer_pool
        self.account_pool = account_pool
        self.rng = rng
        self.faker = faker
        self.probabilities = probabilities or Probabilities()
        self.customer_id_range = customer_id_range
        self._handlers = self._build_handlers()
        missing = set(FieldType) - set(self._handlers)
        if missing:
            raise UnknownFieldTypeError(", ".join(sorted(missing)))

    def generate(
        self, field: FieldDefinition, context: GenerationContext, nested: NestedResolver
    ) -> Any:
        handler = self._handlers.get(field.type)
        if handler is None:
            raise UnknownFieldTypeError(str(field.type))
        return handler(field, context, nested)

    def handled_types(self) -> frozenset[FieldType]:
        return frozenset(self._handlers)

    def _build_handlers(self) -> dict[FieldType, Handler]:
        loc = self.locale

        def plain(fn: Callable[[], Any]) -> Handler:
            return lambda field, ctx, nested: fn()

        def localized(fn: Callable[[Any], Any]) -> Handler:
            return lambda field, ctx, nested: fn(ctx.country)

        def localized_named(fn: Callable[[Any, str], Any]) -> Handler:
            return lambda field, ctx, nested: fn(ctx.country, field.name)

        return {
            FieldType.CUSTOMER_ID: plain(self.new_customer_id),
            FieldType.CUSTOMER_ID_REF: self._customer_id_ref,
            FieldType.ACCOUNT_ID_REF: self._account_id_ref,
            FieldType.CUSTOMER_NAME_FROM_POOL: self._name_from_pool,
            FieldType.CUSTOMER_DOB_FROM_POOL: self._dob_from_pool,
            FieldType.CUSTOMER_NATIONALITY_FROM_POOL: self._nationality_from_pool,
            FieldType.UUID: plain(self.faker.uuid4),
            FieldType.STRING: plain(self.faker.word),
            FieldType.WORD: plain(self.faker.word),
            FieldType.NUMBER: plain(lambda: self.rng.randint(1, 1000)),
            FieldType.BOOLEAN: plain(lambda: self.rng.random() < 0.5),
            FieldType.EMAIL: plain(self.email),
            FieldType.PHONE: localized(loc.phone),
            FieldType.DATE: plain(self.past_date),
            FieldType.DATE_OF_BIRTH: plain(self.date_of_birth),
            FieldType.DATETIME: plain(self.recent_datetime),
            FieldType.DATE_OR_NULL: plain(self.recent_date_or_none),
            FieldType.ADDRESS: localized_named(loc.address),
            FieldType.STREET_ADDRESS: localized_named(loc.address),
            FieldType.CITY: localized(loc.city),
            FieldType.COUNTRY: localized(loc.country_name),
            FieldType.COUNTRY_CODE: localized(loc.country_code),
            FieldType.CURRENCY: plain(lambda: f"{self.rng.uniform(0, 1000):.2f}"),
            FieldType.CURRENCY_CODE: plain(self.faker.currency_code),
            FieldType.FIRST_NAME: localized(loc.first_name),
            FieldType.LAST_NAME: localized(loc.last_name),
            FieldType.FULL_NAME: localized_named(loc.full_name),
            FieldType.COMPANY_NAME: plain(self.faker.company),
            FieldType.SENTENCE: plain(self.faker.sentence),
            FieldType.PARAGRAPH: plain(self.faker.paragraph),
            FieldType.URL: plain(self.faker.url),
            FieldType.NUMERIC_ID: plain(lambda: str(self.rng.randint(10_000_000, 99_999_999))),
            FieldType.RISK_SCORE: plain(lambda: self.rng.randint(0, 100)),
            FieldType.EXCHANGE_RATE: plain(lambda: round(self.rng.uniform(0.5, 2.0), 4)),
            FieldType.ACCOUNT_NUMBER: plain(lambda: self.digits(8, leading_nonzero=True)),
            FieldType.JOB_TITLE: plain(self.faker.job),
            FieldType.LC_NUMBER: plain(lambda: f"LC{datetime.now(UTC).year}{self.digits(8)}"),
            FieldType.SWIFT_REFERENCE: plain(lambda: f"MT700{self.digits(10)}"),
            FieldType.SWIFT_CODE: plain(self.swift_code),
            FieldType.TRADE_AMOUNT: plain(lambda: round(self.rng.uniform(1000, 5_000_000), 2)),
            FieldType.PERCENTAGE: plain(lambda: round(self.rng.uniform(0, 100), 2)),
            FieldType.HS_CODE: plain(lambda: self.rng.choice(HS_CODES)),
            FieldType.PORT: plain(lambda: self.rng.choice(PORTS)),
            FieldType.BANK_NAME: localized(loc.bank_name),
            FieldType.FUTURE_DATE: plain(self.future_date),
            FieldType.SELECT: lambda field, ctx, nested: self.rng.choice(field.options or []),
            FieldType.ARRAY: self._array,
            FieldType.ARRAY_OF_STRINGS: lambda field, ctx, nested: [
                self.faker.word() for _ in range(field.count or DEFAULT_STRING_COUNT)
            ],
            FieldType.ARRAY_OF_COUNTRIES: lambda field, ctx, nested: self._led_by_locale(
                field, ctx, loc.country_name, self.faker.country
            ),
            FieldType.ARRAY_OF_COUNTRY_CODES: lambda field, ctx, nested: self._led_by_locale(
                field, ctx, loc.country_code, self.faker.country_code
            ),
            FieldType.ARRAY_OF_NAMES: lambda field, ctx, nested: [
                loc.full_name(ctx.country) for _ in range(field.count or DEFAULT_NAME_COUNT)
            ],
            FieldType.NESTED_OBJECT: self._nested_object,
            FieldType.NESTED_ARRAY: self._nested_array,
        }

    # -- scalar helpers --------------------------------------------------

    def new_customer_id(self) -> int:
        lo, hi = self.customer_id_range
        return self.rng.randint(lo, hi)

    def digits(self, n: int, leading_nonzero: bool = False) -> str:
        out = "".join(self.rng.choices(string.digits, k=n))
        if leading_nonzero and out[0] == "0":
            out = str(self.rng.randint(1, 9)) + out[1:]
        return out

    def email(self) -> str:
        return _EMAIL_STRIP.sub("", self.faker.email()).lower()

    def past_date(self) -> str:
        return self.faker.date_between(start_date="-1y", end_date="today").isoformat()

    def date_of_birth(self) -> str:
        return self.faker.date_of_birth(minimum_age=18, maximum_age=80).isoformat()

    def recent_datetime(self) -> str:
        moment = self.faker.date_time_between(start_date="-1d", end_date="now", tzinfo=UTC)
        return moment.isoformat()

    def recent_date_or_none(self) -> str | None:
        if self.rng.random() < 0.5:
            return None
        return self.faker.date_between(start_date="-1d", end_date="today").isoformat()

    def future_date(self) -> str:
        return self.faker.date_between(start_date="+1d", end_date="+1y").isoformat()

    def swift_code(self) -> str:
        bank = "".join(self.rng.choices(string.ascii_uppercase, k=4))
        branch = "".join(self.rng.choices(_ALNUM_UPPER, k=5))
        return f"{bank}{self.faker.country_code()}{branch}"

    # -- pool-backed -----------------------------------------------------

    def _customer_id_ref(
        self, field: FieldDefinition, ctx: GenerationContext, nested: NestedResolver
    ) -> int:
        if ctx.customer_id is not None:
            return ctx.customer_id
        if ctx.selected_customer is not None:
            return ctx.selected_customer.customer_id
        return self.customer_pool.draw_id()

    def _account_id_ref(
        self, field: FieldDefinition, ctx: GenerationContext, nested: NestedResolver
    ) -> str:
        if ctx.account_id is not None:
            return ctx.account_id
        return self.account_pool.draw_random()

    def _pooled_customer(self, ctx: GenerationContext) -> CustomerPoolEntry:
        if ctx.selected_customer is not None:
            return ctx.selected_customer
        if ctx.customer_id is not None:
            pinned = self.customer_pool.get(ctx.customer_id)
            if pinned is not None:
                return pinned
        return self.customer_pool.draw_random()

    def _name_from_pool(
        self, field: FieldDefinition, ctx: GenerationContext, nested: NestedResolver
    ) -> str:
        customer = self._pooled_customer(ctx)
        name = customer.customer_name_eng
        if not name:
            return self.locale.bd_full_name()
        strategy = self.probabilities.match.draw(self.rng)
        if strategy == MatchStrategy.FUZZY:
            return apply_fuzzy_name(name, self.rng)
        # partial keeps the name identical; only DOB has a partial variant
        return name

    def _dob_from_pool(
        self, field: FieldDefinition, ctx: GenerationContext, nested: NestedResolver
    ) -> str:
        customer = self._pooled_customer(ctx)
        dob = customer.date_of_birth
        if not dob:
            return self.date_of_birth()
        strategy = self.probabilities.match.draw(self.rng)
        if strategy == MatchStrategy.EXACT:
            return dob
        if strategy == MatchStrategy.PARTIAL:
            return partial_dob(dob, self.rng)
        return self.date_of_birth()

    def _nationality_from_pool(
        self, field: FieldDefinition, ctx: GenerationContext, nested: NestedResolver
    ) -> str:
        customer = self._pooled_customer(ctx)
        if customer.nationality and self.probabilities.nationality_match.draw(self.rng):
            return customer.nationality
        return self.locale.country_name(ctx.country)

    # -- composite -------------------------------------------------------

    def _array(
        self, field: FieldDefinition, ctx: GenerationContext, nested: NestedResolver
    ) -> list[Any]:
        item = FieldDefinition(name=field.name, type=field.item_type)  # type: ignore[arg-type]
        return [self.generate(item, ctx, nested) for _ in range(field.count or 0)]

    def _led_by_locale(
        self,
        field: FieldDefinition,
        ctx: GenerationContext,
        local: Callable[[Any], str],
        generic: Callable[[], str],
    ) -> list[str]:
        n = field.count or DEFAULT_COUNTRY_COUNT
        if ctx.country and n > 0:
            return [local(ctx.country)] + [generic() for _ in range(n - 1)]
        return [generic() for _ in range(n)]

    def _nested_object(
        self, field: FieldDefinition, ctx: GenerationContext, nested: NestedResolver
    ) -> dict[str, Any]:
        schema = nested.lookup(field.schema_name or "")
        if schema is None:
            logger.warning(
                "Field %s references undefined schema %s; using {}", field.name, field.schema_name
            )
            return {}
        return nested.resolve(schema, ctx)

    def _nested_array(
        self, field: FieldDefinition, ctx: GenerationContext, nested: NestedResolver
    ) -> list[dict[str, Any]]:
        schema = nested.lookup(field.schema_name or "")
        if schema is None:
            logger.warning(
                "Field %s references undefined schema %s; using []", field.name, field.schema_name
            )
            return []
        lo = field.min_count if field.min_count is not None else DEFAULT_MIN_ITEMS
        hi = field.max_count if field.max_count is not None else max(lo, DEFAULT_MAX_ITEMS)
        items = [nested.resolve(schema, ctx) for _ in range(self.rng.randint(lo, hi))]
        share_fields = [f.name for f in schema.fields if f.name in SHARE_PERCENTAGE_FIELDS]
        if items and share_fields:
            shares = share_percentages(len(items), self.rng)
            for item, share in zip(items, shares, strict=True):
                for name in share_fields:
                    item[name] = share
        return items
