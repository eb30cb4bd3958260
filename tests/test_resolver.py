"""Tests for the schema resolver: context propagation, pools, nested schemas."""

import logging

import pytest

from aml_synth.errors import PoolExhaustedError, SchemaConfigError
from aml_synth.generation import GenerationContext, SchemaResolver
from aml_synth.generation.matching import fuzzy_variants
from aml_synth.generation.resolver import advance_context
from aml_synth.pool import CustomerPool
from aml_synth.schemas import CustomerPoolEntry, FieldDefinition, FieldType, SchemaSet

COUNTRY_CODES = {"Bangladesh": "BD", "United States": "US"}


def test_customer_record_propagates_customer_id(resolver: SchemaResolver) -> None:
    for _ in range(20):
        record = resolver.resolve_named("customer")
        cid = record["customerId"]
        assert 100000 <= cid <= 999999
        assert record["kyc"]["customerId"] == cid
        assert record["nominees"]
        assert all(n["customerId"] == cid for n in record["nominees"])


def test_customer_record_keeps_field_order(resolver: SchemaResolver, schema_set) -> None:
    record = resolver.resolve_named("customer")
    assert list(record) == [f.name for f in schema_set["customer"].fields]


def test_customer_country_is_consistent(resolver: SchemaResolver) -> None:
    for _ in range(30):
        record = resolver.resolve_named("customer")
        assert record["nationality"] in COUNTRY_CODES
        assert record["countryCode"] == COUNTRY_CODES[record["nationality"]]
        if record["countryCode"] == "BD":
            assert record["mobileNumber"].startswith("+880")


def test_nominee_shares_sum_to_100(resolver: SchemaResolver) -> None:
    for _ in range(50):
        nominees = resolver.resolve_named("customer")["nominees"]
        assert 1 <= len(nominees) <= 3
        shares = [n["nomineeSharePercentage"] for n in nominees]
        assert sum(shares) == 100
        assert all(isinstance(s, int) and s > 0 for s in shares)


def test_pool_consumers_fail_on_empty_pool(resolver: SchemaResolver) -> None:
    for name in ("transaction", "account", "sanction", "trade", "credit"):
        with pytest.raises(PoolExhaustedError):
            resolver.resolve_named(name)


def test_referential_integrity(resolver: SchemaResolver, seeded_pools) -> None:
    customers, accounts = seeded_pools
    for _ in range(20):
        txn = resolver.resolve_named("transaction")
        assert txn["customerId"] in customers
        assert txn["accountId"] in accounts
        trade = resolver.resolve_named("trade")
        assert trade["customerId"] in customers
        assert trade["accountId"] in accounts


def test_account_signatories_reference_the_account(
    resolver: SchemaResolver, customer_pool: CustomerPool, bd_customer
) -> None:
    customer_pool.upsert(bd_customer)
    # signatories use accountIdRef; the record's own accountNumber pins it
    record = resolver.resolve_named("account")
    assert record["customerId"] == 500123
    assert record["signatories"]
    assert all(s["accountId"] == record["accountNumber"] for s in record["signatories"])


def test_sanction_record_mirrors_pooled_customer(resolver: SchemaResolver, seeded_pools) -> None:
    for _ in range(30):
        record = resolver.resolve_named("sanction")
        assert record["fullName"] == "Rahim Uddin" or record["fullName"] in fuzzy_variants(
            "Rahim Uddin"
        )
        # BD customer: both the pooled value and the locale fallback are Bangladesh
        assert record["nationality"] == "Bangladesh"
        assert record["countries"][0] == "Bangladesh"


def test_pooled_country_pins_locale(resolver: SchemaResolver, customer_pool: CustomerPool) -> None:
    customer_pool.upsert(CustomerPoolEntry(customer_id=1, country="US", nationality="Canada"))
    for _ in range(10):
        record = resolver.resolve_named("transaction", GenerationContext(account_id="1"))
        assert record["customerId"] == 1
        assert record["counterpartyCountry"] == "US"


def test_explicit_context_is_respected(resolver: SchemaResolver) -> None:
    ctx = GenerationContext(customer_id=777777, account_id="55555555", country="BD")
    record = resolver.resolve_named("transaction", ctx)
    assert record["customerId"] == 777777
    assert record["accountId"] == "55555555"
    assert record["counterpartyCountry"] == "BD"


def test_missing_nested_schema_degrades(generator, customer_pool: CustomerPool, rng) -> None:
    schema_set = SchemaSet.from_mapping(
        {
            "customer": {
                "fields": [
                    {"name": "customerId", "type": "customerId"},
                    {"name": "kyc", "type": "nestedObject", "schema": "ghost"},
                    {"name": "items", "type": "nestedArray", "schema": "ghost"},
                ]
            }
        }
    )
    resolver = SchemaResolver(schema_set, generator, customer_pool, rng)
    record = resolver.resolve_named("customer")
    assert record["kyc"] == {}
    assert record["items"] == []


def test_unknown_schema(resolver: SchemaResolver) -> None:
    with pytest.raises(SchemaConfigError, match="Schema not defined: wallet"):
        resolver.resolve_named("wallet")


def test_field_failure_is_logged_and_reraised(
    resolver: SchemaResolver, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.ERROR, logger="aml_synth.generation.resolver"):
        with pytest.raises(PoolExhaustedError):
            resolver.resolve_named("transaction")
    assert "Failed generating field customerId (type customerIdRef)" in caplog.text


def test_advance_context_rules(customer_pool: CustomerPool) -> None:
    customer_pool.upsert(CustomerPoolEntry(customer_id=5, country="US"))
    ctx = GenerationContext()
    ref = FieldDefinition(name="owner", type=FieldType.CUSTOMER_ID_REF)
    ctx = advance_context(ctx, ref, 5, customer_pool)
    assert ctx.customer_id == 5
    assert ctx.country == "US"

    uuid_field = FieldDefinition(name="uuid", type=FieldType.UUID)
    ctx = advance_context(ctx, uuid_field, "abc")
    assert ctx.account_id == "abc"

    number = FieldDefinition(name="accountNumber", type=FieldType.ACCOUNT_NUMBER)
    ctx = advance_context(ctx, number, "12345678")
    assert ctx.account_number == "12345678"
    assert ctx.account_id == "12345678"

    # a later uuid does not override an account already pinned
    ctx = advance_context(ctx, uuid_field, "zzz")
    assert ctx.account_id == "12345678"

    # None values leave the context untouched
    assert advance_context(ctx, ref, None, customer_pool) is ctx
