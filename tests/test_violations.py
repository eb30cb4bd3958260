"""Tests for violation scenario composition across the whole rule catalog."""

import json
import random
import re
from datetime import UTC, datetime, timedelta

import pytest
from faker import Faker

from aml_synth.errors import PoolExhaustedError, UnknownRuleError
from aml_synth.pool import ACCOUNT_POOL_EMPTY
from aml_synth.violations import ViolationComposer, rule_codes
from aml_synth.violations.composer import CUSTOMER_POOL_REQUIRED, RANDOM_ACCOUNT_NOTE
from aml_synth.violations.records import (
    FATF_GREYLIST,
    SCENARIO_BUILDERS,
    Actor,
    RecordFactory,
    scenario,
)
from aml_synth.violations.sanction import name_aliases
from aml_synth.violations.transaction import CTR_THRESHOLD, PREREQUISITE_PEP

NOW = datetime(2025, 3, 10, 12, 0, tzinfo=UTC)
MILLIS = re.compile(r"\.\d{3}\+00:00$")


@pytest.fixture
def composer(seeded_pools, rng, faker) -> ViolationComposer:
    customers, accounts = seeded_pools
    return ViolationComposer(customers, accounts, rng, faker, max_quantity=5, clock=lambda: NOW)


def _hours_before_now(ts: str) -> float:
    return (NOW - datetime.fromisoformat(ts)) / timedelta(hours=1)


@pytest.mark.parametrize("code", rule_codes())
def test_every_rule_composes(composer: ViolationComposer, code: str) -> None:
    result = composer.compose(code)
    assert result.rule.code == code
    assert result.data_type == result.rule.category
    assert result.record_count == len(result.records) >= 1
    assert result.explanation
    # JSON-serializable as served
    json.dumps(result.to_json_dict())
    for record in result.records:
        if result.data_type == "transaction":
            assert isinstance(record["amount"], int) and record["amount"] >= 0
            assert MILLIS.search(record["timestamp"])
            assert datetime.fromisoformat(record["timestamp"]) <= NOW
        elif result.data_type == "trade":
            assert record["lcNumber"].startswith(f"LC{NOW.year}-")
            assert record["customerId"] == 500123
            assert record["parties"]
            assert isinstance(record["documents"], list)
        else:
            assert record["entityId"].startswith("SANC-")
            assert record["entityType"]


def test_cash_threshold_literal(composer: ViolationComposer) -> None:
    result = composer.compose("CASH_THRESHOLD")
    assert result.record_count == 1
    (record,) = result.records
    assert 1_100_000 <= record["amount"] <= 1_500_000
    assert record["type"] == "CASH_DEPOSIT"
    assert record["customerId"] == 500123
    assert f"{record['amount']:,}" in result.explanation
    assert "Rahim Uddin" in result.explanation
    assert record["accountId"] in ("12345678", "87654321")
    assert result.note is None


def test_structuring_stays_below_ctr(composer: ViolationComposer) -> None:
    for _ in range(25):
        result = composer.compose("STRUCTURING")
        assert result.records
        for record in result.records:
            assert 0.9 * CTR_THRESHOLD < record["amount"] < 0.99 * CTR_THRESHOLD
            assert record["type"] == "CASH_DEPOSIT"
            assert 0 <= _hours_before_now(record["timestamp"]) <= 48


def test_funnel_outflow_is_85_percent_of_inflow(composer: ViolationComposer) -> None:
    records = composer.compose("FUNNEL_ACCOUNT").records
    inflow = sum(r["amount"] for r in records if r["direction"] == "IN")
    (outbound,) = [r for r in records if r["direction"] == "OUT"]
    assert outbound["amount"] == round(inflow * 0.85)


def test_flow_through_is_balanced(composer: ViolationComposer) -> None:
    for _ in range(10):
        records = composer.compose("FLOW_THROUGH").records
        inflow = sum(r["amount"] for r in records if r["direction"] == "IN")
        outflow = sum(r["amount"] for r in records if r["direction"] == "OUT")
        assert abs(inflow - outflow) <= 0.1 * max(inflow, outflow)


def test_multi_account_structuring_uses_pooled_accounts(composer: ViolationComposer) -> None:
    records = composer.compose("MULTI_ACCOUNT_STRUCTURING").records
    assert sorted(r["accountId"] for r in records) == ["12345678", "87654321"]
    assert len({r["receiverAccount"] for r in records}) == 1


def test_high_risk_country_flag_has_greylist_beneficiary(composer: ViolationComposer) -> None:
    (lc,) = composer.compose("TBML-040").records
    assert lc["highRiskCountryFlag"] is True
    assert lc["beneficiaryCountry"] in FATF_GREYLIST
    beneficiary = next(p for p in lc["parties"] if p["partyRole"] == "BENEFICIARY")
    assert beneficiary["country"] == lc["beneficiaryCountry"]


RESIDENTIAL = re.compile(r"house|flat|apartment|বাড়ি", re.IGNORECASE)


@pytest.mark.parametrize(
    "code", [c for c in rule_codes() if c.startswith(("TBML-", "ADV-")) and c != "TBML-002"]
)
def test_trade_defaults_carry_no_residential_address(
    composer: ViolationComposer, code: str
) -> None:
    for lc in composer.compose(code).records:
        addresses = [lc["applicantAddress"], lc["beneficiaryAddress"]]
        addresses += [p["partyAddress"] for p in lc["parties"]]
        addresses += [inv.get("sellerAddress") for inv in lc.get("invoices", [])]
        assert not [a for a in addresses if a and RESIDENTIAL.search(a)], code


def test_residential_address_rule(composer: ViolationComposer) -> None:
    (lc,) = composer.compose("TBML-002").records
    assert RESIDENTIAL.search(lc["beneficiaryAddress"])
    beneficiary = next(p for p in lc["parties"] if p["partyRole"] == "BENEFICIARY")
    assert beneficiary["partyAddress"] == lc["beneficiaryAddress"]


def test_default_party_address_follows_country() -> None:
    faker = Faker()
    faker.seed_instance(5)
    f = RecordFactory(random.Random(5), faker, NOW)
    beneficiary = next(p for p in f.core_parties() if p["partyRole"] == "BENEFICIARY")
    assert beneficiary["country"] == "CN"
    assert beneficiary["partyAddress"].endswith("Industrial Rd, Shanghai")
    assert beneficiary["city"] == "Shanghai"
    dubai = f.party("BENEFICIARY", {"country": "AE"})
    assert dubai["partyAddress"].endswith(", Dubai")
    assert f.party("APPLICANT")["partyAddress"].endswith("Commercial Area, Dhaka")


def test_sanction_individual_mirrors_pooled_customer(composer: ViolationComposer) -> None:
    (entry,) = composer.compose("SANCTION_INDIVIDUAL").records
    assert entry["name"] == "Rahim Uddin"
    assert entry["aliases"] == ["Rahim Uddin", "Uddin Rahim", "Rehim Uddin"]
    assert entry["dateOfBirth"] == "1985-06-15"
    assert entry["nationality"] == ["Bangladesh"]
    assert entry["countryCodes"] == ["BD"]


def test_name_aliases() -> None:
    assert name_aliases("Ayesha Akter") == ["Ayesha Akter", "Akter Ayesha", "eyeshe ekter"]


def test_prerequisite_note(composer: ViolationComposer) -> None:
    assert composer.compose("PEP_MONITORING").note == PREREQUISITE_PEP


def test_quantity_batches_records(composer: ViolationComposer) -> None:
    result = composer.compose("CASH_THRESHOLD", quantity=3)
    assert result.record_count == 3
    assert result.explanation.startswith("Generated 3 batches (3 total records). Single cash")
    structuring = composer.compose("STRUCTURING", quantity=2)
    assert structuring.record_count == 6
    assert structuring.explanation.startswith("Generated 2 batches (6 total records). ")


@pytest.mark.parametrize(("quantity", "batches"), [(0, 1), (-3, 1), (1, 1), (5, 5), (500, 5)])
def test_quantity_is_clamped(composer: ViolationComposer, quantity: int, batches: int) -> None:
    assert composer.compose("CASH_THRESHOLD", quantity=quantity).record_count == batches


def test_unknown_rule(composer: ViolationComposer) -> None:
    with pytest.raises(UnknownRuleError, match="NOPE"):
        composer.compose("NOPE")


def test_empty_customer_pool_is_a_hard_failure(customer_pool, account_pool, rng, faker) -> None:
    composer = ViolationComposer(customer_pool, account_pool, rng, faker)
    with pytest.raises(PoolExhaustedError) as exc:
        composer.compose("CASH_THRESHOLD")
    assert str(exc.value) == CUSTOMER_POOL_REQUIRED
    assert exc.value.pool_name == "customer"


def test_empty_account_pool_uses_random_account(
    customer_pool, account_pool, bd_customer, rng, faker
) -> None:
    customer_pool.upsert(bd_customer)
    composer = ViolationComposer(customer_pool, account_pool, rng, faker)
    result = composer.compose("CASH_THRESHOLD")
    assert re.fullmatch(r"[1-9]\d{7}", result.records[0]["accountId"])
    assert result.note == RANDOM_ACCOUNT_NOTE
    # advisory note is kept alongside a rule prerequisite
    pep = composer.compose("PEP_MONITORING")
    assert pep.note == f"{RANDOM_ACCOUNT_NOTE} {PREREQUISITE_PEP}"


def test_required_account_pool(customer_pool, account_pool, bd_customer, rng, faker) -> None:
    customer_pool.upsert(bd_customer)
    composer = ViolationComposer(
        customer_pool, account_pool, rng, faker, require_account_pool=True
    )
    with pytest.raises(PoolExhaustedError, match=ACCOUNT_POOL_EMPTY) as exc:
        composer.compose("CASH_THRESHOLD")
    assert exc.value.pool_name == "account"


def test_composer_refuses_catalog_without_builder(
    seeded_pools, rng, faker, monkeypatch: pytest.MonkeyPatch
) -> None:
    customers, accounts = seeded_pools
    monkeypatch.delitem(SCENARIO_BUILDERS, "ADV-010")
    with pytest.raises(RuntimeError, match="ADV-010"):
        ViolationComposer(customers, accounts, rng, faker)


def test_duplicate_builder_registration_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate scenario builder"):
        scenario("CASH_THRESHOLD")(lambda f, actor: None)  # type: ignore[arg-type,return-value]


def test_record_factory_is_deterministic(bd_customer) -> None:
    def build():
        faker = Faker()
        faker.seed_instance(3)
        f = RecordFactory(random.Random(3), faker, NOW)
        return SCENARIO_BUILDERS["STRUCTURING"](f, Actor(bd_customer, "12345678"))

    assert build().records == build().records
