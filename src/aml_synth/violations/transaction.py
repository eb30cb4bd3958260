"""Transaction-monitoring scenarios: thresholds, structuring, velocity, flows, geography."""

from __future__ import annotations

from aml_synth.violations.records import (
    FATF_BLACKLIST,
    LANDLOCKED_COUNTRIES,
    PURPOSES,
    SANCTIONED_COUNTRIES,
    TAX_HAVENS,
    Actor,
    Built,
    Record,
    RecordFactory,
    scenario,
    total,
)

CTR_THRESHOLD = 1_000_000

PREREQUISITE_PEP = "PREREQUISITE: Customer must be flagged as PEP in the system."


# -- shapes shared by several rules -------------------------------------


def large_amount(
    f: RecordFactory,
    actor: Actor,
    amount: int,
    type_: str,
    payment_method: str,
    purpose: str | None = None,
) -> list[Record]:
    """One record from the actor carrying the violating amount."""
    return [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": amount,
                "type": type_,
                "direction": "IN",
                "paymentMethod": payment_method,
                "timestamp": f.hours_ago(1, 6),
                "purpose": purpose or f.choice(PURPOSES),
                "sender": f.name_of(actor.customer),
                "receiver": f.person_name(),
            },
        )
    ]


def structured_deposits(
    f: RecordFactory, actor: Actor, count: int, lo: int, hi: int, hours: float
) -> list[Record]:
    """`count` cash deposits in [lo, hi], one per equal slice of the last `hours` hours."""
    name = f.name_of(actor.customer)
    slot = hours / count
    return [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": f.amount(lo, hi),
                "type": "CASH_DEPOSIT",
                "direction": "IN",
                "paymentMethod": "Cash",
                "timestamp": f.hours_ago(i * slot, (i + 1) * slot),
                "sender": name,
                "receiver": name,
            },
        )
        for i in range(count)
    ]


def cumulative(
    f: RecordFactory, actor: Actor, target: int, count: int, hours: float
) -> list[Record]:
    """`count` inflows summing exactly to `target`, spread over the last `hours` hours."""
    per_txn = round(target / count) + f.amount(-10_000, 10_000)
    slot = hours / count
    return [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": target - per_txn * (count - 1) if i == count - 1 else per_txn,
                "type": f.choice(("CASH_DEPOSIT", "WIRE_TRANSFER", "CASH_WITHDRAWAL")),
                "direction": "IN",
                "paymentMethod": f.choice(("Cash", "Wire Transfer", "Transfer")),
                "timestamp": f.hours_ago(i * slot, (i + 1) * slot),
            },
        )
        for i in range(count)
    ]


def rapid_in_out(f: RecordFactory, actor: Actor, in_amount: int) -> list[Record]:
    """Wire in, then 91-96% of it wired out a few hours later."""
    name = f.name_of(actor.customer)
    out_amount = round(in_amount * f.ratio(0.91, 0.96))
    wire = {"type": "WIRE_TRANSFER", "paymentMethod": "Wire Transfer"}
    return [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                **wire,
                "amount": in_amount,
                "direction": "IN",
                "timestamp": f.hours_ago(8, 16),
                "sender": f.person_name(),
                "receiver": name,
            },
        ),
        f.txn(
            actor.customer_id,
            actor.account,
            {
                **wire,
                "amount": out_amount,
                "direction": "OUT",
                "timestamp": f.hours_ago(1, 6),
                "sender": name,
                "receiver": f.person_name(),
            },
        ),
    ]


def outbound_to(
    f: RecordFactory,
    actor: Actor,
    countries: tuple[str, ...],
    amount: int,
    payment_method: str = "Wire Transfer",
    purpose: str = "International Transfer",
) -> list[Record]:
    return [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": amount,
                "type": "WIRE_TRANSFER",
                "direction": "OUT",
                "paymentMethod": payment_method,
                "senderCountry": "BD",
                "receiverCountry": f.choice(countries),
                "purpose": purpose,
                "timestamp": f.hours_ago(1, 12),
            },
        )
    ]


def multi_country(
    f: RecordFactory,
    actor: Actor,
    countries: tuple[str, ...],
    count: int,
    type_: str = "WIRE_TRANSFER",
) -> list[Record]:
    """One outbound transfer to each of `count` distinct countries within 24h."""
    return [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": f.amount(200_000, 2_000_000),
                "type": type_,
                "direction": "OUT",
                "paymentMethod": "Wire Transfer",
                "senderCountry": "BD",
                "receiverCountry": country,
                "purpose": "International Transfer",
                "timestamp": f.hours_ago(0, 24),
            },
        )
        for country in f.pick_n(countries, count)
    ]


def _pct(part: int, whole: int) -> int:
    return round(part / whole * 100)


# -- cash ----------------------------------------------------------------


@scenario("CASH_THRESHOLD")
def cash_threshold(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(
        f, actor, f.amount(CTR_THRESHOLD * 1.1, CTR_THRESHOLD * 1.5), "CASH_DEPOSIT", "Cash"
    )
    who = actor.customer.customer_name_eng or actor.customer_id
    return Built(
        records,
        f"Single cash deposit of BDT {records[0]['amount']:,} exceeds CTR threshold "
        f"(BDT {CTR_THRESHOLD:,}). Customer: {who}.",
    )


@scenario("CASH_DEPOSIT_ANOMALY")
def cash_deposit_anomaly(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(f, actor, f.amount(600_000, 900_000), "CASH_DEPOSIT", "Cash")
    return Built(
        records,
        f"Large cash deposit of BDT {records[0]['amount']:,}, expected to exceed 200% of the "
        f"90-day average for customer {actor.customer_id}.",
    )


@scenario("CASH_VS_INSTRUMENT_RATIO")
def cash_vs_instrument_ratio(f: RecordFactory, actor: Actor) -> Built:
    records = [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": f.amount(50_000, 200_000),
                "type": "CASH_DEPOSIT",
                "direction": "IN",
                "paymentMethod": "Cash",
                "timestamp": f.hours_ago(0, 600),
            },
        )
        for _ in range(7)
    ]
    return Built(
        records,
        f"7 cash transactions out of 7 total (100% cash ratio > 80% threshold) within 30 days "
        f"for customer {actor.customer_id}.",
    )


@scenario("DENOMINATION_EXCHANGE")
def denomination_exchange(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(
        f,
        actor,
        f.amount(550_000, 800_000),
        "DENOMINATION_EXCHANGE",
        "Cash",
        purpose="Denomination exchange - small to large bills",
    )
    return Built(
        records,
        f"Denomination exchange of BDT {records[0]['amount']:,} exceeds BDT 500,000 threshold.",
    )


@scenario("ATM_CASH_EVASION")
def atm_cash_evasion(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(
        f, actor, f.amount(350_000, 500_000), "ATM_DEPOSIT", "ATM", purpose="ATM Cash Deposit"
    )
    return Built(
        records,
        f"ATM cash deposit of BDT {records[0]['amount']:,} exceeds BDT 300,000; "
        "possible staff avoidance.",
    )


@scenario("AUTO_CTR")
def auto_ctr(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(f, actor, f.amount(1_100_000, 2_000_000), "CASH_DEPOSIT", "Cash")
    return Built(
        records,
        f"Cash transaction of BDT {records[0]['amount']:,} triggers automatic CTR filing.",
    )


@scenario("CASH_INSTRUMENT_CONVERSION")
def cash_instrument_conversion(f: RecordFactory, actor: Actor) -> Built:
    cash = f.amount(500_000, 800_000)
    records = [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": round(cash / 3),
                "type": "CASH_DEPOSIT",
                "direction": "IN",
                "paymentMethod": "Cash",
                "timestamp": f.hours_ago(48, 120),
            },
        )
        for _ in range(3)
    ]
    records.append(
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": round(cash * 0.9),
                "type": "PAY_ORDER",
                "direction": "OUT",
                "paymentMethod": "Pay Order",
                "timestamp": f.hours_ago(1, 24),
                "purpose": "Purchase of pay order",
            },
        )
    )
    return Built(
        records,
        f"Cash deposits of ~BDT {cash:,} followed by pay order purchase of 90% within 168h.",
    )


@scenario("SAFE_DEPOSIT_SURGE")
def safe_deposit_surge(f: RecordFactory, actor: Actor) -> Built:
    records = [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": 0,
                "type": "SAFE_DEPOSIT",
                "direction": "IN",
                "paymentMethod": "Other",
                "timestamp": f.hours_ago(i * 24, (i + 1) * 24),
                "purpose": "Safe deposit box access",
            },
        )
        for i in range(4)
    ]
    return Built(records, "4 safe deposit box accesses in 7 days (threshold: >=3 per 168h).")


# -- structuring -----------------------------------------------------------


@scenario("STRUCTURING")
def structuring(f: RecordFactory, actor: Actor) -> Built:
    # strictly inside (90%, 99%) of the CTR threshold
    records = structured_deposits(f, actor, 3, 900_001, 989_999, 36)
    return Built(
        records,
        f"{len(records)} cash deposits each BDT 900K-990K (just below 1M CTR) within 48h. "
        f"Total: BDT {total(records):,}.",
    )


@scenario("AGGREGATE_STRUCTURING")
def aggregate_structuring(f: RecordFactory, actor: Actor) -> Built:
    records = structured_deposits(f, actor, 5, 200_000, 350_000, 40)
    return Built(
        records,
        f"{len(records)} small deposits aggregating BDT {total(records):,} "
        "(exceeds BDT 1M) within 48h.",
    )


@scenario("MULTI_ACCOUNT_STRUCTURING")
def multi_account_structuring(f: RecordFactory, actor: Actor) -> Built:
    if len(actor.accounts) >= 2:
        sources = f.pick_n(actor.accounts, 2)
    else:
        sources = [actor.account, f.account_number()]
    beneficiary = f.name_of(actor.customer)
    beneficiary_account = f.account_number()
    records = [
        f.txn(
            actor.customer_id,
            source,
            {
                "amount": f.amount(550_000, 700_000),
                "type": "WIRE_TRANSFER",
                "direction": "OUT",
                "paymentMethod": "Wire Transfer",
                "timestamp": f.hours_ago(1, 24),
                "receiver": beneficiary,
                "receiverAccount": beneficiary_account,
            },
        )
        for source in sources
    ]
    return Built(
        records,
        f"Transfers from {len(sources)} different accounts to same beneficiary totaling "
        f"BDT {total(records):,}.",
    )


@scenario("COORDINATED_STRUCTURING")
def coordinated_structuring(f: RecordFactory, actor: Actor) -> Built:
    customers = f.pick_n(actor.customers or (actor.customer,), 3)
    records = [
        f.txn(
            c.customer_id,
            actor.account,
            {
                "amount": f.amount(200_000, 350_000),
                "type": "CASH_DEPOSIT",
                "direction": "IN",
                "paymentMethod": "Cash",
                "timestamp": f.hours_ago(0, 1.5),
                "sender": f.name_of(c),
            },
        )
        for c in customers
    ]
    return Built(
        records,
        f"{len(customers)} customers depositing cash at same branch within 2 hours. "
        f"Total: BDT {total(records):,}.",
    )


# -- velocity and volume -------------------------------------------------------


@scenario("VELOCITY_COUNT")
def velocity_count(f: RecordFactory, actor: Actor) -> Built:
    name = f.name_of(actor.customer)
    records = [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": f.amount(5_000, 80_000),
                "type": f.choice(("CASH_DEPOSIT", "CASH_WITHDRAWAL", "WIRE_TRANSFER")),
                "direction": f.choice(("IN", "OUT")),
                "paymentMethod": f.choice(("Cash", "Wire Transfer", "Online")),
                "timestamp": f.hours_ago(0, 20),
                "sender": name,
            },
        )
        for _ in range(25)
    ]
    return Built(
        records,
        f"25 transactions within 24 hours (threshold: 20) for customer {actor.customer_id}.",
    )


@scenario("SUDDEN_VOLUME_INCREASE")
def sudden_volume_increase(f: RecordFactory, actor: Actor) -> Built:
    records = cumulative(f, actor, f.amount(5_000_000, 10_000_000), 15, 120)
    return Built(
        records,
        f"15 transactions totaling BDT {total(records):,}, designed to create a 300%+ spike "
        "over the prior week.",
        "Ensure prior week has minimal activity for this customer to trigger the 300% spike.",
    )


@scenario("WIRE_VELOCITY")
def wire_velocity(f: RecordFactory, actor: Actor) -> Built:
    beneficiaries = [f.person_name() for _ in range(3)]
    records = [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": f.amount(200_000, 800_000),
                "type": "WIRE_TRANSFER",
                "direction": "OUT",
                "paymentMethod": "Wire Transfer",
                "timestamp": f.hours_ago(i * 3, (i + 1) * 3),
                "receiver": beneficiaries[i % 3],
                "receiverAccount": f.account_number(),
            },
        )
        for i in range(7)
    ]
    return Built(
        records,
        "7 wire transfers to 3 different beneficiaries within 24h "
        "(threshold: >5 wires, >2 beneficiaries).",
    )


@scenario("SINGLE_AMOUNT")
def single_amount(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(
        f, actor, f.amount(5_500_000, 8_000_000), "WIRE_TRANSFER", "Wire Transfer"
    )
    return Built(
        records,
        f"Single transaction of BDT {records[0]['amount']:,} exceeds BDT 5,000,000 threshold.",
    )


@scenario("CUMULATIVE_DAILY")
def cumulative_daily(f: RecordFactory, actor: Actor) -> Built:
    records = cumulative(f, actor, f.amount(11_000_000, 15_000_000), 6, 20)
    return Built(
        records,
        f"6 transactions totaling BDT {total(records):,} in 24h (threshold: BDT 10,000,000).",
    )


@scenario("CUMULATIVE_WEEKLY")
def cumulative_weekly(f: RecordFactory, actor: Actor) -> Built:
    records = cumulative(f, actor, f.amount(26_000_000, 35_000_000), 12, 150)
    return Built(
        records,
        f"12 transactions totaling BDT {total(records):,} in 7 days "
        "(threshold: BDT 25,000,000).",
    )


# -- customer-profile rules (state owned by the monitoring system) -------------


@scenario("KYC_MISMATCH")
def kyc_mismatch(f: RecordFactory, actor: Actor) -> Built:
    records = cumulative(f, actor, f.amount(6_000_000, 10_000_000), 8, 600)
    return Built(
        records,
        f"BDT {total(records):,} in 30 days; rule checks if this exceeds 200% of the "
        "customer's declared profile.",
        "This rule depends on the customer's declared income/profile already existing "
        "in the system.",
    )


@scenario("NON_EARNING_ACTIVITY")
def non_earning_activity(f: RecordFactory, actor: Actor) -> Built:
    records = cumulative(f, actor, f.amount(600_000, 1_000_000), 4, 500)
    return Built(
        records,
        f"BDT {total(records):,} in 30 days for customer {actor.customer_id}.",
        "PREREQUISITE: Customer must have a non-earning occupation (Housewife, Student, "
        "Unemployed, Retired) in their profile.",
    )


@scenario("SUDDEN_LOAN_PAYOFF")
def sudden_loan_payoff(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(
        f,
        actor,
        f.amount(1_200_000, 2_000_000),
        "LOAN_PAYMENT",
        "Cash",
        purpose="Loan repayment",
    )
    return Built(
        records,
        f"Sudden loan payment of BDT {records[0]['amount']:,} "
        "(threshold: BDT 1,000,000 in 72h).",
    )


@scenario("THIRD_PARTY_UNEXPLAINED")
def third_party_unexplained(f: RecordFactory, actor: Actor) -> Built:
    records = [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": f.amount(600_000, 1_000_000),
                "type": "WIRE_TRANSFER",
                "direction": "IN",
                "paymentMethod": "Wire Transfer",
                "timestamp": f.hours_ago(2, 12),
                "sender": f.person_name(),
                "purpose": "",
            },
        )
    ]
    return Built(
        records,
        f"Third-party credit of BDT {records[0]['amount']:,} with no stated purpose.",
    )


@scenario("DOCUMENT_RELUCTANCE")
def document_reluctance(f: RecordFactory, actor: Actor) -> Built:
    records = cumulative(f, actor, f.amount(150_000, 300_000), 3, 500)
    return Built(
        records,
        f"Transactions totaling BDT {total(records):,} for customer with incomplete KYC.",
        "PREREQUISITE: Customer must have KYC status = INCOMPLETE/PENDING/REJECTED "
        "in the system.",
    )


@scenario("SHELL_COMPANY")
def shell_company(f: RecordFactory, actor: Actor) -> Built:
    records = cumulative(f, actor, f.amount(12_000_000, 20_000_000), 5, 200)
    return Built(
        records,
        f"BDT {total(records):,} volume in only {len(records)} active days within 90 days.",
        "PREREQUISITE: Customer must be a CORPORATE type with high-risk rating.",
    )


@scenario("PEP_MONITORING")
def pep_monitoring(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(f, actor, f.amount(150_000, 500_000), "WIRE_TRANSFER", "Wire Transfer")
    return Built(
        records,
        f"Transaction of BDT {records[0]['amount']:,} (PEP threshold: BDT 100,000).",
        PREREQUISITE_PEP,
    )


@scenario("PEP_LIFESTYLE")
def pep_lifestyle(f: RecordFactory, actor: Actor) -> Built:
    records = cumulative(f, actor, f.amount(6_000_000, 10_000_000), 8, 600)
    for r in records:
        r["direction"] = "OUT"
    return Built(
        records,
        f"BDT {total(records):,} outgoing spending in 30 days for PEP customer.",
        PREREQUISITE_PEP,
    )


@scenario("PEP_ASSOCIATE")
def pep_associate(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(
        f, actor, f.amount(500_000, 2_000_000), "WIRE_TRANSFER", "Wire Transfer"
    )
    return Built(
        records,
        f"Transfer of BDT {records[0]['amount']:,}; rule requires a customer relationship "
        "graph linking to a PEP.",
        "This rule depends on the customer relationship graph in the system.",
    )


@scenario("HIGH_RISK_CUSTOMER")
def high_risk_customer(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(f, actor, f.amount(300_000, 600_000), "WIRE_TRANSFER", "Wire Transfer")
    return Built(
        records,
        f"Transaction of BDT {records[0]['amount']:,} (high-risk threshold: BDT 250,000 = "
        "50% of normal BDT 500,000).",
        "PREREQUISITE: Customer must have HIGH/VERY_HIGH/CRITICAL risk rating.",
    )


@scenario("DORMANT_ACTIVATION")
def dormant_activation(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(f, actor, f.amount(150_000, 500_000), "CASH_DEPOSIT", "Cash")
    return Built(
        records,
        f"Deposit of BDT {records[0]['amount']:,} on account.",
        "PREREQUISITE: The account must have been dormant (no activity) for >=180 days "
        "in the system.",
    )


@scenario("NEW_ACCOUNT_ACTIVITY")
def new_account_activity(f: RecordFactory, actor: Actor) -> Built:
    records = cumulative(f, actor, f.amount(600_000, 1_200_000), 4, 48)
    return Built(
        records,
        f"BDT {total(records):,} activity on new account.",
        "PREREQUISITE: Account must be <=30 days old in the system.",
    )


@scenario("NGO_MISUSE")
def ngo_misuse(f: RecordFactory, actor: Actor) -> Built:
    records = [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": f.amount(300_000, 500_000),
                "type": "Payment",
                "direction": "OUT",
                "paymentMethod": "Wire Transfer",
                "timestamp": f.hours_ago(0, 600),
                "purpose": "Luxury vehicle purchase",
            },
        )
        for _ in range(3)
    ]
    records.append(
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": f.amount(100_000, 200_000),
                "type": "Payment",
                "direction": "OUT",
                "paymentMethod": "Transfer",
                "timestamp": f.hours_ago(0, 600),
                "purpose": "Program operational expenses",
            },
        )
    )
    return Built(
        records,
        "NGO spending: 75%+ on non-operational items (vehicles, travel) vs 25% on operations.",
        "PREREQUISITE: Customer must be an NGO/NPO type entity in the system.",
    )


@scenario("ADVERSE_MEDIA_TXN")
def adverse_media_txn(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(f, actor, f.amount(300_000, 600_000), "WIRE_TRANSFER", "Wire Transfer")
    return Built(
        records,
        f"Transaction of BDT {records[0]['amount']:,} for customer with adverse media flag "
        "(threshold: BDT 250,000).",
        "PREREQUISITE: Customer must have adverse_media_flag = true in the system.",
    )


# -- geography -------------------------------------------------------------------


@scenario("HIGH_RISK_COUNTRY")
def high_risk_country(f: RecordFactory, actor: Actor) -> Built:
    records = outbound_to(f, actor, FATF_BLACKLIST, f.amount(100_000, 1_000_000))
    return Built(
        records,
        f"Transfer to FATF blacklist country {records[0]['receiverCountry']} "
        f"(amount: BDT {records[0]['amount']:,}).",
    )


@scenario("TAX_HAVEN")
def tax_haven(f: RecordFactory, actor: Actor) -> Built:
    records = outbound_to(f, actor, TAX_HAVENS, f.amount(500_000, 3_000_000))
    return Built(
        records,
        f"Transfer to tax haven {records[0]['receiverCountry']} "
        f"(amount: BDT {records[0]['amount']:,}).",
    )


@scenario("LANDLOCKED_ANOMALY")
def landlocked_anomaly(f: RecordFactory, actor: Actor) -> Built:
    records = outbound_to(
        f,
        actor,
        LANDLOCKED_COUNTRIES,
        f.amount(200_000, 800_000),
        purpose="Shipping payment for goods transport",
    )
    return Built(
        records,
        f"Shipping-related payment to landlocked country {records[0]['receiverCountry']}; "
        "maritime shipping implausible.",
    )


@scenario("CROSS_BORDER_SUSPICIOUS")
def cross_border_suspicious(f: RecordFactory, actor: Actor) -> Built:
    records = multi_country(f, actor, ("AE", "SG", "HK", "MY", "TH"), 4)
    return Built(
        records,
        f"Cross-border transfers to {len(records)} different countries within 24h "
        "(threshold: >=3 countries).",
    )


@scenario("REMITTANCE_ANOMALY")
def remittance_anomaly(f: RecordFactory, actor: Actor) -> Built:
    records = multi_country(f, actor, ("AE", "MY", "SG", "SA", "QA"), 4, type_="REMITTANCE")
    return Built(
        records,
        f"Outbound remittances to {len(records)} different countries within 168h "
        "(threshold: >=3).",
    )


@scenario("SANCTIONED_COUNTRY_PAYMENT")
def sanctioned_country_payment(f: RecordFactory, actor: Actor) -> Built:
    records = outbound_to(f, actor, SANCTIONED_COUNTRIES, f.amount(100_000, 1_000_000))
    return Built(
        records,
        f"Payment to sanctioned country {records[0]['receiverCountry']}. "
        "Action: block_and_report.",
    )


@scenario("CORRESPONDENT_ANOMALY")
def correspondent_anomaly(f: RecordFactory, actor: Actor) -> Built:
    records = large_amount(
        f,
        actor,
        f.amount(55_000_000, 80_000_000),
        "NOSTRO",
        "Nostro Transfer",
        purpose="Nostro account settlement",
    )
    return Built(
        records,
        f"Correspondent banking transfer of BDT {records[0]['amount']:,} "
        "(threshold: BDT 50,000,000).",
    )


# -- SWIFT ---------------------------------------------------------------------------


def _swift(f: RecordFactory, actor: Actor, country: str, amount: int, timestamp: str) -> Record:
    return f.txn(
        actor.customer_id,
        actor.account,
        {
            "amount": amount,
            "type": "SWIFT",
            "direction": "OUT",
            "paymentMethod": "SWIFT",
            "senderCountry": "BD",
            "receiverCountry": country,
            "timestamp": timestamp,
            "purpose": "SWIFT Transfer",
        },
    )


@scenario("SWIFT_SANCTION_RT")
def swift_sanction_rt(f: RecordFactory, actor: Actor) -> Built:
    records = [
        _swift(
            f,
            actor,
            f.choice(SANCTIONED_COUNTRIES),
            f.amount(500_000, 5_000_000),
            f.hours_ago(0, 12),
        )
    ]
    return Built(
        records,
        f"SWIFT transfer to sanctioned country {records[0]['receiverCountry']}. Action: FREEZE.",
    )


@scenario("SWIFT_PATTERN_ANOMALY")
def swift_pattern_anomaly(f: RecordFactory, actor: Actor) -> Built:
    countries = f.pick_n(("AE", "SG", "HK", "GB", "DE", "JP", "AU", "CA"), 6)
    records = [
        _swift(
            f,
            actor,
            countries[i % 6],
            f.amount(200_000, 1_000_000),
            f.hours_ago(i * 12, (i + 1) * 12),
        )
        for i in range(12)
    ]
    return Built(
        records,
        "12 SWIFT transfers to 6 different countries within 168h "
        "(threshold: >=10 SWIFT, >=5 countries).",
    )


# -- flow patterns -----------------------------------------------------------------


@scenario("RAPID_IN_OUT")
def rapid_in_out_scenario(f: RecordFactory, actor: Actor) -> Built:
    records = rapid_in_out(f, actor, f.amount(1_200_000, 2_000_000))
    first, second = records[0]["amount"], records[1]["amount"]
    return Built(
        records,
        f"BDT {first:,} credit followed by BDT {second:,} debit "
        f"({_pct(second, first)}%) within 24h.",
    )


@scenario("SAME_DAY_IN_OUT")
def same_day_in_out(f: RecordFactory, actor: Actor) -> Built:
    records = rapid_in_out(f, actor, f.amount(600_000, 1_000_000))
    first, second = records[0]["amount"], records[1]["amount"]
    return Built(
        records,
        f"Same-day in BDT {first:,} / out BDT {second:,} ({_pct(second, first)}% matching).",
    )


@scenario("FUNNEL_ACCOUNT")
def funnel_account(f: RecordFactory, actor: Actor) -> Built:
    records = [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": f.amount(80_000, 180_000),
                "type": "WIRE_TRANSFER",
                "direction": "IN",
                "paymentMethod": "Wire Transfer",
                "timestamp": f.hours_ago(24 + i * 12, 36 + i * 12),
                "sender": f.person_name(),
                "senderAccount": f.account_number(),
            },
        )
        for i in range(6)
    ]
    inflow = total(records)
    records.append(
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": round(inflow * 0.85),
                "type": "WIRE_TRANSFER",
                "direction": "OUT",
                "paymentMethod": "Wire Transfer",
                "timestamp": f.hours_ago(1, 6),
                "receiver": f.person_name(),
                "receiverCountry": f.choice(("AE", "SG", "HK")),
            },
        )
    )
    return Built(
        records,
        f"{len(records) - 1} inbound transfers from different senders (BDT {inflow:,}) "
        "consolidated into 1 large outbound (funnel pattern).",
    )


@scenario("FLOW_THROUGH")
def flow_through(f: RecordFactory, actor: Actor) -> Built:
    wire = {"type": "WIRE_TRANSFER", "paymentMethod": "Wire Transfer"}
    records: list[Record] = []
    inflow = outflow = 0
    for i in range(25):
        amt = f.amount(40_000, 120_000)
        credit = inflow <= outflow or f.rng.random() > 0.5
        if credit:
            inflow += amt
        else:
            outflow += amt
        records.append(
            f.txn(
                actor.customer_id,
                actor.account,
                {
                    **wire,
                    "amount": amt,
                    "direction": "IN" if credit else "OUT",
                    "timestamp": f.hours_ago(i * 24, (i + 1) * 24),
                },
            )
        )
    # top up the lighter side so in/out end within 10% of each other
    gap = abs(inflow - outflow)
    if gap > 0.1 * max(inflow, outflow):
        records.append(
            f.txn(
                actor.customer_id,
                actor.account,
                {
                    **wire,
                    "amount": gap - f.amount(1_000, 10_000),
                    "direction": "OUT" if outflow < inflow else "IN",
                    "timestamp": f.hours_ago(0, 12),
                },
            )
        )
    return Built(
        records,
        f"{len(records)} transactions with near-balanced in/out flow; "
        "flow-through account pattern.",
    )


@scenario("ROUND_TRIP")
def round_trip(f: RecordFactory, actor: Actor) -> Built:
    counterparty = f.person_name()
    counter_account = f.account_number()
    base = f.amount(500_000, 2_000_000)
    legs = (
        ("OUT", 1.0, 1.0, 480, 600),
        ("IN", 0.96, 1.04, 360, 480),
        ("OUT", 0.97, 1.03, 200, 300),
        ("IN", 0.95, 1.05, 50, 150),
    )
    records = []
    for direction, lo, hi, h_lo, h_hi in legs:
        if direction == "OUT":
            side = {"receiver": counterparty, "receiverAccount": counter_account}
        else:
            side = {"sender": counterparty, "senderAccount": counter_account}
        records.append(
            f.txn(
                actor.customer_id,
                actor.account,
                {
                    **side,
                    "amount": round(base * f.ratio(lo, hi)),
                    "type": "WIRE_TRANSFER",
                    "direction": direction,
                    "paymentMethod": "Wire Transfer",
                    "timestamp": f.hours_ago(h_lo, h_hi),
                },
            )
        )
    return Built(
        records,
        "Circular fund flow: 2 round-trips with same counterparty at +/-5% amounts "
        "within 30 days.",
    )


@scenario("SMALL_DEPOSIT_LARGE_WIRE")
def small_deposit_large_wire(f: RecordFactory, actor: Actor) -> Built:
    deposits = [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": f.amount(80_000, 190_000),
                "type": "CASH_DEPOSIT",
                "direction": "IN",
                "paymentMethod": "Cash",
                "timestamp": f.hours_ago(24 + i * 18, 36 + i * 18),
            },
        )
        for i in range(6)
    ]
    deposited = total(deposits)
    wire = f.txn(
        actor.customer_id,
        actor.account,
        {
            "amount": round(deposited * 0.85),
            "type": "WIRE_TRANSFER",
            "direction": "OUT",
            "paymentMethod": "Wire Transfer",
            "timestamp": f.hours_ago(1, 12),
            "receiverCountry": f.choice(("AE", "MY", "SG")),
            "purpose": "Family remittance",
        },
    )
    return Built(
        [*deposits, wire],
        f"{len(deposits)} small cash deposits totaling BDT {deposited:,} -> 1 international "
        f"wire of BDT {wire['amount']:,}. TF indicator.",
    )


@scenario("COMPLEX_CHAIN")
def complex_chain(f: RecordFactory, actor: Actor) -> Built:
    parties = [f.name_of(actor.customer)] + [f.person_name() for _ in range(3)]
    countries = ("BD", "AE", "SG", "HK")
    base = f.amount(1_000_000, 3_000_000)
    records = [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": round(base * f.ratio(0.92, 1.08)),
                "type": "WIRE_TRANSFER",
                "direction": "OUT" if hop == 0 else "IN",
                "paymentMethod": "Wire Transfer",
                "timestamp": f.hours_ago(hop * 72, (hop + 1) * 72),
                "sender": parties[hop],
                "receiver": parties[hop + 1],
                "senderCountry": countries[hop],
                "receiverCountry": countries[hop + 1],
            },
        )
        for hop in range(3)
    ]
    touched = {r["senderCountry"] for r in records} | {r["receiverCountry"] for r in records}
    return Built(
        records, f"{len(records)}-hop transfer chain across {len(touched)} countries."
    )


@scenario("STR_COMPOSITE")
def str_composite(f: RecordFactory, actor: Actor) -> Built:
    high_risk = outbound_to(f, actor, FATF_BLACKLIST, f.amount(2_000_000, 3_000_000))
    cash = [
        f.txn(
            actor.customer_id,
            actor.account,
            {
                "amount": f.amount(100_000, 500_000),
                "type": "CASH_DEPOSIT",
                "paymentMethod": "Cash",
                "timestamp": f.hours_ago(0, 600),
            },
        )
        for _ in range(8)
    ]
    international = multi_country(f, actor, ("AE", "SG", "HK", "MY", "TR", "KE"), 6)
    records = [*high_risk, *cash, *international]
    return Built(
        records,
        "Composite STR indicators: high-risk country txns, 80%+ cash ratio, 6+ countries, "
        f"high volume. {len(records)} total transactions.",
    )
