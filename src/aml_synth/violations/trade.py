"""Trade-based money laundering scenarios over letters of credit.

Each builder overrides exactly the LC sub-fields its rule inspects; everything
else keeps the innocuous defaults from RecordFactory.lc.
"""

from __future__ import annotations

from aml_synth.violations.records import (
    BMPE_CORRIDORS,
    FATF_BLACKLIST,
    FATF_GREYLIST,
    FTZ_PORTS,
    HIGH_RISK_GOODS_KEYWORDS,
    SANCTIONED_COUNTRIES,
    SHELL_JURISDICTIONS,
    Actor,
    Built,
    Record,
    RecordFactory,
    scenario,
)


def _one(f: RecordFactory, actor: Actor, overrides: Record, explanation: str) -> Built:
    return Built([f.lc(actor, overrides)], explanation)


# -- parties and structure (TBML-001..013) -----------------------------------


@scenario("TBML-001")
def related_party(f: RecordFactory, actor: Actor) -> Built:
    shared = f.address()
    c = actor.customer
    applicant = f"{c.customer_name_eng} Trading" if c.customer_name_eng else f.company()
    overrides = {
        "applicantName": applicant,
        "applicantAddress": shared,
        "beneficiaryAddress": shared,
        "parties": f.core_parties(
            applicant={"partyName": applicant, "partyAddress": shared},
            beneficiary={"partyAddress": shared},
        ),
    }
    return _one(
        f, actor, overrides, "Applicant and beneficiary share the same address: related party."
    )


@scenario("TBML-002")
def residential_address(f: RecordFactory, actor: Actor) -> Built:
    residential = "House 42, Flat 3B, Apartment Complex, Dhanmondi, Dhaka"
    overrides = {
        "beneficiaryAddress": residential,
        "parties": f.core_parties(beneficiary={"partyAddress": residential}),
    }
    return _one(
        f,
        actor,
        overrides,
        "Beneficiary address contains residential keywords (House, Flat, Apartment).",
    )


@scenario("TBML-003")
def short_validity(f: RecordFactory, actor: Actor) -> Built:
    lc = f.lc(actor, {"issueDate": f.days_ago(0), "expiryDate": f.days_ahead(5)})
    return Built(
        [lc],
        f"LC validity < 7 days (issued {lc['issueDate']}, expires {lc['expiryDate']}); "
        "extreme time pressure.",
    )


@scenario("TBML-004")
def pep_applicant(f: RecordFactory, actor: Actor) -> Built:
    parties = f.core_parties(applicant={"pepFlag": True, "riskRating": "HIGH"})
    return _one(f, actor, {"parties": parties}, "LC applicant has PEP flag set.")


@scenario("TBML-005")
def unexplained_intermediary(f: RecordFactory, actor: Actor) -> Built:
    parties = f.core_parties()
    parties.insert(
        2, f.party("BROKER", {"partyAddress": "", "country": "", "partyName": "Unknown Agent"})
    )
    return _one(
        f,
        actor,
        {"parties": parties},
        "Broker/intermediary party with missing address and country.",
    )


@scenario("TBML-006")
def too_many_intermediaries(f: RecordFactory, actor: Actor) -> Built:
    parties = f.core_parties() + [
        f.party("BROKER", {"country": "SG"}),
        f.party("FREIGHT_FORWARDER", {"country": "AE"}),
        f.party("INTERMEDIARY", {"country": "HK"}),
        f.party("THIRD_PARTY_BENEFICIARY", {"country": "MY"}),
    ]
    return _one(
        f,
        actor,
        {"parties": parties},
        f"LC has {len(parties)} parties including 4 non-core intermediaries (threshold: >3).",
    )


@scenario("TBML-007")
def complex_structure(f: RecordFactory, actor: Actor) -> Built:
    parties = f.core_parties() + [
        f.party("CONFIRMING_BANK", {"partyType": "BANK", "country": "SG"}),
        f.party("BROKER", {"country": "AE"}),
    ]
    overrides = {"transferableLc": True, "transshipmentAllowed": True, "parties": parties}
    return _one(
        f,
        actor,
        overrides,
        "LC is transferable with transshipment allowed and 5 parties across 4 countries: "
        "complex structure.",
    )


@scenario("TBML-008")
def goods_outside_profile(f: RecordFactory, actor: Actor) -> Built:
    overrides = {"goodsDescription": "Live cattle and livestock", "hsCode": "0102"}
    return _one(
        f, actor, overrides, "LC goods (livestock) unlikely to match customer trade profile."
    )


@scenario("TBML-009")
def non_standard_terms(f: RecordFactory, actor: Actor) -> Built:
    goods = (
        "Various goods as per proforma invoice - assignable - bearer instrument - "
        "without recourse to drawer"
    )
    return _one(
        f,
        actor,
        {"goodsDescription": goods},
        'LC contains suspicious terms: "assignable", "bearer instrument", "without recourse".',
    )


@scenario("TBML-010")
def frequent_amendment(f: RecordFactory, actor: Actor) -> Built:
    amendments = [
        f.amendment(
            {
                "amendmentNumber": i + 1,
                "frequentAmendmentFlag": i >= 2,
                "suspiciousChangeFlag": i >= 3,
                "amendmentType": f.choice(("AMOUNT", "BENEFICIARY", "TERMS", "EXPIRY", "GOODS")),
            }
        )
        for i in range(5)
    ]
    return _one(
        f,
        actor,
        {"status": "AMENDED", "amendments": amendments},
        "LC has 5 amendments (threshold: >=3 medium, >=5 high).",
    )


@scenario("TBML-011")
def shell_company_beneficiary(f: RecordFactory, actor: Actor) -> Built:
    country = f.choice(SHELL_JURISDICTIONS)
    overrides = {
        "beneficiaryCountry": country,
        "parties": f.core_parties(
            beneficiary={"country": country, "highRiskJurisdiction": True}
        ),
    }
    return _one(
        f, actor, overrides, f"Beneficiary registered in shell jurisdiction: {country}."
    )


@scenario("TBML-012")
def guarantee_without_reference(f: RecordFactory, actor: Actor) -> Built:
    return _one(
        f,
        actor,
        {"lcType": "STANDBY", "contractReference": ""},
        "Standby LC (guarantee) without underlying contract reference.",
    )


@scenario("TBML-013")
def fake_underlying(f: RecordFactory, actor: Actor) -> Built:
    return _one(
        f,
        actor,
        {"status": "OPENED", "invoices": [], "shipments": []},
        "Active LC with zero invoices and zero shipments; possible fake trade.",
    )


# -- pricing and payment (TBML-014..028) -----------------------------------------


def _priced(f: RecordFactory, actor: Actor, invoice: Record, explanation: str) -> Built:
    invoice = {"priceAnomalyScore": 80, "marketPriceRef": 500, **invoice}
    overrides = {"priceAnomalyFlag": True, "invoices": [f.invoice(invoice)]}
    return _one(f, actor, overrides, explanation)


@scenario("TBML-014")
def unusual_pricing(f: RecordFactory, actor: Actor) -> Built:
    return _priced(
        f,
        actor,
        {"priceDeviation": 65, "unitPrice": 2500},
        "Invoice unit price deviates >50% from market reference price.",
    )


@scenario("TBML-015")
def under_invoicing(f: RecordFactory, actor: Actor) -> Built:
    return _priced(
        f,
        actor,
        {"priceDeviation": 85, "underInvoicingFlag": True, "unitPrice": 50},
        "Invoice flagged for under-invoicing (unit price 10% of market).",
    )


@scenario("TBML-016")
def over_invoicing(f: RecordFactory, actor: Actor) -> Built:
    return _priced(
        f,
        actor,
        {"priceDeviation": 85, "overInvoicingFlag": True, "unitPrice": 5000},
        "Invoice flagged for over-invoicing (unit price 10x market).",
    )


@scenario("TBML-017")
def excessive_charges(f: RecordFactory, actor: Actor) -> Built:
    amount = 500_000
    invoice = f.invoice(
        {
            "totalAmount": amount,
            "freightAmount": round(amount * 0.10),
            "insuranceAmount": round(amount * 0.08),
            "taxAmount": round(amount * 0.05),
        }
    )
    return _one(
        f,
        actor,
        {"amount": amount, "invoices": [invoice]},
        "Freight + insurance + tax charges reach 23% of LC value (threshold: 15%).",
    )


@scenario("TBML-018")
def double_invoicing(f: RecordFactory, actor: Actor) -> Built:
    seller = f.company()
    amount = f.amount(100_000, 500_000)
    invoice = {"sellerName": seller, "totalAmount": amount, "netAmount": amount}
    return _one(
        f,
        actor,
        {"invoices": [f.invoice(invoice), f.invoice(invoice)]},
        "Two invoices with identical seller and amount: double invoicing.",
    )


@scenario("TBML-019")
def inconsistent_payment_terms(f: RecordFactory, actor: Actor) -> Built:
    return _one(
        f,
        actor,
        {"paymentTerms": "AT_SIGHT", "tenorDays": 90},
        "Payment terms say AT_SIGHT but tenor is 90 days: inconsistent.",
    )


@scenario("TBML-020")
def third_party_payment(f: RecordFactory, actor: Actor) -> Built:
    return _one(
        f,
        actor,
        {"paymentToThirdParty": True},
        "Payment directed to third party (paymentToThirdParty = true).",
    )


@scenario("TBML-021")
def payment_country_mismatch(f: RecordFactory, actor: Actor) -> Built:
    return _one(
        f,
        actor,
        {"beneficiaryCountry": "CN", "paymentCountry": "AE"},
        "Payment country (AE) differs from beneficiary country (CN).",
    )


@scenario("TBML-022")
def last_minute_change(f: RecordFactory, actor: Actor) -> Built:
    amendment = f.amendment(
        {
            "amendmentType": "BENEFICIARY",
            "suspiciousChangeFlag": True,
            "reason": "Change of beneficiary bank account and payment routing",
        }
    )
    return _one(
        f,
        actor,
        {"amendments": [amendment]},
        "Suspicious amendment changing beneficiary bank routing.",
    )


@scenario("TBML-023")
def applicant_controls_payment(f: RecordFactory, actor: Actor) -> Built:
    goods = (
        "Electronic components as per contract - payment subject to applicant approval "
        "and buyer discretion"
    )
    return _one(
        f,
        actor,
        {"goodsDescription": goods},
        'Terms contain "applicant approval" and "buyer discretion" clauses.',
    )


@scenario("TBML-024")
def early_guarantee_claim(f: RecordFactory, actor: Actor) -> Built:
    overrides = {
        "lcType": "STANDBY",
        "issueDate": f.days_ago(15),
        "status": "UTILIZED",
        "utilizedAmount": f.amount(300_000, 800_000),
    }
    return _one(
        f, actor, overrides, "Standby LC utilized within 15 days of issue (threshold: <30 days)."
    )


@scenario("TBML-025")
def fraudulent_undertaking(f: RecordFactory, actor: Actor) -> Built:
    overrides = {
        "lcType": "STANDBY",
        "collateralAmount": 0,
        "amount": f.amount(5_000_000, 20_000_000),
    }
    return _one(f, actor, overrides, "Letter of Undertaking with zero collateral amount.")


@scenario("TBML-026")
def phantom_shipment(f: RecordFactory, actor: Actor) -> Built:
    return _one(
        f,
        actor,
        {"status": "OPENED", "shipments": [], "documents": []},
        "Active LC with empty shipments and empty documents: phantom shipment.",
    )


@scenario("TBML-027")
def unclear_goods(f: RecordFactory, actor: Actor) -> Built:
    return _one(
        f,
        actor,
        {"goodsDescription": "General merchandise and various goods as described"},
        'Vague goods description: "General merchandise and various goods".',
    )


@scenario("TBML-028")
def pattern_deviation(f: RecordFactory, actor: Actor) -> Built:
    lc = f.lc(actor, {"amount": f.amount(5_000_000, 15_000_000)})
    return Built(
        [lc],
        f"LC amount BDT {lc['amount']:,}, expected to exceed the customer average by >50%.",
    )


# -- goods and shipping (TBML-029..038) ------------------------------------------


@scenario("TBML-029")
def dual_use_goods(f: RecordFactory, actor: Actor) -> Built:
    overrides = {
        "dualUseGoodsFlag": True,
        "goodsDescription": "Centrifuge equipment and precision machining tools for industrial use",
        "hsCode": "8456",
    }
    return _one(
        f,
        actor,
        overrides,
        "Dual-use goods flag set. Goods: centrifuge equipment and precision machining tools.",
    )


@scenario("TBML-030")
def hs_code_mismatch(f: RecordFactory, actor: Actor) -> Built:
    return _one(
        f,
        actor,
        {"hsCode": "8471", "invoices": [f.invoice({"hsCode": "6204"})]},
        "LC HS code 8471 (computers) but invoice HS code 6204 (clothing): mismatch.",
    )


@scenario("TBML-031")
def quantity_overload(f: RecordFactory, actor: Actor) -> Built:
    # one container holds 28,000 KG; 10% tolerance gives 30,800
    shipment = f.shipment({"totalWeight": 35_000, "weightUnit": "KG", "packageCount": 1})
    return _one(
        f,
        actor,
        {"shipments": [shipment]},
        "Declared weight 35,000 KG in 1 package exceeds capacity "
        "(28,000 x 1 x 1.1 = 30,800 KG).",
    )


@scenario("TBML-032")
def high_risk_goods(f: RecordFactory, actor: Actor) -> Built:
    keyword = f.choice(HIGH_RISK_GOODS_KEYWORDS)
    return _one(
        f,
        actor,
        {"goodsDescription": f"Refined {keyword} bars and {keyword} products for export"},
        f'Goods description contains high-risk keyword "{keyword}".',
    )


@scenario("TBML-033")
def circuitous_route(f: RecordFactory, actor: Actor) -> Built:
    shipment = f.shipment(
        {
            "circuitousRouteFlag": True,
            "originCountry": "CN",
            "destinationCountry": "BD",
            "transshipmentPort": "Durban",
        }
    )
    return _one(
        f,
        actor,
        {"shipments": [shipment]},
        "Circuitous route flag set: CN->BD shipment via Durban (South Africa).",
    )


@scenario("TBML-034")
def unjustified_transshipment(f: RecordFactory, actor: Actor) -> Built:
    shipment = f.shipment(
        {"transshipmentPort": "Colombo", "originCountry": "CN", "destinationCountry": "BD"}
    )
    return _one(
        f,
        actor,
        {"transshipmentAllowed": True, "shipments": [shipment]},
        "Transshipment via Colombo with no documented justification.",
    )


@scenario("TBML-035")
def unclear_shipping(f: RecordFactory, actor: Actor) -> Built:
    return _one(
        f,
        actor,
        {"shipmentMode": "", "portOfLoading": "", "portOfDischarge": ""},
        "Missing shipping mode, port of loading, and port of discharge.",
    )


@scenario("TBML-036")
def origin_mismatch(f: RecordFactory, actor: Actor) -> Built:
    shipment = f.shipment({"originCountry": "VN", "destinationCountry": "BD"})
    return _one(
        f,
        actor,
        {"beneficiaryCountry": "CN", "shipments": [shipment]},
        "Beneficiary in CN but shipment origin is VN: country mismatch.",
    )


@scenario("TBML-037")
def untrackable_vessel(f: RecordFactory, actor: Actor) -> Built:
    shipment = f.shipment({"vesselName": "", "vesselImo": 0})
    return _one(
        f,
        actor,
        {"shipmentMode": "SEA", "shipments": [shipment]},
        "Sea shipment with empty vessel name and zero IMO: untrackable.",
    )


@scenario("TBML-038")
def missing_containers(f: RecordFactory, actor: Actor) -> Built:
    shipment = f.shipment({"containerNumbers": [], "packageCount": 50})
    return _one(
        f,
        actor,
        {"shipments": [shipment]},
        "50 packages declared but no container numbers provided.",
    )


# -- jurisdictions and screening (TBML-039..041) ---------------------------------


@scenario("TBML-039")
def fatf_blacklist_beneficiary(f: RecordFactory, actor: Actor) -> Built:
    country = f.choice(FATF_BLACKLIST)
    overrides = {
        "beneficiaryCountry": country,
        "highRiskCountryFlag": True,
        "parties": f.core_parties(
            beneficiary={
                "country": country,
                "highRiskJurisdiction": True,
                "riskRating": "CRITICAL",
            }
        ),
    }
    return _one(f, actor, overrides, f"Beneficiary from FATF blacklist country: {country}.")


@scenario("TBML-040")
def high_risk_country_flag(f: RecordFactory, actor: Actor) -> Built:
    # greylist beneficiary keeps the flag consistent with the parties
    country = f.choice(FATF_GREYLIST)
    overrides = {
        "highRiskCountryFlag": True,
        "beneficiaryCountry": country,
        "parties": f.core_parties(
            beneficiary={"country": country, "highRiskJurisdiction": True, "riskRating": "HIGH"}
        ),
    }
    return _one(
        f,
        actor,
        overrides,
        f"LC highRiskCountryFlag is set to true (beneficiary country {country}).",
    )


@scenario("TBML-041")
def sanctioned_entity(f: RecordFactory, actor: Actor) -> Built:
    parties = f.core_parties(
        beneficiary={
            "screeningResult": "HIT",
            "sanctionScreened": True,
            "riskRating": "CRITICAL",
            "country": f.choice(SANCTIONED_COUNTRIES),
        }
    )
    return _one(
        f, actor, {"parties": parties}, "Beneficiary screening result: HIT (sanctioned entity)."
    )


# -- documents (TBML-042..048) ---------------------------------------------------


@scenario("TBML-042")
def document_discrepancy(f: RecordFactory, actor: Actor) -> Built:
    overrides = {
        "invoices": [
            f.invoice(
                {
                    "discrepancyFound": True,
                    "discrepancyDetails": "Goods description does not match BL",
                }
            )
        ],
        "documents": [
            f.document(
                "COMMERCIAL_INVOICE",
                {
                    "discrepancyFound": True,
                    "discrepancyNotes": "Amount mismatch between invoice and LC",
                },
            )
        ],
    }
    return _one(f, actor, overrides, "Invoice and document have discrepancyFound = true.")


@scenario("TBML-043")
def clause_abuse(f: RecordFactory, actor: Actor) -> Built:
    goods = (
        "Goods per contract - all discrepancy acceptable - documents may be presented "
        "in any form"
    )
    return _one(
        f,
        actor,
        {"goodsDescription": goods},
        'LC goods description includes "all discrepancy acceptable" clause.',
    )


@scenario("TBML-044")
def essential_documents_missing(f: RecordFactory, actor: Actor) -> Built:
    return _one(
        f,
        actor,
        {"status": "DOCUMENTS_RECEIVED", "documents": [f.document("PACKING_LIST")]},
        "Only packing list present: missing bill of lading, invoice, and certificate of origin.",
    )


@scenario("TBML-045")
def excessive_waivers(f: RecordFactory, actor: Actor) -> Built:
    amount = 500_000
    overrides = {
        "amount": amount,
        "utilizedAmount": round(amount * 1.15),
        "balanceAmount": -round(amount * 0.15),
    }
    return _one(
        f, actor, overrides, "Utilized amount is 115% of LC amount (threshold: 110%)."
    )


@scenario("TBML-046")
def excessive_discrepancy_acceptance(f: RecordFactory, actor: Actor) -> Built:
    notes = (
        ("COMMERCIAL_INVOICE", "Minor amount discrepancy"),
        ("BILL_OF_LADING", "Date inconsistency"),
        ("CERTIFICATE_OF_ORIGIN", "Country code mismatch"),
        ("PACKING_LIST", "Weight discrepancy"),
    )
    documents = [
        f.document(doc_type, {"discrepancyFound": True, "discrepancyNotes": note})
        for doc_type, note in notes
    ]
    return _one(
        f,
        actor,
        {"documents": documents},
        f"{len(documents)} documents with discrepancies accepted (threshold: >3).",
    )


@scenario("TBML-047")
def altered_documents(f: RecordFactory, actor: Actor) -> Built:
    document = f.document(
        "COMMERCIAL_INVOICE",
        {
            "discrepancyFound": True,
            "verified": False,
            "discrepancyNotes": "Document appears altered",
        },
    )
    return _one(
        f,
        actor,
        {"documents": [document]},
        "Document has discrepancy AND failed verification; possibly altered.",
    )


@scenario("TBML-048")
def reused_documents(f: RecordFactory, actor: Actor) -> Built:
    digest = f.token(64)
    documents = [
        f.document("BILL_OF_LADING", {"documentHash": digest}),
        f.document("COMMERCIAL_INVOICE", {"documentHash": digest}),
    ]
    return _one(
        f,
        actor,
        {"documents": documents},
        "Two documents share the same hash: document reuse.",
    )


# -- advanced typologies (ADV-001..010) --------------------------------------------


@scenario("ADV-001")
def carousel_trading(f: RecordFactory, actor: Actor) -> Built:
    import_leg = {"lcType": "IMPORT", "originCountry": "CN", "destinationCountry": "BD"}
    export_leg = {"lcType": "EXPORT", "originCountry": "BD", "destinationCountry": "CN"}
    records = [
        f.lc(actor, {**import_leg, "issueDate": f.days_ago(80)}),
        f.lc(actor, {**export_leg, "issueDate": f.days_ago(50)}),
        f.lc(actor, {**import_leg, "issueDate": f.days_ago(20)}),
    ]
    return Built(
        records,
        f"{len(records)} LCs between BD<->CN in alternating directions within 90 days: "
        "carousel trading.",
    )


@scenario("ADV-002")
def trade_layering(f: RecordFactory, actor: Actor) -> Built:
    parties = [
        f.party("APPLICANT", {"country": "BD"}),
        f.party("BENEFICIARY", {"country": "AE"}),
        f.party("BROKER", {"country": "SG"}),
        f.party("FREIGHT_FORWARDER", {"country": "PA"}),
        f.party("THIRD_PARTY_BENEFICIARY", {"country": "HK"}),
        f.party("ISSUING_BANK", {"partyType": "BANK", "country": "BD"}),
    ]
    countries = sorted({p["country"] for p in parties})
    return _one(
        f,
        actor,
        {"parties": parties},
        f"LC with {len(parties)} parties across {len(countries)} jurisdictions "
        f"({', '.join(countries)}): trade-based layering.",
    )


@scenario("ADV-003")
def free_trade_zone_abuse(f: RecordFactory, actor: Actor) -> Built:
    port = f.choice(FTZ_PORTS)
    shipment = f.shipment({"transshipmentPort": port, "portOfLoading": port})
    return _one(
        f,
        actor,
        {"shipments": [shipment], "transshipmentAllowed": True},
        f"Trade routed through Free Trade Zone port: {port}.",
    )


@scenario("ADV-004")
def mirror_trade(f: RecordFactory, actor: Actor) -> Built:
    amount = f.amount(500_000, 2_000_000)
    records = [
        f.lc(
            actor,
            {
                "lcType": "IMPORT",
                "amount": amount,
                "originCountry": "CN",
                "destinationCountry": "BD",
                "issueDate": f.days_ago(3),
            },
        ),
        f.lc(
            actor,
            {
                "lcType": "EXPORT",
                "amount": round(amount * f.ratio(0.96, 1.04)),
                "originCountry": "BD",
                "destinationCountry": "CN",
                "issueDate": f.days_ago(1),
            },
        ),
    ]
    return Built(
        records,
        "Mirror trade: 2 LCs with matching amounts (+/-4%) in opposite directions within 7 days.",
    )


@scenario("ADV-005")
def bmpe_pattern(f: RecordFactory, actor: Actor) -> Built:
    origin, destination = f.choice(BMPE_CORRIDORS)
    overrides = {
        "applicantCountry": origin,
        "beneficiaryCountry": destination,
        "originCountry": origin,
        "destinationCountry": destination,
    }
    return _one(f, actor, overrides, f"Trade on BMPE corridor: {origin} -> {destination}.")


@scenario("ADV-006")
def quantity_misrepresentation(f: RecordFactory, actor: Actor) -> Built:
    quantity = 1000
    return _one(
        f,
        actor,
        {"quantity": quantity, "invoices": [f.invoice({"quantity": round(quantity * 1.25)})]},
        "Invoice quantity 25% higher than LC declared quantity (threshold: >10%).",
    )


@scenario("ADV-007")
def lcaf_excess(f: RecordFactory, actor: Actor) -> Built:
    lcaf_value = 500_000
    return _one(
        f,
        actor,
        {"amount": round(lcaf_value * 1.12)},
        f"LC amount exceeds authorized LCAF value of {lcaf_value:,} by 12% (threshold: >5%).",
    )


@scenario("ADV-008")
def export_basket_mismatch(f: RecordFactory, actor: Actor) -> Built:
    overrides = {
        "originCountry": "BD",
        "hsCode": "8471",
        "goodsDescription": "Advanced computer servers and networking equipment",
    }
    return _one(
        f,
        actor,
        overrides,
        "Computer equipment (HS 8471) exported from BD: not in typical export basket.",
    )


@scenario("ADV-009")
def shared_collateral(f: RecordFactory, actor: Actor) -> Built:
    collateral = {
        "contractReference": f"CLT-{f.integer(10000, 99999)}",
        "collateralAmount": 200_000,
        "status": "OPENED",
    }
    records = [f.lc(actor, dict(collateral)), f.lc(actor, dict(collateral))]
    return Built(records, "Two active LCs using the same collateral reference.")


@scenario("ADV-010")
def hawala_advance(f: RecordFactory, actor: Actor) -> Built:
    amount = f.amount(1_000_000, 5_000_000)
    overrides = {
        "amount": amount,
        "utilizedAmount": round(amount * 0.6),
        "paymentTerms": "RED_CLAUSE",
    }
    return _one(
        f, actor, overrides, "60% advance payment on RED_CLAUSE LC (threshold: >50%)."
    )
