"""Static catalog of detection rules the violation composer can target."""

from __future__ import annotations

from aml_synth.errors import UnknownRuleError
from aml_synth.schemas import Rule, RuleCategory

CATEGORY_LABELS: dict[RuleCategory, str] = {
    "transaction": "Transaction Monitoring",
    "sanction": "Sanction Screening",
    "trade": "Trade-Based ML (TBML)",
}


def _rule(
    category: RuleCategory,
    code: str,
    name: str,
    subcategory: str,
    severity: str,
    risk_score: str,
    threshold: str,
    description: str,
) -> Rule:
    return Rule(
        code=code,
        name=name,
        category=category,
        subcategory=subcategory,
        severity=severity,  # type: ignore[arg-type]
        risk_score=risk_score,
        threshold=threshold,
        description=description,
        data_type=category,
    )


RULE_CATALOG: tuple[Rule, ...] = (
    # Transaction: Cash
    _rule(
        "transaction", "CASH_THRESHOLD", "CTR Threshold", "Cash Transaction",
        "high", "80", "BDT 1,000,000 / 24h",
        "Cash transactions exceeding CTR reporting threshold (BDT 10 Lakh). "
        "Triggers mandatory CTR filing.",
    ),
    _rule(
        "transaction", "CASH_DEPOSIT_ANOMALY", "Cash Deposit Profile Anomaly", "Cash Transaction",
        "medium", "65", "BDT 500,000; 200% of 90-day avg",
        "Single cash deposit significantly deviating from customer 90-day average pattern.",
    ),
    _rule(
        "transaction", "CASH_VS_INSTRUMENT_RATIO", "Cash-Intensive Business Anomaly",
        "Cash Transaction",
        "medium", "55", "80% cash ratio / 30 days (min 5 txns)",
        "Customer where ≥80% of transactions are cash within 30 days.",
    ),
    _rule(
        "transaction", "DENOMINATION_EXCHANGE", "Denomination Exchange", "Cash Transaction",
        "medium", "60", "BDT 500,000 / 24h",
        "Large low-to-high denomination exchanges or FX conversions.",
    ),
    _rule(
        "transaction", "ATM_CASH_EVASION", "ATM Cash Deposit (Staff Avoidance)", "Cash Transaction",
        "high", "70", "BDT 300,000 / 24h",
        "Large ATM cash deposits: possible avoidance of teller reporting.",
    ),
    # Transaction: Structuring
    _rule(
        "transaction", "STRUCTURING", "Below-CTR Structuring", "Structuring",
        "critical", "85-95", "90% of BDT 1M, ≥2 txns / 48h",
        "Multiple transactions just below the CTR threshold to avoid reporting.",
    ),
    _rule(
        "transaction", "AGGREGATE_STRUCTURING", "Multiple Credit Slips", "Structuring",
        "high", "80", "BDT 1,000,000 cumulative, ≥3 deposits / 48h",
        "Multiple small deposits that aggregate above the CTR threshold.",
    ),
    _rule(
        "transaction", "MULTI_ACCOUNT_STRUCTURING", "Multi-Account Structuring", "Structuring",
        "critical", "90", "BDT 1,000,000 from ≥2 accounts / 48h",
        "Same beneficiary receiving from multiple originating accounts above threshold.",
    ),
    _rule(
        "transaction", "COORDINATED_STRUCTURING", "Same-Branch Coordinated", "Structuring",
        "critical", "90", "BDT 500,000, ≥2 customers, same branch / 2h",
        "Multiple customers depositing cash at the same branch within short window.",
    ),
    # Transaction: Velocity
    _rule(
        "transaction", "VELOCITY_COUNT", "High Frequency Transactions", "Velocity",
        "high", "70-90", ">20 txns / 24h",
        "Exceeding normal transaction count within 24 hours.",
    ),
    _rule(
        "transaction", "RAPID_IN_OUT", "Rapid Fund Movement", "Velocity",
        "critical", "85", "BDT 1,000,000 in, ≥90% out / 24h",
        "Large credit immediately followed by near-equal debit. Classic layering indicator.",
    ),
    _rule(
        "transaction", "SUDDEN_VOLUME_INCREASE", "Week-over-Week Volume Spike", "Velocity",
        "high", "75", "300% increase vs prior week",
        "Transaction volume ≥300% of previous week.",
    ),
    _rule(
        "transaction", "WIRE_VELOCITY", "Wire Transfer Velocity", "Velocity",
        "high", "75", ">5 wires to >2 beneficiaries / 24h",
        "High-velocity outgoing wire transfers to many different recipients.",
    ),
    # Transaction: Amount Threshold
    _rule(
        "transaction", "SINGLE_AMOUNT", "Single Large Transaction", "Amount Threshold",
        "medium", "60", "BDT 5,000,000 / 24h",
        "Any single transaction exceeding BDT 5M threshold.",
    ),
    _rule(
        "transaction", "CUMULATIVE_DAILY", "Cumulative Daily Threshold", "Amount Threshold",
        "high", "70", "BDT 10,000,000 / 24h",
        "Daily aggregate transaction amount across all types exceeds threshold.",
    ),
    _rule(
        "transaction", "CUMULATIVE_WEEKLY", "Cumulative Weekly Threshold", "Amount Threshold",
        "medium", "70", "BDT 25,000,000 / 168h",
        "Weekly aggregate transaction amount exceeds threshold.",
    ),
    _rule(
        "transaction", "CASH_INSTRUMENT_CONVERSION", "Cash to Instrument Conversion",
        "Amount Threshold",
        "high", "75", "BDT 500,000 / 168h",
        "Cash deposits followed by instrument purchases (pay orders, demand drafts). "
        "Instruments ≥80% of cash.",
    ),
    # Transaction: Behavioral
    _rule(
        "transaction", "KYC_MISMATCH", "KYC Profile Inconsistency", "Behavioral",
        "high", "70", "BDT 5,000,000 / 30 days; 200% deviation",
        "Monthly volume inconsistent with declared customer profile.",
    ),
    _rule(
        "transaction", "NON_EARNING_ACTIVITY", "Non-Earning Member Activity", "Behavioral",
        "high", "75", "BDT 500,000 / 30 days",
        "Housewife, student, minor, unemployed, or retired person with significant transactions.",
    ),
    _rule(
        "transaction", "SUDDEN_LOAN_PAYOFF", "Sudden Loan Payoff", "Behavioral",
        "high", "65", "BDT 1,000,000 / 72h",
        "Large unexpected loan payments from unknown sources.",
    ),
    _rule(
        "transaction", "THIRD_PARTY_UNEXPLAINED", "Third-Party w/o Explanation", "Behavioral",
        "medium", "55", "BDT 500,000 / 24h",
        "Inbound credits from third parties with no stated purpose.",
    ),
    _rule(
        "transaction", "DOCUMENT_RELUCTANCE", "KYC Incomplete + Transacting", "Behavioral",
        "critical", "80", "BDT 100,000 / 30 days",
        "Customer with INCOMPLETE/PENDING/REJECTED KYC still transacting. Auto-STR flag.",
    ),
    _rule(
        "transaction", "SHELL_COMPANY", "Shell Company Pattern", "Behavioral",
        "critical", "85", "BDT 10,000,000, ≤10 active days / 90 days",
        "High-risk corporate with high-volume low-activity-day pattern.",
    ),
    # Transaction: Geographic
    _rule(
        "transaction", "HIGH_RISK_COUNTRY", "FATF High-Risk Jurisdiction", "Geographic Risk",
        "high", "75", "Any amount / 24h",
        "Transaction involving FATF black/grey list countries.",
    ),
    _rule(
        "transaction", "TAX_HAVEN", "Tax Haven Jurisdiction", "Geographic Risk",
        "medium", "55", "Any amount / 24h",
        "Transaction involving known tax haven jurisdictions.",
    ),
    _rule(
        "transaction", "LANDLOCKED_ANOMALY", "Landlocked Country Shipping", "Geographic Risk",
        "medium", "55", "Any with \"ship\" in purpose / 168h",
        "Shipping-related transactions to landlocked countries "
        "where maritime shipping is implausible.",
    ),
    _rule(
        "transaction", "CROSS_BORDER_SUSPICIOUS", "Suspicious Cross-Border", "Geographic Risk",
        "high", "70", "≥3 countries OR ≥BDT 5M bidirectional / 24h",
        "Multiple cross-border transactions or high-value bidirectional international flows.",
    ),
    # Transaction: PEP & High-Risk
    _rule(
        "transaction", "PEP_MONITORING", "PEP Transaction Monitoring", "PEP & High-Risk",
        "high", "75", "BDT 100,000 / 24h",
        "PEP or high-risk customer activity above lowered threshold. Triggers EDD.",
    ),
    _rule(
        "transaction", "PEP_LIFESTYLE", "PEP Lifestyle Inconsistency", "PEP & High-Risk",
        "critical", "80", "BDT 5,000,000 outgoing / 30 days",
        "PEP with high monthly spending requiring source-of-wealth verification.",
    ),
    _rule(
        "transaction", "PEP_ASSOCIATE", "PEP Associate Transactions", "PEP & High-Risk",
        "high", "70", "Graph-based detection",
        "Transactions involving known associates of PEPs (requires customer relationship graph).",
    ),
    _rule(
        "transaction", "HIGH_RISK_CUSTOMER", "High-Risk Enhanced Monitoring", "PEP & High-Risk",
        "high", "75", "BDT 250,000 / 24h (50% of normal)",
        "Lowered thresholds applied to HIGH/VERY_HIGH/CRITICAL risk customers.",
    ),
    # Transaction: Account Activity
    _rule(
        "transaction", "DORMANT_ACTIVATION", "Dormant Account Activation", "Account Activity",
        "high", "70", "BDT 100,000 / 7 days; dormant ≥180 days",
        "Account with no activity for 180+ days suddenly transacting.",
    ),
    _rule(
        "transaction", "NEW_ACCOUNT_ACTIVITY", "New Account High Activity", "Account Activity",
        "medium", "60", "BDT 500,000; account ≤30 days old",
        "Newly opened account with unusually high initial activity.",
    ),
    _rule(
        "transaction", "FUNNEL_ACCOUNT", "Funnel Account Detection", "Account Activity",
        "critical", "90", "≥5 inbound sources; outbound ≥70% / 168h",
        "Multiple small inflows consolidated into single large outflow.",
    ),
    _rule(
        "transaction", "FLOW_THROUGH", "Flow-Through Account", "Account Activity",
        "high", "75", "≥BDT 1M in, ≥20 txns, in≈out (±10%) / 30 days",
        "High-volume near-zero-balance account: classic money laundering conduit.",
    ),
    _rule(
        "transaction", "SAFE_DEPOSIT_SURGE", "Safe Deposit Box Surge", "Account Activity",
        "medium", "55", "≥3 accesses / 168h",
        "Unusual frequency of safe deposit box access.",
    ),
    # Transaction: Cross-Border & Remittance
    _rule(
        "transaction", "REMITTANCE_ANOMALY", "Unusual Remittance Pattern", "Cross-Border",
        "medium", "60", "≥3 countries OR BDT 2,000,000 / 168h",
        "Outbound remittances to many countries or in high volume.",
    ),
    _rule(
        "transaction", "SMALL_DEPOSIT_LARGE_WIRE", "TF Indicator Pattern", "Cross-Border",
        "critical", "85", "≥5 deposits <BDT 200K → wire ≥70% / 168h",
        "Multiple small deposits aggregated then sent as international wire. "
        "Terrorism financing indicator.",
    ),
    _rule(
        "transaction", "CORRESPONDENT_ANOMALY", "Correspondent Banking Anomaly", "Cross-Border",
        "high", "70", "BDT 50,000,000 OR ≥100 txns / 30 days",
        "Unusual patterns in nostro/vostro/correspondent accounts.",
    ),
    # Transaction: Layering
    _rule(
        "transaction", "ROUND_TRIP", "Circular Fund Flow", "Layering",
        "critical", "90", "≥2 round-trips, amount ±5% / 30 days",
        "Funds sent to a party and received back at similar amounts. Circular flow.",
    ),
    _rule(
        "transaction", "SAME_DAY_IN_OUT", "Same-Day In/Out", "Layering",
        "high", "75", "BDT 500,000 in; out ≥80% / 24h",
        "Large same-day credit followed by matching debit.",
    ),
    _rule(
        "transaction", "COMPLEX_CHAIN", "Complex Transfer Chain", "Layering",
        "critical", "90", "≥3 hops, amount ±10%, multi-country / 30 days",
        "Multi-hop A→B→C→D transfer chains detected via recursive analysis.",
    ),
    # Transaction: Regulatory
    _rule(
        "transaction", "AUTO_CTR", "Auto-CTR Filing", "Regulatory",
        "high", "80", "BDT 1,000,000 / 24h",
        "Automatic CTR filing trigger. Report deadline: 24 hours.",
    ),
    _rule(
        "transaction", "STR_COMPOSITE", "STR Composite Score", "Regulatory",
        "critical", "up to 100", "≥10 txns, composite ≥70/100 / 30 days",
        "Multi-indicator composite scoring: high-risk txns, cash ratio, countries, volume.",
    ),
    _rule(
        "transaction", "NGO_MISUSE", "NGO/NPO Fund Misuse", "Regulatory",
        "critical", "80", "BDT 1,000,000; non-operational >70% / 30 days",
        "Charitable organizations spending >70% on non-operational items.",
    ),
    _rule(
        "transaction", "ADVERSE_MEDIA_TXN", "Adverse Media Customer", "Regulatory",
        "high", "70", "BDT 250,000 / 24h",
        "Customers with adverse_media_flag get lowered monitoring thresholds.",
    ),
    # Transaction: SWIFT
    _rule(
        "transaction", "SWIFT_SANCTION_RT", "SWIFT Real-Time Screening", "SWIFT & Payments",
        "critical", "95", "Any SWIFT to sanctioned country / 1h",
        "Near-real-time screening of SWIFT messages to KP, IR, SY, CU, VE, RU, BY. Action: FREEZE.",
    ),
    _rule(
        "transaction", "SANCTIONED_COUNTRY_PAYMENT", "Sanctioned Country Payment",
        "SWIFT & Payments",
        "critical", "95", "Any outbound to sanctioned country / 24h",
        "Any payment to sanctioned country. Action: block_and_report.",
    ),
    _rule(
        "transaction", "SWIFT_PATTERN_ANOMALY", "SWIFT Pattern Anomaly", "SWIFT & Payments",
        "high", "70", "≥10 SWIFT to ≥5 countries / 168h",
        "Unusual SWIFT transfer pattern across many countries.",
    ),
    # Sanction screening
    _rule(
        "sanction", "SANCTION_INDIVIDUAL", "Individual Sanction Screening", "Screening",
        "critical", "85-95", "Match score ≥85%",
        "Screen individual customer names against sanction lists with fuzzy matching.",
    ),
    _rule(
        "sanction", "SANCTION_CORPORATE", "Corporate Sanction Screening", "Screening",
        "critical", "85-95", "Match score ≥85%",
        "Screen corporate/business names against sanction lists.",
    ),
    _rule(
        "sanction", "SANCTION_PEP", "PEP Screening", "Screening",
        "high", "80-90", "Match score ≥85%",
        "Screen customers against Politically Exposed Persons lists.",
    ),
    _rule(
        "sanction", "SANCTION_VESSEL", "Vessel Screening", "Screening",
        "high", "80", "Match score ≥85%",
        "Screen vessel names and IMO numbers against sanctioned vessel lists.",
    ),
    _rule(
        "sanction", "SANCTION_ASSET", "Asset Screening", "Screening",
        "high", "80", "Match score ≥85%",
        "Screen asset registrations against sanctioned asset databases.",
    ),
    _rule(
        "sanction", "SANCTION_ADVERSE_MEDIA", "Adverse Media Screening", "Screening",
        "medium", "70", "Match score ≥85%",
        "Screen for adverse media mentions related to customers.",
    ),
    # Trade: Applicant & Beneficiary
    _rule(
        "trade", "TBML-001", "Related Party / Common Interest", "Applicant & Beneficiary",
        "high", "65-70", "Same address or name similarity >70%",
        "Applicant and beneficiary share address or have >70% name similarity.",
    ),
    _rule(
        "trade", "TBML-002", "Residential/Agent Address", "Applicant & Beneficiary",
        "medium", "50", "Residential keywords in address",
        "Party address contains residential keywords (house, flat, apartment, বাড়ি).",
    ),
    _rule(
        "trade", "TBML-003", "Suspicious Customer Behaviour", "Applicant & Beneficiary",
        "critical", "75", "LC validity < 7 days",
        "LC with extremely short validity period indicating extreme pressure.",
    ),
    _rule(
        "trade", "TBML-004", "PEP/Influential Person", "Applicant & Beneficiary",
        "critical", "80", "Any party with PEP flag",
        "Any party in the LC has PEP flag set.",
    ),
    # Trade: Third Party
    _rule(
        "trade", "TBML-005", "Unexplained Intermediary", "Third Party",
        "high", "65", "Intermediary with missing info",
        "Intermediary/agent/broker with missing address or country.",
    ),
    _rule(
        "trade", "TBML-006", "Too Many Intermediaries", "Third Party",
        "high", "70", ">3 non-core parties",
        "More than 3 non-core (intermediary/broker/agent) parties in the LC.",
    ),
    # Trade: Transaction Structure
    _rule(
        "trade", "TBML-007", "Complex Structure", "Transaction Structure",
        "high", "70", "≥2 of: transferable, transshipment, >3 countries",
        "LC has multiple complexity indicators simultaneously.",
    ),
    _rule(
        "trade", "TBML-008", "Business Profile Mismatch", "Transaction Structure",
        "high", "70", "Goods ≠ customer TTP",
        "LC goods do not match customer trade transaction profile commodities.",
    ),
    _rule(
        "trade", "TBML-009", "Non-Standard Terms", "Transaction Structure",
        "medium", "55", "Suspicious clause keywords",
        "LC contains suspicious clauses: assignable, bearer instrument, without recourse, etc.",
    ),
    _rule(
        "trade", "TBML-010", "Frequent Amendment", "Transaction Structure",
        "high", "60-75", "≥3 amendments (≥5=high)",
        "LC has been amended 3 or more times.",
    ),
    _rule(
        "trade", "TBML-011", "Shell/Front Company", "Transaction Structure",
        "critical", "80", "Party in shell jurisdictions",
        "Party registered in shell company jurisdictions (PA, VG, KY, BZ, SC, MH, LR, WS, VU).",
    ),
    _rule(
        "trade", "TBML-012", "Guarantee No Reference", "Transaction Structure",
        "high", "65", "Guarantee/SBLC without contract ref",
        "Guarantee or standby LC without underlying contract reference.",
    ),
    _rule(
        "trade", "TBML-013", "Fake Underlying Transaction", "Transaction Structure",
        "critical", "75", "Active LC with no invoices/shipments",
        "Active/confirmed LC with zero invoices and zero shipments.",
    ),
    # Trade: Value & Price
    _rule(
        "trade", "TBML-014", "Unusual Pricing", "Value & Price",
        "high", "55-75", "Price deviation >50%",
        "Significant price deviation from market reference in invoice.",
    ),
    _rule(
        "trade", "TBML-015", "Under-Invoicing", "Value & Price",
        "critical", "85", "Under-invoicing flag",
        "Invoice flagged for under-invoicing compared to market prices.",
    ),
    _rule(
        "trade", "TBML-016", "Over-Invoicing", "Value & Price",
        "critical", "85", "Over-invoicing flag",
        "Invoice flagged for over-invoicing compared to market prices.",
    ),
    _rule(
        "trade", "TBML-017", "Excessive Misc Charges", "Value & Price",
        "high", "65", "Misc charges >15% of LC value",
        "Miscellaneous/handling/fee charges exceed 15% of the LC value.",
    ),
    _rule(
        "trade", "TBML-018", "Double/Multiple Invoicing", "Value & Price",
        "critical", "85", "Duplicate invoice (same amount + seller)",
        "Two or more invoices with the same seller and amount: duplicate invoicing.",
    ),
    # Trade: Payment Anomalies
    _rule(
        "trade", "TBML-019", "Inconsistent Payment Terms", "Payment Anomalies",
        "high", "60", "Sight payment but tenor >0",
        "LC says AT_SIGHT payment but tenor days is greater than zero.",
    ),
    _rule(
        "trade", "TBML-020", "Third-Party Payment", "Payment Anomalies",
        "high", "70", "Payment to non-LC party",
        "Payment directed to a party not named in the LC.",
    ),
    _rule(
        "trade", "TBML-021", "Payment Country Mismatch", "Payment Anomalies",
        "high", "70", "Payment country ≠ beneficiary country",
        "Payment routed to a country different from the beneficiary's country.",
    ),
    _rule(
        "trade", "TBML-022", "Last-Minute Payment Change", "Payment Anomalies",
        "critical", "80", "Amendment changing payment/beneficiary",
        "Suspicious amendment changing payment details, beneficiary, account, or bank.",
    ),
    _rule(
        "trade", "TBML-023", "Applicant Controls Payment", "Payment Anomalies",
        "medium", "50", "\"Applicant approval\" in terms",
        "Payment terms contain \"applicant approval\" or \"buyer discretion\" clauses.",
    ),
    _rule(
        "trade", "TBML-024", "Early Guarantee Claim", "Payment Anomalies",
        "high", "70", "Guarantee claimed <30 days of issue",
        "Bank guarantee claimed within less than 30 days of issuance.",
    ),
    _rule(
        "trade", "TBML-025", "Fraudulent Letter of Undertaking", "Payment Anomalies",
        "critical", "90", "LoU without collateral",
        "Letter of Undertaking issued without any collateral backing.",
    ),
    # Trade: Goods & Shipment
    _rule(
        "trade", "TBML-026", "Phantom Shipment", "Goods & Shipment",
        "critical", "90", "Active LC, zero shipments + zero docs",
        "Active LC with no shipments and no documents: purely fictitious trade.",
    ),
    _rule(
        "trade", "TBML-027", "Unclear/No Goods Description", "Goods & Shipment",
        "high", "65-70", "Vague goods description",
        "LC goods description is empty or vague (\"general merchandise\", \"various goods\").",
    ),
    _rule(
        "trade", "TBML-028", "Trade Pattern Deviation", "Goods & Shipment",
        "high", "70", "LC amount >50% above customer avg",
        "LC amount significantly exceeds customer historical average.",
    ),
    _rule(
        "trade", "TBML-029", "Dual-Use Goods", "Goods & Shipment",
        "critical", "85", "Dual-use flag or HS code match",
        "LC involves dual-use goods that could have military applications.",
    ),
    _rule(
        "trade", "TBML-030", "HS Code Mismatch", "Goods & Shipment",
        "high", "70", "Invoice HS ≠ LC HS (4-digit prefix)",
        "Invoice item HS code differs from the LC declared HS code.",
    ),
    _rule(
        "trade", "TBML-031", "Quantity vs Container Capacity", "Goods & Shipment",
        "high", "75", "Weight > 28000kg × packages × 1.1",
        "Declared weight exceeds physical container capacity limits.",
    ),
    _rule(
        "trade", "TBML-032", "High-Risk Goods", "Goods & Shipment",
        "high", "70", "High-risk goods keywords",
        "LC involves high-risk goods: gold, diamond, weapons, tobacco, pharmaceuticals.",
    ),
    # Trade: Transport & Routing
    _rule(
        "trade", "TBML-033", "Inconsistent Route", "Transport & Routing",
        "high", "70", "Circuitous route flag",
        "Shipping route is unnecessarily circuitous or illogical.",
    ),
    _rule(
        "trade", "TBML-034", "Unjustified Transshipment", "Transport & Routing",
        "high", "65", "Transshipment with named port, no justification",
        "Transshipment allowed with a named port but no documented justification.",
    ),
    _rule(
        "trade", "TBML-035", "Unclear Shipping", "Transport & Routing",
        "medium", "50", "Missing shipping mode or ports",
        "Missing shipping mode, port of loading, or port of discharge.",
    ),
    _rule(
        "trade", "TBML-036", "Origin ≠ Beneficiary Country", "Transport & Routing",
        "high", "65", "Shipment origin ≠ beneficiary/seller",
        "Shipment origin country does not match beneficiary or seller country.",
    ),
    _rule(
        "trade", "TBML-037", "Untrackable/Sanctioned Vessel", "Transport & Routing",
        "critical", "80-95", "No vessel name/IMO or sanctioned vessel",
        "Sea shipment with no vessel name/IMO number, or vessel is on sanctioned list.",
    ),
    _rule(
        "trade", "TBML-038", "Missing Container Numbers", "Transport & Routing",
        "high", "65", "Packages declared but no container refs",
        "Packages are declared but no container numbers provided.",
    ),
    # Trade: Country & Jurisdiction
    _rule(
        "trade", "TBML-039", "FATF High-Risk/Grey-List Country", "Country & Jurisdiction",
        "critical", "70-90", "Party from FATF list",
        "Party from FATF black list (90) or grey list (70).",
    ),
    _rule(
        "trade", "TBML-040", "High-Risk Country Trade", "Country & Jurisdiction",
        "high", "75", "high_risk_country_flag set",
        "LC has the high_risk_country_flag set.",
    ),
    _rule(
        "trade", "TBML-041", "Sanctioned Entity in Trade", "Country & Jurisdiction",
        "critical", "75-95", "Screening result HIT or POTENTIAL_MATCH",
        "Party screening result is HIT (95) or POTENTIAL_MATCH (75).",
    ),
    # Trade: Document Discrepancies
    _rule(
        "trade", "TBML-042", "Goods Description Discrepancy", "Document Discrepancies",
        "high", "70", "discrepancy_found = true",
        "Trade document has discrepancy_found flag set.",
    ),
    _rule(
        "trade", "TBML-043", "LC Clause Abuse", "Document Discrepancies",
        "high", "70", "\"all discrepancy acceptable\" clause",
        "LC contains clauses like \"all discrepancy acceptable\" to bypass controls.",
    ),
    _rule(
        "trade", "TBML-044", "Essential Documents Missing", "Document Discrepancies",
        "high", "65", "Missing BL, invoice, or CoO",
        "Missing bill of lading, commercial invoice, or certificate of origin for non-draft LC.",
    ),
    _rule(
        "trade", "TBML-045", "Excessive Waivers / Overdrawn LC", "Document Discrepancies",
        "high", "65-70", ">3 waivers or utilized >110% of LC",
        "More than 3 waivers granted, or utilized amount exceeds 110% of LC limit.",
    ),
    _rule(
        "trade", "TBML-046", "Excessive Discrepancy Acceptance", "Document Discrepancies",
        "medium", "55", ">3 discrepancies accepted without query",
        "Multiple document discrepancies accepted without proper review.",
    ),
    # Trade: Unusual Documentation
    _rule(
        "trade", "TBML-047", "Altered/Suspicious Documents", "Unusual Documentation",
        "critical", "85", "Discrepancy AND failed verification",
        "Document has discrepancy AND failed verification check.",
    ),
    _rule(
        "trade", "TBML-048", "Reused Documents", "Unusual Documentation",
        "critical", "90", "Document hash matches another LC",
        "Document hash matches a document from another LC: reuse of trade documents.",
    ),
    # Trade: Advanced typologies
    _rule(
        "trade", "ADV-001", "Carousel/Circular Trading", "Advanced Typology",
        "critical", "85", "≥3 reverse-direction LCs same countries / 90d",
        "Circular trading pattern: goods flowing back and forth between same countries.",
    ),
    _rule(
        "trade", "ADV-002", "Trade-Based Layering", "Advanced Typology",
        "critical", "80", "≥4 parties across ≥4 jurisdictions",
        "Complex multi-jurisdiction LC with many parties to obscure beneficial ownership.",
    ),
    _rule(
        "trade", "ADV-003", "Free Trade Zone Abuse", "Advanced Typology",
        "high", "70", "Route through FTZ ports",
        "Trade routed through Free Trade Zone ports (Jebel Ali, Labuan, Colon, HK, SG, Dubai).",
    ),
    _rule(
        "trade", "ADV-004", "Mirror Trade Detection", "Advanced Typology",
        "critical", "85", "Matching opposite-direction LC (±5%) / 7d",
        "Two LCs with matching amounts in opposite directions within 7 days.",
    ),
    _rule(
        "trade", "ADV-005", "BMPE Pattern", "Advanced Typology",
        "critical", "75", "Trade on BMPE corridors",
        "Trade on Black Market Peso Exchange corridors (Colombia ↔ US/Mexico/Panama).",
    ),
    _rule(
        "trade", "ADV-006", "Quantity Misrepresentation", "Advanced Typology",
        "high", "70", "Invoice qty deviates >10% from LC qty",
        "Invoice quantity differs from LC declared quantity by more than 10%.",
    ),
    _rule(
        "trade", "ADV-007", "LCAF Value Excess", "Advanced Typology",
        "high", "65", "LC amount >LCAF value by >5%",
        "LC amount exceeds LCAF (LC Application Form) authorized value.",
    ),
    _rule(
        "trade", "ADV-008", "Export Basket Mismatch", "Advanced Typology",
        "high", "60", "HS code not in origin export basket",
        "HS code of goods not in the exporting country's typical export basket.",
    ),
    _rule(
        "trade", "ADV-009", "Multiple LC Same Collateral", "Advanced Typology",
        "critical", "90", "Same collateral ref in multiple active LCs",
        "Same collateral reference used for multiple active LCs.",
    ),
    _rule(
        "trade", "ADV-010", "Hawala/Advance Payment", "Advanced Typology",
        "critical", "75", "Advance payment >50% of LC value",
        "Advance payment exceeds 50% of the LC value: potential hawala indicator.",
    ),
)

_BY_CODE: dict[str, Rule] = {r.code: r for r in RULE_CATALOG}


def get_rule(code: str) -> Rule:
    """Return the rule for `code`; raise UnknownRuleError if absent."""
    try:
        return _BY_CODE[code]
    except KeyError:
        raise UnknownRuleError(code) from None


def rule_codes() -> list[str]:
    return [r.code for r in RULE_CATALOG]


def rules_by_category() -> dict[str, list[Rule]]:
    """Catalog grouped under display labels, in catalog order."""
    grouped: dict[str, list[Rule]] = {label: [] for label in CATEGORY_LABELS.values()}
    for r in RULE_CATALOG:
        grouped[CATEGORY_LABELS[r.category]].append(r)
    return grouped
