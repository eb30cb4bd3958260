"""Base record builders and shared helpers for violation scenarios.

Every scenario builder starts from one of the base records here (transaction,
letter of credit with its invoices/shipments/parties/documents/amendments, or
sanction-list entry) and overrides only the fields its rule inspects. The
defaults are chosen to be innocuous for every other rule.
"""

from __future__ import annotations

import random
import string
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta
from typing import Any, TypeVar

from faker import Faker

from aml_synth.schemas import CustomerPoolEntry

T = TypeVar("T")

FATF_BLACKLIST = ("KP", "IR", "MM", "SY", "YE", "AF")
FATF_GREYLIST = (
    "PK", "JM", "TR", "VN", "PH", "NG", "TZ", "UG", "ZW", "HT",
    "ML", "BF", "CM", "MZ", "SS", "CD", "SO", "LY", "LB", "SA",
)  # fmt: skip
TAX_HAVENS = (
    "BM", "BS", "KY", "VG", "PA", "JE", "GG", "IM", "GI", "MC",
    "LI", "AD", "MU", "SC", "BZ", "TC", "AG", "KN", "WS", "VU",
)  # fmt: skip
SANCTIONED_COUNTRIES = ("KP", "IR", "SY", "CU", "VE", "RU", "BY", "MM")
SHELL_JURISDICTIONS = ("PA", "VG", "KY", "BZ", "SC", "MH", "LR", "WS", "VU")
LANDLOCKED_COUNTRIES = (
    "AF", "AM", "AZ", "BT", "BO", "BW", "BF", "BI", "CF", "TD", "ET", "HU", "KZ", "KG", "LA",
    "LS", "MW", "ML", "MN", "NP", "NE", "PY", "RW", "RS", "SK", "SS", "SZ", "TJ", "TM", "UG",
    "UZ", "ZW",
)  # fmt: skip
FTZ_PORTS = ("Jebel Ali", "Labuan", "Colon Free Zone", "Hong Kong", "Singapore", "Dubai")
BMPE_CORRIDORS = (("CO", "US"), ("CO", "MX"), ("CO", "PA"), ("CO", "EC"), ("CO", "VE"))
HIGH_RISK_GOODS_KEYWORDS = (
    "gold", "diamond", "weapon", "tobacco", "pharmaceutical",
    "nuclear", "chemical", "explosives", "arms", "ammunition",
)  # fmt: skip
BD_BANKS = (
    "Sonali Bank", "Janata Bank", "Agrani Bank", "Rupali Bank", "BRAC Bank",
    "Eastern Bank", "Dutch-Bangla Bank", "Islami Bank", "Prime Bank", "City Bank",
)  # fmt: skip
BD_NAMES = (
    "Mohammad Rahman", "Abdul Karim", "Rafiqul Islam", "Shafiqul Haque", "Kamrul Hassan",
    "Mizanur Rahman", "Shahidul Islam", "Nurul Amin", "Alamgir Hossain", "Farid Ahmed",
    "Fatima Begum", "Nasreen Akter", "Rahima Khatun", "Salma Begum", "Hasina Akter",
    "Ayesha Siddiqua", "Jannatul Ferdous", "Taslima Akter", "Razia Sultana", "Mst Halima",
)  # fmt: skip
PURPOSES = (
    "Business Payment", "Import Settlement", "Salary Transfer", "Investment",
    "Personal Transfer", "Loan Repayment", "Trade Settlement", "Service Payment",
)  # fmt: skip
DHAKA_AREAS = ("Gulshan", "Dhanmondi", "Banani", "Motijheel", "Mirpur")
PARTY_CITIES = {
    "BD": "Dhaka", "CN": "Shanghai", "AE": "Dubai", "SG": "Singapore", "HK": "Hong Kong",
    "MY": "Kuala Lumpur", "PA": "Panama City", "US": "New York",
}  # fmt: skip
TRADE_PORTS = (
    "Shanghai", "Singapore", "Chittagong", "Busan", "Rotterdam",
    "Hamburg", "Dubai", "Mumbai", "Colombo", "Hong Kong",
)  # fmt: skip
TRADE_HS_CODES = ("8471", "6204", "3004", "8517", "2710", "7108", "0901", "5209", "8703", "6110")
AMENDMENT_TYPES = ("AMOUNT", "EXPIRY", "SHIPMENT", "DOCUMENTS", "TERMS")

Record = dict[str, Any]


@dataclass(frozen=True)
class Actor:
    """The customer and account a scenario is built around, plus pool snapshots."""

    customer: CustomerPoolEntry
    account: str
    customers: tuple[CustomerPoolEntry, ...] = ()
    accounts: tuple[str, ...] = ()

    @property
    def customer_id(self) -> int:
        return self.customer.customer_id


@dataclass
class Built:
    """Output of one scenario builder before it is wrapped into a ViolationScenario."""

    records: list[Record]
    explanation: str
    note: str = ""


Builder = Callable[["RecordFactory", Actor], Built]

SCENARIO_BUILDERS: dict[str, Builder] = {}


def scenario(*codes: str) -> Callable[[Builder], Builder]:
    """Register a builder for one or more rule codes."""

    def register(fn: Builder) -> Builder:
        for code in codes:
            if code in SCENARIO_BUILDERS:
                raise ValueError(f"Duplicate scenario builder for rule {code}")
            SCENARIO_BUILDERS[code] = fn
        return fn

    return register


def total(records: Sequence[Record]) -> int:
    return sum(int(r["amount"]) for r in records)


@dataclass
class RecordFactory:
    """Random helpers and base records, all drawn from one injected rng/Faker pair."""

    rng: random.Random
    faker: Faker
    now: datetime = field(default_factory=lambda: datetime.now(UTC))

    # -- primitives ------------------------------------------------------

    def amount(self, lo: float, hi: float) -> int:
        """Uniform amount in [lo, hi], rounded to whole units."""
        return round(lo + self.rng.random() * (hi - lo))

    def integer(self, lo: int, hi: int) -> int:
        return self.rng.randint(lo, hi)

    def ratio(self, lo: float, hi: float) -> float:
        return lo + self.rng.random() * (hi - lo)

    def choice(self, options: Sequence[T]) -> T:
        return self.rng.choice(options)

    def pick_n(self, options: Sequence[T], n: int) -> list[T]:
        return self.rng.sample(list(options), min(n, len(options)))

    def hours_ago(self, lo: float, hi: float) -> str:
        """ISO timestamp uniformly between `hi` and `lo` hours before now."""
        hours = lo + self.rng.random() * (hi - lo)
        return (self.now - timedelta(hours=hours)).isoformat(timespec="milliseconds")

    def days_ago(self, days: int) -> str:
        return self._date(self.now - timedelta(days=days))

    def days_ahead(self, days: int) -> str:
        return self._date(self.now + timedelta(days=days))

    @staticmethod
    def _date(moment: datetime) -> str:
        return date(moment.year, moment.month, moment.day).isoformat()

    def person_name(self) -> str:
        return self.rng.choice(BD_NAMES)

    def name_of(self, customer: CustomerPoolEntry) -> str:
        return customer.customer_name_eng or self.person_name()

    def company(self) -> str:
        return self.faker.company()

    def address(self, country: str = "BD") -> str:
        """Business address in `country`; never uses residential keywords."""
        if country == "BD":
            return (
                f"Plot {self.rng.randint(1, 99)}, Road {self.rng.randint(1, 30)}, "
                f"{self.rng.choice(DHAKA_AREAS)} Commercial Area, Dhaka"
            )
        city = PARTY_CITIES.get(country, country)
        return f"{self.rng.randint(1, 999)} Industrial Rd, {city}"

    def bank(self) -> str:
        return self.rng.choice(BD_BANKS)

    def swift(self) -> str:
        bank = "".join(self.rng.choices(string.ascii_uppercase, k=4))
        branch = "".join(self.rng.choices(string.ascii_uppercase + string.digits, k=5))
        return f"{bank}BD{branch}"

    def account_number(self) -> str:
        return str(self.rng.randint(10_000_000, 99_999_999))

    def hs_code(self) -> str:
        return self.rng.choice(TRADE_HS_CODES)

    def token(self, length: int) -> str:
        return "".join(self.rng.choices(string.ascii_letters + string.digits, k=length))

    # -- transactions ----------------------------------------------------

    def txn(self, customer_id: int, account: str, overrides: Record | None = None) -> Record:
        record: Record = {
            "reference": self.faker.uuid4(),
            "customerId": customer_id,
            "accountId": account,
            "amount": self.amount(10_000, 100_000),
            "currency": "BDT",
            "exchangeRate": 1.0,
            "fees": self.amount(0, 500),
            "type": "CASH_DEPOSIT",
            "direction": "IN",
            "timestamp": self.hours_ago(0, 12),
            "sender": self.person_name(),
            "receiver": self.person_name(),
            "senderAccount": self.account_number(),
            "receiverAccount": self.account_number(),
            "senderCountry": "BD",
            "receiverCountry": "BD",
            "paymentMethod": "Cash",
            "purpose": self.rng.choice(PURPOSES),
            "status": "Completed",
            "riskScore": self.rng.randint(10, 40),
        }
        record.update(overrides or {})
        return record

    # -- trade -----------------------------------------------------------

    def invoice(self, overrides: Record | None = None) -> Record:
        record: Record = {
            "invoiceNumber": f"INV-{self.rng.randint(10000, 99999)}",
            "invoiceDate": self.days_ago(self.rng.randint(5, 30)),
            "sellerName": self.company(),
            "sellerAddress": self.address("CN"),
            "sellerCountry": "CN",
            "buyerName": self.company(),
            "buyerAddress": self.address(),
            "buyerCountry": "BD",
            "currency": "USD",
            "totalAmount": self.amount(50_000, 500_000),
            "taxAmount": self.amount(1_000, 10_000),
            "freightAmount": self.amount(2_000, 15_000),
            "insuranceAmount": self.amount(500, 5_000),
            "discountAmount": 0,
            "netAmount": self.amount(50_000, 500_000),
            "goodsDescription": "Industrial machinery parts and components",
            "hsCode": self.hs_code(),
            "quantity": self.amount(100, 5_000),
            "quantityUnit": "PCS",
            "unitPrice": self.amount(10, 500),
            "incoterms": "FOB",
            "marketPriceRef": self.amount(10, 500),
            "priceDeviation": round(self.ratio(0, 5), 2),
            "overInvoicingFlag": False,
            "underInvoicingFlag": False,
            "priceAnomalyScore": round(self.ratio(0, 10), 2),
            "documentsReceived": True,
            "documentsVerified": True,
            "discrepancyFound": False,
            "discrepancyDetails": "",
            "sanctionScreened": True,
            "complianceCleared": True,
        }
        record.update(overrides or {})
        return record

    def shipment(self, overrides: Record | None = None) -> Record:
        record: Record = {
            "shipmentNumber": f"SH-{self.rng.randint(10000, 99999)}",
            "blNumber": f"BL-{self.rng.randint(100000, 999999)}",
            "awbNumber": "",
            "shipmentDate": self.days_ago(self.rng.randint(5, 20)),
            "estimatedArrival": self.days_ahead(self.rng.randint(10, 40)),
            "actualArrival": None,
            "shipmentMode": "SEA",
            "vesselName": f"MV {self.company().split()[0]} Star",
            "vesselImo": self.rng.randint(9_000_000, 9_999_999),
            "vesselFlag": "SG",
            "voyageNumber": f"V{self.rng.randint(100, 999)}",
            "portOfLoading": "Shanghai",
            "portOfDischarge": "Chittagong",
            "transshipmentPort": "",
            "originCountry": "CN",
            "destinationCountry": "BD",
            "goodsDescription": "Industrial machinery parts",
            "hsCode": self.hs_code(),
            "totalWeight": self.amount(5_000, 25_000),
            "weightUnit": "KG",
            "packageCount": self.rng.randint(10, 200),
            "containerNumbers": [f"CONT{self.rng.randint(100000, 999999)}"],
            "highRiskPortFlag": False,
            "sanctionedPortFlag": False,
            "sanctionedVesselFlag": False,
            "circuitousRouteFlag": False,
            "vesselScreened": True,
            "portsScreened": True,
            "customsClearance": False,
        }
        record.update(overrides or {})
        return record

    def party(self, role: str, overrides: Record | None = None) -> Record:
        overrides = overrides or {}
        country = overrides.get("country") or ("CN" if role == "BENEFICIARY" else "BD")
        record: Record = {
            "partyRole": role,
            "partyType": "BANK" if "BANK" in role else "ENTITY",
            "partyName": self.company(),
            "partyAddress": self.address(country),
            "city": PARTY_CITIES.get(country, country),
            "country": country,
            "registrationNumber": self.rng.randint(10_000_000, 99_999_999),
            "taxId": self.rng.randint(10_000_000, 99_999_999),
            "swiftCode": self.swift(),
            "contactPerson": self.person_name(),
            "email": self.faker.email(),
            "phone": f"+880 {self.rng.randint(1_300_000_000, 1_999_999_999)}",
            "sanctionScreened": True,
            "screeningResult": "CLEAR",
            "pepFlag": False,
            "adverseMediaFlag": False,
            "highRiskJurisdiction": False,
            "riskRating": "LOW",
        }
        record.update(overrides)
        return record

    def document(self, doc_type: str, overrides: Record | None = None) -> Record:
        record: Record = {
            "documentType": doc_type,
            "documentNumber": f"DOC-{self.rng.randint(10000, 99999)}",
            "documentDate": self.days_ago(self.rng.randint(1, 15)),
            "description": f"{doc_type.replace('_', ' ').lower()} for LC trade",
            "issuerName": self.company(),
            "issuerCountry": "CN",
            "fileName": f"{doc_type.lower()}_{self.rng.randint(1000, 9999)}.pdf",
            "fileType": "PDF",
            "fileSize": self.rng.randint(50_000, 500_000),
            "verified": True,
            "discrepancyFound": False,
            "discrepancyNotes": "",
        }
        record.update(overrides or {})
        return record

    def amendment(self, overrides: Record | None = None) -> Record:
        record: Record = {
            "amendmentNumber": self.rng.randint(1, 5),
            "swiftReference": f"MT707{self.rng.randint(1_000_000_000, 9_999_999_999)}",
            "amendmentDate": self.days_ago(self.rng.randint(1, 30)),
            "amendmentType": self.rng.choice(AMENDMENT_TYPES),
            "amountChange": self.amount(-50_000, 50_000),
            "oldAmount": self.amount(100_000, 500_000),
            "newAmount": self.amount(100_000, 500_000),
            "oldExpiryDate": self.days_ago(10),
            "newExpiryDate": self.days_ahead(60),
            "reason": self.faker.sentence(),
            "requestedBy": self.company(),
            "frequentAmendmentFlag": False,
            "suspiciousChangeFlag": False,
            "status": "APPROVED",
        }
        record.update(overrides or {})
        return record

    def core_parties(
        self, applicant: Record | None = None, beneficiary: Record | None = None
    ) -> list[Record]:
        """Applicant (BD), beneficiary (CN) and issuing bank: the three parties every LC has."""
        return [
            self.party("APPLICANT", {"country": "BD", **(applicant or {})}),
            self.party("BENEFICIARY", {"country": "CN", **(beneficiary or {})}),
            self.party("ISSUING_BANK", {"partyType": "BANK", "country": "BD"}),
        ]

    def lc(self, actor: Actor, overrides: Record | None = None) -> Record:
        """Letter of credit with one invoice, one shipment, core parties and core documents."""
        overrides = overrides or {}
        amount = overrides.get("amount") or self.amount(100_000, 2_000_000)
        applicant_name = overrides.get("applicantName") or self.company()
        record: Record = {
            "lcNumber": f"LC{self.now.year}-{self.rng.randint(10_000_000, 99_999_999)}",
            "swiftReference": f"MT700{self.rng.randint(1_000_000_000, 9_999_999_999)}",
            "customerId": actor.customer_id,
            "applicantAccount": actor.account,
            "lcType": "IMPORT",
            "status": "OPENED",
            "issueDate": self.days_ago(30),
            "expiryDate": self.days_ahead(150),
            "lastShipmentDate": self.days_ahead(120),
            "latestDocPresentationDate": self.days_ahead(140),
            "currency": "USD",
            "amount": amount,
            "tolerancePercent": 5,
            "utilizedAmount": 0,
            "balanceAmount": amount,
            "paymentTerms": "AT_SIGHT",
            "tenorDays": 0,
            "applicantName": applicant_name,
            "applicantAddress": self.address(),
            "applicantCountry": "BD",
            "beneficiaryName": self.company(),
            "beneficiaryAddress": f"{self.rng.randint(1, 999)} Industrial Rd, Shanghai",
            "beneficiaryCountry": "CN",
            "beneficiaryBank": "Bank of China",
            "beneficiaryBankSwift": "BKCHCNBJ",
            "issuingBankName": self.bank(),
            "issuingBankSwift": self.swift(),
            "advisingBankName": "Bank of China Shanghai Branch",
            "advisingBankSwift": "BKCHCNBJ110",
            "confirmingBankName": "",
            "goodsDescription": "Industrial machinery parts and electronic components",
            "hsCode": "8471",
            "quantity": self.amount(500, 5_000),
            "quantityUnit": "PCS",
            "unitPrice": self.amount(50, 500),
            "shipmentMode": "SEA",
            "portOfLoading": "Shanghai",
            "portOfDischarge": "Chittagong",
            "originCountry": "CN",
            "destinationCountry": "BD",
            "transshipmentAllowed": False,
            "partialShipmentAllowed": False,
            "incoterms": "FOB",
            "insuranceRequired": True,
            "insuranceAmount": round(amount * 1.1),
            "transferableLc": False,
            "paymentToThirdParty": False,
            "paymentCountry": "CN",
            "collateralAmount": round(amount * 0.2),
            "contractReference": f"CTR-{self.rng.randint(10000, 99999)}",
            "riskRating": "LOW",
            "sanctionScreened": True,
            "dualUseGoodsFlag": False,
            "highRiskCountryFlag": False,
            "priceAnomalyFlag": False,
            "amendments": [],
            "invoices": [self.invoice({"totalAmount": amount, "netAmount": amount})],
            "shipments": [self.shipment()],
            "parties": self.core_parties(applicant={"partyName": applicant_name}),
            "documents": [
                self.document("BILL_OF_LADING"),
                self.document("COMMERCIAL_INVOICE"),
                self.document("CERTIFICATE_OF_ORIGIN"),
            ],
        }
        record.update(overrides)
        return record

    # -- sanctions -------------------------------------------------------

    def sanction_entry(self, overrides: Record | None = None) -> Record:
        year = self.rng.randint(1950, 1990)
        month, day = self.rng.randint(1, 12), self.rng.randint(1, 28)
        dob = f"{year}-{month:02d}-{day:02d}"
        record: Record = {
            "entityId": f"SANC-{self.rng.randint(100000, 999999)}",
            "name": self.person_name(),
            "caption": self.person_name(),
            "aliases": [self.person_name() for _ in range(3)],
            "dateOfBirth": dob,
            "citizenships": ["BD"],
            "nationality": ["Bangladeshi"],
            "countryCodes": ["BD"],
            "organization": "",
            "position": "",
            "entityType": "Individual",
            "schema": "Person",
            "datasets": ["UN_SANCTIONS", "OFAC_SDN"],
            "topics": ["sanction", "crime.terror", "poi"],
            "properties": {"nationality": ["Bangladeshi"], "gender": ["male"]},
            "riskLevel": "HIGH",
            "firstSeen": self.days_ago(365),
            "lastSeen": self.days_ago(1),
            "lastChange": self.days_ago(7),
            "sourceUrl": "https://sanctionslist.example.com/entity/",
            "searchText": "",
        }
        record.update(overrides or {})
        return record
