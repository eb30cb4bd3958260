"""Pydantic v2 models: field definitions, schema sets, pool entries, rules and scenarios."""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from aml_synth.errors import SchemaConfigError

Country = Literal["BD", "US"]
RuleCategory = Literal["transaction", "sanction", "trade"]
Severity = Literal["critical", "high", "medium", "low"]

ROOT_SCHEMAS = ("customer", "account", "transaction", "sanction", "trade", "credit")

# nestedArray item count when minCount/maxCount are unset
DEFAULT_MIN_ITEMS = 1
DEFAULT_MAX_ITEMS = 3


class FieldType(StrEnum):
    """Closed set of field type tags understood by the field value generator."""

    CUSTOMER_ID = "customerId"
    CUSTOMER_ID_REF = "customerIdRef"
    ACCOUNT_ID_REF = "accountIdRef"
    CUSTOMER_NAME_FROM_POOL = "customerNameFromPool"
    CUSTOMER_DOB_FROM_POOL = "customerDobFromPool"
    CUSTOMER_NATIONALITY_FROM_POOL = "customerNationalityFromPool"
    UUID = "uuid"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    EMAIL = "email"
    PHONE = "phone"
    DATE = "date"
    DATE_OF_BIRTH = "dateOfBirth"
    DATETIME = "datetime"
    DATE_OR_NULL = "dateOrNull"
    ADDRESS = "address"
    STREET_ADDRESS = "streetAddress"
    CITY = "city"
    COUNTRY = "country"
    COUNTRY_CODE = "countryCode"
    CURRENCY = "currency"
    CURRENCY_CODE = "currencyCode"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    FULL_NAME = "fullName"
    COMPANY_NAME = "companyName"
    SENTENCE = "sentence"
    PARAGRAPH = "paragraph"
    URL = "url"
    NUMERIC_ID = "numericId"
    RISK_SCORE = "riskScore"
    EXCHANGE_RATE = "exchangeRate"
    ACCOUNT_NUMBER = "accountNumber"
    WORD = "word"
    JOB_TITLE = "jobTitle"
    LC_NUMBER = "lcNumber"
    SWIFT_REFERENCE = "swiftReference"
    SWIFT_CODE = "swiftCode"
    TRADE_AMOUNT = "tradeAmount"
    PERCENTAGE = "percentage"
    HS_CODE = "hsCode"
    PORT = "port"
    BANK_NAME = "bankName"
    FUTURE_DATE = "futureDate"
    SELECT = "select"
    ARRAY = "array"
    ARRAY_OF_STRINGS = "arrayOfStrings"
    ARRAY_OF_COUNTRIES = "arrayOfCountries"
    ARRAY_OF_COUNTRY_CODES = "arrayOfCountryCodes"
    ARRAY_OF_NAMES = "arrayOfNames"
    NESTED_OBJECT = "nestedObject"
    NESTED_ARRAY = "nestedArray"


POOL_SOURCED_TYPES = frozenset(
    {
        FieldType.CUSTOMER_NAME_FROM_POOL,
        FieldType.CUSTOMER_DOB_FROM_POOL,
        FieldType.CUSTOMER_NATIONALITY_FROM_POOL,
    }
)
NESTED_TYPES = frozenset({FieldType.NESTED_OBJECT, FieldType.NESTED_ARRAY})
# Types that need extra attributes and cannot be an array item.
STRUCTURED_TYPES = NESTED_TYPES | {FieldType.SELECT, FieldType.ARRAY}


class FieldDefinition(BaseModel):
    """One field of a schema. JSON keys are camelCase (itemType, minCount, schema)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    type: FieldType
    options: list[str] | None = None
    item_type: FieldType | None = None
    count: int | None = Field(None, ge=0)
    min_count: int | None = Field(None, ge=0)
    max_count: int | None = Field(None, ge=0)
    schema_name: str | None = Field(None, alias="schema")

    @model_validator(mode="after")
    def check_type_requirements(self) -> FieldDefinition:
        if self.type == FieldType.SELECT and not self.options:
            raise ValueError(f"select field {self.name!r} requires non-empty options")
        if self.type == FieldType.ARRAY:
            if self.item_type is None or not self.count:
                raise ValueError(f"array field {self.name!r} requires itemType and count")
            if self.item_type in STRUCTURED_TYPES:
                raise ValueError(
                    f"array field {self.name!r}: itemType {self.item_type.value} "
                    "is not a scalar type"
                )
        if self.type in NESTED_TYPES and not self.schema_name:
            raise ValueError(f"{self.type.value} field {self.name!r} requires schema")
        lo = self.min_count
        if lo is None and self.type == FieldType.NESTED_ARRAY:
            lo = DEFAULT_MIN_ITEMS
        if lo is not None and self.max_count is not None and lo > self.max_count:
            raise ValueError(
                f"field {self.name!r}: minCount must not exceed maxCount ({lo} > {self.max_count})"
            )
        return self


class Schema(BaseModel):
    """Named, ordered list of field definitions."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: list[FieldDefinition]

    @model_validator(mode="after")
    def check_unique_names(self) -> Schema:
        seen: set[str] = set()
        for f in self.fields:
            if f.name in seen:
                raise ValueError(f"schema {self.name!r} declares field {f.name!r} twice")
            seen.add(f.name)
        return self

    def has_type(self, *types: FieldType) -> bool:
        return any(f.type in types for f in self.fields)

    def nested_references(self) -> Iterator[str]:
        for f in self.fields:
            if f.type in NESTED_TYPES and f.schema_name:
                yield f.schema_name


class SchemaSet(BaseModel):
    """All schemas by name; any schema may be nested, ROOT_SCHEMAS are directly requestable."""

    model_config = ConfigDict(frozen=True)

    schemas: dict[str, Schema]

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> SchemaSet:
        """Parse `{name: {"fields": [...]}}` and reject invalid fields and nested cycles."""
        try:
            schema_set = cls(
                schemas={
                    name: Schema(name=name, fields=body.get("fields", []))
                    for name, body in data.items()
                }
            )
        except ValidationError as e:
            raise SchemaConfigError(str(e)) from e
        schema_set.check_acyclic()
        return schema_set

    def to_mapping(self) -> dict[str, Any]:
        return {
            name: {
                "fields": [
                    f.model_dump(by_alias=True, exclude_none=True, mode="json")
                    for f in s.fields
                ]
            }
            for name, s in self.schemas.items()
        }

    def get(self, name: str) -> Schema | None:
        return self.schemas.get(name)

    def __getitem__(self, name: str) -> Schema:
        try:
            return self.schemas[name]
        except KeyError:
            raise SchemaConfigError(f"Schema not defined: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self.schemas

    def missing_references(self) -> list[tuple[str, str]]:
        """Return (schema, referenced name) pairs whose nested schema is not defined."""
        return [
            (name, ref)
            for name, s in self.schemas.items()
            for ref in s.nested_references()
            if ref not in self.schemas
        ]

    def check_acyclic(self) -> None:
        """Raise SchemaConfigError if nested references form a cycle."""
        visiting: set[str] = set()
        done: set[str] = set()

        def visit(name: str, path: list[str]) -> None:
            if name in done or name not in self.schemas:
                return
            if name in visiting:
                cycle = " -> ".join(path[path.index(name) :] + [name])
                raise SchemaConfigError(f"Nested schema cycle: {cycle}")
            visiting.add(name)
            for ref in self.schemas[name].nested_references():
                visit(ref, path + [name])
            visiting.discard(name)
            done.add(name)

        for name in self.schemas:
            visit(name, [])


class CustomerPoolEntry(BaseModel):
    """Pooled customer identity, keyed by customer_id. Persisted with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    customer_id: int
    customer_name_eng: str | None = None
    customer_name_ben: str | None = None
    date_of_birth: str | None = None
    nationality: str | None = None
    country: Country | None = None

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Rule(BaseModel):
    """Static catalog entry for one detection rule."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    code: str
    name: str
    category: RuleCategory
    subcategory: str
    severity: Severity
    risk_score: str
    threshold: str
    description: str
    data_type: RuleCategory


class ViolationScenario(BaseModel):
    """Records engineered to trip one rule, plus the explanation an operator reads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    rule: Rule
    data_type: RuleCategory
    records: list[dict[str, Any]]
    record_count: int
    explanation: str
    note: str | None = None

    @model_validator(mode="after")
    def check_record_count(self) -> ViolationScenario:
        if self.record_count != len(self.records):
            raise ValueError("record_count must equal the number of records")
        if not self.records:
            raise ValueError("a scenario must contain at least one record")
        return self

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
