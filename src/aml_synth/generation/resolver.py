"""Schema resolver: schema + context -> one ordered record."""

from __future__ import annotations

import random
from typing import Any

from aml_synth.generation.context import GenerationContext
from aml_synth.generation.fields import FieldValueGenerator
from aml_synth.generation.probabilities import Probabilities
from aml_synth.logging_config import get_logger
from aml_synth.pool import CustomerPool
from aml_synth.schemas import (
    POOL_SOURCED_TYPES,
    FieldDefinition,
    FieldType,
    Schema,
    SchemaSet,
)

logger = get_logger(__name__)


def advance_context(
    context: GenerationContext,
    field: FieldDefinition,
    value: Any,
    customer_pool: CustomerPool | None = None,
) -> GenerationContext:
    """Return the context as seen by the fields after `field` (and their nested objects)."""
    if value is None:
        return context
    if field.name == "customerId" or field.type in (
        FieldType.CUSTOMER_ID,
        FieldType.CUSTOMER_ID_REF,
    ):
        context = context.evolve(customer_id=value)
        if field.type == FieldType.CUSTOMER_ID_REF and customer_pool is not None:
            pooled = customer_pool.get(value)
            if pooled is not None and pooled.country:
                context = context.evolve(country=pooled.country)
    if field.name == "accountNumber":
        context = context.evolve(account_number=str(value), account_id=str(value))
    elif field.type == FieldType.ACCOUNT_ID_REF:
        context = context.evolve(account_id=str(value))
    if field.name == "uuid" and context.account_id is None:
        context = context.evolve(account_id=str(value))
    return context


class SchemaResolver:
    """Walk a schema's fields in order, threading the context into nested schemas."""

    def __init__(
        self,
        schema_set: SchemaSet,
        generator: FieldValueGenerator,
        customer_pool: CustomerPool,
        rng: random.Random,
        probabilities: Probabilities | None = None,
    ) -> None:
        self.schema_set = schema_set
        self.generator = generator
        self.customer_pool = customer_pool
        self.rng = rng
        self.probabilities = probabilities or Probabilities()

    def lookup(self, schema_name: str) -> Schema | None:
        return self.schema_set.get(schema_name)

    def resolve_named(
        self, schema_name: str, context: GenerationContext | None = None
    ) -> dict[str, Any]:
        return self.resolve(self.schema_set[schema_name], context)

    def prepare_context(self, schema: Schema, context: GenerationContext) -> GenerationContext:
        """Pin country (new identities) or a pooled customer (pool consumers) for this record."""
        if context.country is None and schema.has_type(FieldType.CUSTOMER_ID):
            context = context.evolve(country=self.probabilities.country.draw(self.rng))
        if (
            context.country is None
            and context.customer_id is None
            and schema.has_type(*POOL_SOURCED_TYPES)
        ):
            customer = self.customer_pool.draw_random()
            context = context.evolve(selected_customer=customer, country=customer.country)
        return context

    def resolve(
        self, schema: Schema, context: GenerationContext | None = None
    ) -> dict[str, Any]:
        ctx = self.prepare_context(schema, context or GenerationContext())
        record: dict[str, Any] = {}
        for field in schema.fields:
            try:
                value = self.generator.generate(field, ctx, self)
            except Exception:
                logger.error(
                    "Failed generating field %s (type %s) of schema %s",
                    field.name,
                    field.type.value,
                    schema.name,
                )
                raise
            record[field.name] = value
            ctx = advance_context(ctx, field, value, self.customer_pool)
        return record
