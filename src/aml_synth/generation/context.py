"""Per-record generation context, folded forward field by field."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from aml_synth.schemas import Country, CustomerPoolEntry


@dataclass(frozen=True)
class GenerationContext:
    """Identity and locale pinned for one record and inherited by its nested objects."""

    customer_id: int | None = None
    account_id: str | None = None
    account_number: str | None = None
    country: Country | None = None
    selected_customer: CustomerPoolEntry | None = None

    def evolve(self, **changes: Any) -> GenerationContext:
        return replace(self, **changes)
