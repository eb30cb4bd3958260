"""Named probability tables for every random branch the generator takes.

Tables draw with a single rng.random() call so tests can inject a stub random
source and pin the branch.
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, TypeVar

from faker import Faker

T = TypeVar("T")


class MatchStrategy(StrEnum):
    EXACT = "exact"
    PARTIAL = "partial"
    FUZZY = "fuzzy"


@dataclass(frozen=True)
class ProbabilityTable(Generic[T]):
    """Ordered (outcome, weight) pairs; weights sum to 1."""

    name: str
    weights: tuple[tuple[T, float], ...]

    def draw(self, rng: random.Random) -> T:
        r = rng.random()
        cumulative = 0.0
        for outcome, weight in self.weights:
            cumulative += weight
            if r < cumulative:
                return outcome
        # float rounding can leave r just above the last cumulative bound
        return self.weights[-1][0]

    def probability(self, outcome: T) -> float:
        return sum(w for o, w in self.weights if o == outcome)


@dataclass(frozen=True)
class Probabilities:
    """All tables used by generation. Defaults mirror config/default.yaml."""

    country: ProbabilityTable[str] = ProbabilityTable(
        "country_split", (("BD", 0.7), ("US", 0.3))
    )
    match: ProbabilityTable[MatchStrategy] = ProbabilityTable(
        "match_strategy",
        ((MatchStrategy.EXACT, 0.3), (MatchStrategy.PARTIAL, 0.3), (MatchStrategy.FUZZY, 0.4)),
    )
    nationality_match: ProbabilityTable[bool] = ProbabilityTable(
        "nationality_match", ((True, 0.6), (False, 0.4))
    )
    gender: ProbabilityTable[str] = ProbabilityTable(
        "gender", (("male", 0.5), ("female", 0.5))
    )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Probabilities:
        gen = config.get("generation") or {}
        defaults = cls()
        country = defaults.country
        if gen.get("country_weights"):
            country = ProbabilityTable(
                "country_split",
                tuple((k, float(v)) for k, v in gen["country_weights"].items()),
            )
        match = defaults.match
        if gen.get("match_weights"):
            match = ProbabilityTable(
                "match_strategy",
                tuple((MatchStrategy(k), float(v)) for k, v in gen["match_weights"].items()),
            )
        rate = float(gen.get("nationality_match_rate", 0.6))
        nationality = ProbabilityTable("nationality_match", ((True, rate), (False, 1.0 - rate)))
        return cls(country=country, match=match, nationality_match=nationality)


def random_sources(seed: int | None = None, locale: str = "en_US") -> tuple[random.Random, Faker]:
    """Return a Random and a Faker instance seeded from the same value (None = unseeded)."""
    rng = random.Random(seed)
    faker = Faker(locale)
    if seed is not None:
        faker.seed_instance(seed)
    return rng, faker
