"""Near-miss variants of pooled identities and nominee share splits."""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import date

VOWELS = "aeiou"
TRAILING_SUBSTITUTES = "ahne"


def _first_vowel_index(name: str) -> int | None:
    for i, ch in enumerate(name):
        if ch.lower() in VOWELS:
            return i
    return None


def swap_vowel(name: str, rng: random.Random) -> str:
    """Replace the first vowel (any case) with a random lowercase vowel."""
    i = _first_vowel_index(name)
    if i is None:
        return name
    return name[:i] + rng.choice(VOWELS) + name[i + 1 :]


def transpose_first_two(name: str, rng: random.Random) -> str:
    if len(name) < 2:
        return name
    return name[1] + name[0] + name[2:]


def replace_last_char(name: str, rng: random.Random) -> str:
    return name[:-1] + rng.choice(TRAILING_SUBSTITUTES)


def remove_spaces(name: str, rng: random.Random) -> str:
    return name.replace(" ", "")


FUZZY_TRANSFORMS: tuple[Callable[[str, random.Random], str], ...] = (
    swap_vowel,
    transpose_first_two,
    replace_last_char,
    remove_spaces,
)


def apply_fuzzy_name(name: str, rng: random.Random) -> str:
    """Apply one randomly chosen fuzzy transform."""
    return rng.choice(FUZZY_TRANSFORMS)(name, rng)


def fuzzy_variants(name: str) -> set[str]:
    """Every string any fuzzy transform can produce from `name`."""
    out = {name.replace(" ", "")}
    out.update(name[:-1] + c for c in TRAILING_SUBSTITUTES)
    if len(name) >= 2:
        out.add(name[1] + name[0] + name[2:])
    i = _first_vowel_index(name)
    if i is not None:
        out.update(name[:i] + v + name[i + 1 :] for v in VOWELS)
    return out


def partial_dob(dob: str, rng: random.Random) -> str:
    """Same month/day, year shifted by 1 or 2 in either direction."""
    original = date.fromisoformat(dob[:10])
    year = original.year + rng.choice((-2, -1, 1, 2))
    try:
        return original.replace(year=year).isoformat()
    except ValueError:
        # 29 February into a non-leap year
        return original.replace(year=year, day=28).isoformat()


def share_percentages(count: int, rng: random.Random) -> list[int]:
    """Positive integers summing to exactly 100, from distinct sorted cut points in [1, 99]."""
    if count < 1:
        return []
    if count > 100:
        raise ValueError(f"Cannot split 100% into {count} positive integer shares")
    cuts = sorted(rng.sample(range(1, 100), count - 1))
    shares: list[int] = []
    prev = 0
    for cut in cuts:
        shares.append(cut - prev)
        prev = cut
    shares.append(100 - prev)
    return shares
