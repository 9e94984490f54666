"""Species-specific constants used by the breeding engine.

Unknown species fall back to the ``DEFAULT_*`` values.
"""

from __future__ import annotations

DEFAULT_GESTATION_DAYS = 30
GESTATION_DAYS: dict[str, int] = {
    "rabbit": 31,
    "goat": 150,
    # Incubation for egg-laying species
    "chicken": 21,
    "duck": 28,
}

NEST_BOX_LEAD_DAYS = 3
WEAN_DAYS = 56

# Upper bound on offspring recorded for a single birth
MAX_LITTER_SIZE = 30

DEFAULT_BASE_LITTER_SIZE = 6
BASE_LITTER_SIZE: dict[str, int] = {
    "rabbit": 6,
    "goat": 2,
    "chicken": 8,
    "duck": 10,
}

DEFAULT_VALUE_PER_OFFSPRING = 25
VALUE_PER_OFFSPRING: dict[str, int] = {
    "rabbit": 30,
    "goat": 200,
    "chicken": 5,
    "duck": 7,
}

DEFAULT_MALE_RATIO = 0.5
MALE_RATIO: dict[str, float] = {
    "rabbit": 0.45,
}


def _key(species: str | None) -> str:
    return (species or "").strip().lower()


def gestation_days(species: str | None) -> int:
    return GESTATION_DAYS.get(_key(species), DEFAULT_GESTATION_DAYS)


def base_litter_size(species: str | None) -> int:
    return BASE_LITTER_SIZE.get(_key(species), DEFAULT_BASE_LITTER_SIZE)


def value_per_offspring(species: str | None) -> int:
    return VALUE_PER_OFFSPRING.get(_key(species), DEFAULT_VALUE_PER_OFFSPRING)


def male_ratio(species: str | None) -> float:
    return MALE_RATIO.get(_key(species), DEFAULT_MALE_RATIO)
