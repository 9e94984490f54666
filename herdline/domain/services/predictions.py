"""Predictive breeding metrics.

All values are plain functions of the two parent records and the risk verdict
for the pair; they are computed once when a breeding event is created.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from herdline.domain.models.animal import DEFAULT_TRAIT_SCORE, Animal
from herdline.domain.value_objects import species as species_constants

BASE_COMPATIBILITY = 90
INBREEDING_COMPATIBILITY_PENALTY = 30
MIN_COMPATIBILITY, MAX_COMPATIBILITY = 30, 100

INBREEDING_HEALTH_FACTOR = 0.85
HYBRID_VIGOR_FACTOR = 1.05
MIN_HEALTH, MAX_HEALTH = 60, 100

COST_SHARE_OF_VALUE = 0.4


@dataclass(frozen=True, slots=True)
class PairingPrediction:
    genetic_compatibility_score: int
    predicted_litter_size: int
    predicted_offspring_health: int
    predicted_roi: int


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def genetic_compatibility(is_risky: bool) -> int:
    score = BASE_COMPATIBILITY
    if is_risky:
        score -= INBREEDING_COMPATIBILITY_PENALTY
    return int(clamp(score, MIN_COMPATIBILITY, MAX_COMPATIBILITY))


def litter_size(female: Animal, species: str | None = None) -> int:
    base = female.litter_size
    if base is None:
        base = species_constants.base_litter_size(species or female.species)
    fertility = female.fertility if female.fertility is not None else DEFAULT_TRAIT_SCORE
    return max(0, round_half_up(base * fertility / DEFAULT_TRAIT_SCORE))


def offspring_health(male: Animal, female: Animal, is_risky: bool) -> int:
    male_health = male.health if male.health is not None else DEFAULT_TRAIT_SCORE
    female_health = female.health if female.health is not None else DEFAULT_TRAIT_SCORE
    health = (male_health + female_health) / 2
    if is_risky:
        health *= INBREEDING_HEALTH_FACTOR
    if male.breed != female.breed:
        health *= HYBRID_VIGOR_FACTOR
    return round_half_up(clamp(health, MIN_HEALTH, MAX_HEALTH))


def projected_roi(species: str | None, litter: int, health: int) -> int:
    value = species_constants.value_per_offspring(species)
    revenue = litter * value * (health / DEFAULT_TRAIT_SCORE)
    cost = litter * (value * COST_SHARE_OF_VALUE)
    return round_half_up(revenue - cost)


def predict(male: Animal, female: Animal, is_risky: bool) -> PairingPrediction:
    species = female.species or male.species
    litter = litter_size(female, species)
    health = offspring_health(male, female, is_risky)
    return PairingPrediction(
        genetic_compatibility_score=genetic_compatibility(is_risky),
        predicted_litter_size=litter,
        predicted_offspring_health=health,
        predicted_roi=projected_roi(species, litter, health),
    )


def actual_roi(
    predicted_roi: int | None, predicted_litter_size: int | None, actual_offspring_count: int
) -> int | None:
    """Scale the predicted ROI by how the real litter compares to the prediction."""
    if predicted_roi is None or not predicted_litter_size or predicted_litter_size <= 0:
        return None
    return round_half_up(predicted_roi * (actual_offspring_count / predicted_litter_size))
