from __future__ import annotations

import random
from typing import Protocol

from herdline.domain.models.animal import Animal, inherited_ancestry
from herdline.domain.models.breeding_event import BreedingEvent
from herdline.domain.services.predictions import MAX_HEALTH, MIN_HEALTH, clamp, round_half_up
from herdline.domain.value_objects import species as species_constants
from herdline.domain.value_objects.animal_status import AnimalStatus
from herdline.domain.value_objects.gender import Gender

HEALTH_VARIATION = 5
DEFAULT_INHERITED_FERTILITY = 90
DEFAULT_PARENT_HEALTH = 85
MIXED_BREED_RATIO = "50/50"


class RandomSource(Protocol):
    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...


def offspring_code(pair_code: str, index: int) -> str:
    return f"{pair_code}_{index:02d}"


class OffspringGenerator:
    """Builds offspring records from two parents and a birth event.

    Gender and the health jitter are the only random parts; both come from the
    injected ``rng`` so a seeded source gives reproducible litters.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        self.rng = rng or random.Random()

    def _breed(self, male: Animal, female: Animal) -> dict:
        if male.breed == female.breed or not male.breed or not female.breed:
            source = female if female.breed else male
            return {
                "breed": source.breed,
                "breed_id": source.breed_id,
                "secondary_breed_id": source.secondary_breed_id,
                "is_mixed": source.is_mixed,
                "mix_ratio": source.mix_ratio,
            }
        return {
            "breed": f"{male.breed}/{female.breed}",
            "breed_id": male.breed_id,
            "secondary_breed_id": female.breed_id,
            "is_mixed": True,
            "mix_ratio": MIXED_BREED_RATIO,
        }

    def _gender(self, species: str) -> Gender:
        if self.rng.random() < species_constants.male_ratio(species):
            return Gender.MALE
        return Gender.FEMALE

    def _health(self, male: Animal, female: Animal) -> int:
        male_health = male.health if male.health is not None else DEFAULT_PARENT_HEALTH
        female_health = female.health if female.health is not None else DEFAULT_PARENT_HEALTH
        base = (male_health + female_health) / 2
        jitter = self.rng.randint(-HEALTH_VARIATION, HEALTH_VARIATION)
        return round_half_up(clamp(base + jitter, MIN_HEALTH, MAX_HEALTH))

    def generate(
        self, male: Animal, female: Animal, event: BreedingEvent, index: int
    ) -> Animal:
        species = female.species or male.species
        gender = self._gender(species)
        same_gender_parent = male if gender is Gender.MALE else female
        fertility = same_gender_parent.fertility
        if fertility is None:
            fertility = DEFAULT_INHERITED_FERTILITY
        growth_rates = [g for g in (male.growth_rate, female.growth_rate) if g is not None]

        return Animal.create(
            animal_code=offspring_code(event.pair_code, index),
            name=f"Offspring {index} of {female.name}",
            species=species,
            gender=gender.value,
            date_of_birth=event.actual_birth_date,
            parent_male_id=male.id,
            parent_female_id=female.id,
            generation=max(male.generation or 0, female.generation or 0) + 1,
            ancestry=inherited_ancestry(male, female),
            pedigree_level=min(male.pedigree_level or 0, female.pedigree_level or 0),
            health=self._health(male, female),
            fertility=fertility,
            growth_rate=(
                round_half_up(sum(growth_rates) / len(growth_rates)) if growth_rates else None
            ),
            status=AnimalStatus.ACTIVE.value,
            notes=f"Offspring from breeding event {event.event_code}",
            **self._breed(male, female),
        )
