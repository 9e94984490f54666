from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date

from herdline.application.errors import InvalidGender, NotFound, ValidationError
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.domain.models.animal import DEFAULT_TRAIT_SCORE, Animal, inherited_ancestry
from herdline.domain.value_objects.animal_status import AnimalStatus
from herdline.domain.value_objects.gender import Gender

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateAnimalInput:
    name: str
    species: str
    gender: str
    animal_code: str | None = None
    breed: str | None = None
    breed_id: int | None = None
    secondary_breed_id: int | None = None
    is_mixed: bool = False
    mix_ratio: str | None = None
    date_of_birth: date | None = None
    weight: float | None = None
    color: str | None = None
    markings: str | None = None
    # Genealogy fields
    parent_male_id: int | None = None
    parent_female_id: int | None = None
    ancestry: list[str] = field(default_factory=list)
    pedigree_level: int = 0
    # Performance traits
    health: int | None = DEFAULT_TRAIT_SCORE
    fertility: int | None = DEFAULT_TRAIT_SCORE
    growth_rate: int | None = DEFAULT_TRAIT_SCORE
    litter_size: int | None = None
    status: str = AnimalStatus.ACTIVE.value
    notes: str | None = None
    tags: list[str] = field(default_factory=list)


def validate_gender(value: str) -> Gender:
    try:
        return Gender(value.lower())
    except ValueError as exc:
        raise ValidationError(f"Invalid gender '{value}'. Must be 'male' or 'female'") from exc


def validate_status(value: str) -> str:
    valid = {s.value for s in AnimalStatus}
    if value not in valid:
        raise ValidationError(f"Invalid status. Must be one of: {', '.join(sorted(valid))}")
    return value


async def next_animal_code(uow: UnitOfWork, species: str, gender: Gender) -> str:
    """Generate the next free ``M{n}`` / ``F{n}`` code within a species."""
    prefix = "M" if gender is Gender.MALE else "F"
    pattern = re.compile(rf"^{prefix}(\d+)$")
    numbers = []
    for code in await uow.animals.list_codes(species, prefix=prefix):
        match = pattern.match(code)
        if match:
            numbers.append(int(match.group(1)))
    return f"{prefix}{max(numbers, default=0) + 1}"


async def _load_parent(
    uow: UnitOfWork, parent_id: int, species: str, expected: Gender
) -> Animal:
    parent = await uow.animals.get(parent_id)
    if not parent:
        raise NotFound(f"Parent animal {parent_id} not found")
    if parent.species != species:
        raise ValidationError("Parents must be of the same species as the animal")
    if parent.gender != expected.value:
        raise InvalidGender(f"Parent {parent_id} must be {expected.value}")
    return parent


async def execute(uow: UnitOfWork, payload: CreateAnimalInput) -> Animal:
    species = payload.species.strip().lower()
    if not species:
        raise ValidationError("species is required")
    gender = validate_gender(payload.gender)
    status = validate_status(payload.status)

    sire = dam = None
    if payload.parent_male_id is not None:
        sire = await _load_parent(uow, payload.parent_male_id, species, Gender.MALE)
    if payload.parent_female_id is not None:
        dam = await _load_parent(uow, payload.parent_female_id, species, Gender.FEMALE)

    ancestry = list(dict.fromkeys(payload.ancestry))
    generation = 0
    if sire and dam:
        ancestry = inherited_ancestry(sire, dam, extra=ancestry)
        generation = max(sire.generation, dam.generation) + 1
    elif sire or dam:
        parent = sire or dam
        ancestry = list(dict.fromkeys([*parent.ancestry, *ancestry, parent.ancestry_token]))
        generation = parent.generation + 1

    animal_code = payload.animal_code or await next_animal_code(uow, species, gender)
    animal = Animal.create(
        animal_code=animal_code,
        name=payload.name,
        species=species,
        gender=gender.value,
        breed=payload.breed,
        breed_id=payload.breed_id,
        secondary_breed_id=payload.secondary_breed_id,
        is_mixed=payload.is_mixed,
        mix_ratio=payload.mix_ratio,
        date_of_birth=payload.date_of_birth,
        weight=payload.weight,
        color=payload.color,
        markings=payload.markings,
        parent_male_id=payload.parent_male_id,
        parent_female_id=payload.parent_female_id,
        generation=generation,
        ancestry=ancestry,
        pedigree_level=payload.pedigree_level,
        health=payload.health,
        fertility=payload.fertility,
        growth_rate=payload.growth_rate,
        litter_size=payload.litter_size,
        status=status,
        notes=payload.notes,
        tags=payload.tags,
    )
    created = await uow.animals.add(animal)
    await uow.commit()
    logger.info("Animal %s (%s) created with id %s", created.animal_code, species, created.id)
    return created
