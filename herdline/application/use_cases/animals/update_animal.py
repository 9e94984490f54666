from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from herdline.application.errors import ConflictError, NotFound, ValidationError
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.application.use_cases.animals.create_animal import validate_status
from herdline.domain.models.animal import Animal


@dataclass(slots=True)
class UpdateAnimalInput:
    version: int
    name: str | None = None
    breed: str | None = None
    breed_id: int | None = None
    secondary_breed_id: int | None = None
    is_mixed: bool | None = None
    mix_ratio: str | None = None
    date_of_birth: date | None = None
    weight: float | None = None
    color: str | None = None
    markings: str | None = None
    pedigree_level: int | None = None
    health: int | None = None
    fertility: int | None = None
    growth_rate: int | None = None
    litter_size: int | None = None
    status: str | None = None
    notes: str | None = None
    tags: list[str] | None = None


# Lineage (parents, generation, ancestry) is fixed at creation and not listed here
UPDATABLE_FIELDS = (
    "name",
    "breed",
    "breed_id",
    "secondary_breed_id",
    "is_mixed",
    "mix_ratio",
    "date_of_birth",
    "weight",
    "color",
    "markings",
    "pedigree_level",
    "health",
    "fertility",
    "growth_rate",
    "litter_size",
    "status",
    "notes",
    "tags",
)


async def execute(uow: UnitOfWork, animal_id: int, payload: UpdateAnimalInput) -> Animal:
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.animals.get(animal_id)
    if not existing:
        raise NotFound("Animal not found")
    if payload.status is not None:
        validate_status(payload.status)
    data: dict = {}
    for field_name in UPDATABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if not data:
        return existing
    updated = await uow.animals.update(animal_id, data=data, expected_version=payload.version)
    if not updated:
        raise ConflictError("Version mismatch while updating animal")
    await uow.commit()
    return updated
