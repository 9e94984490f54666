from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from herdline.application.errors import InvalidGender, NotFound, ValidationError
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.application.use_cases.genealogy import predict_pairing
from herdline.domain.models.animal import Animal
from herdline.domain.models.breeding_event import BreedingEvent
from herdline.domain.value_objects.gender import Gender

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateBreedingEventInput:
    male_id: int
    female_id: int
    breeding_date: date
    event_code: str | None = None
    pair_code: str | None = None
    expected_birth_date: date | None = None
    nest_box_date: date | None = None
    was_planned: bool = True
    breeding_purpose: str = "commercial"
    male_weight: float | None = None
    female_weight: float | None = None
    # Predicted metrics; computed when left as None
    genetic_compatibility_score: int | None = None
    predicted_litter_size: int | None = None
    predicted_offspring_health: int | None = None
    predicted_roi: int | None = None
    expected_offspring_count: int | None = None
    notes: str | None = None
    tags: list[str] = field(default_factory=list)


def default_pair_code(male: Animal, female: Animal) -> str:
    return f"{male.animal_code}_{female.animal_code}"


def default_event_code(male: Animal, female: Animal, breeding_date: date) -> str:
    return f"BE-{default_pair_code(male, female)}-{breeding_date:%Y%m%d}"


def ensure_valid_pair(male: Animal, female: Animal) -> None:
    if male.gender == female.gender:
        raise InvalidGender("Breeding partners must be of different genders")
    if male.gender != Gender.MALE.value or female.gender != Gender.FEMALE.value:
        raise InvalidGender("male_id must reference a male and female_id a female")
    if male.species != female.species:
        raise ValidationError("Breeding partners must be of the same species")


async def execute(uow: UnitOfWork, payload: CreateBreedingEventInput) -> BreedingEvent:
    if payload.breeding_date is None:
        raise ValidationError("breeding_date is required")
    male = await uow.animals.get(payload.male_id)
    if not male:
        raise NotFound(f"Animal {payload.male_id} not found")
    female = await uow.animals.get(payload.female_id)
    if not female:
        raise NotFound(f"Animal {payload.female_id} not found")
    ensure_valid_pair(male, female)

    metrics = {
        "genetic_compatibility_score": payload.genetic_compatibility_score,
        "predicted_litter_size": payload.predicted_litter_size,
        "predicted_offspring_health": payload.predicted_offspring_health,
        "predicted_roi": payload.predicted_roi,
    }
    if any(value is None for value in metrics.values()):
        result = await predict_pairing.predict_for(uow, male, female)
        for name, value in metrics.items():
            if value is None:
                metrics[name] = getattr(result.prediction, name)
        if result.assessment.is_risky:
            logger.warning(
                "Breeding event for %s x %s created despite risk: %s",
                male.animal_code,
                female.animal_code,
                result.assessment.relationship,
            )

    expected_offspring_count = payload.expected_offspring_count
    if expected_offspring_count is None:
        expected_offspring_count = metrics["predicted_litter_size"]

    event = BreedingEvent.create(
        event_code=payload.event_code or default_event_code(male, female, payload.breeding_date),
        pair_code=payload.pair_code or default_pair_code(male, female),
        male_id=male.id,
        female_id=female.id,
        breeding_date=payload.breeding_date,
        species=female.species,
        expected_birth_date=payload.expected_birth_date,
        nest_box_date=payload.nest_box_date,
        was_planned=payload.was_planned,
        breeding_purpose=payload.breeding_purpose,
        male_weight=payload.male_weight,
        female_weight=payload.female_weight,
        expected_offspring_count=expected_offspring_count,
        notes=payload.notes,
        tags=payload.tags,
        **metrics,
    )
    created = await uow.breeding_events.add(event)
    await uow.commit()
    logger.info(
        "Breeding event %s created (expected birth %s)",
        created.event_code,
        created.expected_birth_date,
    )
    return created
