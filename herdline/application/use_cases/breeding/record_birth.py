from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from herdline.application.errors import ConflictError, NotFound, ValidationError
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.domain.models.animal import Animal
from herdline.domain.models.breeding_event import BreedingEvent
from herdline.domain.services import predictions
from herdline.domain.services.offspring import OffspringGenerator
from herdline.domain.value_objects import species as species_constants
from herdline.domain.value_objects.breeding_status import BreedingEventStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordBirthInput:
    actual_birth_date: date
    actual_offspring_count: int
    wean_date: date | None = None
    notes: str | None = None


@dataclass(slots=True)
class RecordBirthOutput:
    event: BreedingEvent
    offspring: list[Animal] = field(default_factory=list)


async def _first_offspring_index(uow: UnitOfWork, event: BreedingEvent) -> int:
    # Continue numbering after earlier litters of the same pair so codes stay unique
    earlier = await uow.breeding_events.list(pair_code=event.pair_code)
    born = sum(len(e.offspring_ids) for e in earlier if e.id != event.id)
    return born + 1


async def _add_offspring_to_parent(uow: UnitOfWork, parent: Animal, count: int) -> None:
    updated = await uow.animals.update(
        parent.id,
        data={"offspring_count": (parent.offspring_count or 0) + count},
        expected_version=parent.version,
    )
    if not updated:
        raise ConflictError(f"Animal {parent.id} changed while recording birth")


async def execute(
    uow: UnitOfWork,
    event_id: int,
    payload: RecordBirthInput,
    generator: OffspringGenerator | None = None,
) -> RecordBirthOutput:
    """Record the birth outcome of a breeding event and create the offspring.

    Birth can be recorded once per event. The final event write is guarded by
    the version read here, so when two calls race, the loser raises
    ``ConflictError`` and its unit of work (offspring included) is rolled back.
    """
    if payload.actual_birth_date is None:
        raise ValidationError("actual_birth_date is required")
    if payload.actual_offspring_count is None or payload.actual_offspring_count < 0:
        raise ValidationError("actual_offspring_count must be zero or positive")
    if payload.actual_offspring_count > species_constants.MAX_LITTER_SIZE:
        raise ValidationError(
            f"actual_offspring_count cannot exceed {species_constants.MAX_LITTER_SIZE}"
        )

    event = await uow.breeding_events.get(event_id)
    if not event:
        raise NotFound("Breeding event not found")
    if event.offspring_ids:
        raise ConflictError("Birth has already been recorded for this breeding event")
    if event.status != BreedingEventStatus.PENDING.value:
        raise ConflictError(f"Cannot record birth on a '{event.status}' breeding event")
    if payload.actual_birth_date < event.breeding_date:
        raise ValidationError("actual_birth_date cannot precede breeding_date")
    expected_version = event.version

    male = await uow.animals.get(event.male_id)
    if not male:
        raise NotFound(f"Animal {event.male_id} not found")
    female = await uow.animals.get(event.female_id)
    if not female:
        raise NotFound(f"Animal {event.female_id} not found")

    generator = generator or OffspringGenerator()
    count = payload.actual_offspring_count
    event.actual_birth_date = payload.actual_birth_date
    start = await _first_offspring_index(uow, event) if count else 1
    offspring = []
    for index in range(start, start + count):
        child = generator.generate(male, female, event, index)
        offspring.append(await uow.animals.add(child))

    if offspring:
        await _add_offspring_to_parent(uow, male, count)
        await _add_offspring_to_parent(uow, female, count)

    event.record_birth(
        actual_birth_date=payload.actual_birth_date,
        offspring_ids=[child.id for child in offspring],
        actual_roi=predictions.actual_roi(
            event.predicted_roi, event.predicted_litter_size, count
        ),
        wean_date=payload.wean_date,
    )
    if payload.notes:
        event.notes = payload.notes
    updated = await uow.breeding_events.update(event, expected_version=expected_version)
    if not updated:
        raise ConflictError("Breeding event changed while recording birth")
    await uow.commit()
    logger.info(
        "Birth recorded for breeding event %s: %d offspring, actual ROI %s",
        updated.event_code,
        count,
        updated.actual_roi,
    )
    return RecordBirthOutput(event=updated, offspring=offspring)
