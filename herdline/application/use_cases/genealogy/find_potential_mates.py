from __future__ import annotations

import logging

from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.application.use_cases.genealogy import load_lineage
from herdline.application.use_cases.genealogy.check_inbreeding_risk import assess_loaded
from herdline.domain.models.animal import Animal
from herdline.domain.value_objects.animal_status import AnimalStatus
from herdline.domain.value_objects.gender import Gender

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, animal_id: int) -> list[Animal]:
    """Active, opposite-gender animals of the same species with no inbreeding risk.

    Returns an empty list when the subject animal does not exist.
    """
    subject = await uow.animals.get(animal_id)
    if not subject:
        return []
    try:
        opposite = Gender(subject.gender).opposite()
    except ValueError:
        logger.warning(
            "Animal %s has unknown gender %r; no potential mates", animal_id, subject.gender
        )
        return []

    candidates = await uow.animals.list(
        species=subject.species,
        gender=opposite.value,
        status=AnimalStatus.ACTIVE.value,
        exclude_id=subject.id,
    )
    lineage = await load_lineage.execute(uow, [subject, *candidates])

    mates = []
    for candidate in candidates:
        male, female = (subject, candidate) if opposite is Gender.FEMALE else (candidate, subject)
        assessment = assess_loaded(male.id, female.id, male, female, lineage)
        if not assessment.is_risky:
            mates.append(candidate)
    logger.debug(
        "Animal %s: %d of %d candidates are safe mates", animal_id, len(mates), len(candidates)
    )
    return sorted(mates, key=lambda a: a.id)
