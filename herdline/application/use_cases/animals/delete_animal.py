from __future__ import annotations

import logging

from herdline.application.errors import ConflictError, NotFound
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.domain.value_objects.animal_status import AnimalStatus

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, animal_id: int) -> None:
    """Delete an animal that nothing depends on.

    Animals referenced as a parent or by a breeding event are kept and marked
    inactive instead; the status change is committed before ``ConflictError``
    is raised.
    """
    animal = await uow.animals.get(animal_id)
    if not animal:
        raise NotFound("Animal not found")

    is_parent = await uow.animals.has_offspring(animal_id)
    in_events = await uow.breeding_events.count(animal_id=animal_id) > 0
    if is_parent or in_events:
        if animal.status != AnimalStatus.INACTIVE.value:
            updated = await uow.animals.update(
                animal_id,
                data={"status": AnimalStatus.INACTIVE.value},
                expected_version=animal.version,
            )
            if not updated:
                raise ConflictError("Version mismatch while deactivating animal")
            await uow.commit()
            logger.info("Animal %s has dependents; marked inactive instead of deleted", animal_id)
        raise ConflictError(
            "Cannot delete this animal as it has offspring or breeding records",
            details={"status": AnimalStatus.INACTIVE.value},
        )

    deleted = await uow.animals.delete(animal_id)
    if not deleted:
        raise NotFound("Animal not found")
    await uow.commit()
    logger.info("Animal %s deleted", animal_id)
