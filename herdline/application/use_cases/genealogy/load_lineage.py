from __future__ import annotations

import logging
from collections.abc import Iterable

from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.domain.models.animal import Animal
from herdline.domain.services.genealogy import MAX_ANCESTOR_DEPTH

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork, animals: Iterable[Animal], depth: int = MAX_ANCESTOR_DEPTH
) -> dict[int, Animal]:
    """Load the given animals and up to ``depth`` generations of their ancestors.

    Returns an id-indexed arena for the genealogy analyzer. Each generation is
    fetched with a single ``get_many`` call and ids already in the arena are
    never requested again, so a parent cycle cannot loop.
    """
    lineage: dict[int, Animal] = {a.id: a for a in animals if a.id is not None}
    roots = set(lineage)
    frontier = {pid for a in lineage.values() for pid in a.parent_ids} - lineage.keys()
    for _ in range(depth):
        if not frontier:
            break
        loaded = await uow.animals.get_many(sorted(frontier))
        for ancestor in loaded:
            lineage[ancestor.id] = ancestor
        frontier = {
            pid for ancestor in loaded for pid in ancestor.parent_ids if pid not in lineage
        }
    logger.debug(
        "Loaded lineage for %d animals (%d ancestors)", len(roots), len(lineage) - len(roots)
    )
    return lineage
