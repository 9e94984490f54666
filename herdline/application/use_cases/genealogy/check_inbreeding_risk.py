from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.application.use_cases.genealogy import load_lineage
from herdline.domain.models.animal import Animal
from herdline.domain.services import genealogy, risk_policy
from herdline.domain.value_objects.relationship import Relationship


@dataclass(slots=True)
class RiskAssessment:
    male_id: int
    female_id: int
    is_risky: bool
    relationship: str
    reason: str
    relationship_degree: int | None = None
    shared_ancestors: list[str] = field(default_factory=list)


def assess_loaded(
    male_id: int,
    female_id: int,
    male: Animal | None,
    female: Animal | None,
    lineage: Mapping[int, Animal],
) -> RiskAssessment:
    relationship: Relationship = genealogy.classify(male, female, lineage)
    verdict = risk_policy.evaluate(relationship)
    return RiskAssessment(
        male_id=male_id,
        female_id=female_id,
        is_risky=verdict.is_risky,
        relationship=relationship.kind.value,
        reason=verdict.reason,
        relationship_degree=relationship.degree,
        shared_ancestors=list(relationship.shared_ancestors),
    )


async def assess(uow: UnitOfWork, male: Animal, female: Animal) -> RiskAssessment:
    lineage = await load_lineage.execute(uow, [male, female])
    return assess_loaded(male.id, female.id, male, female, lineage)


async def execute(uow: UnitOfWork, male_id: int, female_id: int) -> RiskAssessment:
    # A missing animal is reported as not-found/unrelated rather than raised
    male = await uow.animals.get(male_id)
    female = await uow.animals.get(female_id)
    if male is None or female is None:
        return assess_loaded(male_id, female_id, male, female, {})
    return await assess(uow, male, female)
