from __future__ import annotations

from dataclasses import dataclass

from herdline.application.errors import ValidationError
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.application.use_cases.genealogy import load_lineage
from herdline.application.use_cases.genealogy.check_inbreeding_risk import assess_loaded
from herdline.domain.models.animal import Animal
from herdline.domain.services import predictions
from herdline.domain.services.predictions import PairingPrediction
from herdline.domain.value_objects.animal_status import AnimalStatus
from herdline.domain.value_objects.gender import Gender

MAX_SUGGESTIONS = 50


@dataclass(slots=True)
class BreedingSuggestion:
    male: Animal
    female: Animal
    prediction: PairingPrediction


async def execute(uow: UnitOfWork, species: str, limit: int = 5) -> list[BreedingSuggestion]:
    if limit <= 0 or limit > MAX_SUGGESTIONS:
        raise ValidationError(f"limit must be between 1 and {MAX_SUGGESTIONS}")
    species = species.strip().lower()
    active = AnimalStatus.ACTIVE.value
    males = await uow.animals.list(species=species, gender=Gender.MALE.value, status=active)
    females = await uow.animals.list(species=species, gender=Gender.FEMALE.value, status=active)
    if not males or not females:
        return []
    lineage = await load_lineage.execute(uow, [*males, *females])

    suggestions = []
    for male in males:
        for female in females:
            assessment = assess_loaded(male.id, female.id, male, female, lineage)
            if assessment.is_risky:
                continue
            suggestions.append(
                BreedingSuggestion(
                    male=male,
                    female=female,
                    prediction=predictions.predict(male, female, is_risky=False),
                )
            )
    suggestions.sort(
        key=lambda s: (
            -s.prediction.genetic_compatibility_score,
            -s.prediction.predicted_roi,
            s.male.id,
            s.female.id,
        )
    )
    return suggestions[:limit]
