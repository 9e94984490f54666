from __future__ import annotations

from dataclasses import dataclass

from herdline.application.errors import NotFound
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.application.use_cases.genealogy import check_inbreeding_risk
from herdline.application.use_cases.genealogy.check_inbreeding_risk import RiskAssessment
from herdline.domain.models.animal import Animal
from herdline.domain.services import predictions
from herdline.domain.services.predictions import PairingPrediction


@dataclass(slots=True)
class PairingPredictionOutput:
    assessment: RiskAssessment
    prediction: PairingPrediction


async def predict_for(uow: UnitOfWork, male: Animal, female: Animal) -> PairingPredictionOutput:
    assessment = await check_inbreeding_risk.assess(uow, male, female)
    prediction = predictions.predict(male, female, assessment.is_risky)
    return PairingPredictionOutput(assessment=assessment, prediction=prediction)


async def execute(uow: UnitOfWork, male_id: int, female_id: int) -> PairingPredictionOutput:
    male = await uow.animals.get(male_id)
    if not male:
        raise NotFound(f"Animal {male_id} not found")
    female = await uow.animals.get(female_id)
    if not female:
        raise NotFound(f"Animal {female_id} not found")
    return await predict_for(uow, male, female)
