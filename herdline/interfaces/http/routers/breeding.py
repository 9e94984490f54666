from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from herdline.application.use_cases.genealogy import (
    check_inbreeding_risk,
    predict_pairing,
    suggest_breeding_pairs,
)
from herdline.config.settings import Settings
from herdline.interfaces.http.deps import get_app_settings, get_uow
from herdline.interfaces.http.schemas.breeding import (
    BreedingSuggestionResponse,
    PairingPredictionResponse,
    PairRequest,
    PredictionResponse,
    RiskCheckResponse,
)

router = APIRouter(prefix="/breeding", tags=["breeding"])


@router.post("/risk-check", response_model=RiskCheckResponse)
async def risk_check_endpoint(payload: PairRequest, uow=Depends(get_uow)):
    return await check_inbreeding_risk.execute(uow, payload.male_id, payload.female_id)


@router.post("/predictions", response_model=PairingPredictionResponse)
async def predict_pairing_endpoint(payload: PairRequest, uow=Depends(get_uow)):
    result = await predict_pairing.execute(uow, payload.male_id, payload.female_id)
    return PairingPredictionResponse(
        risk=RiskCheckResponse.model_validate(result.assessment),
        prediction=PredictionResponse.model_validate(result.prediction),
    )


@router.get("/suggestions", response_model=list[BreedingSuggestionResponse])
async def suggestions_endpoint(
    species: str = Query("rabbit", min_length=1),
    limit: int | None = Query(None, ge=1, le=suggest_breeding_pairs.MAX_SUGGESTIONS),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    suggestions = await suggest_breeding_pairs.execute(
        uow, species, limit=limit or settings.suggestions_limit
    )
    return [
        BreedingSuggestionResponse(
            male_id=s.male.id,
            male_name=s.male.name,
            female_id=s.female.id,
            female_name=s.female.name,
            compatibility_score=s.prediction.genetic_compatibility_score,
            prediction=PredictionResponse.model_validate(s.prediction),
        )
        for s in suggestions
    ]
