from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from herdline.interfaces.http.schemas.animals import AnimalResponse


class PairRequest(BaseModel):
    male_id: int = Field(gt=0)
    female_id: int = Field(gt=0)


class RiskCheckResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    male_id: int
    female_id: int
    is_risky: bool
    relationship: str
    relationship_degree: int | None
    reason: str
    shared_ancestors: list[str]


class PredictionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    genetic_compatibility_score: int
    predicted_litter_size: int
    predicted_offspring_health: int
    predicted_roi: int


class PairingPredictionResponse(BaseModel):
    risk: RiskCheckResponse
    prediction: PredictionResponse


class BreedingSuggestionResponse(BaseModel):
    male_id: int
    male_name: str
    female_id: int
    female_name: str
    compatibility_score: int
    prediction: PredictionResponse


class PotentialMatesResponse(BaseModel):
    animal_id: int
    items: list[AnimalResponse]
