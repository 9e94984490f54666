from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from herdline.domain.value_objects.species import MAX_LITTER_SIZE
from herdline.interfaces.http.schemas.animals import AnimalResponse


class BreedingEventCreate(BaseModel):
    male_id: int = Field(gt=0)
    female_id: int = Field(gt=0)
    breeding_date: date
    event_code: str | None = Field(default=None, max_length=128)
    pair_code: str | None = Field(default=None, max_length=128)
    expected_birth_date: date | None = None
    nest_box_date: date | None = None
    was_planned: bool = True
    breeding_purpose: str = "commercial"
    male_weight: float | None = Field(default=None, ge=0)
    female_weight: float | None = Field(default=None, ge=0)
    genetic_compatibility_score: int | None = Field(default=None, ge=0, le=100)
    predicted_litter_size: int | None = Field(default=None, ge=0)
    predicted_offspring_health: int | None = Field(default=None, ge=0, le=100)
    predicted_roi: int | None = None
    expected_offspring_count: int | None = Field(default=None, ge=0)
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)


class BreedingEventUpdate(BaseModel):
    version: int
    status: str | None = None
    nest_box_date: date | None = None
    wean_date: date | None = None
    success_rating: int | None = Field(default=None, ge=1, le=10)
    was_planned: bool | None = None
    breeding_purpose: str | None = None
    male_weight: float | None = Field(default=None, ge=0)
    female_weight: float | None = Field(default=None, ge=0)
    notes: str | None = None
    tags: list[str] | None = None


class RecordBirthRequest(BaseModel):
    actual_birth_date: date
    actual_offspring_count: int = Field(ge=0, le=MAX_LITTER_SIZE)
    wean_date: date | None = None
    notes: str | None = None


class BreedingEventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_code: str
    pair_code: str
    male_id: int
    female_id: int
    breeding_date: date
    nest_box_date: date | None
    expected_birth_date: date | None
    actual_birth_date: date | None
    wean_date: date | None
    status: str
    success_rating: int | None
    was_planned: bool
    breeding_purpose: str
    male_weight: float | None
    female_weight: float | None
    genetic_compatibility_score: int | None
    predicted_litter_size: int | None
    predicted_offspring_health: int | None
    predicted_roi: int | None
    expected_offspring_count: int | None
    actual_offspring_count: int | None
    offspring_count: int
    offspring_ids: list[int]
    actual_roi: int | None
    notes: str | None
    tags: list[str]
    created_at: datetime
    updated_at: datetime
    version: int


class BreedingEventListResponse(BaseModel):
    items: list[BreedingEventResponse]
    total: int
    limit: int
    offset: int


class RecordBirthResponse(BaseModel):
    event: BreedingEventResponse
    offspring: list[AnimalResponse]
