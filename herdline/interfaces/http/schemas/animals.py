from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnimalBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    species: str = Field(default="rabbit", min_length=1, max_length=32)
    gender: str
    breed: str | None = None
    breed_id: int | None = None
    secondary_breed_id: int | None = None
    is_mixed: bool = False
    mix_ratio: str | None = None
    date_of_birth: date | None = None
    weight: float | None = Field(default=None, ge=0)
    color: str | None = None
    markings: str | None = None
    pedigree_level: int = Field(default=0, ge=0, le=5)
    health: int | None = Field(default=85, ge=0, le=100)
    fertility: int | None = Field(default=85, ge=0, le=100)
    growth_rate: int | None = Field(default=85, ge=0, le=100)
    litter_size: int | None = Field(default=None, ge=0)
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("gender")
    @classmethod
    def normalize_gender(cls, v: str) -> str:
        return v.strip().lower()


class AnimalCreate(AnimalBase):
    animal_code: str | None = Field(default=None, max_length=64)
    status: str = "active"
    # Genealogy fields
    parent_male_id: int | None = None
    parent_female_id: int | None = None
    ancestry: list[str] = Field(default_factory=list)


class AnimalUpdate(BaseModel):
    version: int
    name: str | None = None
    breed: str | None = None
    breed_id: int | None = None
    secondary_breed_id: int | None = None
    is_mixed: bool | None = None
    mix_ratio: str | None = None
    date_of_birth: date | None = None
    weight: float | None = Field(default=None, ge=0)
    color: str | None = None
    markings: str | None = None
    pedigree_level: int | None = Field(default=None, ge=0, le=5)
    health: int | None = Field(default=None, ge=0, le=100)
    fertility: int | None = Field(default=None, ge=0, le=100)
    growth_rate: int | None = Field(default=None, ge=0, le=100)
    litter_size: int | None = Field(default=None, ge=0)
    status: str | None = None
    notes: str | None = None
    tags: list[str] | None = None


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    animal_code: str
    name: str
    species: str
    gender: str
    breed: str | None
    breed_id: int | None
    secondary_breed_id: int | None
    is_mixed: bool
    mix_ratio: str | None
    date_of_birth: date | None
    weight: float | None
    color: str | None
    markings: str | None
    parent_male_id: int | None
    parent_female_id: int | None
    generation: int
    ancestry: list[str]
    pedigree_level: int
    health: int | None
    fertility: int | None
    growth_rate: int | None
    litter_size: int | None
    offspring_count: int
    status: str
    notes: str | None
    tags: list[str]
    created_at: datetime
    updated_at: datetime
    version: int


class AnimalsListResponse(BaseModel):
    items: list[AnimalResponse]
    total: int
    limit: int
    offset: int
