from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from herdline.application.use_cases.animals import (
    create_animal,
    delete_animal,
    get_animal,
    list_animals,
    update_animal,
)
from herdline.application.use_cases.genealogy import find_potential_mates
from herdline.interfaces.http.deps import get_uow
from herdline.interfaces.http.schemas.animals import (
    AnimalCreate,
    AnimalResponse,
    AnimalsListResponse,
    AnimalUpdate,
)
from herdline.interfaces.http.schemas.breeding import PotentialMatesResponse

router = APIRouter(prefix="/animals", tags=["animals"])


@router.get("", response_model=AnimalsListResponse)
async def list_animals_endpoint(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    species: str | None = Query(None),
    gender: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    uow=Depends(get_uow),
) -> AnimalsListResponse:
    result = await list_animals.execute(
        uow,
        limit=limit,
        offset=offset,
        species=species,
        gender=gender,
        status=status_filter,
    )
    return AnimalsListResponse(
        items=[AnimalResponse.model_validate(item) for item in result.items],
        total=result.total,
        limit=limit,
        offset=offset,
    )


@router.post("", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal_endpoint(payload: AnimalCreate, uow=Depends(get_uow)):
    return await create_animal.execute(
        uow, create_animal.CreateAnimalInput(**payload.model_dump())
    )


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal_endpoint(animal_id: int, uow=Depends(get_uow)):
    return await get_animal.execute(uow, animal_id)


@router.put("/{animal_id}", response_model=AnimalResponse)
async def update_animal_endpoint(animal_id: int, payload: AnimalUpdate, uow=Depends(get_uow)):
    return await update_animal.execute(
        uow, animal_id, update_animal.UpdateAnimalInput(**payload.model_dump())
    )


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal_endpoint(animal_id: int, uow=Depends(get_uow)) -> Response:
    await delete_animal.execute(uow, animal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{animal_id}/potential-mates", response_model=PotentialMatesResponse)
async def potential_mates_endpoint(animal_id: int, uow=Depends(get_uow)):
    mates = await find_potential_mates.execute(uow, animal_id)
    return PotentialMatesResponse(
        animal_id=animal_id,
        items=[AnimalResponse.model_validate(mate) for mate in mates],
    )
