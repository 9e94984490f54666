from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from herdline.application.use_cases.breeding import (
    create_breeding_event,
    delete_breeding_event,
    get_breeding_event,
    list_breeding_events,
    record_birth,
    update_breeding_event,
)
from herdline.domain.services.offspring import OffspringGenerator
from herdline.interfaces.http.deps import get_offspring_generator, get_uow
from herdline.interfaces.http.schemas.animals import AnimalResponse
from herdline.interfaces.http.schemas.breeding_events import (
    BreedingEventCreate,
    BreedingEventListResponse,
    BreedingEventResponse,
    BreedingEventUpdate,
    RecordBirthRequest,
    RecordBirthResponse,
)

router = APIRouter(prefix="/breeding-events", tags=["breeding-events"])


@router.get("", response_model=BreedingEventListResponse)
async def list_breeding_events_endpoint(
    animal_id: int | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    pair_code: str | None = Query(None),
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    uow=Depends(get_uow),
) -> BreedingEventListResponse:
    result = await list_breeding_events.execute(
        uow,
        limit=limit,
        offset=offset,
        animal_id=animal_id,
        status=status_filter,
        pair_code=pair_code,
    )
    return BreedingEventListResponse(
        items=[BreedingEventResponse.model_validate(item) for item in result.items],
        total=result.total,
        limit=limit,
        offset=offset,
    )


@router.post("", response_model=BreedingEventResponse, status_code=status.HTTP_201_CREATED)
async def create_breeding_event_endpoint(payload: BreedingEventCreate, uow=Depends(get_uow)):
    return await create_breeding_event.execute(
        uow, create_breeding_event.CreateBreedingEventInput(**payload.model_dump())
    )


@router.get("/{event_id}", response_model=BreedingEventResponse)
async def get_breeding_event_endpoint(event_id: int, uow=Depends(get_uow)):
    return await get_breeding_event.execute(uow, event_id)


@router.put("/{event_id}", response_model=BreedingEventResponse)
async def update_breeding_event_endpoint(
    event_id: int, payload: BreedingEventUpdate, uow=Depends(get_uow)
):
    return await update_breeding_event.execute(
        uow, event_id, update_breeding_event.UpdateBreedingEventInput(**payload.model_dump())
    )


@router.post("/{event_id}/birth", response_model=RecordBirthResponse)
async def record_birth_endpoint(
    event_id: int,
    payload: RecordBirthRequest,
    generator: OffspringGenerator = Depends(get_offspring_generator),
    uow=Depends(get_uow),
):
    result = await record_birth.execute(
        uow,
        event_id,
        record_birth.RecordBirthInput(**payload.model_dump()),
        generator=generator,
    )
    return RecordBirthResponse(
        event=BreedingEventResponse.model_validate(result.event),
        offspring=[AnimalResponse.model_validate(child) for child in result.offspring],
    )


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_breeding_event_endpoint(event_id: int, uow=Depends(get_uow)) -> Response:
    await delete_breeding_event.execute(uow, event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
