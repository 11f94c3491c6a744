from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.enums import MonsterSortField, SortOrder
from app.models.monster import Monster
from app.schemas.common import APIResponse, PaginatedResponse
from app.schemas.monster import MonsterCreate, MonsterListParams, MonsterUpdate
from app.services.monster import MonsterService

router = APIRouter(prefix="/monsters", tags=["monsters"])


@router.get("/")
async def get_monsters(
    service: Annotated[MonsterService, Depends()],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1)] = 10,
    search_name: Annotated[
        str | None, Query(description="Search monsters by name (partial match)")
    ] = None,
    sort_by: Annotated[
        MonsterSortField, Query(description="Field to sort by")
    ] = MonsterSortField.ID,
    sort_order: Annotated[SortOrder, Query(description="Sort order")] = SortOrder.ASC,
) -> PaginatedResponse[Sequence[Monster]]:
    params = MonsterListParams(search_name=search_name, sort_by=sort_by, sort_order=sort_order)
    monsters, pagination = await service.get_monsters(
        page=page, page_size=page_size, params=params
    )
    return PaginatedResponse(data=monsters, pagination=pagination)


@router.get("/{monster_id}")
async def get_monster(
    monster_id: int, service: Annotated[MonsterService, Depends()]
) -> APIResponse[Monster]:
    monster = await service.get_monster(monster_id)
    if not monster:
        raise HTTPException(status_code=404, detail="Monster not found")
    return APIResponse(data=monster)


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_monster(
    monster: MonsterCreate, service: Annotated[MonsterService, Depends()]
) -> APIResponse[Monster]:
    created_monster = await service.create_monster(monster)
    return APIResponse(data=created_monster, message="Monster created successfully")


@router.put("/{monster_id}")
async def update_monster(
    monster_id: int, monster: MonsterUpdate, service: Annotated[MonsterService, Depends()]
) -> APIResponse[Monster]:
    updated_monster = await service.update_monster(monster_id, monster)
    if not updated_monster:
        raise HTTPException(status_code=404, detail="Monster not found")
    return APIResponse(data=updated_monster, message="Monster updated successfully")


@router.delete("/{monster_id}")
async def delete_monster(
    monster_id: int, service: Annotated[MonsterService, Depends()]
) -> APIResponse[None]:
    deleted = await service.delete_monster(monster_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Monster not found")
    return APIResponse(message="Monster deleted successfully")
