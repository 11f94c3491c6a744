from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.models.battle import Battle
from app.schemas.battle import BattleCreate, BattleResult
from app.schemas.common import APIResponse, PaginatedResponse
from app.services.battle import BattleRepository, BattleService

router = APIRouter(prefix="/battles", tags=["battles"])


@router.get("/")
async def get_battles(
    repository: Annotated[BattleRepository, Depends()],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1)] = 10,
    monster_id: Annotated[
        int | None, Query(description="Only battles this monster took part in")
    ] = None,
) -> PaginatedResponse[Sequence[Battle]]:
    battles, pagination = await repository.get_battles(
        page=page, page_size=page_size, monster_id=monster_id
    )
    return PaginatedResponse(data=battles, pagination=pagination)


@router.get("/{battle_id}")
async def get_battle(
    battle_id: int, repository: Annotated[BattleRepository, Depends()]
) -> APIResponse[Battle]:
    battle = await repository.get_battle(battle_id)
    if not battle:
        raise HTTPException(status_code=404, detail="Battle not found")
    return APIResponse(data=battle)


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_battle(
    battle: BattleCreate, service: Annotated[BattleService, Depends()]
) -> APIResponse[BattleResult]:
    result = await service.create_battle(battle)
    return APIResponse(data=result, message="Battle created successfully")
