from collections.abc import Sequence
from typing import Annotated, cast

from fastapi import Depends, HTTPException, status
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, desc, func, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.engine.ports import BattleRecorder, MonsterLookup
from app.engine.simulator import simulate_battle
from app.engine.validator import validate_battle_request
from app.models.battle import Battle
from app.schemas.battle import BattleCreate, BattleData, BattleResult
from app.schemas.common import PaginationData
from app.services.monster import MonsterService


class BattleRepository:
    """Stores finished battles. Only participants and winner are kept, not the turns."""

    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db

    async def record_battle(self, *, monster_a_id: int, monster_b_id: int, winner_id: int) -> int:
        battle = Battle(monster_a_id=monster_a_id, monster_b_id=monster_b_id, winner_id=winner_id)

        self.db.add(battle)
        await self.db.commit()
        await self.db.refresh(battle)
        return battle.id

    async def get_battles(
        self, *, page: int, page_size: int, monster_id: int | None = None
    ) -> tuple[Sequence[Battle], PaginationData]:
        offset = (page - 1) * page_size

        query = select(Battle)
        if monster_id is not None:
            query = query.where(
                or_(col(Battle.monster_a_id) == monster_id, col(Battle.monster_b_id) == monster_id)
            )

        count_query = select(func.count()).select_from(query.subquery())
        total_items_result = await self.db.exec(count_query)
        total_items = total_items_result.one()

        result = await self.db.exec(
            query.order_by(desc(col(Battle.created_at)), desc(col(Battle.id)))
            .offset(offset)
            .limit(page_size)
        )
        battles = result.all()

        pagination = PaginationData.for_page(
            page=page, page_size=page_size, total_items=total_items
        )

        return battles, pagination

    async def get_battle(self, battle_id: int) -> Battle | None:
        result = await self.db.exec(select(Battle).where(Battle.id == battle_id))
        return result.first()


class BattleService:
    """Runs a battle end to end: validate, look up, simulate, record."""

    def __init__(
        self,
        monsters: Annotated[MonsterLookup, Depends(MonsterService)],
        battles: Annotated[BattleRecorder, Depends(BattleRepository)],
    ) -> None:
        self.monsters = monsters
        self.battles = battles

    async def create_battle(self, request: BattleCreate) -> BattleResult:
        rejection = validate_battle_request(request.monster1_id, request.monster2_id)
        if rejection is not None:
            logger.debug(f"Rejected battle request {request}: {rejection}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=rejection.value)

        # Both ids are present once validation passes
        monster1 = await self.monsters.get_monster_stats(cast(int, request.monster1_id))
        monster2 = await self.monsters.get_monster_stats(cast(int, request.monster2_id))
        if monster1 is None or monster2 is None:
            msg = "One or both monsters not found"
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=msg)

        outcome = simulate_battle(monster1, monster2)
        logger.info(
            f"Battle {monster1.name} (#{monster1.id}) vs {monster2.name} (#{monster2.id}): "
            f"{outcome.winner.name} beat {outcome.loser.name} in {len(outcome.turns)} turns"
        )

        try:
            battle_id = await self.battles.record_battle(
                monster_a_id=monster1.id, monster_b_id=monster2.id, winner_id=outcome.winner.id
            )
        except SQLAlchemyError as e:
            logger.exception("Failed to record battle")
            msg = "Failed to create battle"
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=msg
            ) from e

        return BattleResult(
            id=battle_id,
            winner=outcome.winner,
            battle_data=BattleData(
                monster1=outcome.monster1, monster2=outcome.monster2, turns=list(outcome.turns)
            ),
        )
