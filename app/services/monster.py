from collections.abc import Sequence
from typing import Annotated

from fastapi import Depends, HTTPException, status
from sqlmodel import col, func, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.core.enums import SortOrder
from app.engine.models import MonsterStats
from app.models.battle import Battle
from app.models.monster import Monster
from app.schemas.common import PaginationData
from app.schemas.monster import MonsterCreate, MonsterListParams, MonsterUpdate


class MonsterService:
    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db

    async def get_monsters(
        self, *, page: int, page_size: int, params: MonsterListParams
    ) -> tuple[Sequence[Monster], PaginationData]:
        offset = (page - 1) * page_size

        query = select(Monster)
        if params.search_name:
            query = query.where(col(Monster.name).ilike(f"%{params.search_name}%"))

        count_query = select(func.count()).select_from(query.subquery())
        total_items_result = await self.db.exec(count_query)
        total_items = total_items_result.one()

        sort_column = getattr(Monster, params.sort_by.value)
        if params.sort_order == SortOrder.DESC:
            query = query.order_by(sort_column.desc())
        else:
            query = query.order_by(sort_column.asc())

        query = query.offset(offset).limit(page_size)
        result = await self.db.exec(query)
        monsters = result.all()

        pagination = PaginationData.for_page(
            page=page, page_size=page_size, total_items=total_items
        )

        return monsters, pagination

    async def get_monster(self, monster_id: int) -> Monster | None:
        result = await self.db.exec(select(Monster).where(Monster.id == monster_id))
        return result.first()

    async def get_monster_stats(self, monster_id: int) -> MonsterStats | None:
        """Detached stat snapshot of a monster, for handing to the simulator."""
        monster = await self.get_monster(monster_id)
        if not monster:
            return None
        return monster.to_stats()

    async def create_monster(self, monster_data: MonsterCreate) -> Monster:
        monster = Monster(**monster_data.model_dump())

        self.db.add(monster)
        await self.db.commit()
        await self.db.refresh(monster)
        return monster

    async def update_monster(self, monster_id: int, monster_data: MonsterUpdate) -> Monster | None:
        existing_monster = await self.get_monster(monster_id)
        if not existing_monster:
            return None

        existing_monster.sqlmodel_update(monster_data.model_dump(exclude_unset=True))
        self.db.add(existing_monster)
        await self.db.commit()
        await self.db.refresh(existing_monster)
        return existing_monster

    async def delete_monster(self, monster_id: int) -> bool:
        monster = await self.get_monster(monster_id)
        if not monster:
            return False

        battles = await self.db.exec(
            select(func.count())
            .select_from(Battle)
            .where(
                or_(
                    col(Battle.monster_a_id) == monster_id,
                    col(Battle.monster_b_id) == monster_id,
                    col(Battle.winner_id) == monster_id,
                )
            )
        )
        if battles.one():
            msg = "Monster has recorded battles"
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=msg)

        await self.db.delete(monster)
        await self.db.commit()
        return True
