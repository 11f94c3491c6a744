from pydantic import BaseModel

from app.engine.models import MonsterStats, Turn


class BattleCreate(BaseModel):
    # None means the id was not sent
    monster1_id: int | None = None
    monster2_id: int | None = None


class BattleData(BaseModel):
    monster1: MonsterStats
    monster2: MonsterStats
    turns: list[Turn]


class BattleResult(BaseModel):
    """A recorded battle together with its full turn log."""

    id: int
    winner: MonsterStats
    battle_data: BattleData
