from typing import Protocol

from app.engine.models import MonsterStats


class MonsterLookup(Protocol):
    async def get_monster_stats(self, monster_id: int) -> MonsterStats | None: ...


class BattleRecorder(Protocol):
    async def record_battle(self, *, monster_a_id: int, monster_b_id: int, winner_id: int) -> int:
        """Store a finished battle and return its generated id."""
        ...
