from __future__ import annotations

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from app.core.enums import BattleRequestRejection
from app.engine.models import MonsterStats
from app.schemas.battle import BattleCreate
from app.services import battle as battle_module
from app.services.battle import BattleService
from tests.helpers.monsters import make_stats

pytestmark = pytest.mark.anyio


class FakeMonsterLookup:
    def __init__(self, *monsters: MonsterStats) -> None:
        self.monsters = {monster.id: monster for monster in monsters}
        self.requested: list[int] = []

    async def get_monster_stats(self, monster_id: int) -> MonsterStats | None:
        self.requested.append(monster_id)
        return self.monsters.get(monster_id)


class FakeBattleRecorder:
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.records: list[tuple[int, int, int]] = []

    async def record_battle(self, *, monster_a_id: int, monster_b_id: int, winner_id: int) -> int:
        if self.fail:
            msg = "database is down"
            raise SQLAlchemyError(msg)
        self.records.append((monster_a_id, monster_b_id, winner_id))
        return len(self.records)


STRONG = make_stats(3, name="Dragon", attack=100, defense=10, hp=100, speed=90)
WEAK = make_stats(1, name="Slime", attack=20, defense=10, hp=30, speed=50)


def _make_service(
    lookup: FakeMonsterLookup | None = None, recorder: FakeBattleRecorder | None = None
) -> tuple[BattleService, FakeMonsterLookup, FakeBattleRecorder]:
    lookup = lookup or FakeMonsterLookup(STRONG, WEAK)
    recorder = recorder or FakeBattleRecorder()
    return BattleService(monsters=lookup, battles=recorder), lookup, recorder


@pytest.fixture
def simulate_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[int, int]]:
    calls: list[tuple[int, int]] = []
    real_simulate = battle_module.simulate_battle

    def tracking_simulate(monster1: MonsterStats, monster2: MonsterStats):  # noqa: ANN202
        calls.append((monster1.id, monster2.id))
        return real_simulate(monster1, monster2)

    monkeypatch.setattr(battle_module, "simulate_battle", tracking_simulate)
    return calls


async def test_successful_battle_is_recorded(simulate_calls: list[tuple[int, int]]) -> None:
    service, _, recorder = _make_service()

    result = await service.create_battle(BattleCreate(monster1_id=1, monster2_id=3))

    assert result.id == 1
    assert result.winner == STRONG
    assert result.battle_data.monster1 == WEAK
    assert result.battle_data.monster2 == STRONG
    assert len(result.battle_data.turns) == 1
    assert recorder.records == [(1, 3, 3)]
    assert simulate_calls == [(1, 3)]


async def test_same_monster_is_rejected_before_lookup(
    simulate_calls: list[tuple[int, int]],
) -> None:
    service, lookup, recorder = _make_service()

    with pytest.raises(HTTPException) as exc_info:
        await service.create_battle(BattleCreate(monster1_id=7, monster2_id=7))

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == BattleRequestRejection.SELF_BATTLE.value
    assert lookup.requested == []
    assert recorder.records == []
    assert simulate_calls == []


async def test_missing_monster_id_is_rejected(simulate_calls: list[tuple[int, int]]) -> None:
    service, lookup, _ = _make_service()

    with pytest.raises(HTTPException) as exc_info:
        await service.create_battle(BattleCreate(monster1_id=None, monster2_id=3))

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == BattleRequestRejection.MISSING_ID.value
    assert lookup.requested == []
    assert simulate_calls == []


async def test_unknown_monster_is_not_found(simulate_calls: list[tuple[int, int]]) -> None:
    service, _, recorder = _make_service()

    with pytest.raises(HTTPException) as exc_info:
        await service.create_battle(BattleCreate(monster1_id=999, monster2_id=1000))

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "One or both monsters not found"
    assert recorder.records == []
    assert simulate_calls == []


async def test_zero_id_reaches_the_lookup() -> None:
    service, lookup, _ = _make_service()

    with pytest.raises(HTTPException) as exc_info:
        await service.create_battle(BattleCreate(monster1_id=0, monster2_id=3))

    assert exc_info.value.status_code == 404
    assert lookup.requested == [0, 3]


async def test_recording_failure_hides_details() -> None:
    service, _, _ = _make_service(recorder=FakeBattleRecorder(fail=True))

    with pytest.raises(HTTPException) as exc_info:
        await service.create_battle(BattleCreate(monster1_id=1, monster2_id=3))

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Failed to create battle"
