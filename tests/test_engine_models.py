from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.engine.models import BattleOutcome, Combatant, Turn
from tests.helpers.monsters import make_stats


def test_combatant_starts_at_full_hp() -> None:
    stats = make_stats(hp=42)
    combatant = Combatant.from_stats(stats)

    assert combatant.current_hp == 42
    assert combatant.stats == stats
    assert combatant.is_alive


def test_take_hit_clamps_at_zero() -> None:
    combatant = Combatant.from_stats(make_stats(hp=5))

    assert combatant.take_hit(3) == 2
    assert combatant.take_hit(10) == 0
    assert not combatant.is_alive


def test_combatant_rejects_hp_above_maximum() -> None:
    combatant = Combatant.from_stats(make_stats(hp=5))

    with pytest.raises(ValidationError):
        combatant.current_hp = 6


def test_combatant_rejects_negative_hp() -> None:
    with pytest.raises(ValidationError):
        Combatant(stats=make_stats(hp=5), current_hp=-1)


def test_taking_hits_leaves_the_stats_record_untouched() -> None:
    stats = make_stats(hp=8)
    combatant = Combatant.from_stats(stats)
    combatant.take_hit(5)

    assert stats.hp == 8
    assert combatant.stats.hp == 8


def test_stats_are_immutable() -> None:
    stats = make_stats()

    with pytest.raises(ValidationError):
        stats.hp = 1  # type: ignore[misc]


def test_stats_require_positive_hp() -> None:
    with pytest.raises(ValidationError):
        make_stats(hp=0)


def test_turn_requires_at_least_one_damage() -> None:
    with pytest.raises(ValidationError):
        Turn(attacker=make_stats(1), defender=make_stats(2), damage=0, remaining_hp=5)


def test_turn_requires_non_negative_remaining_hp() -> None:
    with pytest.raises(ValidationError):
        Turn(attacker=make_stats(1), defender=make_stats(2), damage=1, remaining_hp=-1)


def test_outcome_loser_is_the_other_participant() -> None:
    a, b = make_stats(1), make_stats(2)
    outcome = BattleOutcome(winner=b, monster1=a, monster2=b, turns=())

    assert outcome.loser == a
