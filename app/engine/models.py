from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MonsterStats(BaseModel):
    """Read-only stat snapshot of a monster, as handed to the simulator."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    hp: int = Field(ge=1)
    speed: int = Field(ge=0)
    image_url: str


class Combatant(BaseModel):
    """Per-battle working copy of a monster that tracks its remaining HP."""

    model_config = ConfigDict(validate_assignment=True)

    stats: MonsterStats
    current_hp: int

    @model_validator(mode="after")
    def _check_hp_range(self) -> Self:
        if not 0 <= self.current_hp <= self.stats.hp:
            msg = f"current_hp must be between 0 and {self.stats.hp}, got {self.current_hp}"
            raise ValueError(msg)
        return self

    @classmethod
    def from_stats(cls, stats: MonsterStats) -> Self:
        return cls(stats=stats.model_copy(), current_hp=stats.hp)

    @property
    def is_alive(self) -> bool:
        return self.current_hp > 0

    def take_hit(self, damage: int) -> int:
        """Apply damage, clamping at zero, and return the HP left."""
        self.current_hp = max(0, self.current_hp - damage)
        return self.current_hp


class Turn(BaseModel):
    """One attack, recorded with both monsters' pre-damage stats."""

    model_config = ConfigDict(frozen=True)

    attacker: MonsterStats
    defender: MonsterStats
    damage: int = Field(ge=1)
    remaining_hp: int = Field(ge=0)


class BattleOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    winner: MonsterStats
    monster1: MonsterStats
    monster2: MonsterStats
    turns: tuple[Turn, ...]

    @property
    def loser(self) -> MonsterStats:
        return self.monster2 if self.winner == self.monster1 else self.monster1
