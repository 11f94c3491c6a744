import sqlmodel

from app.engine.models import MonsterStats

from ._base import BaseModel


class Monster(BaseModel, table=True):
    __tablename__: str = "monsters"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    name: str = sqlmodel.Field(max_length=100, index=True)
    attack: int = sqlmodel.Field(ge=0)
    defense: int = sqlmodel.Field(ge=0)
    hp: int = sqlmodel.Field(ge=1)
    speed: int = sqlmodel.Field(ge=0)
    image_url: str

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"

    def to_stats(self) -> MonsterStats:
        return MonsterStats(
            id=self.id,
            name=self.name,
            attack=self.attack,
            defense=self.defense,
            hp=self.hp,
            speed=self.speed,
            image_url=self.image_url,
        )
