import sqlmodel

from ._base import BaseModel


class Battle(BaseModel, table=True):
    __tablename__: str = "battles"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    monster_a_id: int = sqlmodel.Field(foreign_key="monsters.id", index=True)
    monster_b_id: int = sqlmodel.Field(foreign_key="monsters.id", index=True)
    winner_id: int = sqlmodel.Field(foreign_key="monsters.id", index=True)
