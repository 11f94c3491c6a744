from enum import StrEnum


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class MonsterSortField(StrEnum):
    ID = "id"
    NAME = "name"
    ATTACK = "attack"
    DEFENSE = "defense"
    HP = "hp"
    SPEED = "speed"


class BattleRequestRejection(StrEnum):
    """Reasons a battle request is refused before any monster is looked up."""

    MISSING_ID = "Both monster1_id and monster2_id are required"
    SELF_BATTLE = "A monster cannot battle itself"
