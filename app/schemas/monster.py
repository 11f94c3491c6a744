from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.core.enums import MonsterSortField, SortOrder


class MonsterListParams(BaseModel):
    """Query parameters for listing monsters."""

    search_name: str | None = None
    sort_by: MonsterSortField = MonsterSortField.ID
    sort_order: SortOrder = SortOrder.ASC


class MonsterCreate(BaseModel):
    name: str = Field(max_length=100)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    hp: int = Field(ge=1)
    speed: int = Field(ge=0)
    image_url: str


class MonsterUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    attack: int | None = Field(default=None, ge=0)
    defense: int | None = Field(default=None, ge=0)
    hp: int | None = Field(default=None, ge=1)
    speed: int | None = Field(default=None, ge=0)
    image_url: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # Omit a field to leave it unchanged
        if value is None:
            msg = "Field cannot be null"
            raise ValueError(msg)
        return value
