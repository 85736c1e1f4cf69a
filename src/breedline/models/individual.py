"""Individual records as read from the storage collaborator."""
from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sex(str, Enum):
    """Sex of an individual."""
    MALE = "male"
    FEMALE = "female"


class Individual(BaseModel):
    """A bird (or other animal) in the breeding herd.

    Only ``id`` is required. Parent links are plain ids; the store decides
    whether they resolve.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    sex: Sex | None = None
    sire_id: str | None = None
    dam_id: str | None = None
    birth_date: datetime | None = None
    name: str | None = Field(default=None, description="Display name only")

    @field_validator("sex", mode="before")
    @classmethod
    def _normalize_sex(cls, value: object) -> object:
        if isinstance(value, str):
            lowered = value.strip().lower()
            return {"m": "male", "f": "female"}.get(lowered, lowered) or None
        return value

    @field_validator("sire_id", "dam_id", mode="before")
    @classmethod
    def _blank_is_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def parent_ids(self) -> tuple[str, ...]:
        """Known parent ids, sire first."""
        return tuple(p for p in (self.sire_id, self.dam_id) if p is not None)

    @property
    def label(self) -> str:
        return self.name or self.id
