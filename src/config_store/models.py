"""Pydantic models for stored entries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .text import split_key


class Entry(BaseModel):
    """One ``(full_key, value)`` pair as held by a store."""

    model_config = ConfigDict(frozen=True)

    full_key: str = Field(min_length=1)
    value: str

    @property
    def section(self) -> str:
        return split_key(self.full_key)[0]

    @property
    def key(self) -> str:
        return split_key(self.full_key)[1]

    def as_tuple(self) -> tuple[str, str]:
        return self.full_key, self.value
