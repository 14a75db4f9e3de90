"""Pydantic models describing game-master style catalog payloads."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

type CatalogPayloadInput = Mapping[str, object] | Sequence[object]


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class GameMasterBaseModel(BaseModel):
    # Entries carry stats, moves, types and more; only identity fields are modelled.
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class CatalogEntryPayload(GameMasterBaseModel):
    species_id: str = Field(alias="speciesId", min_length=1)
    species_name: str = Field(alias="speciesName", min_length=1)
    dex: PositiveInt
    is_shadow: bool = Field(default=False, alias="isShadow")
    is_mega: bool = Field(default=False, alias="isMega")
    alias_id: str | None = Field(default=None, alias="aliasId")

    _normalize_alias_id = field_validator("alias_id", mode="before")(_blank_to_none)
