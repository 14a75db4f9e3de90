"""Species catalog entries and the restricted domains carved out of them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

type SpeciesId = str
type CatalogIndex = Mapping[SpeciesId, CatalogEntry]
type Domain = tuple[CatalogEntry, ...]


class CatalogError(ValueError):
    """Raised when a catalog cannot be indexed consistently."""


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogEntry:
    """One physical form of a species, including shadow and mega duplicates."""

    species_id: SpeciesId
    species_name: str
    dex: int
    is_shadow: bool = False
    is_mega: bool = False
    alias_id: SpeciesId | None = None

    def __post_init__(self) -> None:
        if not self.species_id:
            raise CatalogError("Catalog entries need a species id")
        if self.dex <= 0:
            raise CatalogError(f"Invalid dex {self.dex} for {self.species_id}")

    @property
    def is_alias(self) -> bool:
        return self.alias_id is not None


class DomainKind(StrEnum):
    """Named restrictions used by the scrapers when resolving a batch."""

    NORMAL = "normal"
    SHADOW = "shadow"
    MEGA = "mega"


def build_catalog_index(entries: Iterable[CatalogEntry]) -> dict[SpeciesId, CatalogEntry]:
    """Index entries by species id, rejecting duplicate ids."""

    index: dict[SpeciesId, CatalogEntry] = {}
    for entry in entries:
        if entry.species_id in index:
            raise CatalogError(f"Duplicate species id in catalog: {entry.species_id}")
        index[entry.species_id] = entry
    return index


def restrict_domain(
    catalog: CatalogIndex,
    *,
    shadow: bool,
    mega: bool,
    aliases: bool = False,
) -> Domain:
    """Return the catalog entries admitted by the given flags, in catalog order.

    ``shadow``/``mega`` admit shadow and mega entries next to the plain ones;
    alias entries are excluded unless ``aliases`` is set.
    """

    return tuple(
        entry
        for entry in catalog.values()
        if (aliases or not entry.is_alias)
        and (shadow or not entry.is_shadow)
        and (mega or not entry.is_mega)
    )


def domain_for(kind: DomainKind, catalog: CatalogIndex) -> Domain:
    if kind is DomainKind.SHADOW:
        return restrict_domain(catalog, shadow=True, mega=False)
    if kind is DomainKind.MEGA:
        return restrict_domain(catalog, shadow=False, mega=True)
    return restrict_domain(catalog, shadow=False, mega=False)


__all__ = [
    "CatalogEntry",
    "CatalogError",
    "CatalogIndex",
    "Domain",
    "DomainKind",
    "SpeciesId",
    "build_catalog_index",
    "domain_for",
    "restrict_domain",
]
