"""Translate game-master catalog payloads into a catalog index."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from eventdex.domain.catalog import CatalogEntry, build_catalog_index

from .schema import CatalogEntryPayload

if TYPE_CHECKING:
    from collections.abc import Iterator

    from eventdex.domain.catalog import SpeciesId

    from .schema import CatalogPayloadInput


log = getLogger(__name__)


def to_catalog_entry(payload: CatalogEntryPayload) -> CatalogEntry:
    return CatalogEntry(
        species_id=payload.species_id,
        species_name=payload.species_name,
        dex=payload.dex,
        is_shadow=payload.is_shadow,
        is_mega=payload.is_mega,
        alias_id=payload.alias_id,
    )


def parse_catalog(payload: CatalogPayloadInput) -> dict[SpeciesId, CatalogEntry]:
    """Build a catalog index from a decoded game-master payload.

    ``payload`` is either a mapping keyed by species id or a list of entries.
    Entries that fail validation are logged and skipped; duplicate ids raise
    ``CatalogError``.
    """

    entries: list[CatalogEntry] = []
    skipped = 0
    for key, raw in _raw_entries(payload):
        try:
            entry_payload = CatalogEntryPayload.model_validate(raw)
        except ValidationError as exc:
            skipped += 1
            log.warning("Skipping invalid catalog entry %s: %s", key, exc.errors(include_url=False))
            continue
        if isinstance(key, str) and key != entry_payload.species_id:
            log.warning(
                "Catalog key %s does not match speciesId %s; using speciesId",
                key,
                entry_payload.species_id,
            )
        entries.append(to_catalog_entry(entry_payload))

    index = build_catalog_index(entries)
    log.info("Loaded catalog: entries=%s, skipped=%s", len(index), skipped)
    return index


def _raw_entries(payload: CatalogPayloadInput) -> Iterator[tuple[str | int, object]]:
    if isinstance(payload, Mapping):
        yield from payload.items()
        return
    yield from enumerate(payload)
