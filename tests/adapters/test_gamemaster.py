from __future__ import annotations

import logging

import pytest

from eventdex.adapters.gamemaster import CatalogEntryPayload, parse_catalog, to_catalog_entry
from eventdex.domain.catalog import CatalogEntry, CatalogError


def test_schema_reads_aliases_and_ignores_extra_keys() -> None:
    payload = CatalogEntryPayload.model_validate(
        {
            "speciesId": "zygarde",
            "speciesName": "Zygarde",
            "dex": 718,
            "aliasId": "zygarde_50",
            "types": ["dragon", "ground"],
        }
    )

    assert payload.species_id == "zygarde"
    assert payload.alias_id == "zygarde_50"
    assert not payload.is_shadow
    assert to_catalog_entry(payload) == CatalogEntry(
        species_id="zygarde",
        species_name="Zygarde",
        dex=718,
        alias_id="zygarde_50",
    )


def test_schema_treats_blank_alias_as_missing() -> None:
    payload = CatalogEntryPayload.model_validate(
        {"speciesId": "pikachu", "speciesName": "Pikachu", "dex": 25, "aliasId": "  "}
    )

    assert payload.alias_id is None


def test_parse_catalog_accepts_list_payload(catalog_payload: list[dict[str, object]]) -> None:
    catalog = parse_catalog(catalog_payload)

    assert len(catalog) == len(catalog_payload)
    assert catalog["charizard_mega_y"].is_mega
    assert catalog["bulbasaur_shadow"].is_shadow
    assert catalog["zygarde"].is_alias


def test_parse_catalog_accepts_mapping_payload() -> None:
    catalog = parse_catalog(
        {
            "pikachu": {"speciesId": "pikachu", "speciesName": "Pikachu", "dex": 25},
            "raichu": {"speciesId": "raichu", "speciesName": "Raichu", "dex": 26},
        }
    )

    assert list(catalog) == ["pikachu", "raichu"]


def test_parse_catalog_skips_invalid_entries(caplog: pytest.LogCaptureFixture) -> None:
    payload = [
        {"speciesId": "pikachu", "speciesName": "Pikachu", "dex": 25},
        {"speciesId": "missingno", "speciesName": "Missingno", "dex": 0},
        {"speciesName": "Nameless", "dex": 1},
        "not an entry",
    ]

    with caplog.at_level(logging.WARNING, logger="eventdex"):
        catalog = parse_catalog(payload)

    assert list(catalog) == ["pikachu"]
    assert sum("Skipping invalid catalog entry" in record.message for record in caplog.records) == 3


def test_parse_catalog_rejects_duplicate_ids() -> None:
    entry = {"speciesId": "pikachu", "speciesName": "Pikachu", "dex": 25}

    with pytest.raises(CatalogError):
        parse_catalog([entry, dict(entry)])
