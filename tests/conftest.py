from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from eventdex.adapters.gamemaster import parse_catalog
from eventdex.domain.catalog import DomainKind, domain_for
from eventdex.domain.species import SpeciesMatcher

if TYPE_CHECKING:
    from collections.abc import Callable

    from eventdex.domain.catalog import CatalogEntry, SpeciesId
    from eventdex.domain.species import ResolutionIssue

CATALOG_PATH = Path(__file__).resolve().parent / "data" / "gamemaster_catalog.json"


@pytest.fixture(scope="session")
def catalog_payload() -> list[dict[str, object]]:
    with CATALOG_PATH.open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture(scope="session")
def catalog(catalog_payload: list[dict[str, object]]) -> dict[SpeciesId, CatalogEntry]:
    return parse_catalog(catalog_payload)


@pytest.fixture
def issues() -> list[ResolutionIssue]:
    return []


@pytest.fixture
def make_matcher(
    catalog: dict[SpeciesId, CatalogEntry],
    issues: list[ResolutionIssue],
) -> Callable[[DomainKind], SpeciesMatcher]:
    def _make(kind: DomainKind = DomainKind.NORMAL) -> SpeciesMatcher:
        return SpeciesMatcher(catalog, domain_for(kind, catalog), report=issues.append)

    return _make
