"""Game-master catalog adapter."""

from __future__ import annotations

from .schema import CatalogEntryPayload, CatalogPayloadInput
from .translator import parse_catalog, to_catalog_entry

__all__ = [
    "CatalogEntryPayload",
    "CatalogPayloadInput",
    "parse_catalog",
    "to_catalog_entry",
]
