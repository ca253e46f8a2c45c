"""Lookup over the in-memory source item datasets."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache

from data.calls import build_recent_calls
from data.emails import CUSTOMER_EMAILS
from data.reviews import REVIEWS
from models.source_items import SourceItem, SourceKind


class SourceCatalog:
    """Read-only index of source items by kind and id.

    Shared between requests; it is never mutated after construction.
    """

    def __init__(self, items: Mapping[SourceKind, Iterable[SourceItem]]) -> None:
        self._items: dict[SourceKind, tuple[SourceItem, ...]] = {}
        self._index: dict[SourceKind, dict[str, SourceItem]] = {}
        for kind, kind_items in items.items():
            ordered = tuple(kind_items)
            by_id = {item.id: item for item in ordered}
            if len(by_id) != len(ordered):
                raise ValueError(f"duplicate {kind} ids in catalog")
            self._items[kind] = ordered
            self._index[kind] = by_id

    def get(self, kind: SourceKind, item_id: str) -> SourceItem | None:
        return self._index.get(kind, {}).get(item_id)

    def list_items(self, kind: SourceKind) -> tuple[SourceItem, ...]:
        return self._items.get(kind, ())


@lru_cache
def get_catalog() -> SourceCatalog:
    """Return the process-wide catalog built from the bundled datasets."""
    return SourceCatalog(
        {
            SourceKind.REVIEW: REVIEWS,
            SourceKind.EMAIL: CUSTOMER_EMAILS,
            SourceKind.CALL: build_recent_calls(),
        }
    )
