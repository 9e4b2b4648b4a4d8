"""
Console Kernel: Filter View

Read-only, order-preserving projection of a store by a search string.
The view keeps only the search string; the projection is recomputed from
the store on every access.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from console.kernel.store import EntityStore
from console.kernel.types import Record


def apply_filter(records: Iterable[Record], search: str, fields: Sequence[str]) -> Iterator[Record]:
    """
    Lazily yield the records whose listed fields contain `search`
    as a case-insensitive substring. An empty search yields everything.
    """
    needle = search.lower()
    for record in records:
        if not needle:
            yield record
            continue
        for name in fields:
            value = record.get(name)
            if value is not None and needle in str(value).lower():
                yield record
                break


class FilterView:
    """Search projection over one store."""

    def __init__(self, store: EntityStore, fields: Sequence[str] | None = None) -> None:
        self._store = store
        self.fields = list(fields if fields is not None else store.schema.search_fields)
        self.search = ""

    def set_search(self, search: str) -> None:
        self.search = search

    def __iter__(self) -> Iterator[Record]:
        return apply_filter(self._store, self.search, self.fields)

    def records(self) -> list[Record]:
        return list(self)

    def ids(self) -> list[str]:
        return [r.id for r in self]

    def __len__(self) -> int:
        return sum(1 for _ in self)
