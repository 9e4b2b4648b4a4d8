"""
Console Kernel: Selection Set

Identifiers marked for bulk action. The set is independent of the filter
view: narrowing the search does not drop hidden members, and a later bulk
delete still includes them. Only "select all" is scoped to the ids the
caller reports as visible.

The set follows its store: removed records leave the selection.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from console.kernel.store import EntityStore
from console.kernel.types import NotFound, StoreChange


class SelectionSet:
    def __init__(self, store: EntityStore) -> None:
        self._store = store
        self._members: set[str] = set()
        self._unsubscribe = store.subscribe(self._on_change)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._members and record_id in self._store

    def __len__(self) -> int:
        return len(self.members())

    def __iter__(self) -> Iterator[str]:
        return iter(self.members())

    def members(self) -> list[str]:
        """Selected ids in collection order."""
        return [rid for rid in self._store.ids() if rid in self._members]

    def toggle(self, record_id: str) -> bool:
        """Flip membership. Returns True if the id is now selected."""
        if record_id not in self._store:
            raise NotFound(record_id)
        if record_id in self._members:
            self._members.discard(record_id)
            return False
        self._members.add(record_id)
        return True

    def select_all(self, visible_ids: Iterable[str]) -> None:
        self._members.update(rid for rid in visible_ids if rid in self._store)

    def deselect_all(self, visible_ids: Iterable[str]) -> None:
        self._members.difference_update(visible_ids)

    def clear(self) -> None:
        self._members.clear()

    def is_all_selected(self, visible_ids: Iterable[str]) -> bool:
        visible = list(visible_ids)
        return bool(visible) and all(rid in self._members for rid in visible)

    def close(self) -> None:
        self._unsubscribe()

    def _on_change(self, change: StoreChange) -> None:
        if change.kind == "delete":
            self._members.difference_update(change.ids)
