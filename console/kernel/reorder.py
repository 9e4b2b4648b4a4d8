"""
Console Kernel: Reorder Controller

Turns a pick-up / drop gesture into one store.reorder call.
There is no separate cancel: a drop that resolves to a no-op ends the
gesture just the same.
"""

from __future__ import annotations

from console.kernel.store import EntityStore


class ReorderController:
    def __init__(self, store: EntityStore) -> None:
        self._store = store
        self.picked_up: str | None = None

    def pick_up(self, record_id: str) -> None:
        self.picked_up = record_id

    def drop_on(self, target_id: str) -> bool:
        """Returns True if the store order changed."""
        picked, self.picked_up = self.picked_up, None
        if picked is None or picked == target_id:
            return False
        if picked not in self._store or target_id not in self._store:
            return False
        return self._store.reorder(picked, target_id)
