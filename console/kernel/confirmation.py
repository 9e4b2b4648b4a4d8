"""
Console Kernel: Confirmation Gate

Two-step protocol in front of destructive deletes:

    idle --request_delete()--> pending(ids) --confirm()--> idle (store.delete_many)
                                            --cancel()---> idle (nothing deleted)

The ids are captured when the request is made. Selection changes while the
gate is pending do not alter what a confirm deletes. A new request while
one is pending raises InvalidState; cancel or confirm it first.
"""

from __future__ import annotations

import logging

from console.kernel.selection import SelectionSet
from console.kernel.store import EntityStore
from console.kernel.types import EmptySelection, InvalidState, NotFound

logger = logging.getLogger(__name__)


class ConfirmationGate:
    def __init__(self, store: EntityStore, selection: SelectionSet) -> None:
        self._store = store
        self._selection = selection
        self._pending: tuple[str, ...] | None = None
        self._from_selection = False

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    @property
    def pending_ids(self) -> tuple[str, ...]:
        return self._pending or ()

    @property
    def from_selection(self) -> bool:
        """True when the pending ids were captured from the selection set."""
        return self._pending is not None and self._from_selection

    def request_delete(self) -> tuple[str, ...]:
        """Ask to delete the current selection."""
        self._ensure_idle()
        members = self._selection.members()
        if not members:
            raise EmptySelection(f"No {self._store.schema.plural} selected")
        self._pending = tuple(members)
        self._from_selection = True
        return self._pending

    def request_delete_of(self, record_id: str) -> tuple[str, ...]:
        """Ask to delete one record, independent of the selection."""
        self._ensure_idle()
        if record_id not in self._store:
            raise NotFound(record_id)
        self._pending = (record_id,)
        self._from_selection = False
        return self._pending

    def confirm(self) -> list[str]:
        if self._pending is None:
            raise InvalidState("No delete is awaiting confirmation")

        removed = self._store.delete_many(self._pending)
        if self._from_selection:
            self._selection.clear()
        logger.debug("Confirmed delete of %d %s", len(removed), self._store.schema.plural)

        self._pending = None
        self._from_selection = False
        return removed

    def cancel(self) -> None:
        if self._pending is None:
            raise InvalidState("No delete is awaiting confirmation")
        self._pending = None
        self._from_selection = False

    def _ensure_idle(self) -> None:
        if self._pending is not None:
            raise InvalidState("A delete is already awaiting confirmation")
