"""
Console Kernel: Collection Manager

One engine per record-management screen. Wires a store to its filter view,
edit session, selection set, confirmation gate, creation form and (for
reorderable schemas) reorder controller, and turns outcomes into the
success / error notifications the screen shows.

User-facing failures (validation, empty selection) are reported to the
notifier and come back as a falsy result; they are never raised from here.
Programming errors (unknown field names, calls from the wrong state) still
raise.
"""

from __future__ import annotations

import logging
from typing import Any

from console.kernel.confirmation import ConfirmationGate
from console.kernel.creation import CreationForm
from console.kernel.edit_session import EditSession
from console.kernel.filter_view import FilterView
from console.kernel.notifications import LoggingNotifier, Notifier
from console.kernel.reorder import ReorderController
from console.kernel.selection import SelectionSet
from console.kernel.store import EntityStore
from console.kernel.types import (
    EmptySelection,
    InvalidState,
    NotFound,
    Record,
    StoreChange,
    ValidationFailed,
)
from console.kernel.validation import has_missing_required, has_negative_number

logger = logging.getLogger(__name__)


def default_messages(noun: str, plural: str) -> dict[str, str]:
    """Notification texts for one entity kind."""
    title = noun.capitalize()
    return {
        "added": f"{title} added successfully!",
        "updated": f"{title} updated successfully!",
        "deleted": f"{title} deleted successfully!",
        "bulk_deleted": f"Selected {plural} deleted successfully!",
        "missing_fields": "Please fill in all fields.",
        "negative_numbers": "Numeric fields must be non-negative.",
        "empty_selection": f"Please select {plural} to delete.",
    }


class CollectionManager:
    """
    Args:
        store: The screen's store, constructed and owned by the caller
        notifier: Sink for user-facing messages (logs them by default)
        messages: Overrides for default_messages()
    """

    def __init__(
        self,
        store: EntityStore,
        notifier: Notifier | None = None,
        messages: dict[str, str] | None = None,
    ) -> None:
        schema = store.schema
        self.store = store
        self.schema = schema
        self.notifier = notifier or LoggingNotifier()
        self.messages = {**default_messages(schema.name, schema.plural), **(messages or {})}

        self.view = FilterView(store)
        self.edit = EditSession(store)
        self.selection = SelectionSet(store)
        self.gate = ConfirmationGate(store, self.selection)
        self.creation = CreationForm(store)
        self.reorder = ReorderController(store) if schema.reorderable else None
        self.focused: str | None = None

        self._unsubscribe = store.subscribe(self._on_change)

    # -- filtering --

    def search(self, text: str) -> list[Record]:
        self.view.set_search(text)
        return self.view.records()

    def visible(self) -> list[Record]:
        return self.view.records()

    def visible_ids(self) -> list[str]:
        return self.view.ids()

    # -- focus (detail pane) --

    def focus(self, record_id: str) -> Record | None:
        """Show one record in the detail pane. Cancels any edit in progress."""
        record = self.store.get(record_id)
        if record is None:
            logger.debug("%s: focus on missing id %s ignored", self.schema.plural, record_id)
            return None
        self.edit.cancel()
        self.focused = record_id
        return record

    @property
    def focused_record(self) -> Record | None:
        return None if self.focused is None else self.store.get(self.focused)

    # -- inline edit --

    def begin_edit(self, record_id: str) -> dict[str, Any] | None:
        try:
            return self.edit.begin_edit(record_id)
        except NotFound:
            logger.debug("%s: edit of missing id %s ignored", self.schema.plural, record_id)
            return None

    def edit_field(self, key: str, value: Any) -> None:
        self.edit.edit_field(key, value)

    def save_edit(self) -> Record | None:
        try:
            record = self.edit.commit()
        except ValidationFailed as e:
            self._report_invalid(e)
            return None
        except NotFound:
            logger.debug("%s: edited record vanished before save", self.schema.plural)
            return None
        self.notifier.success(self.messages["updated"])
        return record

    def cancel_edit(self) -> None:
        self.edit.cancel()

    # -- creation --

    def set_new_field(self, key: str, value: Any) -> None:
        self.creation.set_field(key, value)

    def add(self) -> Record | None:
        try:
            record = self.creation.submit()
        except ValidationFailed as e:
            self._report_invalid(e)
            return None
        self.notifier.success(self.messages["added"])
        return record

    # -- single delete --

    def delete(self, record_id: str) -> bool:
        """Immediate delete. Deleting a missing id is a silent no-op."""
        if not self.store.delete(record_id):
            return False
        self.notifier.success(self.messages["deleted"])
        return True

    def request_delete(self, record_id: str) -> bool:
        """Confirmed delete of one record: opens the gate for it."""
        try:
            self.gate.request_delete_of(record_id)
        except NotFound:
            logger.debug("%s: delete request for missing id %s ignored", self.schema.plural, record_id)
            return False
        return True

    # -- selection & bulk delete --

    def toggle(self, record_id: str) -> bool:
        try:
            return self.selection.toggle(record_id)
        except NotFound:
            logger.debug("%s: toggle of missing id %s ignored", self.schema.plural, record_id)
            return False

    @property
    def all_selected(self) -> bool:
        return self.selection.is_all_selected(self.visible_ids())

    def toggle_select_all(self) -> None:
        """Select every visible record, or deselect them if all already are."""
        visible = self.visible_ids()
        if self.selection.is_all_selected(visible):
            self.selection.deselect_all(visible)
        else:
            self.selection.select_all(visible)

    def request_delete_selected(self) -> bool:
        try:
            self.gate.request_delete()
        except EmptySelection:
            self.notifier.error(self.messages["empty_selection"])
            return False
        return True

    def confirm_delete(self) -> list[str]:
        bulk = self.gate.from_selection
        removed = self.gate.confirm()
        if removed:
            self.notifier.success(self.messages["bulk_deleted" if bulk else "deleted"])
        return removed

    def cancel_delete(self) -> None:
        self.gate.cancel()

    # -- reordering --

    def pick_up(self, record_id: str) -> None:
        self._reorder().pick_up(record_id)

    def drop_on(self, target_id: str) -> bool:
        return self._reorder().drop_on(target_id)

    # -- snapshot & teardown --

    def snapshot(self) -> dict[str, Any]:
        """Read-only state for a presentation layer."""
        visible = self.visible()
        return {
            "entity": self.schema.name,
            "plural": self.schema.plural,
            "fields": self.schema.field_names,
            "search": self.view.search,
            "total": len(self.store),
            "records": [r.to_dict() for r in visible],
            "selected": self.selection.members(),
            "all_selected": self.selection.is_all_selected([r.id for r in visible]),
            "editing": {"id": self.edit.editing_id, "draft": self.edit.draft} if self.edit.is_editing else None,
            "pending_delete": list(self.gate.pending_ids) if self.gate.is_pending else None,
            "new_draft": self.creation.draft,
            "focused": self.focused,
            "picked_up": self.reorder.picked_up if self.reorder else None,
        }

    def close(self) -> None:
        self._unsubscribe()
        self.selection.close()

    # -- internal --

    def _reorder(self) -> ReorderController:
        if self.reorder is None:
            raise InvalidState(f"{self.schema.plural} cannot be reordered")
        return self.reorder

    def _report_invalid(self, error: ValidationFailed) -> None:
        if has_missing_required(error.errors):
            message = self.messages["missing_fields"]
        elif has_negative_number(error.errors):
            message = self.messages["negative_numbers"]
        else:
            message = error.errors[0]
        logger.debug("%s: validation failed: %s", self.schema.plural, error)
        self.notifier.error(message)

    def _on_change(self, change: StoreChange) -> None:
        if change.kind != "delete":
            return
        removed = set(change.ids)
        self.edit.forget(removed)
        if self.focused in removed:
            self.focused = None
