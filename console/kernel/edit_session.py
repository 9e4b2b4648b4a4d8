"""
Console Kernel: Edit Session

At most one in-place edit at a time.

    viewing --begin_edit(id)--> editing(id, draft)
    editing --commit()--------> viewing      (valid draft, store updated)
    editing --commit()--------> editing      (ValidationFailed, draft kept)
    editing --cancel()--------> viewing      (store untouched)

begin_edit while already editing drops the previous draft without saving it.
"""

from __future__ import annotations

import logging
from typing import Any

from console.kernel.store import EntityStore
from console.kernel.types import InvalidState, NotFound, Record, ValidationFailed
from console.kernel.validation import validate_fields

logger = logging.getLogger(__name__)


class EditSession:
    def __init__(self, store: EntityStore) -> None:
        self._store = store
        self._editing_id: str | None = None
        self._draft: dict[str, Any] | None = None

    @property
    def is_editing(self) -> bool:
        return self._editing_id is not None

    @property
    def editing_id(self) -> str | None:
        return self._editing_id

    @property
    def draft(self) -> dict[str, Any] | None:
        """Copy of the draft, or None when viewing."""
        return None if self._draft is None else dict(self._draft)

    def begin_edit(self, record_id: str) -> dict[str, Any]:
        record = self._store.get(record_id)
        if record is None:
            raise NotFound(record_id)

        if self._editing_id is not None and self._editing_id != record_id:
            logger.debug("Discarding unsaved edit of %s", self._editing_id)

        self._editing_id = record_id
        self._draft = dict(record.fields)
        return dict(self._draft)

    def edit_field(self, key: str, value: Any) -> None:
        if self._draft is None:
            raise InvalidState("No record is being edited")
        if self._store.schema.get_field(key) is None:
            raise ValueError(f"Unknown field for {self._store.schema.name}: {key}")
        self._draft[key] = value

    def commit(self) -> Record:
        if self._editing_id is None or self._draft is None:
            raise InvalidState("No record is being edited")

        errors = validate_fields(self._store.schema, self._draft)
        if errors:
            raise ValidationFailed(errors)

        record_id, draft = self._editing_id, self._draft
        try:
            return self._store.update(record_id, draft)
        finally:
            # A record deleted mid-edit still ends the session
            self._editing_id = None
            self._draft = None

    def cancel(self) -> None:
        self._editing_id = None
        self._draft = None

    def forget(self, record_ids: set[str]) -> None:
        """End the session if its record was removed from the store."""
        if self._editing_id in record_ids:
            logger.debug("Edited record %s was removed; ending session", self._editing_id)
            self.cancel()
