"""
Console Kernel: Creation Form

Draft of a record that does not exist yet. A failed submit keeps the draft
so the user can correct it; a successful one resets it to blank defaults.
"""

from __future__ import annotations

from typing import Any

from console.kernel.store import EntityStore
from console.kernel.types import Record, ValidationFailed
from console.kernel.validation import validate_fields


class CreationForm:
    def __init__(self, store: EntityStore) -> None:
        self._store = store
        self._draft: dict[str, Any] = store.schema.blank_draft()

    @property
    def draft(self) -> dict[str, Any]:
        return dict(self._draft)

    def set_field(self, key: str, value: Any) -> None:
        if self._store.schema.get_field(key) is None:
            raise ValueError(f"Unknown field for {self._store.schema.name}: {key}")
        self._draft[key] = value

    def reset(self) -> None:
        self._draft = self._store.schema.blank_draft()

    def submit(self) -> Record:
        errors = validate_fields(self._store.schema, self._draft)
        if errors:
            raise ValidationFailed(errors)

        record = self._store.create(self._draft)
        self.reset()
        return record
