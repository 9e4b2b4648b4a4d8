"""
Documents screen: titled text documents in a user-defined order.

Unlike users and products, documents are reorderable by drag and drop,
and a single delete goes through the confirmation gate.
"""

from __future__ import annotations

from collections.abc import Callable

from console.kernel.manager import CollectionManager
from console.kernel.notifications import Notifier
from console.kernel.store import EntityStore, new_id
from console.kernel.types import EntitySchema, FieldSpec

DOCUMENT_SCHEMA = EntitySchema(
    name="document",
    plural="documents",
    fields=(
        FieldSpec("title", required=True, searchable=True),
        FieldSpec("content", kind="text", searchable=True),
    ),
    reorderable=True,
)

SEED_DOCUMENTS = [
    {"id": "1", "title": "Project Proposal", "content": "This is the proposal for the project."},
    {"id": "2", "title": "Meeting Minutes", "content": "Minutes from the last meeting."},
    {"id": "3", "title": "Design Specs", "content": "Detailed design specifications."},
]

DOCUMENT_MESSAGES = {
    "updated": "Document saved successfully!",
    "missing_fields": "Please enter a title for the new document.",
}


def make_documents(notifier: Notifier | None = None, id_factory: Callable[[], str] = new_id) -> CollectionManager:
    store = EntityStore(DOCUMENT_SCHEMA, SEED_DOCUMENTS, id_factory=id_factory)
    return CollectionManager(store, notifier, messages=DOCUMENT_MESSAGES)
