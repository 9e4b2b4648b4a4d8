"""Users screen: people with a role and an account status."""

from __future__ import annotations

from collections.abc import Callable

from console.kernel.manager import CollectionManager
from console.kernel.notifications import Notifier
from console.kernel.store import EntityStore, new_id
from console.kernel.types import EntitySchema, FieldSpec

ROLES = ("Admin", "Editor", "Viewer")
STATUSES = ("active", "inactive", "pending")

USER_SCHEMA = EntitySchema(
    name="user",
    plural="users",
    fields=(
        FieldSpec("name", required=True, searchable=True),
        FieldSpec("email", required=True, searchable=True),
        FieldSpec("role", kind="choice", choices=ROLES, default="Viewer"),
        FieldSpec("status", kind="choice", choices=STATUSES, default="inactive"),
    ),
)

SEED_USERS = [
    {"id": "1", "name": "John Doe", "email": "john.doe@example.com", "role": "Admin", "status": "active"},
    {"id": "2", "name": "Jane Smith", "email": "jane.smith@example.com", "role": "Editor", "status": "active"},
    {"id": "3", "name": "Bob Johnson", "email": "bob.johnson@example.com", "role": "Viewer", "status": "inactive"},
    {"id": "4", "name": "Alice Brown", "email": "alice.brown@example.com", "role": "Editor", "status": "pending"},
    {"id": "5", "name": "Mike Davis", "email": "mike.davis@example.com", "role": "Admin", "status": "active"},
]


def make_users(notifier: Notifier | None = None, id_factory: Callable[[], str] = new_id) -> CollectionManager:
    store = EntityStore(USER_SCHEMA, SEED_USERS, id_factory=id_factory)
    return CollectionManager(store, notifier)
