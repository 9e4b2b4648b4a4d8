"""
Console kernel test configuration.

Shared fixtures: a small people schema, seeded stores and a deterministic
id factory so created records get predictable ids.
"""

import itertools

import pytest

from console.kernel.notifications import MemoryNotifier
from console.kernel.store import EntityStore
from console.kernel.types import EntitySchema, FieldSpec

PEOPLE = EntitySchema(
    name="person",
    plural="people",
    fields=(
        FieldSpec("name", required=True, searchable=True),
        FieldSpec("email", required=True, searchable=True),
        FieldSpec("age", kind="integer", non_negative=True, default=30),
    ),
)

NOTES = EntitySchema(
    name="note",
    plural="notes",
    fields=(
        FieldSpec("title", required=True, searchable=True),
        FieldSpec("body", kind="text"),
    ),
    reorderable=True,
)

SEED_PEOPLE = [
    {"id": "1", "name": "John Doe", "email": "john@x.com", "age": 41},
    {"id": "2", "name": "Jane Smith", "email": "jane@x.com", "age": 35},
    {"id": "3", "name": "Bob Johnson", "email": "bob@y.org", "age": 28},
]

SEED_NOTES = [
    {"id": "a", "title": "Alpha", "body": ""},
    {"id": "b", "title": "Bravo", "body": ""},
    {"id": "c", "title": "Charlie", "body": ""},
    {"id": "d", "title": "Delta", "body": ""},
]


def counter_ids(prefix: str = "new"):
    counter = itertools.count(1)
    return lambda: f"{prefix}_{next(counter)}"


@pytest.fixture
def people():
    return EntityStore(PEOPLE, SEED_PEOPLE, id_factory=counter_ids())


@pytest.fixture
def empty_people():
    return EntityStore(PEOPLE, id_factory=counter_ids())


@pytest.fixture
def notes():
    return EntityStore(NOTES, SEED_NOTES, id_factory=counter_ids("note"))


@pytest.fixture
def notifier():
    return MemoryNotifier()


@pytest.fixture
def changes(people):
    """Every StoreChange published by the people store."""
    seen = []
    people.subscribe(seen.append)
    return seen
