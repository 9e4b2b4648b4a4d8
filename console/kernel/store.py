"""
Console Kernel: Entity Store

Owns the ordered collection of records for one entity kind.

Every mutation runs to completion before subscribers hear about it, and
each public mutation produces at most one StoreChange. Observers therefore
never see a partially applied delete_many or reorder.

No validation happens here. Callers (creation form, edit session) validate
drafts before handing them over.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from console.kernel.types import EntitySchema, NotFound, Record, StoreChange

logger = logging.getLogger(__name__)

Subscriber = Callable[[StoreChange], None]


def new_id() -> str:
    """Default identifier source: a random UUID4 string."""
    return str(uuid.uuid4())


class EntityStore:
    """
    Ordered, id-unique collection of Records.

    Args:
        schema: Field schema of the entity kind
        records: Optional seed records (Records or flat dicts with an "id")
        id_factory: Source of fresh identifiers, uuid4 strings by default
    """

    def __init__(
        self,
        schema: EntitySchema,
        records: Iterable[Record | dict[str, Any]] = (),
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self.schema = schema
        self._id_factory = id_factory
        self._records: list[Record] = []
        self._subscribers: list[Subscriber] = []

        seen: set[str] = set()
        for item in records:
            record = item if isinstance(item, Record) else Record.from_dict(item)
            if record.id in seen:
                raise ValueError(f"Duplicate id in seed data for {schema.plural}: {record.id}")
            seen.add(record.id)
            self._records.append(record)

    # -- read side --

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._records))

    def __contains__(self, record_id: object) -> bool:
        return self._index_of(record_id) is not None

    def get(self, record_id: str) -> Record | None:
        index = self._index_of(record_id)
        return None if index is None else self._records[index]

    def ids(self) -> list[str]:
        return [r.id for r in self._records]

    def records(self) -> tuple[Record, ...]:
        return tuple(self._records)

    # -- observers --

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register an observer. Returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, kind: str, ids: list[str]) -> None:
        change = StoreChange(kind=kind, ids=tuple(ids))
        for callback in list(self._subscribers):
            callback(change)

    # -- mutations --

    def create(self, fields: dict[str, Any]) -> Record:
        """Append a new record with a fresh identifier."""
        record_id = self._id_factory()
        if record_id in self:
            raise ValueError(f"Identifier factory returned an existing id: {record_id}")

        record = Record(id=record_id, fields=fields)
        self._records.append(record)
        logger.debug("%s: created %s", self.schema.plural, record_id)
        self._publish("create", [record_id])
        return record

    def update(self, record_id: str, fields: dict[str, Any]) -> Record:
        """Replace every field of a record, keeping its id and position."""
        index = self._index_of(record_id)
        if index is None:
            raise NotFound(record_id)

        record = Record(id=record_id, fields=fields)
        self._records[index] = record
        logger.debug("%s: updated %s", self.schema.plural, record_id)
        self._publish("update", [record_id])
        return record

    def delete(self, record_id: str) -> bool:
        """
        Remove a record. Returns False when it was already gone,
        which makes repeated deletes harmless.
        """
        index = self._index_of(record_id)
        if index is None:
            logger.debug("%s: delete of missing id %s ignored", self.schema.plural, record_id)
            return False

        del self._records[index]
        logger.debug("%s: deleted %s", self.schema.plural, record_id)
        self._publish("delete", [record_id])
        return True

    def delete_many(self, record_ids: Iterable[str]) -> list[str]:
        """
        Remove every listed record in one step.
        Missing ids are skipped. Returns the removed ids in collection order.
        """
        targets = set(record_ids)
        removed = [r.id for r in self._records if r.id in targets]

        missing = targets.difference(removed)
        if missing:
            logger.warning("%s: bulk delete skipped %d missing id(s)", self.schema.plural, len(missing))

        if not removed:
            return []

        self._records = [r for r in self._records if r.id not in targets]
        logger.debug("%s: deleted %d record(s)", self.schema.plural, len(removed))
        self._publish("delete", removed)
        return removed

    def reorder(self, record_id: str, before_id: str) -> bool:
        """
        Move a record so it sits immediately before another one.
        Relative order of every other record is preserved.
        Returns False (no change) when either id is unknown, when both are
        the same, or when the record is already in place.
        """
        if record_id == before_id:
            return False

        index = self._index_of(record_id)
        target = self._index_of(before_id)
        if index is None or target is None:
            return False
        if index == target - 1:
            return False

        reordered = list(self._records)
        moving = reordered.pop(index)
        target = next(i for i, r in enumerate(reordered) if r.id == before_id)
        reordered.insert(target, moving)
        self._records = reordered

        logger.debug("%s: moved %s before %s", self.schema.plural, record_id, before_id)
        self._publish("reorder", [record_id])
        return True

    # -- internal --

    def _index_of(self, record_id: object) -> int | None:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        return None
