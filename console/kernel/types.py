"""
Console Kernel: Shared Types

Data classes used across the store, the interaction components and the
screens. A schema is a list of field descriptors; users, products and
documents are three configurations of the same engine.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

# ---------------------------------------------------------------------------
# Field kinds
# ---------------------------------------------------------------------------

FIELD_KINDS: set[str] = {
    "string",
    "text",
    "number",
    "integer",
    "boolean",
    "choice",
}

NUMERIC_KINDS: set[str] = {"number", "integer"}
TEXT_KINDS: set[str] = {"string", "text"}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConsoleError(Exception):
    """Base class for every recoverable kernel error."""


class NotFound(ConsoleError):
    """An operation referenced an identifier absent from the collection."""

    def __init__(self, record_id: str):
        super().__init__(f"Record not found: {record_id}")
        self.record_id = record_id


class ValidationFailed(ConsoleError):
    """A draft failed its schema's validation rules."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class EmptySelection(ConsoleError):
    """A bulk action was requested with nothing selected."""


class InvalidState(ConsoleError):
    """An operation was called from a state that does not allow it."""


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldSpec:
    """One typed field of an entity kind."""

    name: str
    kind: str = "string"
    required: bool = False
    searchable: bool = False
    default: Any = None
    choices: tuple[str, ...] = ()
    non_negative: bool = False
    label: str | None = None

    def __post_init__(self) -> None:
        if self.kind not in FIELD_KINDS:
            raise ValueError(f"Unknown field kind for '{self.name}': {self.kind}")
        if self.kind == "choice" and not self.choices:
            raise ValueError(f"Choice field '{self.name}' declares no choices")

    @property
    def title(self) -> str:
        return self.label or self.name.replace("_", " ").capitalize()

    def blank(self) -> Any:
        """Default value for a fresh draft."""
        if self.default is not None:
            return self.default
        if self.kind in TEXT_KINDS:
            return ""
        if self.kind == "number":
            return 0.0
        if self.kind == "integer":
            return 0
        if self.kind == "boolean":
            return False
        return self.choices[0]


@dataclass(frozen=True)
class EntitySchema:
    """
    Field schema for one entity kind.

    `name` is the singular display noun ("user"), `plural` the collection
    noun ("users"). Only reorderable schemas get a reorder controller.
    """

    name: str
    plural: str
    fields: tuple[FieldSpec, ...]
    reorderable: bool = False

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for spec in self.fields:
            if spec.name == "id":
                raise ValueError("'id' is reserved and cannot be a schema field")
            if spec.name in seen:
                raise ValueError(f"Duplicate field in schema '{self.name}': {spec.name}")
            seen.add(spec.name)

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def search_fields(self) -> list[str]:
        return [f.name for f in self.fields if f.searchable]

    def get_field(self, name: str) -> FieldSpec | None:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None

    def blank_draft(self) -> dict[str, Any]:
        return {f.name: f.blank() for f in self.fields}


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Record:
    """
    One entity instance. The id is assigned at creation and never changes.
    Fields are a read-only view over a private copy; updates replace the
    whole Record object inside the store.
    """

    id: str
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        return hash(self.id)

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.fields}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Record:
        fields = {k: v for k, v in d.items() if k != "id"}
        return cls(id=str(d["id"]), fields=fields)


@dataclass(frozen=True)
class StoreChange:
    """
    One observable state transition of a store.
    `ids` lists the affected records in collection order.
    """

    kind: str
    ids: tuple[str, ...]


@dataclass(frozen=True)
class Notification:
    """A user-facing success or error message."""

    level: str  # "success" or "error"
    message: str
