"""
Console Kernel: the collection-manager engine.

  store          ordered, id-unique records with create/update/delete/reorder
  filter_view    search projection over a store
  edit_session   at most one in-place edit
  selection      ids marked for bulk action
  confirmation   two-step gate in front of deletes
  reorder        pick-up / drop gesture -> store.reorder
  creation       draft of a record to be created
  manager        all of the above for one screen, plus notifications
"""

from console.kernel.confirmation import ConfirmationGate
from console.kernel.creation import CreationForm
from console.kernel.edit_session import EditSession
from console.kernel.filter_view import FilterView, apply_filter
from console.kernel.manager import CollectionManager
from console.kernel.notifications import LoggingNotifier, MemoryNotifier, Notifier
from console.kernel.renderer import render_text
from console.kernel.reorder import ReorderController
from console.kernel.selection import SelectionSet
from console.kernel.store import EntityStore
from console.kernel.timers import AsyncioScheduler, ManualScheduler, Scheduler
from console.kernel.types import (
    ConsoleError,
    EmptySelection,
    EntitySchema,
    FieldSpec,
    InvalidState,
    NotFound,
    Record,
    ValidationFailed,
)
from console.kernel.validation import validate_fields

__all__ = [
    "EntityStore",
    "FilterView",
    "apply_filter",
    "EditSession",
    "SelectionSet",
    "ConfirmationGate",
    "ReorderController",
    "CreationForm",
    "CollectionManager",
    "Notifier",
    "MemoryNotifier",
    "LoggingNotifier",
    "Scheduler",
    "AsyncioScheduler",
    "ManualScheduler",
    "render_text",
    "validate_fields",
    "EntitySchema",
    "FieldSpec",
    "Record",
    "ConsoleError",
    "NotFound",
    "ValidationFailed",
    "EmptySelection",
    "InvalidState",
]
