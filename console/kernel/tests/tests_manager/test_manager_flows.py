"""
Collection Manager: end-to-end screen flows

Drives the manager the way a screen would and checks the store, the
derived state and the notifications it emits.
"""

import pytest

from console.kernel.manager import CollectionManager
from console.kernel.types import InvalidState


@pytest.fixture
def manager(people, notifier):
    return CollectionManager(people, notifier)


@pytest.fixture
def note_manager(notes, notifier):
    return CollectionManager(notes, notifier)


# ============================================================================
# Search
# ============================================================================


class TestSearch:
    def test_search_narrows_visible(self, manager):
        assert [r.id for r in manager.search("jane")] == ["2"]
        assert manager.visible_ids() == ["2"]

    def test_clearing_search_restores_order(self, manager):
        manager.search("jo")
        assert manager.search("") == list(manager.store)


# ============================================================================
# Inline edit
# ============================================================================


class TestInlineEdit:
    def test_edit_and_save(self, manager, people, notifier):
        manager.begin_edit("1")
        manager.edit_field("name", "X")
        record = manager.save_edit()
        assert record.get("name") == "X"
        assert people.get("1").get("name") == "X"
        assert not manager.edit.is_editing
        assert notifier.messages == ["Person updated successfully!"]

    def test_invalid_save_reports_and_keeps_draft(self, manager, people, notifier):
        manager.begin_edit("1")
        manager.edit_field("email", "")
        assert manager.save_edit() is None
        assert manager.edit.is_editing
        assert manager.edit.draft["email"] == ""
        assert people.get("1").get("email") == "john@x.com"
        assert notifier.last.level == "error"
        assert notifier.last.message == "Please fill in all fields."

    def test_negative_number_message(self, manager, notifier):
        manager.begin_edit("1")
        manager.edit_field("age", -4)
        manager.save_edit()
        assert notifier.last.message == "Numeric fields must be non-negative."

    def test_begin_edit_missing_id(self, manager, notifier):
        assert manager.begin_edit("ghost") is None
        assert notifier.notifications == []

    def test_cancel_edit(self, manager, people):
        manager.begin_edit("2")
        manager.edit_field("name", "Nope")
        manager.cancel_edit()
        assert people.get("2").get("name") == "Jane Smith"

    def test_deleting_edited_record_ends_edit(self, manager):
        manager.begin_edit("2")
        manager.delete("2")
        assert not manager.edit.is_editing


# ============================================================================
# Creation
# ============================================================================


class TestAdd:
    def test_add(self, manager, people, notifier):
        manager.set_new_field("name", "Ann")
        manager.set_new_field("email", "ann@x.com")
        record = manager.add()
        assert people.ids()[-1] == record.id
        assert manager.creation.draft["name"] == ""
        assert notifier.messages == ["Person added successfully!"]

    def test_add_incomplete(self, manager, people, notifier):
        manager.set_new_field("name", "Ann")
        assert manager.add() is None
        assert len(people) == 3
        assert manager.creation.draft["name"] == "Ann"
        assert notifier.last.message == "Please fill in all fields."

    def test_custom_messages(self, people, notifier):
        manager = CollectionManager(people, notifier, messages={"missing_fields": "Name and email please."})
        manager.add()
        assert notifier.last.message == "Name and email please."


# ============================================================================
# Delete
# ============================================================================


class TestDelete:
    def test_immediate_delete(self, manager, people, notifier):
        assert manager.delete("1") is True
        assert people.ids() == ["2", "3"]
        assert notifier.messages == ["Person deleted successfully!"]

    def test_repeat_delete_is_silent(self, manager, notifier):
        manager.delete("1")
        assert manager.delete("1") is False
        assert notifier.messages == ["Person deleted successfully!"]

    def test_confirmed_single_delete(self, note_manager, notes, notifier):
        note_manager.focus("b")
        assert note_manager.request_delete("b") is True
        assert notes.ids() == ["a", "b", "c", "d"]
        assert note_manager.confirm_delete() == ["b"]
        assert notes.ids() == ["a", "c", "d"]
        assert note_manager.focused is None
        assert notifier.messages == ["Note deleted successfully!"]

    def test_confirmed_single_delete_cancelled(self, note_manager, notes):
        note_manager.request_delete("b")
        note_manager.cancel_delete()
        assert notes.ids() == ["a", "b", "c", "d"]

    def test_request_delete_missing(self, note_manager):
        assert note_manager.request_delete("ghost") is False
        assert not note_manager.gate.is_pending


# ============================================================================
# Selection & bulk delete
# ============================================================================


class TestBulkDelete:
    def test_example_flow(self, manager, people, notifier):
        manager.toggle("1")
        manager.toggle("2")
        assert manager.request_delete_selected() is True
        assert manager.gate.is_pending
        manager.confirm_delete()
        assert people.ids() == ["3"]
        assert len(manager.selection) == 0
        assert not manager.gate.is_pending
        assert notifier.messages == ["Selected people deleted successfully!"]

    def test_empty_selection_reported(self, manager, notifier):
        assert manager.request_delete_selected() is False
        assert not manager.gate.is_pending
        assert notifier.last.level == "error"
        assert notifier.last.message == "Please select people to delete."

    def test_cancel_keeps_everything(self, manager, people):
        manager.toggle("1")
        manager.request_delete_selected()
        manager.cancel_delete()
        assert len(people) == 3
        assert manager.selection.members() == ["1"]

    def test_toggle_missing_id(self, manager):
        assert manager.toggle("ghost") is False

    def test_toggle_select_all_visible_only(self, manager):
        manager.toggle("3")
        manager.search("x.com")
        manager.toggle_select_all()
        assert manager.selection.members() == ["1", "2", "3"]
        assert manager.all_selected

        manager.toggle_select_all()
        assert manager.selection.members() == ["3"]
        assert not manager.all_selected

    def test_all_selected_false_for_empty_view(self, manager):
        manager.search("nobody")
        manager.toggle_select_all()
        assert not manager.all_selected
        assert len(manager.selection) == 0


# ============================================================================
# Reordering
# ============================================================================


class TestReordering:
    def test_drag_and_drop(self, note_manager, notes):
        note_manager.pick_up("c")
        assert note_manager.drop_on("a") is True
        assert notes.ids() == ["c", "a", "b", "d"]

    def test_not_reorderable(self, manager):
        assert manager.reorder is None
        with pytest.raises(InvalidState):
            manager.pick_up("1")


# ============================================================================
# Focus, snapshot & teardown
# ============================================================================


class TestFocusAndSnapshot:
    def test_focus_leaves_edit(self, note_manager):
        note_manager.begin_edit("a")
        assert note_manager.focus("b").id == "b"
        assert not note_manager.edit.is_editing
        assert note_manager.focused_record.get("title") == "Bravo"

    def test_focus_missing(self, note_manager):
        assert note_manager.focus("ghost") is None
        assert note_manager.focused is None

    def test_snapshot(self, manager):
        manager.search("jo")
        manager.toggle("3")
        manager.begin_edit("1")
        snap = manager.snapshot()
        assert snap["entity"] == "person"
        assert snap["total"] == 3
        assert [r["id"] for r in snap["records"]] == ["1", "3"]
        assert snap["selected"] == ["3"]
        assert snap["all_selected"] is False
        assert snap["editing"]["id"] == "1"
        assert snap["pending_delete"] is None
        assert snap["picked_up"] is None

    def test_snapshot_is_detached(self, manager, people):
        snap = manager.snapshot()
        snap["records"][0]["name"] = "mutated"
        assert people.get("1").get("name") == "John Doe"

    def test_close_unsubscribes(self, manager, people):
        manager.begin_edit("1")
        manager.close()
        people.delete("1")
        # No longer following the store
        assert manager.edit.is_editing
