"""
Test suite for the in-memory task store.

Validates that:
1. Created tasks can be fetched back unchanged
2. Invalid field types are rejected without mutating the store
3. Listing keeps insertion order and filters titles case-insensitively
4. Updates resolve the id before checking fields
5. Deletes remove exactly one task and ids are never reused
6. Stats always agree with the live task list
"""

import doctest
import threading

import pytest

import task_service
from task_service.core.task_store import TaskStore
from task_service.models.task import Task
from task_service.utils.exceptions import InvalidInputError, TaskNotFoundError


class TestTaskStoreCreate:
    """Create and fetch."""

    def setup_method(self):
        self.store = TaskStore()

    def test_create_then_get_returns_same_task(self):
        task = self.store.create("Buy milk", False)

        fetched = self.store.get(task.id)
        assert fetched.id == task.id
        assert fetched.title == "Buy milk"
        assert fetched.completed is False

    def test_create_assigns_uuid_string_ids(self):
        first = self.store.create("a", False)
        second = self.store.create("b", True)

        assert isinstance(first.id, str)
        assert len(first.id) == 36
        assert first.id != second.id

    def test_empty_title_is_accepted(self):
        task = self.store.create("", True)
        assert self.store.get(task.id).title == ""

    @pytest.mark.parametrize("title, completed", [
        (None, False),
        (123, False),
        (["x"], True),
        ("ok", None),
        ("ok", 1),
        ("ok", 0),
        ("ok", "true"),
    ])
    def test_invalid_types_rejected_without_mutation(self, title, completed):
        self.store.create("existing", False)

        with pytest.raises(InvalidInputError):
            self.store.create(title, completed)

        assert len(self.store) == 1

    def test_invalid_input_reports_offending_fields(self):
        with pytest.raises(InvalidInputError) as exc_info:
            self.store.create(42, "yes")

        assert set(exc_info.value.fields) == {"title", "completed"}

    def test_returned_task_is_a_copy(self):
        task = self.store.create("original", False)
        task.title = "tampered"

        assert self.store.get(task.id).title == "original"


class TestTaskStoreList:
    """Listing and title filtering."""

    def setup_method(self):
        self.store = TaskStore()

    def test_empty_store_lists_nothing(self):
        assert self.store.list() == []

    def test_list_preserves_insertion_order(self):
        titles = ["one", "two", "three"]
        for title in titles:
            self.store.create(title, False)

        assert [t.title for t in self.store.list()] == titles

    def test_filter_is_case_insensitive_and_ordered(self):
        report = self.store.create("Write report", False)
        memo = self.store.create("Write memo", True)
        self.store.create("Buy milk", False)

        assert [t.id for t in self.store.list("write")] == [report.id, memo.id]
        assert [t.id for t in self.store.list("MEMO")] == [memo.id]

    def test_filter_without_match_returns_empty_list(self):
        self.store.create("Buy milk", False)
        assert self.store.list("nothing") == []

    def test_empty_filter_returns_everything(self):
        self.store.create("a", False)
        self.store.create("b", False)
        assert len(self.store.list("")) == 2

    def test_list_count_tracks_creates_minus_deletes(self):
        tasks = [self.store.create(f"task {i}", i % 2 == 0) for i in range(5)]
        self.store.delete(tasks[1].id)
        self.store.delete(tasks[3].id)

        assert len(self.store.list()) == 3


class TestTaskStoreUpdate:
    """In-place updates."""

    def setup_method(self):
        self.store = TaskStore()
        self.task = self.store.create("Buy milk", False)

    def test_update_replaces_fields_and_keeps_id(self):
        updated = self.store.update(self.task.id, "Buy oat milk", True)

        assert updated.id == self.task.id
        fetched = self.store.get(self.task.id)
        assert fetched.title == "Buy oat milk"
        assert fetched.completed is True

    def test_update_unknown_id_is_not_found_even_with_bad_fields(self):
        with pytest.raises(TaskNotFoundError):
            self.store.update("missing", "fine", True)
        with pytest.raises(TaskNotFoundError):
            self.store.update("missing", None, "nope")

    def test_update_with_bad_fields_leaves_task_unchanged(self):
        with pytest.raises(InvalidInputError):
            self.store.update(self.task.id, "changed", "yes")

        fetched = self.store.get(self.task.id)
        assert fetched.title == "Buy milk"
        assert fetched.completed is False

    def test_update_keeps_position_in_list(self):
        other = self.store.create("Other", False)
        self.store.update(self.task.id, "Renamed", True)

        assert [t.id for t in self.store.list()] == [self.task.id, other.id]


class TestTaskStoreDelete:
    """Deletion and id retirement."""

    def setup_method(self):
        self.store = TaskStore()

    def test_delete_removes_exactly_one_task(self):
        first = self.store.create("first", False)
        second = self.store.create("second", True)
        third = self.store.create("third", False)

        removed = self.store.delete(second.id)

        assert removed.id == second.id
        assert [t.id for t in self.store.list()] == [first.id, third.id]
        with pytest.raises(TaskNotFoundError):
            self.store.get(second.id)

    def test_delete_unknown_id_is_not_found(self):
        self.store.create("keep", False)
        with pytest.raises(TaskNotFoundError) as exc_info:
            self.store.delete("missing")

        assert exc_info.value.task_id == "missing"
        assert len(self.store) == 1

    def test_delete_decrements_stats_total(self):
        task = self.store.create("a", True)
        self.store.create("b", False)

        before = self.store.stats().total
        self.store.delete(task.id)
        assert self.store.stats().total == before - 1

    def test_deleted_id_is_never_reissued(self):
        ids = iter(["a", "a", "b", "b", "c"])
        store = TaskStore(id_factory=lambda: next(ids))

        first = store.create("one", False)
        store.delete(first.id)
        second = store.create("two", False)
        third = store.create("three", False)

        assert first.id == "a"
        assert second.id == "b"
        assert third.id == "c"

    def test_clear_keeps_ids_retired(self):
        ids = iter(["a", "a", "b"])
        store = TaskStore(id_factory=lambda: next(ids))
        store.create("one", False)
        store.clear()

        assert len(store) == 0
        assert store.create("two", False).id == "b"


class TestTaskStoreStats:
    """Aggregate counts."""

    def setup_method(self):
        self.store = TaskStore()

    def test_stats_on_empty_store(self):
        assert self.store.stats().to_dict() == {"total": 0, "completed": 0, "pending": 0}

    def test_stats_follow_mutations(self):
        a = self.store.create("a", False)
        self.store.create("b", True)
        self.store.create("c", False)

        stats = self.store.stats()
        assert (stats.total, stats.completed, stats.pending) == (3, 1, 2)

        self.store.update(a.id, "a", True)
        stats = self.store.stats()
        assert (stats.total, stats.completed, stats.pending) == (3, 2, 1)
        assert stats.total == stats.completed + stats.pending
        assert stats.total == len(self.store.list())


class TestTaskStoreScenarios:
    """End-to-end flows through the store."""

    def test_buy_milk_lifecycle(self):
        store = TaskStore()
        task = store.create("Buy milk", False)
        assert store.get(task.id) == Task(id=task.id, title="Buy milk", completed=False)

        store.update(task.id, "Buy milk", True)
        assert store.get(task.id).completed is True

        store.delete(task.id)
        with pytest.raises(TaskNotFoundError):
            store.get(task.id)

    def test_concurrent_creates_are_all_kept(self):
        store = TaskStore()

        def worker(n):
            for i in range(50):
                store.create(f"worker {n} task {i}", i % 2 == 0)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        tasks = store.list()
        assert len(tasks) == 400
        assert len({t.id for t in tasks}) == 400
        assert store.stats().completed == 200


class TestPackageExample:

    def test_package_docstring_example_runs(self):
        results = doctest.testmod(task_service, verbose=False)

        assert results.attempted > 0
        assert results.failed == 0
