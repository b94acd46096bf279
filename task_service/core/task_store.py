"""
Task Store - In-memory ownership of the task list.

Keeps tasks in insertion order and exposes create / list / get / update /
delete / stats. Every operation runs under one lock, so mutations never
interleave with each other or with reads. Reads hand out copies; the only way
to change a stored task is through this class.
"""

import threading
import uuid
from typing import Callable, List, Optional, Set

from task_service.models.task import Task, TaskStats
from task_service.utils.exceptions import TaskNotFoundError
from task_service.utils.validation import validate_task_fields


class TaskStore:
    """In-memory task list with lock-guarded CRUD operations."""

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        self._tasks: List[Task] = []
        self._issued_ids: Set[str] = set()
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _new_id(self) -> str:
        # ids are never handed out twice, even after the original is deleted
        task_id = self._id_factory()
        while task_id in self._issued_ids:
            task_id = self._id_factory()
        self._issued_ids.add(task_id)
        return task_id

    def _find(self, task_id: str) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def create(self, title, completed) -> Task:
        """
        Create a task and append it to the end of the list.

        Raises:
            InvalidInputError: if title is not a str or completed is not a bool
        """
        fields = validate_task_fields(title, completed)
        with self._lock:
            task = Task(id=self._new_id(), title=fields.title, completed=fields.completed)
            self._tasks.append(task)
            return task.copy()

    def list(self, title_filter: Optional[str] = None) -> List[Task]:
        """Return tasks in insertion order, optionally filtered by a case-insensitive title substring."""
        with self._lock:
            tasks = self._tasks
            if title_filter:
                needle = title_filter.lower()
                tasks = [t for t in tasks if needle in t.title.lower()]
            return [t.copy() for t in tasks]

    def get(self, task_id: str) -> Task:
        """Get a task by id, raising TaskNotFoundError if absent."""
        with self._lock:
            return self._find(task_id).copy()

    def update(self, task_id: str, title, completed) -> Task:
        """
        Replace title and completed on an existing task.

        The id is resolved before the fields are checked, so an unknown id
        reports TaskNotFoundError even when the fields are also invalid.
        """
        with self._lock:
            task = self._find(task_id)
            fields = validate_task_fields(title, completed)
            task.title = fields.title
            task.completed = fields.completed
            return task.copy()

    def delete(self, task_id: str) -> Task:
        """Remove a task by id and return it."""
        with self._lock:
            task = self._find(task_id)
            self._tasks.remove(task)
            return task

    def stats(self) -> TaskStats:
        """Compute total / completed / pending from the current list."""
        with self._lock:
            total = len(self._tasks)
            completed = sum(1 for t in self._tasks if t.completed)
            return TaskStats(total=total, completed=completed, pending=total - completed)

    def clear(self) -> None:
        """Remove every task. Previously issued ids stay retired."""
        with self._lock:
            self._tasks.clear()
