"""
Task module - Task record and aggregate statistics
"""

from dataclasses import dataclass, asdict


@dataclass
class Task:
    """A single task: opaque id, free-text title and completion flag."""
    id: str
    title: str
    completed: bool = False

    def to_dict(self) -> dict:
        return asdict(self)

    def copy(self) -> "Task":
        return Task(id=self.id, title=self.title, completed=self.completed)


@dataclass
class TaskStats:
    """Counts derived from the current task list."""
    total: int = 0
    completed: int = 0
    pending: int = 0

    def to_dict(self) -> dict:
        return asdict(self)
