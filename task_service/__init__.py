"""
Task Service - In-memory task list with a small JSON HTTP API

Features:
- Create, list, fetch, update and delete tasks
- Case-insensitive title filtering
- Aggregate completion statistics
- Lock-guarded store safe to share between request threads
- Environment-based configuration (config.properties / .env)

Example:
    >>> from task_service import TaskStore
    >>>
    >>> store = TaskStore()
    >>> task = store.create("Buy milk", False)
    >>> _ = store.update(task.id, "Buy milk", True)
    >>> store.stats().to_dict()
    {'total': 1, 'completed': 1, 'pending': 0}
"""

__version__ = "1.0.0"
__all__ = [
    'TaskStore',
    'Task',
    'TaskStats',
    'ServerConfig',
    'ConfigProperties',
    'TaskServiceError',
    'InvalidInputError',
    'TaskNotFoundError',
]

from .core.task_store import TaskStore
from .models.task import Task, TaskStats
from .config import ServerConfig, ConfigProperties
from .utils.exceptions import TaskServiceError, InvalidInputError, TaskNotFoundError
