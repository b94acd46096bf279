"""
Models module - Data structures for the Task Service
"""

from .task import Task, TaskStats

__all__ = [
    'Task',
    'TaskStats',
]
