"""
Task Service HTTP API

Provides the JSON REST surface over the in-memory task store:
- Task CRUD with case-insensitive title filtering
- Completion statistics
- Static information page
"""

__version__ = "1.0.0"
