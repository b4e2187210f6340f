"""
Service Layer Package

Business logic between the presentation layer (CLI) and the store:
- TaskService: task management, completion workflow, daily bonus, dashboard
"""

from taskquest.services.task_service import TaskService

__all__ = ["TaskService"]
