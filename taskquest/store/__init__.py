"""Local persistence: key-value stores and the task repository"""

from taskquest.store.kv_store import InMemoryStore, JsonFileStore, create_store
from taskquest.store.task_store import TaskStore

__all__ = ["InMemoryStore", "JsonFileStore", "create_store", "TaskStore"]
