"""hashtodo: a plain-text task tracker addressed by short id prefixes.

Usage:
    from hashtodo import Storage

    storage = Storage("tasks", ".tasks.done")
    tasks = storage.load()
    tasks.add("write report")
    storage.save(tasks)
"""
from .collection import TaskCollection
from .errors import (AmbiguousReference, EmptyText, Failure, InvalidStorageLocation, TaskExists,
                     UnknownReference)
from .models import Task, task_id
from .prefixes import resolve, unique_prefixes
from .storage import Storage

__version__ = "0.1.0"
__all__ = [
    "TaskCollection",
    "Task",
    "task_id",
    "Storage",
    "resolve",
    "unique_prefixes",
    "Failure",
    "UnknownReference",
    "AmbiguousReference",
    "EmptyText",
    "TaskExists",
    "InvalidStorageLocation",
]
