"""Persistence helpers (load/save) for a task list.

A list named NAME in directory DIR is stored in two taskline files:
DIR/NAME for unfinished tasks and DIR/.NAME.done for finished ones.
A missing file is an empty partition.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Union

from .collection import PARTITIONS, TaskCollection
from .errors import InvalidStorageLocation
from .models import Task
from .taskline import tasks_from_text, text_from_tasks

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Storage:
    def __init__(self, task_file: PathLike, done_file: PathLike):
        self.paths: Dict[str, Path] = {'tasks': Path(task_file), 'done': Path(done_file)}

    def check(self) -> None:
        """Raise InvalidStorageLocation if either task file is a directory."""
        for path in self.paths.values():
            if path.is_dir():
                raise InvalidStorageLocation(path)

    def _read(self, path: Path) -> Dict[str, Task]:
        if not path.exists():
            return {}
        tasks = tasks_from_text(path.read_text(encoding='utf-8'))
        logger.debug('loaded %d tasks from %s', len(tasks), path)
        return tasks

    def load(self) -> TaskCollection:
        """Read both partitions. Missing files -> empty collection."""
        self.check()
        return TaskCollection(tasks=self._read(self.paths['tasks']),
                              done=self._read(self.paths['done']))

    def save(self, collection: TaskCollection, delete_if_empty: bool = False) -> None:
        """Write both partitions back to disk.

        With delete_if_empty, an empty partition removes its file instead of
        leaving an empty one behind.
        """
        self.check()
        for kind in PARTITIONS:
            path = self.paths[kind]
            tasks = collection.partition(kind)
            if tasks or not delete_if_empty:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(text_from_tasks(tasks.values()), encoding='utf-8')
                logger.debug('wrote %d tasks to %s', len(tasks), path)
            elif path.exists():
                path.unlink()
                logger.debug('removed empty task file %s', path)
