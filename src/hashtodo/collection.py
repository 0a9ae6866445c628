"""Task collection logic: holds both partitions of a list and mutates them.

Partitions: "tasks" (unfinished) and "done" (finished). A task lives in
exactly one of them; finish() is the only move between the two.

Operations that take a reference resolve it against the unfinished tasks
and return the resolved id on success, or a Failure value otherwise.
"""
from __future__ import annotations
import logging
import re
from datetime import date
from typing import Dict, Mapping, Optional, Tuple, Union

from .errors import EmptyText, Failure, TaskExists
from .listing import Listing
from .models import Task, task_id
from .prefixes import resolve

logger = logging.getLogger(__name__)

PARTITIONS: Tuple[str, ...] = ("tasks", "done")
SUBSTITUTION_RE = re.compile(r"^s?/")
LINE_BREAK_RE = re.compile(r"[\r\n]+")

Outcome = Union[str, Failure]


def substitute(text: str, expression: str) -> str:
    """Apply a ``/find/replace`` (or ``s/find/replace``) edit to ``text``.

    Every occurrence of ``find`` is replaced. Without a closing ``/`` the
    replacement is empty; an empty ``find`` leaves the text as it was.
    """
    body = SUBSTITUTION_RE.sub('', expression, count=1).strip()
    find, _, repl = body.partition('/')
    if not find:
        return text
    return text.replace(find, repl)


class TaskCollection:
    def __init__(self,
                 tasks: Optional[Mapping[str, Task]] = None,
                 done: Optional[Mapping[str, Task]] = None):
        self.partitions: Dict[str, Dict[str, Task]] = {'tasks': {}, 'done': {}}
        if tasks:
            self.partitions['tasks'].update(tasks)
        if done:
            for tid, task in done.items():
                if tid in self.partitions['tasks']:
                    # keep the unfinished copy; a task belongs to one partition
                    logger.warning('task %s is both unfinished and done; keeping it unfinished', tid)
                    continue
                self.partitions['done'][tid] = task

    @property
    def tasks(self) -> Dict[str, Task]:
        return self.partitions['tasks']

    @property
    def done(self) -> Dict[str, Task]:
        return self.partitions['done']

    def partition(self, kind: str) -> Dict[str, Task]:
        if kind not in self.partitions:
            raise ValueError(f'No such kind: {kind!r}')
        return self.partitions[kind]

    # -------------------- queries --------------------
    def resolve(self, ref: str) -> Outcome:
        """Resolve a reference against the unfinished tasks."""
        return resolve(ref, self.tasks.keys())

    def get(self, ref: str) -> Union[Task, Failure]:
        outcome = self.resolve(ref)
        if isinstance(outcome, Failure):
            return outcome
        return self.tasks[outcome]

    def listing(self, kind: str = 'tasks', grep: str = '', verbose: bool = False) -> Listing:
        return Listing(self.partition(kind), grep=grep, verbose=verbose)

    # -------------------- task operations --------------------
    def add(self, text: str) -> Outcome:
        """Add an unfinished task and return its id.

        Adding the text of an unfinished task again is a no-op; adding the
        text of a finished task reopens it. If the id belongs to an
        unfinished task whose text was edited since, TaskExists is returned.
        """
        text = LINE_BREAK_RE.sub(' ', text)
        if not text.strip():
            return EmptyText()
        tid = task_id(text)
        existing = self.tasks.get(tid)
        if existing is not None:
            if existing.text == text:
                return tid
            return TaskExists(tid, existing.text)
        if tid in self.done:
            task = self.done.pop(tid)
            task.metadata.pop('finished', None)
            task.text = text
            self.tasks[tid] = task
            logger.debug('reopened task %s', tid)
            return tid
        task = Task.create(text)
        self.tasks[task.id] = task
        logger.debug('added task %s', task.id)
        return task.id

    def edit(self, ref: str, text: str) -> Outcome:
        task = self.get(ref)
        if isinstance(task, Failure):
            return task
        if text.startswith('s/') or text.startswith('/'):
            text = substitute(task.text, text)
        text = LINE_BREAK_RE.sub(' ', text).strip()
        if not text:
            return EmptyText()
        # the id stays as assigned at creation
        task.text = text
        logger.debug('edited task %s', task.id)
        return task.id

    def finish(self, ref: str, on: Optional[date] = None) -> Outcome:
        task = self.get(ref)
        if isinstance(task, Failure):
            return task
        del self.tasks[task.id]
        task.metadata['finished'] = (on or date.today()).isoformat()
        self.done[task.id] = task
        logger.debug('finished task %s', task.id)
        return task.id

    def remove(self, ref: str) -> Outcome:
        task = self.get(ref)
        if isinstance(task, Failure):
            return task
        del self.tasks[task.id]
        logger.debug('removed task %s', task.id)
        return task.id

    def __str__(self) -> str:
        return f'Unfinished: {len(self.tasks)} tasks, Done: {len(self.done)} tasks'
