"""Reading and writing tasklines, the on-disk format of a task file.

A taskline looks like::

    summary text ... | id:<hex id>, key:value, ...

Everything before the last ``|`` is the task text, the comma separated
``key:value`` pairs after it are metadata. A line may also hold only summary
text; the id is then derived from the text when the line is read, so a task
file can be edited by hand. Lines starting with ``#`` are comments.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional

from .models import Task, task_id

logger = logging.getLogger(__name__)

COMMENT = '#'
SEPARATOR = '|'


def _parse_metadata(raw: str) -> Dict[str, str]:
    """Split ``key:value`` pieces on the first colon, so values keep theirs."""
    meta: Dict[str, str] = {}
    for piece in raw.split(','):
        if not piece.strip():
            continue
        # a piece without a colon is kept as a key with an empty value
        label, _, data = piece.partition(':')
        meta[label.strip()] = data.strip()
    return meta


def task_from_taskline(taskline: str) -> Optional[Task]:
    """Parse one taskline; return None for blank lines and comments."""
    line = taskline.strip()
    if not line or line.startswith(COMMENT):
        return None
    if SEPARATOR not in line:
        return Task(id=task_id(line), text=line)
    text, _, raw_meta = line.rpartition(SEPARATOR)
    text = text.strip()
    meta = _parse_metadata(raw_meta)
    meta.pop('text', None)
    tid = meta.get('id')
    if not tid:
        tid = task_id(text)
        meta['id'] = tid
        logger.debug('backfilled id %s for %r', tid, text)
    return Task(id=tid, text=text, metadata=meta)


def taskline_from_task(task: Task) -> str:
    """Serialize a task: ``id`` first, then the other keys alphabetically."""
    pairs = [f'id:{task.id}']
    for key in sorted(task.metadata):
        if key in ('id', 'text'):
            continue
        pairs.append(f'{key}:{task.metadata[key]}')
    return f"{task.text} | {', '.join(pairs)}\n"


def tasks_from_text(content: str) -> Dict[str, Task]:
    """Decode a whole task file into a mapping of id -> task."""
    tasks: Dict[str, Task] = {}
    for lineno, line in enumerate(content.split('\n'), start=1):
        task = task_from_taskline(line)
        if task is None:
            continue
        if task.id in tasks:
            logger.warning('line %d repeats task id %s; keeping the later line', lineno, task.id)
        tasks[task.id] = task
    return tasks


def text_from_tasks(tasks: Iterable[Task]) -> str:
    """Encode tasks into file content, ordered by id."""
    lines: List[str] = [taskline_from_task(t) for t in sorted(tasks, key=lambda t: t.id)]
    return ''.join(lines)
