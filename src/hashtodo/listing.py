"""Listing policy: which tasks are shown, in what order, under which label.

Rows are ordered by id. Labels are the shortest unique prefixes of the
partition's ids (recomputed on every iteration), or full ids in verbose
mode. The grep filter is a case-insensitive substring match on the text.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping

from .models import Task
from .prefixes import unique_prefixes
from .theme import DONE_COLOR, LABEL_COLOR, color


@dataclass(frozen=True)
class Row:
    label: str
    task: Task

    @property
    def text(self) -> str:
        return self.task.text


class Listing:
    """Lazy, restartable sequence of rows over one partition."""

    def __init__(self, tasks: Mapping[str, Task], grep: str = '', verbose: bool = False):
        self._tasks = tasks
        self.grep = grep
        self.verbose = verbose

    def labels(self) -> Dict[str, str]:
        if self.verbose:
            return {tid: tid for tid in self._tasks}
        return unique_prefixes(self._tasks.keys())

    def __iter__(self) -> Iterator[Row]:
        labels = self.labels()
        needle = self.grep.lower()
        for tid in sorted(self._tasks):
            task = self._tasks[tid]
            if needle in task.text.lower():
                yield Row(labels[tid], task)

    @property
    def width(self) -> int:
        """Widest label over the whole partition, filtered out rows included."""
        return max((len(label) for label in self.labels().values()), default=0)


def render_listing(listing: Listing, quiet: bool = False) -> Iterator[str]:
    """Yield one display line per row: ``<label> - <text>``."""
    width = 0 if quiet else listing.width
    for row in listing:
        line = row.text
        if row.task.finished:
            line += color(f" (✓ {row.task.finished})", DONE_COLOR)
        if not quiet:
            line = color(row.label.ljust(width), LABEL_COLOR) + ' - ' + line
        yield line
