"""Data models for the hashtodo task tracker.

A task's id is derived from its text once, when the task is created, and
is never recomputed afterwards. Editing the text keeps the id (and so the
prefix the user already knows) stable.
"""
from __future__ import annotations
import hashlib
from dataclasses import dataclass, field
from typing import Dict


def task_id(text: str) -> str:
    """Return the SHA-1 hex digest of ``text`` for use as a task id."""
    return hashlib.sha1(text.encode('utf-8')).hexdigest()


@dataclass
class Task:
    """A single task.

    Fields:
        id: Hex id assigned at creation (see task_id).
        text: Free-form, single-line summary.
        metadata: Auxiliary key/value pairs kept across edits. Usually holds
            a copy of ``id`` so the taskline round-trips unchanged.
    """
    id: str
    text: str
    metadata: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def create(cls, text: str) -> Task:
        tid = task_id(text)
        return cls(id=tid, text=text, metadata={'id': tid})

    @property
    def finished(self) -> str:
        """Day the task was finished (empty when unfinished)."""
        return self.metadata.get('finished', '')

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(id={self.id}, text={self.text})"
