from __future__ import annotations

from hashtodo.models import Task


def make_task(tid: str, text: str, **meta: str) -> Task:
    """Task with a hand-picked id, to control prefix collisions."""
    return Task(id=tid, text=text, metadata={"id": tid, **meta})
