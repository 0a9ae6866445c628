from __future__ import annotations

import logging
from pathlib import Path

import pytest

from hashtodo.collection import TaskCollection

from .helpers import make_task

_ENV_VARS = ("T_TASK_DIR", "T_LIST", "T_DELETE_IF_EMPTY", "T_LOG_LEVEL", "FORCE_COLOR", "NO_COLOR")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the developer's environment out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    logging.getLogger("hashtodo").handlers.clear()


@pytest.fixture()
def collection() -> TaskCollection:
    return TaskCollection(tasks={
        "ab1": make_task("ab1", "buy milk"),
        "ab2": make_task("ab2", "Buy bread"),
        "c3": make_task("c3", "call mom"),
    })


@pytest.fixture()
def task_dir(tmp_path: Path) -> Path:
    d = tmp_path / "lists"
    d.mkdir()
    return d
