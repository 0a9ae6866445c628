"""Settings resolved from command line options and environment variables.

Precedence: explicit option > environment > default. Empty environment
values count as unset.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "T"
DEFAULT_LIST = "tasks"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _log_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.WARNING


@dataclass(frozen=True)
class Settings:
    task_dir: Path
    list_name: str
    delete_if_empty: bool
    log_level: int

    @property
    def task_file(self) -> Path:
        return self.task_dir / self.list_name

    @property
    def done_file(self) -> Path:
        return self.task_dir / f".{self.list_name}.done"

    @classmethod
    def from_env(
        cls,
        *,
        task_dir: Optional[str] = None,
        list_name: Optional[str] = None,
        delete_if_empty: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> Settings:
        return cls(
            task_dir=Path(task_dir).expanduser() if task_dir else _env_path(_k("TASK_DIR"), Path.home()),
            list_name=list_name or _env(_k("LIST"), DEFAULT_LIST),
            delete_if_empty=(
                delete_if_empty if delete_if_empty is not None
                else _env_bool(_k("DELETE_IF_EMPTY"), False)
            ),
            log_level=_log_level(log_level or _env(_k("LOG_LEVEL"), "WARNING")),
        )
