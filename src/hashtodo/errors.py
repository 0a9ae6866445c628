"""Failure values returned by task operations, plus the one fatal error.

Reference and text problems are expected outcomes of user input: operations
return them instead of raising, and the command line turns them into a
message and a non-zero exit. A task file that resolves to a directory is
different: nothing can safely be read or written, so it is raised.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Failure:
    """Base for failures an operation reports back to its caller."""

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class UnknownReference(Failure):
    ref: str

    @property
    def message(self) -> str:
        return f'The ID "{self.ref}" does not match any task.'


@dataclass(frozen=True)
class AmbiguousReference(Failure):
    ref: str

    @property
    def message(self) -> str:
        return f'The ID "{self.ref}" matches more than one task.'


@dataclass(frozen=True)
class EmptyText(Failure):
    @property
    def message(self) -> str:
        return 'Task text required.'


@dataclass(frozen=True)
class TaskExists(Failure):
    """Adding the text would reuse the id of a task whose text has since changed."""
    id: str
    text: str

    @property
    def message(self) -> str:
        return f'Task "{self.id}" already exists as "{self.text}".'


class InvalidStorageLocation(Exception):
    """A task file path exists but is a directory."""

    def __init__(self, path) -> None:
        super().__init__(f"Invalid task file: '{path}'")
        self.path = path
