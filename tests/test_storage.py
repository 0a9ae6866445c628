"""Tests for reading and writing task files."""

import pytest

from hashtodo.collection import TaskCollection
from hashtodo.errors import InvalidStorageLocation
from hashtodo.models import task_id
from hashtodo.storage import Storage


def _storage(task_dir):
    return Storage(task_dir / "tasks", task_dir / ".tasks.done")


def test_missing_files_load_as_empty(task_dir):
    collection = _storage(task_dir).load()
    assert collection.tasks == {}
    assert collection.done == {}


def test_save_then_load(task_dir):
    storage = _storage(task_dir)
    collection = TaskCollection()
    collection.add("foo")
    collection.add("bar")
    collection.finish(task_id("bar"))
    storage.save(collection)

    assert (task_dir / "tasks").read_text() == f"foo | id:{task_id('foo')}\n"
    assert (task_dir / ".tasks.done").read_text().startswith(f"bar | id:{task_id('bar')}, finished:")

    reloaded = storage.load()
    assert list(reloaded.tasks) == [task_id("foo")]
    assert list(reloaded.done) == [task_id("bar")]


def test_empty_partition_writes_empty_file_by_default(task_dir):
    _storage(task_dir).save(TaskCollection())
    assert (task_dir / "tasks").read_text() == ""
    assert (task_dir / ".tasks.done").read_text() == ""


def test_delete_if_empty_removes_files(task_dir):
    storage = _storage(task_dir)
    (task_dir / "tasks").write_text("foo\n")
    collection = storage.load()
    collection.remove(task_id("foo"))
    storage.save(collection, delete_if_empty=True)
    assert not (task_dir / "tasks").exists()
    assert not (task_dir / ".tasks.done").exists()


def test_hand_written_lines_get_ids(task_dir):
    (task_dir / "tasks").write_text("# groceries\nbuy milk\nbuy bread | owner:me\n")
    collection = _storage(task_dir).load()
    assert sorted(collection.tasks) == sorted([task_id("buy milk"), task_id("buy bread")])
    assert collection.tasks[task_id("buy bread")].metadata["owner"] == "me"


def test_directory_in_place_of_file_is_fatal(task_dir):
    (task_dir / ".tasks.done").mkdir()
    storage = _storage(task_dir)
    with pytest.raises(InvalidStorageLocation, match="Invalid task file"):
        storage.load()
    with pytest.raises(InvalidStorageLocation):
        storage.save(TaskCollection())
    assert not (task_dir / "tasks").exists()


def test_save_creates_missing_directory(tmp_path):
    storage = Storage(tmp_path / "new" / "work", tmp_path / "new" / ".work.done")
    collection = TaskCollection()
    collection.add("foo")
    storage.save(collection, delete_if_empty=True)
    assert (tmp_path / "new" / "work").exists()
    assert not (tmp_path / "new" / ".work.done").exists()
