"""Tests for task operations on a collection."""

from datetime import date

import pytest

from hashtodo.collection import TaskCollection, substitute
from hashtodo.errors import AmbiguousReference, EmptyText, TaskExists, UnknownReference
from hashtodo.models import task_id
from hashtodo.taskline import tasks_from_text, text_from_tasks

from .helpers import make_task


def test_add_assigns_hashed_id():
    collection = TaskCollection()
    tid = collection.add("foo")
    assert tid == task_id("foo")
    assert collection.tasks[tid].metadata == {"id": tid}
    assert collection.done == {}


def test_add_rejects_empty_text():
    collection = TaskCollection()
    assert collection.add("   ") == EmptyText()
    assert collection.tasks == {}


def test_edit_replaces_text_and_keeps_id(collection):
    assert collection.edit("c", "call dad") == "c3"
    task = collection.tasks["c3"]
    assert task.text == "call dad"
    assert task.id == "c3"
    assert task.metadata == {"id": "c3"}


def test_edit_of_added_task_keeps_its_first_id():
    collection = TaskCollection()
    tid = collection.add("foo")
    collection.edit(tid[:1], "bar")
    assert list(collection.tasks) == [tid]
    assert collection.tasks[tid].text == "bar"


def test_substitution_replaces_every_occurrence(collection):
    collection.edit("c3", "s/call/ring")
    assert collection.tasks["c3"].text == "ring mom"
    collection.edit("ab1", "/l/L")
    assert collection.tasks["ab1"].text == "buy miLk"
    collection.tasks["ab2"].text = "foobaz foo"
    collection.edit("ab2", "s/foo/bar")
    assert collection.tasks["ab2"].text == "barbaz bar"


def test_substitute_edge_cases():
    assert substitute("foobaz", "s/baz") == "foo"
    assert substitute("foobaz", "s//x") == "foobaz"
    assert substitute("foobaz", "s/ foo/qux ") == "quxbaz"


def test_edit_to_empty_text_is_rejected(collection):
    assert collection.edit("c3", "s/call mom/") == EmptyText()
    assert collection.tasks["c3"].text == "call mom"


def test_edit_unknown_reference(collection):
    assert collection.edit("zz", "x") == UnknownReference("zz")


def test_finish_moves_task_to_done(collection):
    assert collection.finish("c", on=date(2026, 10, 18)) == "c3"
    assert "c3" not in collection.tasks
    done = collection.done["c3"]
    assert done.text == "call mom"
    assert done.metadata == {"id": "c3", "finished": "2026-10-18"}


def test_remove_deletes_without_moving(collection):
    assert collection.remove("ab2") == "ab2"
    assert sorted(collection.tasks) == ["ab1", "c3"]
    assert collection.done == {}


def test_ambiguous_reference_changes_nothing(collection):
    assert collection.finish("ab") == AmbiguousReference("ab")
    assert collection.remove("ab") == AmbiguousReference("ab")
    assert sorted(collection.tasks) == ["ab1", "ab2", "c3"]
    assert collection.done == {}


def test_full_id_that_prefixes_another_can_be_removed():
    collection = TaskCollection(tasks={
        "ab": make_task("ab", "short"),
        "abc": make_task("abc", "long"),
    })
    assert collection.remove("ab") == "ab"
    assert list(collection.tasks) == ["abc"]


def test_references_only_reach_unfinished_tasks():
    collection = TaskCollection(done={"d1": make_task("d1", "old")})
    assert collection.remove("d1") == UnknownReference("d1")
    assert "d1" in collection.done


def test_task_in_both_partitions_stays_unfinished():
    collection = TaskCollection(
        tasks={"a1": make_task("a1", "x")},
        done={"a1": make_task("a1", "x"), "b2": make_task("b2", "y")},
    )
    assert list(collection.tasks) == ["a1"]
    assert list(collection.done) == ["b2"]


def test_unknown_partition_is_an_error(collection):
    with pytest.raises(ValueError):
        collection.partition("archive")


def test_adding_same_text_twice_keeps_one_task():
    collection = TaskCollection()
    tid = collection.add("foo")
    assert collection.add("foo") == tid
    assert list(collection.tasks) == [tid]


def test_adding_text_of_finished_task_reopens_it():
    collection = TaskCollection()
    tid = collection.add("foo")
    collection.finish(tid, on=date(2026, 10, 18))
    assert collection.add("foo") == tid
    assert tid in collection.tasks
    assert tid not in collection.done
    assert collection.tasks[tid].metadata == {"id": tid}


def test_adding_text_whose_id_belongs_to_an_edited_task_fails():
    collection = TaskCollection()
    tid = collection.add("foo")
    collection.edit(tid, "bar")
    assert collection.add("foo") == TaskExists(tid, "bar")
    assert collection.tasks[tid].text == "bar"
    assert len(collection.tasks) == 1


def test_line_breaks_become_spaces():
    collection = TaskCollection()
    tid = collection.add("line one\nline two")
    assert tid == task_id("line one line two")
    collection.edit(tid, "first\r\nsecond")
    decoded = tasks_from_text(text_from_tasks(collection.tasks.values()))
    assert {t.id: t.text for t in decoded.values()} == {tid: "first second"}


def test_edit_stores_trimmed_text(collection):
    collection.edit("c3", "  call dad  ")
    assert collection.tasks["c3"].text == "call dad"
