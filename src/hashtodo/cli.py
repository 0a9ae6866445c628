"""Command-line interface for the task tracker.

One command, ``t``. The action is picked by the first selector given, in
this order: --finish, --remove, --edit, then positional TEXT (add). With
none of them the unfinished tasks (or, with --done, the finished ones) are
listed.

Tasks are referred to by any prefix of their id that is unique in the
list; the listing shows the shortest such prefix for each task.
"""
from __future__ import annotations
from typing import Optional

import click

from .collection import Outcome, TaskCollection
from .config import Settings
from .errors import Failure, InvalidStorageLocation
from .listing import render_listing
from .logging_setup import setup_logging
from .storage import Storage
from .theme import echo_color

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


def _apply(collection: TaskCollection, finish_ref: Optional[str], remove_ref: Optional[str],
           edit_ref: Optional[str], text: str) -> Optional[Outcome]:
    """Run the selected mutation; None when the command only lists."""
    if finish_ref:
        return collection.finish(finish_ref)
    if remove_ref:
        return collection.remove(remove_ref)
    if edit_ref:
        return collection.edit(edit_ref, text)
    if text:
        return collection.add(text)
    return None


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option('-e', '--edit', 'edit_ref', metavar='TASK', help='edit TASK to contain TEXT')
@click.option('-f', '--finish', 'finish_ref', metavar='TASK', help='mark TASK as finished')
@click.option('-r', '--remove', 'remove_ref', metavar='TASK', help='remove TASK from list')
@click.option('-l', '--list', 'list_name', metavar='LIST', help='work on LIST [env: T_LIST]')
@click.option('-t', '--task-dir', metavar='DIR', help='work on the lists in DIR [env: T_TASK_DIR]')
@click.option('-d', '--delete-if-empty', is_flag=True,
              help='delete the task file if it becomes empty [env: T_DELETE_IF_EMPTY]')
@click.option('-g', '--grep', default='', metavar='WORD', help='print only tasks that contain WORD')
@click.option('-v', '--verbose', is_flag=True, help='print more detailed output (full task ids, etc)')
@click.option('-q', '--quiet', is_flag=True, help='print less detailed output (no task ids, etc)')
@click.option('--done', is_flag=True, help='list done tasks instead of unfinished ones')
@click.option('--debug', is_flag=True, help='log diagnostics to stderr [env: T_LOG_LEVEL]')
@click.argument('text', nargs=-1)
@click.pass_context
def main(ctx: click.Context, edit_ref: Optional[str], finish_ref: Optional[str],
         remove_ref: Optional[str], list_name: Optional[str], task_dir: Optional[str],
         delete_if_empty: bool, grep: str, verbose: bool, quiet: bool, done: bool,
         debug: bool, text: tuple[str, ...]) -> None:
    """A simple task tracker: add, edit, finish and remove tasks kept in plain text files."""
    settings = Settings.from_env(
        task_dir=task_dir,
        list_name=list_name,
        delete_if_empty=True if delete_if_empty else None,
        log_level='DEBUG' if debug else None,
    )
    setup_logging(settings.log_level)

    storage = Storage(settings.task_file, settings.done_file)
    try:
        collection = storage.load()
    except InvalidStorageLocation as exc:
        raise click.ClickException(str(exc))

    outcome = _apply(collection, finish_ref, remove_ref, edit_ref, ' '.join(text).strip())
    if outcome is None:
        listing = collection.listing('done' if done else 'tasks', grep=grep, verbose=verbose)
        for line in render_listing(listing, quiet=quiet):
            click.echo(line, color=echo_color())
        return
    if isinstance(outcome, Failure):
        click.echo(outcome.message, err=True)
        ctx.exit(1)

    try:
        storage.save(collection, delete_if_empty=settings.delete_if_empty)
    except InvalidStorageLocation as exc:
        raise click.ClickException(str(exc))


if __name__ == '__main__':  # pragma: no cover
    main()
