"""The copy and clean commands."""

from __future__ import annotations

import os

import click

from ..diff import MirrorDiff
from ..exceptions import MirrorError
from ..mirror import apply_diff, plan, validate_roots
from ..oplog import OperationLog
from ..order import creation_order, deletion_order, sorted_paths
from .._format import bytes_to_mb
from ._helpers import (
    main,
    MSG_ARE_YOU_SURE,
    MSG_CALCULATING,
    MSG_CANCELING,
    MSG_DONE,
    MSG_FINISHED,
    MSG_NOTHING_TO_DO,
    _ask,
    _build_exclude,
    _dry_run_option,
    _exclude_options,
    _fail,
    _log_file_option,
    _progress_cb,
    _roots_arguments,
    _say,
    _status,
    _step_option,
    _yes_option,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _logging_note(log_file: str) -> str:
    return f"Also a log file named '{log_file}' will be generated."


def _print_plan(diff: MirrorDiff) -> None:
    """Print the ordered operations of *diff* to stdout."""
    if diff.clean:
        for rel in sorted_paths(diff.files):
            click.echo(f"- {rel}")
        for rel in deletion_order(diff.folders):
            click.echo(f"- {rel}{os.sep}")
    else:
        for rel in creation_order(diff.folders):
            click.echo(f"+ {rel}{os.sep}")
        for rel in sorted_paths(diff.files):
            click.echo(f"+ {rel}")
    click.echo(f"{len(diff.files)} file(s) ({bytes_to_mb(diff.total_size)} MB) and "
               f"{len(diff.folders)} folder(s) would be changed.")


def _run(ctx, src, dst, *, clean, yes, dry_run, log_file, excl, step):
    try:
        src, dst = validate_roots(src, dst, ignore_name=excl.ignore_name)
    except MirrorError as exc:
        _fail(exc)

    if clean:
        question = f'files may be deleted in the "{dst}" folder. {MSG_ARE_YOU_SURE}'
    else:
        question = f'files from "{src}" will be copied to "{dst}". {MSG_ARE_YOU_SURE}'
    if not dry_run and not _ask(question, yes):
        _say(MSG_CANCELING)
        return

    _say(MSG_CALCULATING)
    try:
        diff = plan(src, dst, clean=clean, exclude=excl)
    except MirrorError as exc:
        _fail(exc)

    if diff.in_sync:
        _say(MSG_NOTHING_TO_DO)
        return

    if dry_run:
        _print_plan(diff)
        return

    size_mb = bytes_to_mb(diff.total_size)
    if clean:
        summary = (f"{len(diff.files)} files ({size_mb} MB) and "
                   f"{len(diff.folders)} folders will be deleted.")
    else:
        summary = (f"{len(diff.files)} files will be copied ({size_mb} MB) and "
                   f"{len(diff.folders)} folders will be created.")
    if not _ask(f"{summary} {_logging_note(log_file)} {MSG_ARE_YOU_SURE}", yes):
        _say(MSG_CANCELING)
        return

    log = OperationLog(log_file)
    try:
        log.truncate()
        apply_diff(diff, src, dst, log=log, on_progress=_progress_cb, step=step,
                   on_done=lambda: _say(MSG_DONE))
    except MirrorError as exc:
        _fail(exc)

    _status(ctx, f"Log written to {log_file}")
    _say(MSG_FINISHED)


# ---------------------------------------------------------------------------
# copy
# ---------------------------------------------------------------------------

@main.command("copy")
@_roots_arguments
@_yes_option
@_dry_run_option
@_log_file_option
@_exclude_options
@_step_option
@click.pass_context
def copy_cmd(ctx, src, dst, yes, dry_run, log_file, ignore_name, exclude, exclude_from, step):
    """Copy everything SRC has and DST lacks into DST.

    Missing folders are created and files that are missing from DST, or
    whose size differs, are copied.  Nothing is ever deleted.
    """
    excl = _build_exclude(ignore_name, exclude, exclude_from)
    _run(ctx, src, dst, clean=False, yes=yes, dry_run=dry_run,
         log_file=log_file, excl=excl, step=step)


# ---------------------------------------------------------------------------
# clean
# ---------------------------------------------------------------------------

@main.command("clean")
@_roots_arguments
@_yes_option
@_dry_run_option
@_log_file_option
@_exclude_options
@_step_option
@click.pass_context
def clean_cmd(ctx, src, dst, yes, dry_run, log_file, ignore_name, exclude, exclude_from, step):
    """Delete everything from DST that SRC does not have.

    Files are removed first, then folders.  Each removed folder goes with
    all of its contents, including any ignored directories and symbolic
    links inside it.  Nothing is ever copied.
    """
    excl = _build_exclude(ignore_name, exclude, exclude_from)
    _run(ctx, src, dst, clean=True, yes=yes, dry_run=dry_run,
         log_file=log_file, excl=excl, step=step)
