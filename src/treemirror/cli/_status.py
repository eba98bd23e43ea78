"""The status command."""

from __future__ import annotations

import click

from ..diff import compute_diff
from ..exceptions import MirrorError
from ..index import read_tree
from ..mirror import validate_roots
from .._format import bytes_to_mb
from ._helpers import (
    main,
    MSG_CALCULATING,
    _build_exclude,
    _exclude_options,
    _fail,
    _roots_arguments,
    _say,
)


@main.command()
@_roots_arguments
@_exclude_options
@click.pass_context
def status(ctx, src, dst, ignore_name, exclude, exclude_from):
    """Show what copy and clean would do, without changing anything.

    Exits with status 0 when DST already mirrors SRC, 1 otherwise.
    """
    excl = _build_exclude(ignore_name, exclude, exclude_from)
    try:
        src, dst = validate_roots(src, dst, ignore_name=excl.ignore_name)
        _say(MSG_CALCULATING)
        src_index = read_tree(src, exclude=excl)
        dst_index = read_tree(dst, exclude=excl)
    except MirrorError as exc:
        _fail(exc)

    to_copy = compute_diff(dst_index, src_index)
    to_clean = compute_diff(dst_index, src_index, clean=True)

    click.echo(f"source:      {len(src_index.files)} files ({bytes_to_mb(src_index.total_size)} MB), "
               f"{len(src_index.folders)} folders")
    click.echo(f"destination: {len(dst_index.files)} files ({bytes_to_mb(dst_index.total_size)} MB), "
               f"{len(dst_index.folders)} folders")
    click.echo(f"copy:  {len(to_copy.files)} files ({bytes_to_mb(to_copy.total_size)} MB), "
               f"{len(to_copy.folders)} folders")
    click.echo(f"clean: {len(to_clean.files)} files ({bytes_to_mb(to_clean.total_size)} MB), "
               f"{len(to_clean.folders)} folders")

    if to_copy.in_sync and to_clean.in_sync:
        click.echo("In sync.")
    else:
        ctx.exit(1)
