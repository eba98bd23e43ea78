"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import click
from loguru import logger

from .._exclude import DEFAULT_IGNORE_NAME, ExcludeFilter
from ..exceptions import MirrorError
from ..oplog import DEFAULT_LOG_FILE
from ..progress import DEFAULT_STEP

MSG_CANCELING = "canceling"
MSG_CALCULATING = "gathering info about files"
MSG_ARE_YOU_SURE = "Do you want to continue?"
MSG_NOTHING_TO_DO = "there is nothing to do"
MSG_ERR_OCCURRED = "an error occurred"
MSG_FINISHED = "the program finished successfully"
MSG_DONE = "done"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _say(msg: str) -> None:
    """Emit an operator message on stderr."""
    click.echo(msg, err=True)


def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _ask(question: str, yes: bool) -> bool:
    """Ask a y/n *question*; ``--yes`` answers it without prompting."""
    if yes:
        return True
    return click.confirm(question, default=False, err=True)


def _fail(exc: MirrorError):
    """Abort the command with *exc* as a Click error (exit status 1)."""
    raise click.ClickException(f"{MSG_ERR_OCCURRED}: {exc}") from exc


def _progress_cb(label: str, pct: int) -> None:
    click.echo(f"{label} {pct}%", err=True)


def _build_exclude(ignore_name: str, exclude, exclude_from) -> ExcludeFilter:
    return ExcludeFilter(ignore_name=ignore_name, patterns=exclude,
                         exclude_from=exclude_from)


def _configure_logging(verbose: bool) -> None:
    """Route treemirror's loguru output to stderr."""
    logger.remove()
    logger.add(
        lambda msg: click.echo(msg, err=True, nl=False),
        level="DEBUG" if verbose else "WARNING",
        format="{time:HH:mm:ss} {level: <7} {message}",
    )
    logger.enable("treemirror")


# ---------------------------------------------------------------------------
# Option decorators
# ---------------------------------------------------------------------------

def _roots_arguments(f):
    """SRC and DST positional arguments."""
    f = click.argument("dst", type=click.Path())(f)
    f = click.argument("src", type=click.Path())(f)
    return f


def _yes_option(f):
    return click.option(
        "--yes", "-y", is_flag=True, default=False,
        help="Answer yes to every confirmation.",
    )(f)


def _dry_run_option(f):
    return click.option(
        "--dry-run", "-n", is_flag=True, default=False,
        help="Show the planned operations without changing anything.",
    )(f)


def _log_file_option(f):
    return click.option(
        "--log-file", type=click.Path(dir_okay=False), default=DEFAULT_LOG_FILE,
        envvar="TREEMIRROR_LOG", show_default=True,
        help="Log file listing completed operations (or set TREEMIRROR_LOG).",
    )(f)


def _step_option(f):
    return click.option(
        "--step", type=click.IntRange(1, 100), default=DEFAULT_STEP,
        show_default=True, help="Report progress every N percent.",
    )(f)


def _exclude_options(f):
    """Shared --ignore-name / --exclude / --exclude-from options."""
    f = click.option("--exclude-from", "exclude_from", type=click.Path(exists=True),
                     help="Read exclude patterns from file.")(f)
    f = click.option("--exclude", multiple=True,
                     help="Exclude paths matching pattern (gitignore syntax, repeatable).")(f)
    f = click.option("--ignore-name", default=DEFAULT_IGNORE_NAME,
                     envvar="TREEMIRROR_IGNORE", show_default=True,
                     help="Skip every directory with this name, and its contents "
                          "(or set TREEMIRROR_IGNORE).")(f)
    return f


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.pass_context
def main(ctx, verbose):
    """treemirror: one-way directory mirroring.

    Files are the same when they have the same relative path and the same
    size; contents are never compared.

    \b
    Quick start:
      treemirror status ./photos /mnt/backup/photos
      treemirror copy ./photos /mnt/backup/photos
      treemirror clean ./photos /mnt/backup/photos

    \b
    Directories named 'dont_mirror' are never indexed (see --ignore-name),
    so copy and clean leave them alone, unless clean removes a folder that
    holds one: a removed folder goes with all of its contents.
    Symbolic links are never followed, copied or written through.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)
