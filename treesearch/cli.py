"""CLI interface for treesearch."""

import logging
import sys

import click

from treesearch.config import Config
from treesearch.errors import SearchError
from treesearch.search import FileType, ProgressReporter, Traverser


@click.group()
@click.option("-v", "--verbose", count=True, help="Log more detail (repeat for debug)")
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    ctx.ensure_object(dict)
    ctx.obj["config"] = Config()
    _configure_logging(verbose)


@cli.command()
@click.argument("roots", nargs=-1, required=True)
@click.option("-p", "--pattern", required=True, help="Regular expression matched against each path")
@click.option(
    "-t",
    "--type",
    "file_type",
    type=click.Choice([t.value for t in FileType]),
    default=FileType.ANY.value,
    help="Match directories, regular files, or both",
)
@click.option("--progress", is_flag=True, help="Print progress to stderr while searching")
@click.option(
    "--progress-interval",
    type=click.IntRange(min=1),
    default=None,
    help="Report every N directories",
)
@click.option("--stats", "show_stats", is_flag=True, help="Print a summary to stderr when done")
@click.option("-0", "--null", "null_separated", is_flag=True, help="Separate results with NUL")
@click.pass_context
def find(
    ctx: click.Context,
    roots: tuple[str, ...],
    pattern: str,
    file_type: str,
    progress: bool,
    progress_interval: int | None,
    show_stats: bool,
    null_separated: bool,
) -> None:
    """Search ROOTS for files and directories whose path matches PATTERN.

    The pattern is searched against the full path of each candidate, so
    ancestor directory names take part in the match.
    """
    config: Config = ctx.obj["config"]
    interval = config.traverser.progress_interval
    if progress_interval is not None:
        interval = progress_interval

    reporter = ProgressReporter(interval=interval)
    traverser = Traverser(progress=reporter if progress else None)

    try:
        results = traverser.search(list(roots), pattern, FileType(file_type))
    except SearchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)

    separator = "\0" if null_separated else "\n"
    for path in results:
        click.echo(path, nl=False)
        click.echo(separator, nl=False)

    if show_stats:
        reporter.report_completion(traverser.stats)


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    """Entry point for the CLI."""
    cli(standalone_mode=True)  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
