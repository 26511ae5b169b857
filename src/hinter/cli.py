"""CLI entry point for hinter. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import click

from hinter.colors import SGR_FOREGROUND, parse_color
from hinter.config import DEFAULT_INPUT_PATTERN, HintOptions
from hinter.editor import read_hinted_line
from hinter.ranker import DEFAULT_LIMIT

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_logging(level: str, log_file: str | None) -> None:
    """Send records to *log_file*, or only warnings and worse to stderr.

    The session runs with the terminal in raw mode, so chatty logging on
    the terminal would garble the hints.
    """
    numeric = getattr(logging, level.upper())
    if log_file:
        logging.basicConfig(level=numeric, format=_LOG_FORMAT, filename=log_file)
    else:
        logging.basicConfig(level=max(numeric, logging.WARNING), format=_LOG_FORMAT)


def _load_candidates(values: tuple[str, ...], file: str | None) -> list[str]:
    candidates = list(values)
    if file:
        lines = Path(file).read_text(encoding="utf-8").splitlines()
        candidates.extend(line for line in lines if line.strip())
    return candidates


def _color_option(ctx, param, value):
    try:
        return parse_color(value)
    except ValueError:
        raise click.BadParameter(
            f"choose from {', '.join(SGR_FOREGROUND)}", ctx=ctx, param=param
        )


@click.command()
@click.argument("candidates", nargs=-1)
@click.option(
    "--file",
    "-f",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read candidates from a file, one per line",
)
@click.option("--ignore-case", "-i", is_flag=True, help="Match without regard to case")
@click.option("--anywhere", "-a", is_flag=True, help="Match anywhere, not only at the start")
@click.option(
    "--pattern",
    default=DEFAULT_INPUT_PATTERN,
    show_default=True,
    help="Regex each typed character must match",
)
@click.option(
    "--hint-color",
    default="darkGray",
    show_default=True,
    callback=_color_option,
    help="Color of the hint text",
)
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=DEFAULT_LIMIT,
    show_default=True,
    help="Number of hints shown",
)
@click.option(
    "--log-level",
    default="warning",
    type=click.Choice(["debug", "info", "warning", "error"]),
)
@click.option("--log-file", default=None, help="Write log records to this file")
def main(
    candidates,
    file,
    ignore_case,
    anywhere,
    pattern,
    hint_color,
    limit,
    log_level,
    log_file,
):
    """Read a line with live hints drawn from CANDIDATES.

    Type to filter, Up/Down to choose, Enter or Tab to accept.
    """
    _configure_logging(log_level, log_file)

    items = _load_candidates(candidates, file)
    if not items:
        raise click.UsageError("no candidates given")

    try:
        options = HintOptions(
            input_pattern=pattern,
            hint_color=hint_color,
            ignore_case=ignore_case,
            find_anywhere=anywhere,
            limit=limit,
        )
    except re.error as e:
        raise click.BadParameter(str(e), param_hint="--pattern")
    read_hinted_line(items, options=options)
    # The accepted text is already on screen; finish its line
    click.echo()


if __name__ == "__main__":
    main()
