from __future__ import annotations

import logging
import sys
from typing import Annotated, TextIO

import typer

from ..convert import Direction, convert
from ..errors import InvalidChoiceError, TooManyArgumentsError, UsageError
from ..global_config import LOCAL_LABEL
from ..parsing import parse_input
from .base import configure_logging, get_logger, handle_errors

logger = get_logger(__name__)

USAGE = "Usage: utc_time HH:MM\nUsage: utc_time HH:MM dd-mm-yy|YYYY"

MENU_LINES = (
    "Select conversion:",
    f"  1) AEST ({LOCAL_LABEL}) -> UTC",
    f"  2) UTC -> AEST ({LOCAL_LABEL})",
)
CHOICE_PROMPT = "Choice [1/2]: "

app = typer.Typer(
    help=f"Convert a time between {LOCAL_LABEL} and UTC.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def join_args(args: list[str]) -> str:
    """Join one or two positional arguments into the parser's input string.

    Raises:
        UsageError: If no arguments were given.
        TooManyArgumentsError: If more than two arguments were given.
    """
    if not args:
        raise UsageError(USAGE)
    if len(args) > 2:
        raise TooManyArgumentsError(
            "Too many arguments; pass either one quoted string or two separate args"
        )
    return " ".join(args)


def parse_choice(response: str) -> Direction:
    """Map a menu response to a Direction after trimming whitespace.

    Raises:
        InvalidChoiceError: If the response is neither "1" nor "2".
    """
    try:
        return Direction(response.strip())
    except ValueError as e:
        raise InvalidChoiceError("Invalid choice, expected '1' or '2'") from e


def prompt_direction(stream: TextIO | None = None) -> Direction:
    """Show the conversion menu and read one line for the choice."""
    for line in MENU_LINES:
        typer.echo(line)
    typer.echo(CHOICE_PROMPT, nl=False)
    response = (stream or sys.stdin).readline()
    logger.debug("Menu response: %r", response)
    return parse_choice(response)


@app.command()
def run(
    args: Annotated[
        list[str] | None,
        typer.Argument(
            help="HH:MM, optionally followed by dd-mm-yy|yyyy or dd/mm/yy|yyyy",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Log parsing and conversion details to stderr"),
    ] = False,
) -> None:
    """Convert a time between Brisbane and UTC.

    With only HH:MM the date is today's date in Brisbane. After parsing, a
    menu asks for the direction: 1 reads the input as Brisbane time and
    converts to UTC, 2 reads it as UTC and converts to Brisbane time.

    Exit codes: 1 usage, 2 too many arguments, 3 parse error, 4 non-existent
    local time, 5 ambiguous local time, 6 invalid choice.
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    with handle_errors("convert", logger=logger):
        raw = join_args(list(args or []))
        ndt = parse_input(raw)
        direction = prompt_direction()
        result = convert(ndt, direction)

    for line in result.lines():
        typer.echo(line)


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.

    Side Effects:
        - Processes CLI arguments and executes the conversion.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()
