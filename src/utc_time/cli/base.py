from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

import typer

from ..errors import ParseError, UtcTimeError

_LOGGING_CONFIGURED = False


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure CLI-wide logging once.

    Sets up basic logging configuration for the CLI. Safe to call multiple
    times; only configures on first call. Records go to stderr so that stdout
    carries only the menu and the conversion result.

    Args:
        level: Logging level (defaults to WARNING).

    Side Effects:
        - Configures Python logging module globally.
        - Sets module-level flag to prevent reconfiguration.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared CLI configuration.

    Args:
        name: Logger name. Uses module name if None.

    Returns:
        Configured Logger instance.
    """
    return logging.getLogger(name)


def format_error(exc: UtcTimeError) -> str:
    """Render a project error as the one-line message shown on stderr."""
    if isinstance(exc, ParseError):
        return f"Parse error: {exc}"
    return str(exc)


@contextmanager
def handle_errors(
    operation: str,
    *,
    logger: logging.Logger | None = None,
) -> Generator[None, None, None]:
    """Provide consistent exception handling for CLI operations.

    Context manager that maps project errors to their exit status and
    reports them on stderr. Re-raises typer.Exit to allow normal CLI exit
    flow.

    Args:
        operation: Human-readable operation name for error messages.
        logger: Logger instance. Defaults to module logger if None.

    Yields:
        None (used as context manager).

    Raises:
        typer.Exit: With `exc.exit_code` for a UtcTimeError, 1 for anything
            else (typer.Exit itself is re-raised unchanged).

    Logs:
        - DEBUG: "{operation} failed" for expected project errors.
        - ERROR: "Error during {operation}" with full traceback otherwise.

    User Output:
        - Prints the error message via typer.secho() in red on stderr.
    """
    logger = logger or get_logger(__name__)
    try:
        yield
    except typer.Exit:
        raise
    except UtcTimeError as exc:
        logger.debug("%s failed: %s (exit %d)", operation, exc, exc.exit_code)
        typer.secho(format_error(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(exc.exit_code) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc
