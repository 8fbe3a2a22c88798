"""Project exception types.

Every error is terminal for a CLI run. Each class carries the process exit
status the CLI reports for it.
"""

from __future__ import annotations


class UtcTimeError(Exception):
    """Base exception for all utc_time errors."""

    exit_code: int = 1


class UsageError(UtcTimeError):
    """Raised when the CLI receives no arguments."""

    exit_code = 1


class TooManyArgumentsError(UsageError):
    """Raised when the CLI receives more than two arguments."""

    exit_code = 2


class ParseError(UtcTimeError, ValueError):
    """Base exception for input that does not match an accepted shape."""

    exit_code = 3


class InvalidTimeError(ParseError):
    """Raised when a bare HH:MM value is out of range (e.g. 24:00 or 12:60)."""


class UnrecognizedFormatError(ParseError):
    """Raised when the input matches none of the accepted date+time layouts."""


class ConversionError(UtcTimeError, ValueError):
    """Base exception for zone resolution failures on the local -> UTC path."""

    exit_code = 4


class NonexistentLocalTimeError(ConversionError):
    """Raised when a naive local time does not exist due to DST spring-forward.

    This occurs when clocks "spring forward" and skip an hour.
    The converter must not invent a time that never occurred.
    """

    exit_code = 4


class AmbiguousLocalTimeError(ConversionError):
    """Raised when a naive local time is ambiguous due to DST fall-back.

    This occurs when a clock "falls back" and the same local time occurs twice.
    The converter must not guess which occurrence was intended.
    """

    exit_code = 5


class InvalidChoiceError(UtcTimeError):
    """Raised when the menu response is neither "1" nor "2"."""

    exit_code = 6
