"""Utility modules.

This package provides shared utilities used across the codebase.
"""

from .time import (
    Ambiguous,
    LocalResolution,
    Nonexistent,
    Single,
    civil_today,
    format_local_display,
    format_rfc3339,
    get_zone,
    local_naive_to_utc,
    resolve_local,
    utc_now,
)

__all__ = [
    # Zone resolution outcomes
    "Ambiguous",
    "LocalResolution",
    "Nonexistent",
    "Single",
    # Time utilities
    "civil_today",
    "format_local_display",
    "format_rfc3339",
    "get_zone",
    "local_naive_to_utc",
    "resolve_local",
    "utc_now",
]
