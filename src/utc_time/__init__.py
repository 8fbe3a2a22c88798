"""
utc_time core package.

Converts a wall-clock time between Brisbane civil time and UTC:
- Input parsing and two-digit year normalization (`utc_time.parsing`)
- Zone resolution and conversion (`utc_time.convert`, `utc_time.utils.time`)
- A minimal Typer-based CLI (`utc_time.cli`)

Configuration:
- Policy constants (the local zone, its display label) live in
  `utc_time.global_config`.
"""
