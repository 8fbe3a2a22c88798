from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import pytest
from typer.testing import CliRunner

import utc_time.utils.time as time_utils


@pytest.fixture
def freeze_utc_now(monkeypatch: pytest.MonkeyPatch) -> Callable[[datetime], None]:
    """
    Pin the "now" seam used by civil-date helpers.
    Call the returned function with an aware datetime (any zone).
    """

    def _freeze(now: datetime) -> None:
        assert now.tzinfo is not None, "freeze_utc_now needs an aware datetime"
        monkeypatch.setattr(time_utils, "utc_now", lambda: now.astimezone(UTC))

    return _freeze


@pytest.fixture
def frozen_now(freeze_utc_now: Callable[[datetime], None]) -> datetime:
    """
    A fixed instant late in the UTC day: already the next calendar day in Brisbane.
    """
    now = datetime(2025, 9, 22, 20, 30, tzinfo=UTC)
    freeze_utc_now(now)
    return now


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
