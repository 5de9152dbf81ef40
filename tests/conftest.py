"""Shared pytest fixtures for zaidctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from zaidctl.config.models import DecoderConfig
from zaidctl.config.settings import ZaidSettings

PINNED_TODAY = date(2026, 1, 15)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def today() -> date:
    """The date every date-sensitive test treats as "today"."""
    return PINNED_TODAY


@pytest.fixture
def settings(today: date) -> ZaidSettings:
    """Settings with the decoder clock pinned to ``today``."""
    return ZaidSettings(decoder=DecoderConfig(reference_date=today))


@pytest.fixture
def _isolated_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, today: date) -> None:
    """Run the CLI from an empty directory with a pinned reference date.

    Use via ``@pytest.mark.usefixtures("_isolated_cli")`` on command test
    classes so a stray zaidctl.toml or ZAIDCTL_* variable cannot leak in.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ZAIDCTL_CONFIG", raising=False)
    monkeypatch.delenv("ZAIDCTL_DECODER__MAX_AGE", raising=False)
    monkeypatch.setenv("ZAIDCTL_DECODER__REFERENCE_DATE", today.isoformat())


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Undo the logging setup the CLI performs on every invocation."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    zaid_level = logging.getLogger("zaidctl").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("zaidctl").setLevel(zaid_level)
    structlog.reset_defaults()
