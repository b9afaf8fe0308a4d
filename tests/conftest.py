"""Shared pytest fixtures and test helpers for menagerie tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from io import StringIO
from pathlib import Path

import pytest
from click.testing import CliRunner

from menagerie.infrastructure.lines import StreamLineSink, StreamLineSource


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("menagerie")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no menagerie env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")``.  Tests that
    need the directory can request ``tmp_path`` (same directory).
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MENAGERIE_CONFIG", raising=False)
    monkeypatch.delenv("MENAGERIE_COLLECT__PARSE_POLICY", raising=False)
    monkeypatch.delenv("MENAGERIE_COLLECT__SENTINEL", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def feed(*lines: str) -> StreamLineSource:
    """A line source that yields *lines* and then hits end of input."""
    return StreamLineSource(StringIO("".join(f"{line}\n" for line in lines)))


def capture(*, show_prompts: bool = True) -> tuple[StreamLineSink, StringIO]:
    """A sink writing into a buffer the test can inspect."""
    buf = StringIO()
    return StreamLineSink(buf, show_prompts=show_prompts), buf
