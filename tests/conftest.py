from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner
from hypothesis import HealthCheck, settings

settings.register_profile("default", suppress_health_check=[HealthCheck.filter_too_much])
settings.load_profile("default")


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def write_journal(tmp_path: Path) -> Callable[..., Path]:
    """Writes dedented journal text under `tmp_path` and returns its path."""

    def _write(content: str, name: str = "today.bujo") -> Path:
        target = tmp_path / name
        target.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return target

    return _write
