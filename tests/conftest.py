"""Shared pytest fixtures for utf16kit tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from utf16kit.config.settings import Utf16Settings
from utf16kit.services.codec import CodecService
from utf16kit.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep host config and env overrides out of every test."""
    monkeypatch.delenv("UTF16KIT_CONFIG", raising=False)
    monkeypatch.delenv("UTF16KIT_CODEC__BYTE_ORDER", raising=False)
    monkeypatch.delenv("UTF16KIT_CODEC__NUMBER_BASE", raising=False)
    yield
    disable_telemetry()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary CWD with no utf16kit.toml, so defaults apply."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> Utf16Settings:
    return Utf16Settings.from_cli(project_root=project_root)


@pytest.fixture
def codec(settings: Utf16Settings) -> CodecService:
    return CodecService(settings)


def make_codec(project_root: Path, toml: str) -> CodecService:
    """Build a CodecService from a utf16kit.toml with *toml* contents."""
    (project_root / "utf16kit.toml").write_text(toml, encoding="utf-8")
    return CodecService(Utf16Settings.from_cli(project_root=project_root))
