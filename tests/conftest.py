"""Pytest configuration for llvmweave tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's configuration and log directory out of the tests."""
    monkeypatch.delenv("WEAVE_LLVM_CONFIG", raising=False)
    monkeypatch.delenv("WEAVE_LLVM_LOG_DIR", raising=False)


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    """Empty download directory."""
    d = tmp_path / "downloads"
    d.mkdir()
    return d


@pytest.fixture
def dst_dir(tmp_path: Path) -> Path:
    """Destination root (not created up-front)."""
    return tmp_path / "work"
