"""Shared pytest fixtures for the create-next-starter test suite.

Provides reusable fixtures for:
- A small on-disk template tree and a config pointing at it
- Recording / failing installer doubles
- Mock subprocess helpers
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from create_next_starter.config import ScaffoldConfig
from create_next_starter.installer import InstallError


# ---------------------------------------------------------------------------
# Template & config
# ---------------------------------------------------------------------------

TEMPLATE_MANIFEST: dict[str, Any] = {
    "name": "template-placeholder",
    "version": "0.1.0",
    "private": True,
    "scripts": {"dev": "next dev", "build": "next build"},
    "dependencies": {"next": "^15.0.0", "react": "^19.0.0"},
}


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A minimal template tree with a manifest, an ignore-file and a subdirectory."""
    root = tmp_path / "template"
    (root / "app").mkdir(parents=True)
    (root / "package.json").write_text(json.dumps(TEMPLATE_MANIFEST, indent=2), encoding="utf-8")
    (root / ".npmignore").write_text("/node_modules\n/.next/\n", encoding="utf-8")
    (root / "app" / "page.js").write_text("export default function Home() {}\n", encoding="utf-8")
    (root / "README.md").write_text("# Starter\n", encoding="utf-8")
    return root


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty directory that plays the role of the user's cwd."""
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    return cwd


@pytest.fixture
def config(template_dir: Path) -> ScaffoldConfig:
    return ScaffoldConfig(template_dir=template_dir)


# ---------------------------------------------------------------------------
# Installer doubles
# ---------------------------------------------------------------------------


class RecordingInstaller:
    """Installer double that remembers every directory it was asked to install in."""

    def __init__(self) -> None:
        self.calls: list[Path] = []

    async def install(self, directory: Path) -> None:
        self.calls.append(Path(directory))


class FailingInstaller(RecordingInstaller):
    """Installer double that records the call and then fails like a non-zero exit."""

    async def install(self, directory: Path) -> None:
        await super().install(directory)
        raise InstallError(["npm", "install"], 1)


@pytest.fixture
def recording_installer() -> RecordingInstaller:
    return RecordingInstaller()


@pytest.fixture
def failing_installer() -> FailingInstaller:
    return FailingInstaller()


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with a
    configurable return code.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(returncode: int = 0) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
