"""Dependency installation through the host package manager."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from create_next_starter.utils import run_command


class InstallError(Exception):
    """Raised when the package manager cannot be spawned or exits non-zero."""

    def __init__(self, command: list[str], returncode: int | None, message: str = "") -> None:
        self.command = command
        self.returncode = returncode
        joined = " ".join(command)
        if not message:
            message = f"Command failed: {joined} (exit code {returncode})"
        super().__init__(message)


class Installer(Protocol):
    async def install(self, directory: Path) -> None: ...


class PackageManagerInstaller:
    """Runs ``<package manager> install`` inside the new project.

    The child inherits the terminal's stdout/stderr so its progress is shown
    live.  No timeout is applied.
    """

    def __init__(self, command: list[str] | None = None) -> None:
        self.command = list(command or ["npm", "install"])

    async def install(self, directory: Path) -> None:
        try:
            returncode = await run_command(self.command, cwd=directory)
        except OSError as exc:
            raise InstallError(
                self.command, None, f"Could not run {' '.join(self.command)}: {exc}"
            ) from exc

        if returncode != 0:
            raise InstallError(self.command, returncode)
