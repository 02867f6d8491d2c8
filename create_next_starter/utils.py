"""Shared utility functions for create-next-starter.

Provides the Rich console used for every status line, glyph-prefixed output
helpers, async command execution, and a small file-system helper.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console

console = Console()

# ---------------------------------------------------------------------------
# Status glyphs
# ---------------------------------------------------------------------------

GLYPH_START = "🚀"
GLYPH_DIRECTORY = "🛠"
GLYPH_COPY = "📂"
GLYPH_PACKAGE = "📦"
GLYPH_OK = "✅"
GLYPH_ERROR = "❌"
GLYPH_WARNING = "⚠️"


# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run *cmd* with the terminal attached and wait for it to exit.

    The child inherits stdin/stdout/stderr, so its output reaches the user
    live.  No timeout is applied.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.

    Returns:
        The child's exit code.

    Raises:
        OSError: If the executable cannot be spawned (e.g. not on ``PATH``).
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Raises:
        FileExistsError: If *path* exists and is not a directory.
        OSError: On any other filesystem failure (permissions, invalid name).
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(glyph: str, message: str) -> None:
    """Print a status line prefixed with *glyph*."""
    console.print(f"{glyph} {message}", markup=False, highlight=False)


def print_success(message: str) -> None:
    """Print a green success line prefixed with the OK glyph."""
    console.print(f"{GLYPH_OK} {message}", style="bold green", markup=False, highlight=False)


def print_error(message: str) -> None:
    """Print a red error line prefixed with the error glyph."""
    console.print(f"{GLYPH_ERROR} {message}", style="bold red", markup=False, highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning line prefixed with the warning glyph."""
    console.print(
        f"{GLYPH_WARNING} {message}", style="bold yellow", markup=False, highlight=False
    )
