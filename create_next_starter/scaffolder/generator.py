"""File-system steps of the scaffolding run.

``ProjectGenerator`` owns everything that touches the target directory before
dependencies are installed: creating it, copying the bundled template tree,
patching the manifest, and renaming the ignore-file.  Each step is a coroutine
that pushes its blocking work onto a worker thread and raises on failure; the
orchestrator decides whether a failure aborts the run.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from create_next_starter.config import ScaffoldConfig
from create_next_starter.utils import ensure_dir

from .manifest import set_manifest_name


class ProjectGenerator:
    """Copies the bundled Next.js starter into a new project directory."""

    def __init__(self, config: ScaffoldConfig | None = None) -> None:
        self.config = config or ScaffoldConfig()

    @property
    def template_dir(self) -> Path:
        return Path(self.config.template_dir)

    # -- Steps -------------------------------------------------------------

    async def create_directory(self, target: str | Path) -> Path:
        """Ensure *target* exists as a directory.

        Succeeds whether or not the directory already existed.
        """
        return await asyncio.to_thread(ensure_dir, target)

    async def copy_template(self, target: str | Path) -> Path:
        """Recursively copy the template tree into *target*.

        Files already present in *target* are overwritten.

        Raises:
            FileNotFoundError: If the template directory does not exist.
        """
        if not self.template_dir.is_dir():
            raise FileNotFoundError(f"template directory not found: {self.template_dir}")
        await asyncio.to_thread(
            shutil.copytree, self.template_dir, Path(target), dirs_exist_ok=True
        )
        return Path(target)

    async def update_manifest(self, target: str | Path, project_name: str) -> Path:
        """Write *project_name* into the copied manifest's ``name`` field."""
        manifest_path = Path(target) / self.config.manifest_name
        await asyncio.to_thread(set_manifest_name, manifest_path, project_name)
        return manifest_path

    async def rename_ignore_file(self, target: str | Path) -> Path:
        """Rename ``.npmignore`` to ``.gitignore`` inside *target*.

        Raises:
            FileNotFoundError: If the template did not provide the source file.
        """
        source = Path(target) / self.config.ignore_source
        destination = Path(target) / self.config.ignore_target
        await asyncio.to_thread(source.rename, destination)
        return destination

    # -- Utility -----------------------------------------------------------

    def list_template_files(self) -> list[str]:
        """Return sorted POSIX paths of every file in the template, relative to it."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            path.relative_to(self.template_dir).as_posix()
            for path in self.template_dir.rglob("*")
            if path.is_file()
        )
