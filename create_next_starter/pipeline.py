"""create-next-starter orchestrator.

Runs the scaffolding steps in strict order:

1. create_directory     -- ensure ``./<name>`` exists
2. copy_template        -- copy the bundled starter tree into it
3. update_manifest      -- write the project name into ``package.json``
4. rename_ignore_file   -- ``.npmignore`` -> ``.gitignore`` (failure is not fatal)
5. install_dependencies -- ``npm install`` with the terminal attached

Every other failure stops the run where it happened.  Nothing is rolled back.

Usage::

    create-next-starter
    create-next-starter my-app --package-manager pnpm
    python -m create_next_starter
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any, NamedTuple, Sequence

from pydantic import BaseModel, Field

from create_next_starter.config import ScaffoldConfig
from create_next_starter.installer import Installer, PackageManagerInstaller
from create_next_starter.prompts import (
    PROJECT_NAME_MESSAGE,
    FixedName,
    NameProvider,
    prompt_project_name,
)
from create_next_starter.scaffolder import ProjectGenerator
from create_next_starter.utils import (
    GLYPH_COPY,
    GLYPH_DIRECTORY,
    GLYPH_PACKAGE,
    GLYPH_START,
    console,
    print_error,
    print_step,
    print_success,
    print_warning,
)

# ---------------------------------------------------------------------------
# Exceptions & results
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when the run cannot proceed past *step*."""

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(f"{step}: {message}")


class StepOutcome(BaseModel):
    """What happened to one step of the run."""

    name: str
    fatal: bool = True
    ok: bool
    error: str | None = None


class ScaffoldResult(BaseModel):
    """Summary of a scaffolding run."""

    project_name: str
    target_dir: Path
    steps: list[StepOutcome] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    aborted_at: str | None = None
    success: bool = False

    @property
    def completed_steps(self) -> list[str]:
        return [step.name for step in self.steps if step.ok]


class _Step(NamedTuple):
    name: str
    fatal: bool
    failure: str


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class Scaffolder:
    """Drives a single scaffolding run.

    Attributes:
        config: Settings for the run.
        ask_name: Name provider called once to obtain the project name.
        installer: Capability that installs dependencies in a directory.
        generator: File-system step implementations.
        cwd: Directory the project folder is created in.
    """

    _STEPS: tuple[_Step, ...] = (
        _Step("create_directory", True, "create directory"),
        _Step("copy_template", True, "copy template files"),
        _Step("update_manifest", True, "update package.json"),
        _Step("rename_ignore_file", False, "rename .npmignore"),
        _Step("install_dependencies", True, "install dependencies"),
    )

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        *,
        ask_name: NameProvider | None = None,
        installer: Installer | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.ask_name = ask_name or prompt_project_name
        self.installer = installer or PackageManagerInstaller(self.config.install_command)
        self.generator = ProjectGenerator(self.config)
        self.cwd = Path(cwd) if cwd is not None else None

        self.project_name = ""
        self.target_dir = Path()

    # ------------------------------------------------------------------
    # Orchestration
    # ------------------------------------------------------------------

    async def run(self, project_name: str | None = None) -> ScaffoldResult:
        """Scaffold the project, prompting for a name unless one is given.

        Args:
            project_name: A name already obtained through :meth:`resolve_name`.
                When omitted the name provider is called here.

        Returns:
            A ``ScaffoldResult``.  ``success`` is ``True`` only when every
            fatal step completed; ``aborted_at`` names the step that stopped
            the run otherwise.
        """
        if project_name is None:
            project_name = self.resolve_name()
        self.project_name = project_name
        self.target_dir = self.config.target_path(self.project_name, self.cwd)

        result = ScaffoldResult(project_name=self.project_name, target_dir=self.target_dir)

        print_step(GLYPH_START, "Creating a new Next.js project...")

        for step in self._STEPS:
            method = getattr(self, step.name)
            try:
                await method()
            except Exception as exc:
                result.steps.append(
                    StepOutcome(name=step.name, fatal=step.fatal, ok=False, error=str(exc))
                )
                if not step.fatal:
                    print_warning(f"Failed to {step.failure}: {exc}")
                    result.warnings.append(f"{step.name}: {exc}")
                    continue
                print_error(f"Failed to {step.failure}: {exc}")
                result.aborted_at = step.name
                return result

            result.steps.append(StepOutcome(name=step.name, fatal=step.fatal, ok=True))

        result.success = True
        self._print_next_steps()
        return result

    def resolve_name(self) -> str:
        """Ask the name provider once; an empty answer yields the default.

        Runs on the calling thread so Ctrl-C at the prompt interrupts the
        process immediately.

        Raises:
            ScaffoldError: If the provider answers with something other than
                a string.
        """
        answer: Any = self.ask_name(PROJECT_NAME_MESSAGE, self.config.default_name)
        if answer is None:
            return self.config.default_name
        if not isinstance(answer, str):
            raise ScaffoldError(
                "acquire_name", f"expected a string, got {type(answer).__name__}"
            )
        return answer or self.config.default_name

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    async def create_directory(self) -> None:
        created = await self.generator.create_directory(self.target_dir)
        print_step(GLYPH_DIRECTORY, f"Created directory: {created}")

    async def copy_template(self) -> None:
        await self.generator.copy_template(self.target_dir)
        print_step(GLYPH_COPY, "Copied template files.")

    async def update_manifest(self) -> None:
        await self.generator.update_manifest(self.target_dir, self.project_name)
        print_success(f"Updated {self.config.manifest_name} with project name.")

    async def rename_ignore_file(self) -> None:
        await self.generator.rename_ignore_file(self.target_dir)
        print_success(f"Renamed {self.config.ignore_source} to {self.config.ignore_target}")

    async def install_dependencies(self) -> None:
        print_step(GLYPH_PACKAGE, "Installing dependencies...")
        await self.installer.install(self.target_dir)
        print_success("Dependencies installed successfully.")

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------

    def _print_next_steps(self) -> None:
        print_success("Project setup complete.")
        console.print("\nTo get started, run the following commands:\n", markup=False)
        console.print(f"   cd {self.project_name}", markup=False, highlight=False)
        console.print(f"   {self.config.dev_command}", markup=False, highlight=False)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``create-next-starter``.

    Returns the process exit code: ``0`` when the project was fully
    scaffolded, ``1`` when the name was unusable or a step aborted the run.
    """
    import argparse

    parser = argparse.ArgumentParser(
        prog="create-next-starter",
        description="Create a new Next.js project from the bundled starter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-next-starter\n"
            "  create-next-starter my-app\n"
            "  create-next-starter my-app --package-manager pnpm\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name (prompted for when omitted)",
    )
    parser.add_argument(
        "--package-manager", "-p",
        default=None,
        help="Package manager used to install dependencies (default: npm)",
    )

    args = parser.parse_args(argv)

    config = ScaffoldConfig.from_env()
    if args.package_manager:
        config.package_manager = args.package_manager

    ask_name = FixedName(args.name) if args.name is not None else None
    scaffolder = Scaffolder(config, ask_name=ask_name)

    # Prompt before asyncio.run: its SIGINT handler cannot interrupt input().
    try:
        project_name = scaffolder.resolve_name()
    except ScaffoldError as exc:
        print_error(f"Failed to read project name: {exc}")
        return 1

    result = asyncio.run(scaffolder.run(project_name))

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
