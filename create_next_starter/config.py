"""create-next-starter configuration.

Typed settings for the scaffolding run. Everything is a Pydantic v2 model so
values are validated at construction time and can be built from defaults,
environment variables, or CLI overrides without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_PROJECT_NAME = "my-next-app"

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "template"


class ScaffoldConfig(BaseModel):
    """Settings for a single scaffolding run.

    Instances are created once by the CLI entry point (or by tests) and handed
    to the ``Scaffolder``, which passes them on to the generator and installer.
    """

    default_name: str = Field(default=DEFAULT_PROJECT_NAME, min_length=1)
    template_dir: Path = Field(default=_DEFAULT_TEMPLATE_DIR)
    package_manager: str = Field(default="npm", min_length=1)
    install_args: list[str] = Field(default_factory=lambda: ["install"])
    dev_script: str = Field(default="dev", description="Script shown in the next-step hint")

    manifest_name: str = Field(default="package.json")
    # The template stores the VCS ignore-file under the packaging name; it is
    # renamed after the copy.
    ignore_source: str = Field(default=".npmignore")
    ignore_target: str = Field(default=".gitignore")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def install_command(self) -> list[str]:
        """The package manager invocation that installs dependencies."""
        return [self.package_manager, *self.install_args]

    @property
    def dev_command(self) -> str:
        """Command the user runs to start the dev server."""
        return f"{self.package_manager} run {self.dev_script}"

    def target_path(self, project_name: str, cwd: str | Path | None = None) -> Path:
        """Return ``<cwd>/<project_name>``; *cwd* defaults to the process cwd."""
        base = Path(cwd) if cwd is not None else Path.cwd()
        return base / project_name

    # ------------------------------------------------------------------
    # Loaders
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            NEXT_STARTER_DEFAULT_NAME, NEXT_STARTER_TEMPLATE_DIR,
            NEXT_STARTER_PACKAGE_MANAGER.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NEXT_STARTER_DEFAULT_NAME"):
            kwargs["default_name"] = os.environ["NEXT_STARTER_DEFAULT_NAME"]
        if os.environ.get("NEXT_STARTER_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["NEXT_STARTER_TEMPLATE_DIR"])
        if os.environ.get("NEXT_STARTER_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["NEXT_STARTER_PACKAGE_MANAGER"]
        return cls(**kwargs)
