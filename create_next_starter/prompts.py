"""Project-name providers.

A name provider is any callable ``(message, default) -> str``.  The scaffolder
calls it exactly once and uses whatever it returns; an empty answer falls back
to the default.
"""

from __future__ import annotations

from typing import Protocol

from rich.prompt import Prompt

from create_next_starter.utils import console

PROJECT_NAME_MESSAGE = "What would you like to name your project?"


class NameProvider(Protocol):
    def __call__(self, message: str, default: str) -> str: ...


def prompt_project_name(message: str = PROJECT_NAME_MESSAGE, default: str = "") -> str:
    """Ask for the project name on the terminal, offering *default*.

    Blocks until the user answers or presses Enter to accept the default.
    """
    return Prompt.ask(message, console=console, default=default, show_default=True)


class FixedName:
    """Name provider that answers with a preset value without prompting."""

    def __init__(self, value: str) -> None:
        self.value = value

    def __call__(self, message: str = PROJECT_NAME_MESSAGE, default: str = "") -> str:
        return self.value
