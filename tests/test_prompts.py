"""Unit tests for name providers (create_next_starter.prompts)."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from create_next_starter.prompts import PROJECT_NAME_MESSAGE, FixedName, prompt_project_name
from create_next_starter.utils import console


class TestPromptProjectName:
    @pytest.mark.unit
    def test_asks_with_message_and_default(self):
        with patch("create_next_starter.prompts.Prompt.ask", return_value="demo") as ask:
            answer = prompt_project_name(PROJECT_NAME_MESSAGE, "my-next-app")

        assert answer == "demo"
        ask.assert_called_once_with(
            "What would you like to name your project?",
            console=console,
            default="my-next-app",
            show_default=True,
        )

    @pytest.mark.unit
    def test_enter_accepts_default(self):
        with patch.object(console, "input", return_value=""):
            assert prompt_project_name(default="my-next-app") == "my-next-app"


class TestFixedName:
    @pytest.mark.unit
    def test_returns_value(self):
        assert FixedName("preset")("ignored?", "my-next-app") == "preset"

    @pytest.mark.unit
    def test_callable_without_arguments(self):
        assert FixedName("preset")() == "preset"
