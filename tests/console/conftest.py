"""Fixtures for driving the console table with scripted input."""

import pytest

from console.table import ConsoleTable


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything printed."""

    def __init__(self, answers: list[str]) -> None:
        self._answers = iter(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None

    def output(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def scripted():
    """Factory for a scripted console and a table wired to it."""

    def _make(*answers: str) -> tuple[ScriptedConsole, ConsoleTable]:
        console = ScriptedConsole(list(answers))
        return console, ConsoleTable(input_fn=console.input, output_fn=console.output)

    return _make
