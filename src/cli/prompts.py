"""Validated prompts (Rich).

Every prompt re-asks until the answer is valid; nothing invalid reaches the
core. End of input (`EOFError`) propagates so the shell can exit cleanly.
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, InvalidResponse, Prompt

from cli.ui_components import status_text
from core.domain.messages import warn


def _invalid(text: str) -> InvalidResponse:
    return InvalidResponse(status_text(warn(text)))


class RangePrompt(IntPrompt):
    """Integer prompt bounded to [minimum, maximum]."""

    def __init__(self, prompt: str, *, minimum: int, maximum: int, console: Console | None = None) -> None:
        super().__init__(prompt, console=console)
        self.minimum = minimum
        self.maximum = maximum

    def process_response(self, value: str) -> int:
        message = f"Enter a number between {self.minimum} and {self.maximum}."
        try:
            number = super().process_response(value)
        except InvalidResponse:
            raise _invalid(message) from None
        if not self.minimum <= number <= self.maximum:
            raise _invalid(message)
        return number


class RequiredPrompt(Prompt):
    """Text prompt that rejects blank answers."""

    def process_response(self, value: str) -> str:
        text = value.strip()
        if not text:
            raise _invalid("Name cannot be empty.")
        return text


class YesNoPrompt(Confirm):
    """Accepts y/yes/n/no in any case."""

    def process_response(self, value: str) -> bool:
        answer = value.strip().lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        raise _invalid("Please enter y/n.")


class Prompter:
    """Reads and validates user answers through a single Rich console."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def choice(self, prompt: str) -> str:
        return self._console.input(prompt).strip()

    def integer(self, prompt: str, minimum: int, maximum: int) -> int:
        return RangePrompt(prompt, minimum=minimum, maximum=maximum, console=self._console)()

    def name(self, prompt: str = "Name") -> str:
        return RequiredPrompt(prompt, console=self._console)()

    def optional_text(self, prompt: str) -> str | None:
        value = Prompt.ask(prompt, console=self._console, default="", show_default=False)
        return value.strip() or None

    def yes_no(self, prompt: str) -> bool:
        return YesNoPrompt(prompt, console=self._console)()
