"""Animal Hierarchy CLI (Typer + Rich).

Commands:
- `shell` (default): interactive menu over an in-memory registry.
- `doctor` (or `doctor run`): settings and model self-checks.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cli import doctor
from cli.logging_setup import configure_logging
from cli.prompts import Prompter
from cli.ui_components import build_animals_table, print_banner, print_menu, print_status
from core.config import AppSettings
from core.domain.messages import StatusMessage, info, success, warn
from core.domain.models import (
    AGE_MAX,
    AGE_MIN,
    WINGSPAN_MAX_CM,
    WINGSPAN_MIN_CM,
    AnimalKind,
    create_animal,
)
from core.services.registry import AnimalRegistry, seed_examples

logger = logging.getLogger(__name__)

app = typer.Typer(help="Add dogs, cats and birds, then make them speak, move and fly.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

_TYPE_CHOICES: dict[str, AnimalKind] = {
    "1": AnimalKind.DOG,
    "2": AnimalKind.CAT,
    "3": AnimalKind.BIRD,
}

NO_ANIMALS = "No animals yet."
NO_FLYERS = "No flyers here."
GOODBYE = "Bye 👋"


class AnimalShell:
    """Read-eval-print loop over an `AnimalRegistry`."""

    def __init__(self, registry: AnimalRegistry, console: Console, prompter: Prompter | None = None) -> None:
        self.registry = registry
        self.console = console
        self.prompter = prompter or Prompter(console)
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_animal,
            "2": self.list_animals,
            "3": self.make_all_speak,
            "4": self.show_movements,
            "5": self.show_flyers,
        }

    def notify(self, message: StatusMessage) -> None:
        print_status(self.console, message)

    def run(self) -> None:
        """Loop until the user picks 0 or input ends."""

        try:
            while True:
                print_menu(self.console)
                choice = self.prompter.choice("Choose: ")
                if choice == "0":
                    break
                action = self._actions.get(choice)
                if action is None:
                    self.notify(warn("Invalid choice."))
                    continue
                action()
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            logger.debug("Input closed, leaving shell")
        self.notify(info(GOODBYE))

    def add_animal(self) -> None:
        self.console.print("\nChoose type: 1) Dog  2) Cat  3) Bird", highlight=False)
        kind = _TYPE_CHOICES.get(self.prompter.choice("Type: "))
        name = self.prompter.name("Name")
        age = self.prompter.integer("Age (years)", AGE_MIN, AGE_MAX)

        if kind is AnimalKind.DOG:
            fields = {"breed": self.prompter.optional_text("Breed (optional)")}
        elif kind is AnimalKind.CAT:
            fields = {"is_indoor": self.prompter.yes_no("Indoor cat?")}
        elif kind is AnimalKind.BIRD:
            fields = {"wingspan_cm": self.prompter.integer("Wingspan (cm)", WINGSPAN_MIN_CM, WINGSPAN_MAX_CM)}
        else:
            self.notify(warn("Unknown type. Aborted."))
            return

        self.registry.add(create_animal(kind, name=name, age=age, **fields))
        self.notify(success("Added ✅"))

    def list_animals(self) -> None:
        animals = self.registry.all()
        if not animals:
            self.notify(info(NO_ANIMALS))
            return
        self.console.print()
        self.console.print(build_animals_table(animals))

    def make_all_speak(self) -> None:
        animals = self.registry.all()
        if not animals:
            self.notify(info(NO_ANIMALS))
            return
        self.console.print()
        for animal in animals:
            self.console.print(f"{animal.name} the {animal.kind.label()}: {animal.speak()}", markup=False, highlight=False)

    def show_movements(self) -> None:
        animals = self.registry.all()
        if not animals:
            self.notify(info(NO_ANIMALS))
            return
        self.console.print()
        for animal in animals:
            self.console.print(f"{animal.name} -> {animal.move()}", markup=False, highlight=False)

    def show_flyers(self) -> None:
        flyers = self.registry.flyers()
        if not flyers:
            self.notify(info(NO_FLYERS))
            return
        self.console.print()
        for flyer in flyers:
            self.console.print(flyer.fly(), markup=False, highlight=False)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Start the interactive shell when no command is given."""

    try:
        level = AppSettings().log_level
    except ValidationError:
        # Reported by the command that needs the settings (`doctor`, `shell`).
        level = "WARNING"
    configure_logging(level, verbose=verbose)
    if ctx.invoked_subcommand is None:
        shell(seed=None)


@app.command()
def shell(
    seed: Optional[bool] = typer.Option(
        None,
        "--seed/--no-seed",
        help="Start with a dog, a cat and a bird (default from settings).",
    ),
) -> None:
    """Interactive menu: add, list, speak, move and fly."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid settings:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    registry = AnimalRegistry()
    if seed is None:
        seed = settings.seed_examples
    if seed:
        seed_examples(registry)

    if settings.show_banner:
        print_banner(_console)
    AnimalShell(registry, _console).run()


def run() -> None:
    app()


if __name__ == "__main__":
    run()
