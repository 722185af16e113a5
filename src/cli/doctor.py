"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.config import AppSettings, get_user_env_file
from core.domain.models import AnimalKind, create_animal
from core.services.registry import AnimalRegistry, seed_examples

app = typer.Typer(help="Settings and self-checks.")

_console = Console()


def _check_models() -> tuple[bool, str]:
    """Build one animal of each kind and make it speak and move."""

    samples = {
        AnimalKind.DOG: {"breed": None},
        AnimalKind.CAT: {"is_indoor": False},
        AnimalKind.BIRD: {"wingspan_cm": 20},
    }
    try:
        sounds = []
        for kind, fields in samples.items():
            animal = create_animal(kind, name="doctor", age=1, **fields)
            animal.move()
            sounds.append(animal.speak())
    except (ValidationError, ValueError) as exc:
        return False, str(exc)
    return True, " ".join(sounds)


def _check_flyers() -> tuple[bool, str]:
    registry = seed_examples(AnimalRegistry())
    flyers = registry.flyers()
    ok = len(flyers) == 1
    return ok, f"{len(flyers)} of {len(registry)} example animals can fly"


@app.command()
def run() -> None:
    """Show effective settings and run the model self-checks."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid settings:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    table = Table(title="Animal Hierarchy Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Seed examples", "OK", str(settings.seed_examples))
    table.add_row("Banner", "OK", str(settings.show_banner))
    table.add_row("Log level", "OK", settings.log_level)

    ok_models, detail_models = _check_models()
    table.add_row("Animal models", "OK" if ok_models else "FAIL", detail_models)

    ok_flyers, detail_flyers = _check_flyers()
    table.add_row("Flyer filter", "OK" if ok_flyers else "FAIL", detail_flyers)

    _console.print(table)

    if not (ok_models and ok_flyers):
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context) -> None:
    """Run the checks when no doctor subcommand is given."""

    if ctx.invoked_subcommand is None:
        run()
