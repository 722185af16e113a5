"""UI components for the CLI (Rich).

Why separate components:
- Keeps menu logic apart from visual details.
- Lets the shell and the doctor command reuse the same tables and styles.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.messages import StatusKind, StatusMessage
from core.domain.models import Bird, Cat, Dog, describe_extra

STATUS_STYLES: dict[StatusKind, str] = {
    StatusKind.WARN: "yellow",
    StatusKind.INFO: "cyan",
    StatusKind.SUCCESS: "green",
}

MENU_ENTRIES: tuple[tuple[str, str], ...] = (
    ("1", "Add animal"),
    ("2", "List animals"),
    ("3", "Make all speak"),
    ("4", "Show movements"),
    ("5", "Show flyers"),
    ("0", "Exit"),
)


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped when `show_banner` is off)."""

    title = Text("Animal Hierarchy", style="bold cyan")
    subtitle = Text("Dogs • Cats • Birds", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_menu(console: Console) -> None:
    console.print()
    console.print("=== Animal Hierarchy ===", style="bold")
    for key, label in MENU_ENTRIES:
        console.print(f"{key}) {label}", highlight=False)


def status_text(message: StatusMessage) -> Text:
    return Text(message.text, style=STATUS_STYLES[message.kind])


def print_status(console: Console, message: StatusMessage) -> None:
    console.print(status_text(message))


def build_animals_table(animals: Sequence[Dog | Cat | Bird]) -> Table:
    """Table of registered animals, numbered from 1 in insertion order."""

    table = Table(title="Animals")
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Age", justify="right")
    table.add_column("Extra", style="magenta")
    for index, animal in enumerate(animals, start=1):
        table.add_row(
            str(index),
            animal.kind.label(),
            Text(animal.name),
            str(animal.age),
            Text(describe_extra(animal)),
        )
    return table
