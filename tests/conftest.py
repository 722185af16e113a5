import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from core.domain.models import Bird, Cat, Dog
from core.services.registry import AnimalRegistry


@pytest.fixture
def rex():
    return Dog(name="Rex", age=3, breed="Shepherd")


@pytest.fixture
def milo():
    return Cat(name="Milo", age=2, is_indoor=True)


@pytest.fixture
def kiwi():
    return Bird(name="Kiwi", age=1, wingspan_cm=28)


@pytest.fixture
def registry():
    return AnimalRegistry()


@pytest.fixture
def filled_registry(registry, rex, milo, kiwi):
    for animal in (rex, milo, kiwi):
        registry.add(animal)
    return registry


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def output(console):
    def read():
        return console.file.getvalue()

    return read


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed answers to `input()`; raises EOFError once they run out."""

    def script(*answers):
        pending = list(answers)

        def fake_input(*_args):
            if not pending:
                raise EOFError
            return pending.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)

    return script


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in ("SEED_EXAMPLES", "SHOW_BANNER", "LOG_LEVEL"):
        monkeypatch.delenv(f"ANIMAL_HIERARCHY_{name}", raising=False)
