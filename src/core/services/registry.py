"""In-memory animal registry.

Holds every animal created during a session in insertion order. The order is
significant: the CLI numbers animals 1..n from it when listing. There is no
update or delete; animals live until the process exits.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from core.domain.models import Bird, Cat, Dog
from core.interfaces.capabilities import Flyer

logger = logging.getLogger(__name__)

AnimalT = Dog | Cat | Bird


class AnimalRegistry:
    """Ordered, append-only collection of animals."""

    def __init__(self) -> None:
        self._animals: list[AnimalT] = []

    def add(self, animal: AnimalT) -> AnimalT:
        """Append `animal` at the end. Duplicate names are allowed."""

        self._animals.append(animal)
        logger.info("Registered %s (#%d)", animal.label, len(self._animals))
        return animal

    def all(self) -> Sequence[AnimalT]:
        """Read-only snapshot of every animal, in insertion order."""

        return tuple(self._animals)

    def flyers(self) -> Sequence[Flyer]:
        """Animals implementing the flight capability, in insertion order."""

        return tuple(a for a in self._animals if isinstance(a, Flyer))

    def __len__(self) -> int:
        return len(self._animals)

    def __iter__(self) -> Iterator[AnimalT]:
        return iter(self.all())

    def __bool__(self) -> bool:
        return bool(self._animals)


def seed_examples(registry: AnimalRegistry) -> AnimalRegistry:
    """Add the three starting animals (a dog, a cat and a bird)."""

    registry.add(Dog(name="Rex", age=3, breed="Shepherd"))
    registry.add(Cat(name="Milo", age=2, is_indoor=True))
    registry.add(Bird(name="Kiwi", age=1, wingspan_cm=28))
    return registry
