"""Domain models (Pydantic v2).

The animal variants form a closed discriminated union on `kind`:
- each variant carries its own fields and behaviour (`speak`, `move`);
- the optional flight capability is a method only `Bird` has (see
  `core.interfaces.capabilities.Flyer`).

Note:
- These models describe *what* an animal is, not how it is prompted or printed.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.config import ConfigDict

logger = logging.getLogger(__name__)

AGE_MIN = 0
AGE_MAX = 100
WINGSPAN_MIN_CM = 5
WINGSPAN_MAX_CM = 300

MISSING_PLACEHOLDER = "—"


class AnimalKind(str, Enum):
    """Closed set of supported animal variants."""

    DOG = "dog"
    CAT = "cat"
    BIRD = "bird"

    def label(self) -> str:
        """Human readable variant name ("Dog", "Cat", "Bird")."""

        return self.value.capitalize()


class AnimalBase(BaseModel):
    """Fields and defaults shared by every variant.

    Rules:
    - `speak` is abstract; `move` defaults to "moves around".
    - `kind` is fixed at creation (frozen field).
    - `name` stays mutable; assignments are re-validated.
    - unknown fields are rejected, so variant data never leaks across variants.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    kind: AnimalKind = Field(..., frozen=True)
    name: str = Field(
        ...,
        min_length=1,
        description="Display name given by the user.",
    )
    age: int = Field(
        ...,
        ge=AGE_MIN,
        le=AGE_MAX,
        description="Age in years.",
    )

    @property
    def label(self) -> str:
        return f"{self.kind.label()} {self.name}, Age {self.age}"

    @abstractmethod
    def speak(self) -> str:
        ...

    def move(self) -> str:
        return "moves around"

    def __str__(self) -> str:
        return self.label


class Dog(AnimalBase):
    kind: Literal[AnimalKind.DOG] = Field(default=AnimalKind.DOG, frozen=True)
    breed: str | None = Field(
        default=None,
        description="Breed, if known.",
    )

    def speak(self) -> str:
        return "Woof!"

    def move(self) -> str:
        return "runs on four legs"


class Cat(AnimalBase):
    kind: Literal[AnimalKind.CAT] = Field(default=AnimalKind.CAT, frozen=True)
    is_indoor: bool = Field(
        ...,
        description="Whether the cat lives indoors.",
    )

    def speak(self) -> str:
        return "Meow~"

    def move(self) -> str:
        return "sneaks gracefully"


class Bird(AnimalBase):
    kind: Literal[AnimalKind.BIRD] = Field(default=AnimalKind.BIRD, frozen=True)
    wingspan_cm: int = Field(
        ...,
        ge=WINGSPAN_MIN_CM,
        le=WINGSPAN_MAX_CM,
        description="Wingspan in centimetres.",
    )

    def speak(self) -> str:
        return "Chirp!"

    def move(self) -> str:
        return "hops and flutters"

    def fly(self) -> str:
        return f"{self.name} spreads {self.wingspan_cm}cm wings and takes off!"


Animal = Annotated[Union[Dog, Cat, Bird], Field(discriminator="kind")]

_animal_adapter: TypeAdapter[Dog | Cat | Bird] = TypeAdapter(Animal)


def parse_animal(payload: Mapping[str, Any]) -> Dog | Cat | Bird:
    """Validate a mapping carrying its own `kind` into the matching variant."""

    data = dict(payload)
    if "kind" in data:
        data["kind"] = AnimalKind(data["kind"])
    return _animal_adapter.validate_python(data)


def create_animal(kind: AnimalKind | str, **fields: Any) -> Dog | Cat | Bird:
    """Build a variant from its kind and fields.

    Raises `ValueError` for an unknown kind and `pydantic.ValidationError` for
    fields that do not fit the variant.
    """

    animal = parse_animal({**fields, "kind": AnimalKind(kind)})
    logger.debug("Created %s", animal.label)
    return animal


def describe_extra(animal: Dog | Cat | Bird) -> str:
    """Variant-specific detail column ("Breed=...", "Indoor=...", "Wingspan=...")."""

    match animal:
        case Dog(breed=breed):
            shown = breed.strip() if breed else ""
            return f"Breed={shown or MISSING_PLACEHOLDER}"
        case Cat(is_indoor=is_indoor):
            return f"Indoor={is_indoor}"
        case Bird(wingspan_cm=wingspan_cm):
            return f"Wingspan={wingspan_cm}cm"
        case _:
            return "-"


def display_label(animal: Dog | Cat | Bird) -> str:
    """Label plus detail column, e.g. "Dog Rex, Age 3 (Breed=—)"."""

    return f"{animal.label} ({describe_extra(animal)})"
