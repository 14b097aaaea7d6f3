"""Animal domain model.

The animal hierarchy is the closed type hierarchy that the diagram generator
introspects: one abstract root, three concrete variants and two enumerations.
Comments attached to each type live in the registry, not on the classes.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_pascal

from animal_diagram.errors import UnknownAnimalError
from animal_diagram.metadata.registry import HierarchyRegistry

logger = logging.getLogger(__name__)

ANIMAL_HIERARCHY = "animal_diagram.animals"


class ClassificationAnimal(Enum):
    """Animal classification by feeding type."""

    Herbivores = "Herbivores"
    Carnivores = "Carnivores"
    Omnivores = "Omnivores"


class FavoriteFood(Enum):
    """Favourite food of animals."""

    Meat = "Meat"
    Plants = "Plants"
    Everything = "Everything"


class DietProfile(BaseModel):
    """Classification and favourite food for one kind of animal."""

    model_config = ConfigDict(frozen=True)

    classification: ClassificationAnimal
    favorite_food: FavoriteFood


# Kept exactly as recorded for each animal kind. Pig is listed as a meat-eating
# carnivore; callers that disagree pass their own table.
DEFAULT_DIETS: Mapping[str, DietProfile] = {
    "Cow": DietProfile(
        classification=ClassificationAnimal.Herbivores,
        favorite_food=FavoriteFood.Plants,
    ),
    "Lion": DietProfile(
        classification=ClassificationAnimal.Carnivores,
        favorite_food=FavoriteFood.Meat,
    ),
    "Pig": DietProfile(
        classification=ClassificationAnimal.Carnivores,
        favorite_food=FavoriteFood.Meat,
    ),
}


class Animal(BaseModel, ABC):
    """Abstract base class for all animals."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        validate_by_name=True,
        validate_by_alias=True,
    )

    country: str = ""
    hide_from_other_animals: bool = False
    name: str = ""
    what_animal: str = ""

    @model_validator(mode="before")
    @classmethod
    def _default_what_animal(cls, data: Any) -> Any:  # noqa: ANN401
        if isinstance(data, dict) and not (
            data.get("what_animal") or data.get("WhatAnimal")
        ):
            return {**data, "what_animal": cls.__name__}
        return data

    def _diet(self, diets: Mapping[str, DietProfile] | None) -> DietProfile:
        table = DEFAULT_DIETS if diets is None else diets
        kind = type(self).__name__
        if kind not in table:
            raise UnknownAnimalError(f"No diet profile recorded for '{kind}'")
        return table[kind]

    def deconstruct(self) -> tuple[str, bool, str, str]:
        """Return country, hide flag, name and animal kind."""
        return self.country, self.hide_from_other_animals, self.name, self.what_animal

    def get_classification_animal(
        self, diets: Mapping[str, DietProfile] | None = None
    ) -> ClassificationAnimal:
        """Look up the classification of this animal in a diet table.

        Args:
            diets: Diet table keyed by animal kind (defaults to DEFAULT_DIETS)

        Raises:
            UnknownAnimalError: If the table has no entry for this kind

        """
        return self._diet(diets).classification

    def get_favorite_food(
        self, diets: Mapping[str, DietProfile] | None = None
    ) -> FavoriteFood:
        """Look up the favourite food of this animal in a diet table."""
        return self._diet(diets).favorite_food

    @abstractmethod
    def say_hello(self) -> str:
        """Return this animal's greeting."""


class Cow(Animal):
    """A class representing cows."""

    def say_hello(self) -> str:
        return f"Muuu! I'm a cow {self.name}"


class Lion(Animal):
    """A class representing lions."""

    def say_hello(self) -> str:
        return f"Rrrrr! I'm a lion {self.name}"


class Pig(Animal):
    """A class representing pigs."""

    def say_hello(self) -> str:
        return f"Piggy Piggy! I'm a pig {self.name}"


ANIMAL_TYPES: tuple[tuple[type, tuple[str, ...]], ...] = (
    (ClassificationAnimal, ()),
    (FavoriteFood, ()),
    (Animal, ("Abstract base class for all animals",)),
    (Cow, ("A class representing cows",)),
    (Lion, ("A class representing lions",)),
    (Pig, ("A class representing pigs",)),
)


def register_animal_types(registry: HierarchyRegistry | None = None) -> None:
    """Register the animal hierarchy.

    Safe to call more than once; a hierarchy that is already registered is
    left untouched.
    """
    registry = registry if registry is not None else HierarchyRegistry()
    if registry.is_registered(ANIMAL_HIERARCHY):
        return

    for type_, comments in ANIMAL_TYPES:
        registry.register(ANIMAL_HIERARCHY, type_, comments)
    logger.debug(
        "Registered %d types under '%s'", len(ANIMAL_TYPES), ANIMAL_HIERARCHY
    )
