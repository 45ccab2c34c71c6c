"""Enums for type effectiveness representation."""

from enum import Enum
from typing import List, Union

from teambuilder.game.exceptions import InvalidTypeError


class PokemonType(Enum):
    """The 18 elemental types, in national type chart order."""

    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    ELECTRIC = "electric"
    GRASS = "grass"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"
    FAIRY = "fairy"

    @classmethod
    def from_label(cls, label: Union[str, "PokemonType"]) -> "PokemonType":
        """Parse a type from a free-form label.

        Args:
            label: Type label (e.g., "Fire", " water ") or a PokemonType

        Returns:
            PokemonType enum value

        Raises:
            InvalidTypeError: If the label is not one of the 18 types

        Examples:
            >>> PokemonType.from_label("Fire")
            PokemonType.FIRE
        """
        if isinstance(label, PokemonType):
            return label
        if not isinstance(label, str):
            raise InvalidTypeError(label)
        try:
            return cls(label.strip().lower())
        except ValueError:
            raise InvalidTypeError(label) from None


ALL_TYPES: List[str] = [t.value for t in PokemonType]
