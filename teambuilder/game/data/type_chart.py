from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Union

from teambuilder.game.exceptions import (
    EmptyTypeSetError,
    InvalidTypeChartError,
    TooManyTypesError,
)
from teambuilder.game.schema.enums import ALL_TYPES, PokemonType

TypeLabel = Union[str, PokemonType]

ALLOWED_MULTIPLIERS = frozenset({0.0, 0.25, 0.5, 1.0, 2.0})
MAX_DEFENDING_TYPES = 2

_TYPE_LABELS = frozenset(ALL_TYPES)


def parse_type_set(
    types: Union[TypeLabel, Sequence[TypeLabel], None],
) -> List[PokemonType]:
    """Parse and validate a defending type set.

    Every label is validated before the set size is checked, so an unknown
    label is always reported as such. Repeated labels collapse to one.

    Args:
        types: One or two type labels

    Returns:
        Distinct PokemonType values in input order

    Raises:
        InvalidTypeError: If a label is not one of the 18 types
        EmptyTypeSetError: If no labels were given
        TooManyTypesError: If more than two distinct types were given
    """
    if isinstance(types, (str, PokemonType)):
        types = [types]

    parsed: List[PokemonType] = []
    for label in types or []:
        pokemon_type = PokemonType.from_label(label)
        if pokemon_type not in parsed:
            parsed.append(pokemon_type)

    if not parsed:
        raise EmptyTypeSetError()
    if len(parsed) > MAX_DEFENDING_TYPES:
        raise TooManyTypesError([t.value for t in parsed])
    return parsed


@dataclass(frozen=True)
class TypeChart:
    """Attacker x defender effectiveness table.

    Keyed effectiveness[attacking_type][defending_type]. Pairs missing from
    the table are neutral (1.0).
    """

    effectiveness: Mapping[str, Mapping[str, float]]
    name: str = "default"

    def __post_init__(self) -> None:
        table: Dict[str, Mapping[str, float]] = {}
        for attacking_type, row in self.effectiveness.items():
            attacking_label = attacking_type.lower()
            if attacking_label not in _TYPE_LABELS:
                raise InvalidTypeChartError(
                    f"Unknown attacking type in chart: {attacking_type}"
                )
            cells: Dict[str, float] = {}
            for defending_type, multiplier in row.items():
                defending_label = defending_type.lower()
                if defending_label not in _TYPE_LABELS:
                    raise InvalidTypeChartError(
                        f"Unknown defending type in chart: {defending_type}"
                    )
                if multiplier not in ALLOWED_MULTIPLIERS:
                    raise InvalidTypeChartError(
                        f"Invalid multiplier {multiplier} for "
                        f"{attacking_type} -> {defending_type}"
                    )
                cells[defending_label] = float(multiplier)
            table[attacking_label] = MappingProxyType(cells)
        # Copied so later changes to the caller's dicts cannot reach the chart.
        object.__setattr__(self, "effectiveness", MappingProxyType(table))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TypeChart":
        """Build a read-only chart from a JSON entry.

        Args:
            data: Entry of the form {"name": ..., "effectiveness": {...}}

        Returns:
            TypeChart with lower-cased labels and float multipliers
        """
        if "effectiveness" not in data:
            raise InvalidTypeChartError("Type chart entry has no 'effectiveness'")
        return cls(
            effectiveness=data["effectiveness"],
            name=data.get("name", "default"),
        )

    def get_effectiveness(
        self, attacking_type: TypeLabel, defending_type: TypeLabel
    ) -> float:
        attacking = PokemonType.from_label(attacking_type)
        defending = PokemonType.from_label(defending_type)
        return self.effectiveness.get(attacking.value, {}).get(defending.value, 1.0)

    def get_attack_multiplier(
        self, attacking_type: TypeLabel, defending_types: Sequence[TypeLabel]
    ) -> float:
        """Combined multiplier of one attacking type against a type set."""
        attacking = PokemonType.from_label(attacking_type)
        return self._multiplier(attacking, parse_type_set(defending_types))

    def compute_defensive_profile(
        self, types: Sequence[TypeLabel]
    ) -> Dict[str, float]:
        """Compute the multiplier of every attacking type against a defender.

        Args:
            types: The defender's 1-2 type labels

        Returns:
            Mapping of each of the 18 attacking type labels to its combined
            multiplier

        Raises:
            InvalidTypeError: If a label is not one of the 18 types
            EmptyTypeSetError: If no labels were given
            TooManyTypesError: If more than two distinct types were given
        """
        defending = parse_type_set(types)
        return {
            attacking.value: self._multiplier(attacking, defending)
            for attacking in PokemonType
        }

    def _multiplier(
        self, attacking: PokemonType, defending: Sequence[PokemonType]
    ) -> float:
        row = self.effectiveness.get(attacking.value, {})
        multiplier = 1.0
        for defending_type in defending:
            multiplier *= row.get(defending_type.value, 1.0)
        return multiplier


def compute_defensive_profile(
    types: Sequence[TypeLabel], type_chart: TypeChart
) -> Dict[str, float]:
    return type_chart.compute_defensive_profile(types)
