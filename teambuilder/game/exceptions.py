"""Custom exceptions for type analysis and team building errors."""

from typing import Any, Sequence


class TeamBuilderError(Exception):
    """Base class for all team builder errors."""


class TypeSetError(TeamBuilderError, ValueError):
    """Exception raised when a defending type set is malformed."""


class InvalidTypeError(TypeSetError):
    """Exception raised when a type label is not one of the 18 known types.

    Attributes:
        label: The rejected label as supplied by the caller
    """

    def __init__(self, label: Any):
        """Initialize the InvalidTypeError.

        Args:
            label: The unrecognized type label
        """
        self.label = label
        super().__init__(f"Unknown type: {label!r}")


class EmptyTypeSetError(TypeSetError):
    """Exception raised when a defensive profile is requested for no types."""

    def __init__(self) -> None:
        super().__init__("At least one defending type is required")


class TooManyTypesError(TypeSetError):
    """Exception raised when more than two distinct defending types are given.

    Attributes:
        types: The distinct type labels that were supplied
    """

    def __init__(self, types: Sequence[str]):
        self.types = list(types)
        super().__init__(
            f"A defender has at most 2 types, got {len(self.types)}: "
            f"{', '.join(self.types)}"
        )


class InvalidTypeChartError(TeamBuilderError, ValueError):
    """Exception raised when type chart data is malformed."""


class SpeciesNotFoundError(TeamBuilderError, KeyError):
    """Exception raised when a species lookup misses the bundled data."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Species not found: {name}")

    def __str__(self) -> str:
        return str(self.args[0])


class TeamError(TeamBuilderError):
    """Base class for team roster errors."""


class TeamFullError(TeamError):
    """Exception raised when adding a member to a full team.

    Attributes:
        max_size: The team size limit that was reached
    """

    def __init__(self, max_size: int):
        self.max_size = max_size
        super().__init__(f"Team is full ({max_size} members)")


class DuplicateMemberError(TeamError):
    """Exception raised when a species is already on the team.

    Attributes:
        species_id: National dex id of the duplicated species
    """

    def __init__(self, species_id: int, name: str):
        self.species_id = species_id
        super().__init__(f"{name} (#{species_id}) is already on the team")
