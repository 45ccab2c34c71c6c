"""Team roster representation for team building."""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from teambuilder.game.data.species import Species
from teambuilder.game.data.type_chart import TypeChart
from teambuilder.game.exceptions import DuplicateMemberError, TeamFullError
from teambuilder.team.team_report import (
    TeamReportConfig,
    TeamTypeReport,
    build_team_type_report_for_types,
)

MAX_TEAM_SIZE = 6


@dataclass(frozen=True)
class TeamRoster:
    """Immutable team of up to 6 distinct species.

    Every change returns a new roster; the original is left untouched.
    """

    members: Tuple[Species, ...] = field(default_factory=tuple)
    max_size: int = MAX_TEAM_SIZE

    def __len__(self) -> int:
        return len(self.members)

    def is_full(self) -> bool:
        return len(self.members) >= self.max_size

    def contains(self, species_id: int) -> bool:
        return any(member.id == species_id for member in self.members)

    def add(self, species: Species) -> "TeamRoster":
        """Add a species to the team.

        Args:
            species: Species to add

        Returns:
            New roster with the species appended

        Raises:
            TeamFullError: If the team already has max_size members
            DuplicateMemberError: If the species is already on the team
        """
        if self.is_full():
            raise TeamFullError(self.max_size)
        if self.contains(species.id):
            raise DuplicateMemberError(species.id, species.name)
        return replace(self, members=self.members + (species,))

    def remove(self, species_id: int) -> "TeamRoster":
        """Remove a species by id; removing an absent species is a no-op."""
        return replace(
            self,
            members=tuple(m for m in self.members if m.id != species_id),
        )

    def clear(self) -> "TeamRoster":
        return replace(self, members=())

    def type_sets(self) -> List[Tuple[str, ...]]:
        return [member.types for member in self.members]

    def type_report(
        self, type_chart: TypeChart, config: Optional[TeamReportConfig] = None
    ) -> TeamTypeReport:
        return build_team_type_report_for_types(self.type_sets(), type_chart, config)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "members": [
                {"id": m.id, "name": m.name, "types": list(m.types)}
                for m in self.members
            ],
            "max_size": self.max_size,
        }

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=2, sort_keys=True)
