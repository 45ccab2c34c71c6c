"""Aggregate defensive type report for a team."""

import json
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from teambuilder.game.data.type_chart import TypeChart, TypeLabel
from teambuilder.game.schema.enums import ALL_TYPES


@dataclass(frozen=True)
class TeamReportConfig:
    """Thresholds used when folding member profiles into a team report.

    Attributes:
        weakness_threshold: A member is weak to a type at or above this multiplier
        resistance_threshold: A member resists a type at or below this multiplier
        shared_min_members: Member count from which a weakness/resistance is shared
        shared_min_fraction: If set, a count reaching this fraction of the team
            is also shared (e.g., 0.5 for "half the team")
    """

    weakness_threshold: float = 2.0
    resistance_threshold: float = 0.5
    shared_min_members: int = 2
    shared_min_fraction: Optional[float] = None

    def shared_cutoff(self, member_count: int) -> int:
        """Smallest count that makes a weakness or resistance shared."""
        cutoff = self.shared_min_members
        if self.shared_min_fraction is not None and member_count > 0:
            cutoff = min(cutoff, math.ceil(self.shared_min_fraction * member_count))
        return max(cutoff, 1)


@dataclass(frozen=True)
class TeamTypeReport:
    """Per attacking type counts of weak, resistant and immune team members."""

    member_count: int = 0
    weaknesses: Dict[str, int] = field(default_factory=dict)
    resistances: Dict[str, int] = field(default_factory=dict)
    immunities: Dict[str, int] = field(default_factory=dict)
    shared_cutoff: int = 2

    def shared_weaknesses(self) -> List[str]:
        """Attacking types that hit at least `shared_cutoff` members hard.

        Returns:
            Type labels in type chart order
        """
        return [t for t in ALL_TYPES if self.weaknesses.get(t, 0) >= self.shared_cutoff]

    def shared_resistances(self) -> List[str]:
        """Attacking types resisted by at least `shared_cutoff` members.

        Returns:
            Type labels in type chart order
        """
        return [
            t for t in ALL_TYPES if self.resistances.get(t, 0) >= self.shared_cutoff
        ]

    def unresisted_types(self) -> List[str]:
        """Attacking types no member resists."""
        return [t for t in ALL_TYPES if self.resistances.get(t, 0) == 0]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the report to a dictionary for JSON serialization."""
        return {
            "member_count": self.member_count,
            "weaknesses": dict(self.weaknesses),
            "resistances": dict(self.resistances),
            "immunities": dict(self.immunities),
            "shared_weaknesses": self.shared_weaknesses(),
            "shared_resistances": self.shared_resistances(),
            "unresisted_types": self.unresisted_types(),
        }

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=2, sort_keys=True)


def build_team_type_report(
    profiles: Sequence[Mapping[str, float]],
    config: Optional[TeamReportConfig] = None,
) -> TeamTypeReport:
    """Fold member defensive profiles into a team report.

    Args:
        profiles: One defensive profile per team member
        config: Thresholds; defaults to TeamReportConfig()

    Returns:
        TeamTypeReport with a count for every attacking type
    """
    config = config or TeamReportConfig()
    weaknesses = {t: 0 for t in ALL_TYPES}
    resistances = {t: 0 for t in ALL_TYPES}
    immunities = {t: 0 for t in ALL_TYPES}

    for profile in profiles:
        for attacking_type in ALL_TYPES:
            multiplier = profile.get(attacking_type, 1.0)
            if multiplier >= config.weakness_threshold:
                weaknesses[attacking_type] += 1
            if multiplier <= config.resistance_threshold:
                resistances[attacking_type] += 1
            if multiplier == 0:
                immunities[attacking_type] += 1

    return TeamTypeReport(
        member_count=len(profiles),
        weaknesses=weaknesses,
        resistances=resistances,
        immunities=immunities,
        shared_cutoff=config.shared_cutoff(len(profiles)),
    )


def build_team_type_report_for_types(
    type_sets: Sequence[Sequence[TypeLabel]],
    type_chart: TypeChart,
    config: Optional[TeamReportConfig] = None,
) -> TeamTypeReport:
    profiles = [type_chart.compute_defensive_profile(types) for types in type_sets]
    return build_team_type_report(profiles, config)
