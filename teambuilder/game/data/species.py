from dataclasses import dataclass
from typing import Any, Dict, Tuple

from teambuilder.game.data.base import GameDataObject
from teambuilder.search.search_candidate import SearchCandidate


@dataclass(frozen=True)
class Species(GameDataObject):
    types: Tuple[str, ...]

    @classmethod
    def _fields_from_dict(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        fields = super()._fields_from_dict(data)
        fields["types"] = tuple(t.lower() for t in data["types"])
        return fields

    def to_candidate(self) -> SearchCandidate:
        return SearchCandidate(
            id=self.id, name=self.name, secondary_name=self.secondary_name
        )
