from dataclasses import dataclass

from teambuilder.game.data.base import GameDataObject


@dataclass(frozen=True)
class SearchCandidate(GameDataObject):
    """A searchable record with a primary and a secondary locale name."""
