import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from absl import logging

from teambuilder.game.data.schemas import SpeciesRecord, TypeChartRecord
from teambuilder.game.data.species import Species
from teambuilder.game.data.type_chart import TypeChart
from teambuilder.game.exceptions import SpeciesNotFoundError
from teambuilder.game.schema.object_name_normalizer import normalize_name
from teambuilder.search.search_candidate import SearchCandidate

DATA_DIR_ENV_VAR = "TEAMBUILDER_DATA_DIR"
DEFAULT_DATA_DIR = Path(__file__).resolve().parent


def _default_data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV_VAR)
    return Path(override) if override else DEFAULT_DATA_DIR


class GameData:
    """Singleton class for accessing static game data.

    This class loads the type chart and the species list once and provides
    read-only access throughout the application. Species are indexed by
    both their English and French names.

    Thread-safe singleton implementation using double-checked locking pattern.
    """

    _instance: Optional["GameData"] = None
    _instance_lock: threading.Lock = threading.Lock()
    _init_lock: threading.Lock = threading.Lock()

    def __new__(cls, data_dir: Optional[str] = None) -> "GameData":
        """Create or return the singleton instance."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self, data_dir: Optional[str] = None) -> None:
        """Initialize the game data (only runs once for the singleton)."""
        if self._initialized:  # type: ignore
            return

        with self._init_lock:
            if self._initialized:  # type: ignore
                return

            self.data_dir = Path(data_dir) if data_dir else _default_data_dir()
            self._type_chart = self._load_type_chart()
            self._species = self._load_species()
            self._species_by_id: Dict[int, Species] = {s.id: s for s in self._species}
            self._species_lookup: Dict[str, Species] = {}
            for species in self._species:
                self._species_lookup.setdefault(normalize_name(species.name), species)
                self._species_lookup.setdefault(
                    normalize_name(species.secondary_name), species
                )
            logging.info(
                "Loaded type chart '%s' and %d species from %s",
                self._type_chart.name,
                len(self._species),
                self.data_dir,
            )
            self._initialized = True  # type: ignore

    def _read_json(self, filename: str) -> Any:
        with open(self.data_dir / filename, "r", encoding="utf-8") as f:
            return json.load(f)

    def _load_type_chart(self) -> TypeChart:
        data = self._read_json("type_chart.json")
        record = TypeChartRecord.model_validate(data[0])
        return TypeChart.from_dict(record.model_dump())

    def _load_species(self) -> List[Species]:
        return [
            Species.from_dict(SpeciesRecord.model_validate(entry).model_dump())
            for entry in self._read_json("species.json")
        ]

    def get_type_chart(self) -> TypeChart:
        return self._type_chart

    def get_species(self, name: str) -> Species:
        key = normalize_name(name)
        if key not in self._species_lookup:
            raise SpeciesNotFoundError(name)
        return self._species_lookup[key]

    def get_species_by_id(self, species_id: int) -> Species:
        if species_id not in self._species_by_id:
            raise SpeciesNotFoundError(species_id)
        return self._species_by_id[species_id]

    def get_all_species(self) -> List[Species]:
        return list(self._species)

    def get_search_candidates(self) -> List[SearchCandidate]:
        """Search candidates for every species, in national dex order."""
        return [species.to_candidate() for species in self._species]
