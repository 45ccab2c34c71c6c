"""Schemas for the bundled JSON game data."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from teambuilder.game.schema.enums import PokemonType


class SpeciesRecord(BaseModel):
    id: int = Field(ge=1, description="National dex number")
    name: str = Field(min_length=1, description="English name")
    name_fr: Optional[str] = Field(default=None, description="French name")
    types: List[str] = Field(min_length=1, max_length=2)

    @field_validator("types")
    @classmethod
    def _known_types(cls, types: List[str]) -> List[str]:
        return [PokemonType.from_label(t).value for t in types]


class TypeChartRecord(BaseModel):
    name: str = "default"
    effectiveness: Dict[str, Dict[str, float]]
