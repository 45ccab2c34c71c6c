from dataclasses import dataclass
from typing import Any, Dict, TypeVar

T = TypeVar("T", bound="GameDataObject")


@dataclass(frozen=True)
class GameDataObject:
    """A record with an id and a name in the primary and secondary locale.

    Bundled JSON carries the secondary locale under "name_fr"; records that
    were already converted carry it under "secondary_name". Either falls back
    to the primary name when missing or empty.
    """

    id: int
    name: str
    secondary_name: str

    @classmethod
    def _fields_from_dict(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        name = data["name"]
        secondary_name = data.get("secondary_name") or data.get("name_fr")
        return {
            "id": int(data["id"]),
            "name": name,
            "secondary_name": secondary_name or name,
        }

    @classmethod
    def from_dict(cls: type[T], data: Dict[str, Any]) -> T:
        return cls(**cls._fields_from_dict(data))
