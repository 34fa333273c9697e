"""
Athlete data model for the VolleyStats system.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass
class Athlete:
    """A roster member. Only name and position change after creation."""
    id: str
    name: str
    position: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Athlete':
        missing = [key for key in ('id', 'name', 'position') if data.get(key) is None]
        if missing:
            raise ValueError(f"Athlete record missing {', '.join(missing)}")
        return cls(
            id=str(data['id']),
            name=str(data['name']),
            position=str(data['position'])
        )
