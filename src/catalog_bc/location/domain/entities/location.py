from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class Location:
    """A named point (airport, transit hub, landmark) identified by a short code."""

    id: UUID
    name: str
    country: str
    city: str
    code: str
    display_order: Optional[int] = None

    @classmethod
    def from_model(cls, model) -> "Location":
        """Create Location from a LocationModel row."""
        return cls(
            id=model.id,
            name=model.name,
            country=model.country,
            city=model.city,
            code=model.code,
            display_order=model.display_order,
        )

    @staticmethod
    def normalize_code(code: str) -> str:
        """Location codes are unique case-insensitively and stored upper-case."""
        return code.strip().upper()
