"""Location request/response schemas."""

from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from .base import CamelModel


class LocationRequest(CamelModel):
    """Body for creating or updating a location."""
    name: str = Field(..., min_length=2, max_length=100)
    country: str = Field(..., min_length=2, max_length=100)
    city: str = Field(..., min_length=2, max_length=100)
    location_code: str = Field(
        ...,
        pattern=r"^[A-Z0-9]{3,10}$",
        description="3-10 alphanumeric characters, case-insensitive (stored upper-case)",
    )
    display_order: Optional[int] = None

    @field_validator("name", "country", "city", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("location_code", mode="before")
    @classmethod
    def normalize_code(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


class LocationResponse(CamelModel):
    id: UUID
    name: str
    country: str
    city: str
    location_code: str
    display_order: Optional[int] = None

    @classmethod
    def from_entity(cls, location) -> "LocationResponse":
        return cls(
            id=location.id,
            name=location.name,
            country=location.country,
            city=location.city,
            location_code=location.code,
            display_order=location.display_order,
        )
