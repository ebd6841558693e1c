"""Transportation request/response schemas."""

from typing import List
from uuid import UUID

from pydantic import Field, field_validator

from core.exceptions import CatalogValidationError
from src.catalog_bc.transportation.domain.entities.transportation import (
    TransportationType,
    validate_operating_days,
)

from .base import CamelModel
from .location_schemas import LocationResponse


class TransportationRequest(CamelModel):
    """Body for creating or updating a transportation."""
    origin_location_id: UUID
    destination_location_id: UUID
    transportation_type: TransportationType
    operating_days: List[int] = Field(
        ...,
        description="Days of week the transportation operates (1=Monday .. 7=Sunday), no duplicates",
        examples=[[1, 3, 5, 7]],
    )

    @field_validator("operating_days")
    @classmethod
    def check_operating_days(cls, value: List[int]) -> List[int]:
        try:
            validate_operating_days(value)
        except CatalogValidationError as e:
            raise ValueError(e.message) from e
        return value


class TransportationResponse(CamelModel):
    id: UUID
    origin_location: LocationResponse
    destination_location: LocationResponse
    transportation_type: TransportationType
    operating_days: List[int]

    @classmethod
    def from_entity(cls, edge) -> "TransportationResponse":
        return cls(
            id=edge.id,
            origin_location=LocationResponse.from_entity(edge.origin),
            destination_location=LocationResponse.from_entity(edge.destination),
            transportation_type=edge.transportation_type,
            operating_days=sorted(edge.operating_days),
        )
