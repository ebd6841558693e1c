"""API schemas for the flight routes endpoints."""

from .auth_schemas import LoginRequest, LoginResponse
from .location_schemas import LocationRequest, LocationResponse
from .transportation_schemas import TransportationRequest, TransportationResponse
from .route_schemas import RouteSegmentResponse, RouteResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "LocationRequest",
    "LocationResponse",
    "TransportationRequest",
    "TransportationResponse",
    "RouteSegmentResponse",
    "RouteResponse",
]
