from .transportation_repository import TransportationRepository

__all__ = ["TransportationRepository"]
