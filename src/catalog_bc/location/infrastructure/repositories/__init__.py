from .location_repository import LocationRepository

__all__ = ["LocationRepository"]
