from .location_model import LocationModel

__all__ = ["LocationModel"]
