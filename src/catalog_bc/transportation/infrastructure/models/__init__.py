from .transportation_model import TransportationModel

__all__ = ["TransportationModel"]
