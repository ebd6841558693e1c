# Models registry for Alembic autogenerate
# Import all SQLAlchemy models here so Alembic can detect them

# Catalog BC models
from src.catalog_bc.location.infrastructure.models import LocationModel
from src.catalog_bc.transportation.infrastructure.models import TransportationModel

# Auth BC models
from src.auth_bc.user.infrastructure.models import UserModel

__all__ = [
    # Catalog BC
    "LocationModel",
    "TransportationModel",
    # Auth BC
    "UserModel",
]
