from .auth_container import AuthContainer
from .catalog_container import CatalogContainer

__all__ = ["AuthContainer", "CatalogContainer"]
