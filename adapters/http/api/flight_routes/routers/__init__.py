from .auth_router import router as auth_router
from .location_router import router as location_router
from .transportation_router import router as transportation_router
from .route_router import router as route_router

__all__ = ["auth_router", "location_router", "transportation_router", "route_router"]
