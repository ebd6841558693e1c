"""FastAPI dependencies: per-request buses and bearer-token authentication."""

from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from core.containers import AuthContainer, CatalogContainer
from core.database import get_db
from core.exceptions import AccessDeniedError, AuthenticationFailedError
from src.auth_bc.user.application.queries import GetCurrentUserQuery
from src.auth_bc.user.domain.entities import User, UserRole
from src.framework.application import CommandBus, QueryBus

bearer_scheme = HTTPBearer(auto_error=False, description="JWT from POST /api/auth/login")


def get_catalog_query_bus(db: Session = Depends(get_db)) -> QueryBus:
    return QueryBus(CatalogContainer(session=db))


def get_catalog_command_bus(db: Session = Depends(get_db)) -> CommandBus:
    return CommandBus(CatalogContainer(session=db))


def get_auth_command_bus(db: Session = Depends(get_db)) -> CommandBus:
    return CommandBus(AuthContainer(session=db))


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the Authorization: Bearer header to an active user, or fail with 401."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise AuthenticationFailedError("Authentication required")
    return QueryBus(AuthContainer(session=db)).query(GetCurrentUserQuery(token=credentials.credentials))


def require_roles(*roles: UserRole) -> Callable[..., User]:
    """Dependency factory allowing only the given roles (403 otherwise)."""
    allowed = frozenset(roles)

    def dependency(user: User = Depends(get_current_user)) -> User:
        if user.role not in allowed:
            raise AccessDeniedError(
                f"Access denied: requires role {' or '.join(sorted(r.value for r in allowed))}"
            )
        return user

    return dependency


require_admin = require_roles(UserRole.ADMIN)
require_admin_or_agency = require_roles(UserRole.ADMIN, UserRole.AGENCY)
