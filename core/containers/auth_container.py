from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from core.config import settings

# Repositories
from src.auth_bc.user.infrastructure.repositories import UserRepository

# Services
from src.auth_bc.user.infrastructure.services import JwtService, PasswordHasher

# Handlers
from src.auth_bc.user.application.commands import LoginCommandHandler
from src.auth_bc.user.application.queries import GetCurrentUserQueryHandler


class AuthContainer(containers.DeclarativeContainer):
    """Dependency injection container for the Auth bounded context.

    Handler naming convention for CommandBus/QueryBus:
    - LoginCommand -> login_command_handler
    - GetCurrentUserQuery -> get_current_user_query_handler
    """

    # External dependencies
    session = providers.Dependency(instance_of=Session)

    # ===== Services =====
    jwt_service = providers.Singleton(
        JwtService,
        secret_key=settings.auth.SECRET_KEY,
        algorithm=settings.auth.ALGORITHM,
        access_token_expire_minutes=settings.auth.ACCESS_TOKEN_EXPIRE_MINUTES
    )

    password_hasher = providers.Singleton(PasswordHasher)

    # ===== Repositories =====
    user_repository = providers.Factory(
        UserRepository,
        session=session
    )

    # ===== Command Handlers =====
    login_command_handler = providers.Factory(
        LoginCommandHandler,
        user_repository=user_repository,
        password_hasher=password_hasher,
        jwt_service=jwt_service
    )

    # ===== Query Handlers =====
    get_current_user_query_handler = providers.Factory(
        GetCurrentUserQueryHandler,
        user_repository=user_repository,
        jwt_service=jwt_service
    )
