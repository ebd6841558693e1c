from dataclasses import dataclass
from uuid import UUID

from core.exceptions import AuthenticationFailedError
from src.auth_bc.user.domain.entities import User
from src.auth_bc.user.infrastructure.repositories import UserRepository
from src.auth_bc.user.infrastructure.services import JwtService
from src.framework.application import Query, QueryHandler


@dataclass
class GetCurrentUserQuery(Query):
    token: str


class GetCurrentUserQueryHandler(QueryHandler[GetCurrentUserQuery, User]):
    """Resolve a bearer token to an active user."""

    def __init__(self, user_repository: UserRepository, jwt_service: JwtService):
        self.user_repository = user_repository
        self.jwt_service = jwt_service

    def handle(self, query: GetCurrentUserQuery) -> User:
        payload = self.jwt_service.decode_token(query.token)
        try:
            user_id = UUID(payload["sub"])
        except ValueError as e:
            raise AuthenticationFailedError("Invalid or expired token") from e

        model = self.user_repository.get_by_id(user_id)
        if model is None or not model.is_active:
            raise AuthenticationFailedError("User not found or inactive")
        return User.from_model(model)
