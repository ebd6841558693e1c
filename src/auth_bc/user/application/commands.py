import logging
from dataclasses import dataclass

from core.exceptions import AuthenticationFailedError
from src.auth_bc.user.domain.entities import User
from src.auth_bc.user.infrastructure.repositories import UserRepository
from src.auth_bc.user.infrastructure.services import JwtService, PasswordHasher
from src.framework.application import Command, CommandHandler

logger = logging.getLogger(__name__)


@dataclass
class LoginCommand(Command):
    username: str
    password: str


class LoginCommandHandler(CommandHandler[LoginCommand, dict]):
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher, jwt_service: JwtService):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.jwt_service = jwt_service

    def handle(self, command: LoginCommand) -> dict:
        logger.debug(f"Login attempt for username: {command.username}")

        model = self.user_repository.get_by_username(command.username)
        if (
            model is None
            or not model.is_active
            or not self.password_hasher.verify(command.password, model.password_hash)
        ):
            logger.warning(f"Login failed for username: {command.username}")
            raise AuthenticationFailedError("Invalid credentials")

        user = User.from_model(model)
        token = self.jwt_service.create_access_token(user)

        logger.info(f"User logged in successfully: {user.username}")
        return {
            "token": token,
            "token_type": "Bearer",
            "user_id": user.id,
            "username": user.username,
            "role": user.role,
        }
