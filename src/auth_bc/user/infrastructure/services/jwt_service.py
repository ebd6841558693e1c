import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

from core.exceptions import AuthenticationFailedError
from src.auth_bc.user.domain.entities import User

logger = logging.getLogger(__name__)


class JwtService:
    """Issues and verifies HS256 access tokens carrying the user id and role."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", access_token_expire_minutes: int = 60 * 24):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_token_expire_minutes = access_token_expire_minutes

    def create_access_token(self, user: User) -> str:
        expire = datetime.now(timezone.utc) + timedelta(minutes=self.access_token_expire_minutes)
        payload = {"sub": str(user.id), "role": user.role.value, "exp": expire}
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """Return the token claims, raising AuthenticationFailedError if invalid or expired."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"Rejected access token: {e}")
            raise AuthenticationFailedError("Invalid or expired token") from e
        if not payload.get("sub"):
            raise AuthenticationFailedError("Invalid or expired token")
        return payload
