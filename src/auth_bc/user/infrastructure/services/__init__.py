from .jwt_service import JwtService
from .password_hasher import PasswordHasher

__all__ = ["JwtService", "PasswordHasher"]
