from uuid import UUID

from pydantic import Field

from src.auth_bc.user.domain.entities import UserRole

from .base import CamelModel


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(CamelModel):
    token: str
    token_type: str = "Bearer"
    user_id: UUID
    username: str
    role: UserRole
