from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class UserRole(str, Enum):
    """ADMIN manages the catalog; AGENCY can only search routes."""
    ADMIN = "ADMIN"
    AGENCY = "AGENCY"


@dataclass(frozen=True)
class User:
    id: UUID
    username: str
    role: UserRole
    is_active: bool = True

    @classmethod
    def from_model(cls, model) -> "User":
        return cls(
            id=model.id,
            username=model.username,
            role=UserRole(model.role),
            is_active=model.is_active,
        )
