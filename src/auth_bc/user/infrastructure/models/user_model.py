import uuid

from sqlalchemy import Column, String, Boolean, DateTime, Uuid, func
from core.base import Base


class UserModel(Base):
    """SQLAlchemy model for API users (bcrypt password hash, single role)."""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False)  # ADMIN, AGENCY
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"
