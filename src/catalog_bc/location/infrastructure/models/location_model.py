import uuid

from sqlalchemy import Column, String, Integer, Boolean, DateTime, Uuid, Index, func
from core.base import Base


class LocationModel(Base):
    """SQLAlchemy model for a catalog Location.

    Rows are soft-deleted (``deleted``) and versioned for optimistic locking.
    Codes are unique among non-deleted rows, enforced by the application layer.
    """

    __tablename__ = "locations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    country = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    code = Column(String(10), nullable=False)
    display_order = Column(Integer, nullable=True)

    deleted = Column(Boolean, nullable=False, default=False)
    version = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        Index("ix_locations_code", "code"),
        Index("ix_locations_deleted_display_order", "deleted", "display_order"),
    )

    def __repr__(self):
        return f"<Location {self.code}>"
