import uuid

from sqlalchemy import Column, String, Integer, Boolean, DateTime, Uuid, ForeignKey, Index, func
from sqlalchemy.orm import relationship
from core.base import Base


class TransportationModel(Base):
    """SQLAlchemy model for a directed transportation edge between two locations.

    operating_days is stored as a comma separated string of weekday numbers
    ("1,3,5,7" = Monday, Wednesday, Friday, Sunday).
    """

    __tablename__ = "transportations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    origin_location_id = Column(Uuid, ForeignKey("locations.id"), nullable=False)
    destination_location_id = Column(Uuid, ForeignKey("locations.id"), nullable=False)
    transportation_type = Column(String(20), nullable=False)  # FLIGHT, BUS, SUBWAY, UBER
    operating_days = Column(String(50), nullable=False)

    deleted = Column(Boolean, nullable=False, default=False)
    version = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())

    # Always joined: route search must never fetch a location per edge
    origin_location = relationship("LocationModel", foreign_keys=[origin_location_id], lazy="joined")
    destination_location = relationship("LocationModel", foreign_keys=[destination_location_id], lazy="joined")

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        Index("ix_transportations_origin_dest", "origin_location_id", "destination_location_id"),
        Index("ix_transportations_type_deleted", "transportation_type", "deleted"),
    )

    def __repr__(self):
        return f"<Transportation {self.transportation_type} {self.origin_location_id} → {self.destination_location_id}>"
