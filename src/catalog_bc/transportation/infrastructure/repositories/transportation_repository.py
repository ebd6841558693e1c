from typing import Collection, List, Optional
from uuid import UUID

from sqlalchemy import literal, or_
from sqlalchemy.orm import Session

from core.database import BaseRepository
from src.catalog_bc.transportation.domain.entities.transportation import TransportationType
from src.catalog_bc.transportation.infrastructure.models import TransportationModel


class TransportationRepository(BaseRepository[TransportationModel]):
    """Persistence for transportation edges (non-deleted rows only).

    Location relationships are joined-loaded, so every edge returned here
    already carries its origin and destination rows.
    """

    def __init__(self, session: Session):
        super().__init__(session, TransportationModel)

    def get_all_ordered(self) -> List[TransportationModel]:
        return self._query().order_by(TransportationModel.created_at, TransportationModel.id).all()

    def find_active(
        self,
        origin_ids: Collection[UUID],
        destination_ids: Optional[Collection[UUID]],
        types: Optional[Collection[TransportationType]],
        day_of_week: int,
    ) -> List[TransportationModel]:
        """Batch query: any origin in set x any destination in set x type filter x weekday.

        ``destination_ids=None`` means any destination and ``types=None`` any type.
        """
        if not origin_ids or (destination_ids is not None and not destination_ids):
            return []

        query = self._query().filter(TransportationModel.origin_location_id.in_(list(origin_ids)))
        if destination_ids is not None:
            query = query.filter(TransportationModel.destination_location_id.in_(list(destination_ids)))
        if types is not None:
            query = query.filter(TransportationModel.transportation_type.in_([t.value for t in types]))

        # "1,3,5" -> ",1,3,5," so that day 1 never matches 11-style substrings
        padded_days = literal(",") + TransportationModel.operating_days + literal(",")
        query = query.filter(padded_days.like(f"%,{int(day_of_week)},%"))

        return query.all()

    def is_location_referenced(self, location_id: UUID) -> bool:
        """True if any non-deleted transportation starts or ends at the location."""
        query = self._query().filter(
            or_(
                TransportationModel.origin_location_id == location_id,
                TransportationModel.destination_location_id == location_id,
            )
        )
        return self.session.query(query.exists()).scalar()
