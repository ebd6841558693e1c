from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from core.database import BaseRepository
from src.catalog_bc.location.infrastructure.models import LocationModel


class LocationRepository(BaseRepository[LocationModel]):
    """Persistence for catalog locations (non-deleted rows only)."""

    def __init__(self, session: Session):
        super().__init__(session, LocationModel)

    def get_all_ordered(self) -> List[LocationModel]:
        """All locations sorted for display: display_order first (unset last), then name."""
        return (
            self._query()
            .order_by(LocationModel.display_order.nulls_last(), LocationModel.name)
            .all()
        )

    def get_by_code(self, code: str) -> Optional[LocationModel]:
        return (
            self._query()
            .filter(func.upper(LocationModel.code) == code.strip().upper())
            .first()
        )

    def exists_by_code(self, code: str, exclude_id: Optional[UUID] = None) -> bool:
        query = self._query().filter(func.upper(LocationModel.code) == code.strip().upper())
        if exclude_id is not None:
            query = query.filter(LocationModel.id != exclude_id)
        return self.session.query(query.exists()).scalar()
