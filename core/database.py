from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Type, Optional, List, Generator, Any
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy.pool import StaticPool

from core.config import settings
from core.base import Base
from core.exceptions import ConcurrentModificationError

logger = logging.getLogger(__name__)


def _build_engine(url: str):
    """Create the SQLAlchemy engine.

    SQLite (tests, local demos) shares one connection across threads, since
    FastAPI runs sync endpoints on a thread pool.
    """
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    return create_engine(
        url,
        pool_size=20,
        max_overflow=30,
        pool_timeout=30,
        pool_recycle=3600,
        pool_pre_ping=True,
        echo=False
    )


# Database engine configuration
engine = _build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Generic type for entities
T = TypeVar('T')


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def create_all_tables() -> None:
    """Create every registered table. Used by the seed script and tests; production uses Alembic."""
    import models  # noqa: F401  (registers all models on Base.metadata)
    Base.metadata.create_all(bind=engine)


class RepositoryInterface(ABC, Generic[T]):
    """Generic interface for repositories."""

    @abstractmethod
    def create(self, entity: T) -> T:
        """Create a new entity."""
        pass

    @abstractmethod
    def get_by_id(self, entity_id: Any) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    def get_all(self) -> List[T]:
        """Get all entities."""
        pass

    @abstractmethod
    def update(self, entity_id: Any, entity_data: dict[str, Any]) -> Optional[T]:
        """Update an entity."""
        pass

    @abstractmethod
    def delete(self, entity_id: Any) -> bool:
        """Delete an entity."""
        pass


class BaseRepository(RepositoryInterface[T]):
    """Base repository implementation.

    Models carrying a ``deleted`` column are soft-deleted and hidden from
    every read. Stale optimistic-lock versions surface as
    ConcurrentModificationError.
    """

    def __init__(self, session: Session, model: Type[T]):
        self.session = session
        self.model = model

    @property
    def _soft_delete(self) -> bool:
        return hasattr(self.model, "deleted")

    def _query(self):
        query = self.session.query(self.model)
        if self._soft_delete:
            query = query.filter(self.model.deleted.is_(False))  # type: ignore
        return query

    def _commit(self) -> None:
        try:
            self.session.commit()
        except StaleDataError as e:
            self.session.rollback()
            logger.warning(f"Optimistic lock failure on {self.model.__name__}: {e}")
            raise ConcurrentModificationError(self.model.__name__) from e

    def create(self, entity: T) -> T:
        self.session.add(entity)
        self._commit()
        self.session.refresh(entity)
        return entity

    def get_by_id(self, entity_id: Any) -> Optional[T]:
        return self._query().filter(
            self.model.id == entity_id  # type: ignore
        ).first()

    def get_all(self) -> List[T]:
        return self._query().all()

    def update(self, entity_id: Any, entity_data: dict[str, Any]) -> Optional[T]:
        entity = self.get_by_id(entity_id)
        if entity:
            for key, value in entity_data.items():
                setattr(entity, key, value)
            self._commit()
            self.session.refresh(entity)
            return entity
        return None

    def delete(self, entity_id: Any) -> bool:
        entity = self.get_by_id(entity_id)
        if not entity:
            return False
        if self._soft_delete:
            entity.deleted = True  # type: ignore
        else:
            self.session.delete(entity)
        self._commit()
        return True
