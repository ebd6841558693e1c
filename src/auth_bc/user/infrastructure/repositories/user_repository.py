from typing import Optional

from sqlalchemy.orm import Session

from core.database import BaseRepository
from src.auth_bc.user.infrastructure.models import UserModel


class UserRepository(BaseRepository[UserModel]):
    def __init__(self, session: Session):
        super().__init__(session, UserModel)

    def get_by_username(self, username: str) -> Optional[UserModel]:
        return self._query().filter(UserModel.username == username).first()
