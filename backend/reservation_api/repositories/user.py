"""
User Repository - Data access for API users.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from reservation_api.models import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    @property
    def model(self) -> type[User]:
        return User

    def get_by_username(self, username: str) -> User | None:
        return self._db.scalar(select(User).where(User.username == username))

    def username_exists(self, username: str) -> bool:
        return self.get_by_username(username) is not None


def get_user_repository(db: Session) -> UserRepository:
    return UserRepository(db)
