# fitflex/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from fitflex.errors import Conflict
from fitflex.models import User, UserSettings
from fitflex.repositories.base import BaseRepository

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get(self, user_id: str) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(self, *, email: str, name: str | None, password_hash: str) -> User:
        user = User(email=email, name=name, password_hash=password_hash)
        user.settings = UserSettings()
        try:
            return self.add_and_refresh(user)
        except IntegrityError:
            self.db.rollback()
            raise Conflict("Email already registered")
