# fitflex/repositories/settings_repo.py
from __future__ import annotations
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from fitflex.models import UserSettings
from fitflex.repositories.base import BaseRepository

class SettingsRepository(BaseRepository[UserSettings]):
    model = UserSettings

    def get_or_create(self, user_id: str) -> UserSettings:
        stmt = select(UserSettings).where(UserSettings.user_id == user_id)
        found = self.db.execute(stmt).scalar_one_or_none()
        if found is not None:
            return found
        try:
            return self.add_and_refresh(UserSettings(user_id=user_id))
        except IntegrityError:
            # created concurrently by another request
            self.db.rollback()
            return self.db.execute(stmt).scalar_one()

    def update(self, user_id: str, changes: dict[str, Any]) -> UserSettings:
        prefs = self.get_or_create(user_id)
        for field, value in changes.items():
            setattr(prefs, field, value)
        self.db.commit()
        self.db.refresh(prefs)
        return prefs
