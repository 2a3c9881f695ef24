# fitflex/repositories/measurement_repo.py
from __future__ import annotations

from sqlalchemy import select

from fitflex.models import BodyMeasurement
from fitflex.repositories.base import BaseRepository

class MeasurementRepository(BaseRepository[BodyMeasurement]):
    model = BodyMeasurement

    def list_by_user(self, user_id: str) -> list[BodyMeasurement]:
        # same-day entries stay in a stable, newest-first order
        stmt = select(BodyMeasurement).where(BodyMeasurement.user_id == user_id)\
                                      .order_by(BodyMeasurement.date.desc(), BodyMeasurement.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def create(self, user_id: str, **metrics) -> BodyMeasurement:
        return self.add_and_refresh(BodyMeasurement(user_id=user_id, **metrics))
