# fitflex/repositories/workout_session_repo.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import selectinload

from fitflex.errors import Conflict, NotFound
from fitflex.models import ExerciseSessionRecord, ExerciseType, WorkoutSession, WorkoutTemplate
from fitflex.repositories.base import BaseRepository, Page
from fitflex.schemas.workout_session import record_payload

STALE_SESSION = "Session was modified by another request; reload and retry"

class WorkoutSessionRepository(BaseRepository[WorkoutSession]):
    model = WorkoutSession

    # READS
    def get(self, session_id: str, user_id: str) -> Optional[WorkoutSession]:
        return self.get_owned(session_id, user_id)

    def list_by_user(
        self,
        user_id: str,
        *,
        limit: int = 10,
        offset: int = 0,
        template_id: str | None = None,
    ) -> Page[WorkoutSession]:
        stmt = select(WorkoutSession).where(WorkoutSession.user_id == user_id)
        if template_id:
            stmt = stmt.where(WorkoutSession.template_id == template_id)
        stmt = stmt.options(selectinload(WorkoutSession.exercises))\
                   .order_by(WorkoutSession.date.desc(), WorkoutSession.created_at.desc())
        return self.page_from_stmt(stmt, limit=limit, offset=offset)

    def all_for_user(self, user_id: str) -> list[WorkoutSession]:
        stmt = select(WorkoutSession).where(WorkoutSession.user_id == user_id)\
                                     .options(selectinload(WorkoutSession.exercises))\
                                     .order_by(WorkoutSession.date.desc(), WorkoutSession.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def count(self, user_id: str) -> int:
        stmt = select(func.count()).select_from(WorkoutSession).where(WorkoutSession.user_id == user_id)
        return self.db.execute(stmt).scalar_one()

    def dates(self, user_id: str) -> list[datetime]:
        stmt = select(WorkoutSession.date).where(WorkoutSession.user_id == user_id)
        return list(self.db.execute(stmt).scalars().all())

    def in_month(self, user_id: str, year: int, month: int) -> list[WorkoutSession]:
        start = datetime(year, month, 1, tzinfo=timezone.utc)
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc) if month == 12 \
            else datetime(year, month + 1, 1, tzinfo=timezone.utc)
        stmt = select(WorkoutSession).where(
            WorkoutSession.user_id == user_id,
            WorkoutSession.date >= start,
            WorkoutSession.date < end,
        ).order_by(WorkoutSession.date.asc(), WorkoutSession.created_at.asc())
        return list(self.db.execute(stmt).scalars().all())

    def records_for_user(self, user_id: str, *, type: ExerciseType | None = None) -> list[ExerciseSessionRecord]:
        """Exercise records of every session, oldest session first."""
        stmt = select(ExerciseSessionRecord)\
            .join(WorkoutSession, ExerciseSessionRecord.workout_session_id == WorkoutSession.id)\
            .where(ExerciseSessionRecord.user_id == user_id)
        if type is not None:
            stmt = stmt.where(ExerciseSessionRecord.type == type)
        stmt = stmt.order_by(WorkoutSession.date.asc(), ExerciseSessionRecord.position.asc())
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    @staticmethod
    def _rows(user_id: str, records: Iterable, session_id: str | None = None) -> list[ExerciseSessionRecord]:
        return [
            ExerciseSessionRecord(
                user_id=user_id,
                workout_session_id=session_id,
                position=i,
                exercise_id=r.exercise_id,
                exercise_name=r.exercise_name,
                type=ExerciseType(r.type),
                payload=record_payload(r),
            )
            for i, r in enumerate(records)
        ]

    def create(self, user_id: str, *, template: WorkoutTemplate, date: datetime, records: list) -> WorkoutSession:
        sess = WorkoutSession(
            user_id=user_id,
            template_id=template.id,
            template_name=template.name,
            date=date,
        )
        sess.exercises = self._rows(user_id, records)
        return self.add_and_refresh(sess)

    def replace_exercises(
        self,
        sess: WorkoutSession,
        records: list,
        *,
        expected_version: int | None = None,
    ) -> WorkoutSession:
        """Delete-all-then-reinsert of the session's records, guarded by ``version``."""
        current = sess.version
        if expected_version is not None and expected_version != current:
            raise Conflict(STALE_SESSION)

        bumped = self.db.execute(
            update(WorkoutSession)
            .where(WorkoutSession.id == sess.id, WorkoutSession.version == current)
            .values(version=current + 1)
            .execution_options(synchronize_session=False)
        )
        if bumped.rowcount == 0:
            session_id = sess.id
            self.db.rollback()
            if self.db.get(WorkoutSession, session_id) is None:
                raise NotFound("Session not found")
            raise Conflict(STALE_SESSION)

        self.db.execute(
            delete(ExerciseSessionRecord)
            .where(ExerciseSessionRecord.workout_session_id == sess.id)
            .execution_options(synchronize_session=False)
        )
        self.db.add_all(self._rows(sess.user_id, records, session_id=sess.id))
        self.db.commit()
        self.db.refresh(sess)
        return sess
