# fitflex/repositories/exercise_repo.py
from __future__ import annotations
import datetime
from typing import Iterable, Optional

from sqlalchemy import and_, func, or_, select
from sqlalchemy.exc import IntegrityError

from fitflex.errors import Conflict
from fitflex.models import Exercise, ExerciseType
from fitflex.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    @staticmethod
    def _visible_to(user_id: str):
        # own rows plus the shared default partition
        return or_(Exercise.user_id == user_id, and_(Exercise.user_id.is_(None), Exercise.is_default.is_(True)))

    # READS
    def list_visible(
        self,
        user_id: str,
        *,
        type: ExerciseType | None = None,
        search: str | None = None,
    ) -> list[Exercise]:
        stmt = select(Exercise).where(self._visible_to(user_id))
        if type is not None:
            stmt = stmt.where(Exercise.type == type)
        if search:
            stmt = stmt.where(func.lower(Exercise.name).contains(search.lower(), autoescape=True))
        stmt = stmt.order_by(Exercise.is_default.desc(), Exercise.name.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get_visible(self, exercise_id: str, user_id: str) -> Optional[Exercise]:
        stmt = select(Exercise).where(Exercise.id == exercise_id, self._visible_to(user_id))
        return self.db.execute(stmt).scalar_one_or_none()

    def visible_by_id(self, exercise_ids: Iterable[str], user_id: str) -> dict[str, Exercise]:
        ids = set(exercise_ids)
        if not ids:
            return {}
        stmt = select(Exercise).where(Exercise.id.in_(ids), self._visible_to(user_id))
        return {ex.id: ex for ex in self.db.execute(stmt).scalars().all()}

    def count_visible(self, user_id: str) -> int:
        stmt = select(func.count()).select_from(Exercise).where(self._visible_to(user_id))
        return self.db.execute(stmt).scalar_one()

    def name_taken(self, user_id: str, name: str, *, case_insensitive: bool = False) -> bool:
        owner = or_(Exercise.user_id == user_id, Exercise.user_id.is_(None))
        if case_insensitive:
            match = func.lower(Exercise.name) == name.lower()
        else:
            match = Exercise.name == name
        stmt = select(Exercise.id).where(owner, match).limit(1)
        return self.db.execute(stmt).first() is not None

    # WRITES
    def create(
        self,
        user_id: str,
        *,
        name: str,
        type: ExerciseType,
        goal: float | None = None,
        goal_due_date: datetime.date | None = None,
    ) -> Exercise:
        ex = Exercise(user_id=user_id, name=name, type=type, goal=goal, goal_due_date=goal_due_date, is_default=False)
        try:
            return self.add_and_refresh(ex)
        except IntegrityError:
            self.db.rollback()
            raise Conflict("Exercise with this name already exists")

    def update_goal(self, ex: Exercise, *, goal: float, goal_due_date: datetime.date) -> Exercise:
        ex.goal = goal
        ex.goal_due_date = goal_due_date
        self.db.commit()
        self.db.refresh(ex)
        return ex
