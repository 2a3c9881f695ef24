# fitflex/repositories/template_repo.py
from __future__ import annotations
from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from fitflex.db import utcnow
from fitflex.models import TemplateExercise, TemplateStatus, WorkoutSession, WorkoutTemplate
from fitflex.repositories.base import BaseRepository

class TemplateRepository(BaseRepository[WorkoutTemplate]):
    model = WorkoutTemplate

    # READS
    def get(self, template_id: str, user_id: str) -> Optional[WorkoutTemplate]:
        """Active or archived; old sessions must keep resolving their template."""
        return self.get_owned(template_id, user_id)

    def get_active(self, template_id: str, user_id: str) -> Optional[WorkoutTemplate]:
        tpl = self.get_owned(template_id, user_id)
        if tpl is None or tpl.status is not TemplateStatus.active:
            return None
        return tpl

    def list_active(self, user_id: str) -> list[tuple[WorkoutTemplate, Optional[datetime]]]:
        """Active templates, most recently updated first, with their lastUsedAt."""
        last_used = (
            select(WorkoutSession.template_id, func.max(WorkoutSession.date).label("last_used_at"))
            .where(WorkoutSession.user_id == user_id)
            .group_by(WorkoutSession.template_id)
            .subquery()
        )
        stmt = (
            select(WorkoutTemplate, last_used.c.last_used_at)
            .outerjoin(last_used, last_used.c.template_id == WorkoutTemplate.id)
            .where(WorkoutTemplate.user_id == user_id, WorkoutTemplate.status == TemplateStatus.active)
            .options(selectinload(WorkoutTemplate.items))
            .order_by(WorkoutTemplate.updated_at.desc())
        )
        return [(tpl, used) for tpl, used in self.db.execute(stmt).all()]

    def last_used_at(self, template_id: str, user_id: str) -> Optional[datetime]:
        stmt = select(func.max(WorkoutSession.date)).where(
            WorkoutSession.template_id == template_id, WorkoutSession.user_id == user_id
        )
        return self.db.execute(stmt).scalar_one()

    # WRITES
    def create(self, user_id: str, *, name: str, exercise_ids: list[str]) -> WorkoutTemplate:
        tpl = WorkoutTemplate(user_id=user_id, name=name)
        tpl.items = [TemplateExercise(exercise_id=ex_id, position=i) for i, ex_id in enumerate(exercise_ids)]
        return self.add_and_refresh(tpl)

    def update(self, tpl: WorkoutTemplate, *, name: str, exercise_ids: list[str]) -> WorkoutTemplate:
        tpl.name = name
        tpl.updated_at = utcnow()
        # replace the ordered list wholesale
        tpl.items.clear()
        self.db.flush()
        tpl.items.extend(TemplateExercise(exercise_id=ex_id, position=i) for i, ex_id in enumerate(exercise_ids))
        self.db.commit()
        self.db.refresh(tpl)
        return tpl

    def archive(self, tpl: WorkoutTemplate) -> WorkoutTemplate:
        tpl.status = TemplateStatus.archived
        tpl.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(tpl)
        return tpl
