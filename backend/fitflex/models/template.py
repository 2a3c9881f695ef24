from datetime import datetime
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import DateTime, ForeignKey, Integer, String, Enum as SAEnum
from fitflex.db import Base, new_id, utcnow

class TemplateStatus(str, Enum):
    active = "active"
    archived = "archived"

class WorkoutTemplate(Base):
    __tablename__ = "workout_templates"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    status: Mapped[TemplateStatus] = mapped_column(
        SAEnum(TemplateStatus, name="template_status"),
        nullable=False,
        default=TemplateStatus.active,
        server_default=TemplateStatus.active.value,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    items = relationship(
        "TemplateExercise",
        back_populates="template",
        order_by="TemplateExercise.position",
        cascade="all, delete-orphan",
    )

    @property
    def exercise_ids(self) -> list[str]:
        return [item.exercise_id for item in self.items]

class TemplateExercise(Base):
    __tablename__ = "template_exercises"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    template_id: Mapped[str] = mapped_column(ForeignKey("workout_templates.id", ondelete="CASCADE"), index=True)
    exercise_id: Mapped[str] = mapped_column(ForeignKey("exercises.id"), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    template = relationship("WorkoutTemplate", back_populates="items")
