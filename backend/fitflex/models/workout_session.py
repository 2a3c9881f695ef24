from datetime import datetime
from typing import Any
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String
from fitflex.db import Base, new_id, utcnow
from fitflex.models.exercise import ExerciseType, exercise_type_enum

class WorkoutSession(Base):
    __tablename__ = "workout_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    template_id: Mapped[str] = mapped_column(ForeignKey("workout_templates.id"), index=True)
    # snapshot taken at creation, never follows later template renames
    template_name: Mapped[str] = mapped_column(String(120), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default="1")

    user = relationship("User", back_populates="sessions")
    exercises = relationship(
        "ExerciseSessionRecord",
        back_populates="session",
        order_by="ExerciseSessionRecord.position",
        cascade="all, delete-orphan",
    )

class ExerciseSessionRecord(Base):
    __tablename__ = "exercise_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    workout_session_id: Mapped[str] = mapped_column(ForeignKey("workout_sessions.id", ondelete="CASCADE"), index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    exercise_id: Mapped[str] = mapped_column(ForeignKey("exercises.id"), index=True)
    exercise_name: Mapped[str] = mapped_column(String(120), nullable=False)
    type: Mapped[ExerciseType] = mapped_column(exercise_type_enum, nullable=False)
    # the per-type body, e.g. {"sets": [...]} for strength
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    session = relationship("WorkoutSession", back_populates="exercises")
