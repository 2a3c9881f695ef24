from datetime import date, datetime
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Boolean, Date, DateTime, Float, ForeignKey, String, UniqueConstraint, Enum as SAEnum
from fitflex.db import Base, new_id, utcnow

class ExerciseType(str, Enum):
    strength = "strength"
    cardio = "cardio"
    endurance = "endurance"
    stretch = "stretch"
    counter = "counter"

# shared by exercises and exercise_sessions so Postgres only gets one enum type
exercise_type_enum = SAEnum(ExerciseType, name="exercise_type")

class Exercise(Base):
    __tablename__ = "exercises"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_exercises_user_name"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    # NULL owner = shared default, readable by everyone
    user_id: Mapped[str | None] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    type: Mapped[ExerciseType] = mapped_column(exercise_type_enum, nullable=False, index=True)
    goal: Mapped[float | None] = mapped_column(Float, nullable=True)
    goal_due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
