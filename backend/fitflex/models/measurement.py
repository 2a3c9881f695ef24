import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Date, DateTime, Float, ForeignKey, String
from fitflex.db import Base, new_id, utcnow

METRIC_FIELDS = ("weight", "chest", "waist", "hips", "upper_arm", "forearm", "thigh", "calf")

class BodyMeasurement(Base):
    __tablename__ = "body_measurements"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)      # kg
    chest: Mapped[float | None] = mapped_column(Float, nullable=True)       # cm from here on
    waist: Mapped[float | None] = mapped_column(Float, nullable=True)
    hips: Mapped[float | None] = mapped_column(Float, nullable=True)
    upper_arm: Mapped[float | None] = mapped_column(Float, nullable=True)
    forearm: Mapped[float | None] = mapped_column(Float, nullable=True)
    thigh: Mapped[float | None] = mapped_column(Float, nullable=True)
    calf: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
