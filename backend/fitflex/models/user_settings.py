from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String
from fitflex.db import Base, new_id

DEFAULT_WIDGET_ORDER = ["stats", "prs", "calendar", "recent"]

class UserSettings(Base):
    __tablename__ = "user_settings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), unique=True)
    dashboard_session_limit: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    dark_mode: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    primary_color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    show_recent_workouts: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_calendar: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_stats_total_workouts: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_stats_this_week: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_stats_total_weight: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_prs: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    dashboard_widget_order: Mapped[list[str]] = mapped_column(
        JSON, nullable=False, default=lambda: list(DEFAULT_WIDGET_ORDER)
    )

    user = relationship("User", back_populates="settings")
