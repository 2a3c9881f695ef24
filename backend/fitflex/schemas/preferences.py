from typing import Annotated
from pydantic import Field, field_validator
from fitflex.models.user_settings import DEFAULT_WIDGET_ORDER
from fitflex.schemas.common import CamelModel

HexColor = Annotated[str, Field(pattern=r"^#[0-9a-fA-F]{6}$")]

class SettingsRead(CamelModel):
    dashboard_session_limit: int
    dark_mode: bool
    primary_color: str | None = None
    show_recent_workouts: bool
    show_calendar: bool
    show_stats_total_workouts: bool
    show_stats_this_week: bool
    show_stats_total_weight: bool
    show_prs: bool
    dashboard_widget_order: list[str]

class SettingsUpdate(CamelModel):
    """Partial update; only keys present in the request body are applied."""
    dashboard_session_limit: Annotated[int, Field(ge=1, le=20)] | None = None
    dark_mode: bool | None = None
    primary_color: HexColor | None = None
    show_recent_workouts: bool | None = None
    show_calendar: bool | None = None
    show_stats_total_workouts: bool | None = None
    show_stats_this_week: bool | None = None
    show_stats_total_weight: bool | None = None
    show_prs: bool | None = None
    dashboard_widget_order: list[str] | None = None

    @field_validator("dashboard_widget_order")
    @classmethod
    def known_widgets(cls, v: list[str] | None) -> list[str] | None:
        if v is not None and sorted(v) != sorted(DEFAULT_WIDGET_ORDER):
            raise ValueError(f"must be an ordering of {', '.join(DEFAULT_WIDGET_ORDER)}")
        return v
