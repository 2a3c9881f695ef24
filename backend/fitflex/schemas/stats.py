import datetime
from fitflex.schemas.common import CamelModel

class DashboardStats(CamelModel):
    total_workouts: int
    this_week_workouts: int
    total_weight_kg: float
    total_exercises: int

class PersonalRecord(CamelModel):
    exercise_id: str
    exercise_name: str
    max_weight: float

class CounterProgress(CamelModel):
    exercise_id: str
    exercise_name: str
    total: float
    goal: float | None = None
    goal_due_date: datetime.date | None = None
    progress: float | None = None
    reached: bool = False

class CalendarEntry(CamelModel):
    id: str
    template_name: str

class CalendarDay(CamelModel):
    date: datetime.date
    sessions: list[CalendarEntry]
