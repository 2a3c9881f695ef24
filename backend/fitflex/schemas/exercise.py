import datetime
import math
from typing import Annotated
from pydantic import Field, field_validator, model_validator
from fitflex.models.exercise import ExerciseType
from fitflex.schemas.common import CamelModel

ExerciseName = Annotated[str, Field(max_length=120)]

def clean_name(v: str) -> str:
    v2 = v.strip()
    if len(v2) < 2:
        raise ValueError("name must be at least 2 characters long")
    return v2

class ExerciseCreate(CamelModel):
    name: ExerciseName
    type: ExerciseType
    goal: float | None = None
    goal_due_date: datetime.date | None = None

    @field_validator("name")
    @classmethod
    def name_min_length(cls, v: str) -> str:
        return clean_name(v)

    @model_validator(mode="after")
    def goal_only_for_counters(self):
        if self.type is ExerciseType.counter:
            if self.goal is None or not math.isfinite(self.goal) or self.goal <= 0:
                raise ValueError("counter exercises need a goal greater than 0")
            if self.goal_due_date is None:
                raise ValueError("counter exercises need a goal due date")
        else:
            # silently discarded for every other kind
            self.goal = None
            self.goal_due_date = None
        return self

class ExerciseGoalUpdate(CamelModel):
    goal: Annotated[float, Field(gt=0, allow_inf_nan=False)]
    goal_due_date: datetime.date

class ExerciseRead(CamelModel):
    id: str
    user_id: str | None = None
    name: str
    type: ExerciseType
    goal: float | None = None
    goal_due_date: datetime.date | None = None
    is_default: bool
    created_at: datetime.datetime
