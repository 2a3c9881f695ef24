from datetime import datetime
from pydantic import Field, field_validator
from fitflex.models.template import TemplateStatus
from fitflex.schemas.common import CamelModel
from fitflex.schemas.exercise import ExerciseName, clean_name

class TemplateWrite(CamelModel):
    name: ExerciseName
    # order matters; duplicates are allowed
    exercise_ids: list[str] = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def name_min_length(cls, v: str) -> str:
        return clean_name(v)

class TemplateRead(CamelModel):
    id: str
    name: str
    status: TemplateStatus
    exercise_ids: list[str]
    created_at: datetime
    updated_at: datetime
    last_used_at: datetime | None = None
