import datetime
import math
from typing import Annotated
from pydantic import Field, model_validator
from fitflex.models.measurement import METRIC_FIELDS
from fitflex.schemas.common import CamelModel

Metric = Annotated[float, Field(ge=0)]

class MeasurementCreate(CamelModel):
    date: datetime.date
    weight: Metric | None = None
    chest: Metric | None = None
    waist: Metric | None = None
    hips: Metric | None = None
    upper_arm: Metric | None = None
    forearm: Metric | None = None
    thigh: Metric | None = None
    calf: Metric | None = None

    @model_validator(mode="after")
    def at_least_one_metric(self):
        values = [getattr(self, f) for f in METRIC_FIELDS]
        if not any(v is not None and not math.isnan(v) for v in values):
            raise ValueError("At least one measurement must be provided")
        return self

class MeasurementRead(CamelModel):
    id: str
    date: datetime.date
    weight: float | None = None
    chest: float | None = None
    waist: float | None = None
    hips: float | None = None
    upper_arm: float | None = None
    forearm: float | None = None
    thigh: float | None = None
    calf: float | None = None
    created_at: datetime.datetime
