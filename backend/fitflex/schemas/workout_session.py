from datetime import datetime
from typing import Annotated, Literal, Union
from pydantic import Field, TypeAdapter, field_validator
from fitflex.db import as_utc
from fitflex.schemas.common import CamelModel

NonNegFloat = Annotated[float, Field(ge=0, allow_inf_nan=False)]
NonNegInt = Annotated[int, Field(ge=0)]

# --- incoming records: every value may be missing, normalization decides ---

class StrengthSetIn(CamelModel):
    weight: NonNegFloat | None = None
    reps: NonNegInt | None = None

class StrengthIn(CamelModel):
    sets: list[StrengthSetIn] = []

class CardioIn(CamelModel):
    time: NonNegFloat | None = None
    level: int | None = None
    distance: NonNegFloat | None = None

class EnduranceIn(CamelModel):
    time: NonNegFloat | None = None
    distance: NonNegFloat | None = None
    pace: float | None = None  # ignored, always recomputed

class StretchIn(CamelModel):
    completed: bool | None = None

class CounterIn(CamelModel):
    value: Annotated[float, Field(allow_inf_nan=False)] | None = None

class _RecordIn(CamelModel):
    exercise_id: str
    # ignored; the catalog name is stored
    exercise_name: str | None = None

class StrengthRecordIn(_RecordIn):
    type: Literal["strength"]
    strength: StrengthIn | None = None

class CardioRecordIn(_RecordIn):
    type: Literal["cardio"]
    cardio: CardioIn | None = None

class EnduranceRecordIn(_RecordIn):
    type: Literal["endurance"]
    endurance: EnduranceIn | None = None

class StretchRecordIn(_RecordIn):
    type: Literal["stretch"]
    stretch: StretchIn | None = None

class CounterRecordIn(_RecordIn):
    type: Literal["counter"]
    counter: CounterIn | None = None

ExerciseRecordIn = Annotated[
    Union[StrengthRecordIn, CardioRecordIn, EnduranceRecordIn, StretchRecordIn, CounterRecordIn],
    Field(discriminator="type"),
]

# --- normalized records: exactly one fully populated payload ---

class StrengthSet(CamelModel):
    weight: float
    reps: int

class StrengthData(CamelModel):
    sets: list[StrengthSet] = Field(min_length=1)

class CardioData(CamelModel):
    time: float
    level: int
    distance: float

class EnduranceData(CamelModel):
    time: float
    distance: float
    pace: float

class StretchData(CamelModel):
    completed: bool

class CounterData(CamelModel):
    value: float

class _Record(CamelModel):
    exercise_id: str
    exercise_name: str

class StrengthRecord(_Record):
    type: Literal["strength"] = "strength"
    strength: StrengthData

class CardioRecord(_Record):
    type: Literal["cardio"] = "cardio"
    cardio: CardioData

class EnduranceRecord(_Record):
    type: Literal["endurance"] = "endurance"
    endurance: EnduranceData

class StretchRecord(_Record):
    type: Literal["stretch"] = "stretch"
    stretch: StretchData

class CounterRecord(_Record):
    type: Literal["counter"] = "counter"
    counter: CounterData

ExerciseRecord = Annotated[
    Union[StrengthRecord, CardioRecord, EnduranceRecord, StretchRecord, CounterRecord],
    Field(discriminator="type"),
]

_record_adapter = TypeAdapter(ExerciseRecord)

def record_payload(record) -> dict:
    """The type-specific body of a normalized record, as stored in the JSON column."""
    return getattr(record, record.type).model_dump()

def record_from_row(row) -> ExerciseRecord:
    kind = row.type.value if hasattr(row.type, "value") else row.type
    return _record_adapter.validate_python({
        "exercise_id": row.exercise_id,
        "exercise_name": row.exercise_name,
        "type": kind,
        kind: row.payload,
    })

# --- sessions ---

class SessionCreate(CamelModel):
    template_id: str
    date: datetime
    exercises: list[ExerciseRecordIn]

    @field_validator("date")
    @classmethod
    def naive_dates_are_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

class SessionUpdate(CamelModel):
    exercises: list[ExerciseRecordIn]
    # optimistic concurrency; omit to overwrite unconditionally
    version: int | None = None

class SessionRead(CamelModel):
    id: str
    template_id: str
    template_name: str
    date: datetime
    created_at: datetime
    version: int
    exercises: list[ExerciseRecord]

def session_to_read(sess) -> SessionRead:
    return SessionRead(
        id=sess.id,
        template_id=sess.template_id,
        template_name=sess.template_name,
        date=as_utc(sess.date),
        created_at=as_utc(sess.created_at),
        version=sess.version,
        exercises=[record_from_row(r) for r in sess.exercises],
    )
