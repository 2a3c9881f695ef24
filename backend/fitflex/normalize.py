# fitflex/normalize.py
"""
Per-type clean-up of exercise records before they are stored.

The same rules run when a workout is created and when it is edited:

  strength   keep sets that have a weight or reps, fill the gap with 0;
             no sets left -> record dropped
  cardio     all of time/level/distance missing -> dropped,
             otherwise time=0, level=1, distance=0 defaults
  endurance  time and distance missing -> dropped, otherwise 0 defaults
             and pace recomputed as round2(time / distance)
  stretch    kept only when completed is True
  counter    kept only when a value is present

A request whose records are all dropped is rejected.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from fitflex.errors import ValidationFailed
from fitflex.schemas.workout_session import (
    CardioData,
    CardioRecord,
    CounterData,
    CounterRecord,
    EnduranceData,
    EnduranceRecord,
    ExerciseRecord,
    ExerciseRecordIn,
    StrengthData,
    StrengthRecord,
    StrengthSet,
    StretchData,
    StretchRecord,
)

log = logging.getLogger(__name__)

EMPTY_SESSION_ERROR = "At least one exercise must have values"


def round2(x: float) -> float:
    # half-up, not Python's round-half-even
    return math.floor(x * 100 + 0.5) / 100


def endurance_pace(time: float, distance: float) -> float:
    """Minutes per km; 0 when no distance was covered."""
    if distance > 0:
        return round2(time / distance)
    return 0.0


def _strength(rec) -> Optional[StrengthRecord]:
    sets = rec.strength.sets if rec.strength else []
    kept = [s for s in sets if s.weight is not None or s.reps is not None]
    if not kept:
        return None
    return StrengthRecord(
        exercise_id=rec.exercise_id,
        exercise_name=rec.exercise_name,
        strength=StrengthData(
            sets=[StrengthSet(weight=s.weight or 0, reps=s.reps or 0) for s in kept]
        ),
    )


def _cardio(rec) -> Optional[CardioRecord]:
    c = rec.cardio
    if c is None or (c.time is None and c.level is None and c.distance is None):
        return None
    return CardioRecord(
        exercise_id=rec.exercise_id,
        exercise_name=rec.exercise_name,
        cardio=CardioData(
            time=c.time if c.time is not None else 0,
            level=c.level if c.level is not None else 1,
            distance=c.distance if c.distance is not None else 0,
        ),
    )


def _endurance(rec) -> Optional[EnduranceRecord]:
    e = rec.endurance
    if e is None or (e.time is None and e.distance is None):
        return None
    time = e.time if e.time is not None else 0
    distance = e.distance if e.distance is not None else 0
    return EnduranceRecord(
        exercise_id=rec.exercise_id,
        exercise_name=rec.exercise_name,
        endurance=EnduranceData(time=time, distance=distance, pace=endurance_pace(time, distance)),
    )


def _stretch(rec) -> Optional[StretchRecord]:
    if rec.stretch is None or rec.stretch.completed is not True:
        return None
    return StretchRecord(
        exercise_id=rec.exercise_id,
        exercise_name=rec.exercise_name,
        stretch=StretchData(completed=True),
    )


def _counter(rec) -> Optional[CounterRecord]:
    if rec.counter is None or rec.counter.value is None:
        return None
    return CounterRecord(
        exercise_id=rec.exercise_id,
        exercise_name=rec.exercise_name,
        counter=CounterData(value=float(rec.counter.value)),
    )


_NORMALIZERS = {
    "strength": _strength,
    "cardio": _cardio,
    "endurance": _endurance,
    "stretch": _stretch,
    "counter": _counter,
}


def normalize_record(record: ExerciseRecordIn) -> Optional[ExerciseRecord]:
    """Normalized copy of one record, or None when it carries no values.

    ``record.exercise_name`` must already be resolved.
    """
    return _NORMALIZERS[record.type](record)


def normalize_exercises(records: Iterable[ExerciseRecordIn]) -> list[ExerciseRecord]:
    records = list(records)
    kept = [n for n in (normalize_record(r) for r in records) if n is not None]
    if len(kept) < len(records):
        log.debug("dropped %d empty exercise record(s)", len(records) - len(kept))
    if not kept:
        raise ValidationFailed(EMPTY_SESSION_ERROR)
    return kept
