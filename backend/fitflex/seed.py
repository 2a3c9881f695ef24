# fitflex/seed.py
"""
Shared default exercises (no owner, readable by every user).

Idempotent: inserts only while the shared partition is empty. On Postgres
a transaction-scoped advisory lock serialises instances starting at once.

Run: cd backend && python -m fitflex.seed
"""
import logging

from sqlalchemy import func, select, text
from sqlalchemy.orm import Session

from fitflex.models import Exercise, ExerciseType

log = logging.getLogger(__name__)

# arbitrary, only has to be stable across instances
SEED_LOCK_KEY = 15826718

DEFAULT_EXERCISES = [
    ("Bench Press", ExerciseType.strength),
    ("Squat", ExerciseType.strength),
    ("Deadlift", ExerciseType.strength),
    ("Running", ExerciseType.cardio),
    ("Cycling", ExerciseType.cardio),
    ("Swimming", ExerciseType.endurance),
    ("Yoga", ExerciseType.stretch),
]

def seed_default_exercises(db: Session) -> int:
    """Insert the defaults if none exist yet; returns how many rows were added."""
    if db.get_bind().dialect.name == "postgresql":
        db.execute(text("SELECT pg_advisory_xact_lock(:key)"), {"key": SEED_LOCK_KEY})

    existing = db.execute(
        select(func.count()).select_from(Exercise).where(Exercise.user_id.is_(None))
    ).scalar_one()
    if existing:
        db.rollback()  # releases the advisory lock
        return 0

    db.add_all(Exercise(user_id=None, name=name, type=kind, is_default=True) for name, kind in DEFAULT_EXERCISES)
    db.commit()
    log.info("seeded %d default exercises", len(DEFAULT_EXERCISES))
    return len(DEFAULT_EXERCISES)

if __name__ == "__main__":
    from fitflex.db import SessionLocal

    logging.basicConfig(level=logging.INFO)
    with SessionLocal() as db:
        seed_default_exercises(db)
