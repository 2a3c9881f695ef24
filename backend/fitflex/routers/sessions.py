from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from fitflex.db import get_db
from fitflex.deps.auth import get_current_user
from fitflex.errors import ValidationFailed
from fitflex.models import ExerciseType, User
from fitflex.normalize import normalize_exercises
from fitflex.repositories.exercise_repo import ExerciseRepository
from fitflex.repositories.template_repo import TemplateRepository
from fitflex.repositories.workout_session_repo import WorkoutSessionRepository
from fitflex.schemas.common import ApiResponse
from fitflex.schemas.stats import CalendarDay, CounterProgress, DashboardStats, PersonalRecord
from fitflex.schemas.workout_session import SessionCreate, SessionRead, SessionUpdate, session_to_read
from fitflex import stats

router = APIRouter(prefix="/sessions", tags=["sessions"])

def _resolve_records(db: Session, user_id: str, records: list, allowed_ids: set[str]) -> list:
    """Reject exercises outside the template or recorded under the wrong kind.

    Name and kind are snapshotted from the catalog; a client-sent name is ignored.
    """
    outside = [r.exercise_id for r in records if r.exercise_id not in allowed_ids]
    if outside:
        raise ValidationFailed(f"Exercise not part of this workout's template: {', '.join(dict.fromkeys(outside))}")
    catalog = ExerciseRepository(db).visible_by_id((r.exercise_id for r in records), user_id)
    resolved = []
    for r in records:
        ex = catalog.get(r.exercise_id)
        if ex is None:
            raise ValidationFailed(f"Unknown exercise id: {r.exercise_id}")
        if r.type != ex.type.value:
            raise ValidationFailed(f"{ex.name} is a {ex.type.value} exercise, not {r.type}")
        resolved.append(r.model_copy(update={"exercise_name": ex.name}))
    return resolved

@router.get("", response_model=ApiResponse[list[SessionRead]])
def list_my_sessions(
    response: Response,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    template_id: str | None = Query(None, alias="templateId"),
):
    page = WorkoutSessionRepository(db).list_by_user(current.id, limit=limit, offset=offset, template_id=template_id)
    response.headers["X-Total-Count"] = str(page.total)
    return ApiResponse(data=[session_to_read(s) for s in page.items])

@router.get("/stats", response_model=ApiResponse[DashboardStats])
def dashboard_stats(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    repo = WorkoutSessionRepository(db)
    strength = repo.records_for_user(current.id, type=ExerciseType.strength)
    return ApiResponse(data=DashboardStats(
        total_workouts=repo.count(current.id),
        this_week_workouts=stats.count_this_week(repo.dates(current.id), datetime.now(timezone.utc)),
        total_weight_kg=stats.total_lifted_weight(strength),
        total_exercises=ExerciseRepository(db).count_visible(current.id),
    ))

@router.get("/prs", response_model=ApiResponse[list[PersonalRecord]])
def personal_records(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    strength = WorkoutSessionRepository(db).records_for_user(current.id, type=ExerciseType.strength)
    return ApiResponse(data=[PersonalRecord(**pr) for pr in stats.personal_records(strength)])

@router.get("/counters", response_model=ApiResponse[list[CounterProgress]])
def counter_progress(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    exercises = ExerciseRepository(db).list_visible(current.id, type=ExerciseType.counter)
    totals = stats.counter_totals(
        WorkoutSessionRepository(db).records_for_user(current.id, type=ExerciseType.counter)
    )
    return ApiResponse(data=[
        CounterProgress(**stats.counter_progress(ex, totals.get(ex.id, 0.0))) for ex in exercises
    ])

@router.get("/calendar", response_model=ApiResponse[list[CalendarDay]])
def calendar(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    year: int | None = Query(None, ge=1970, le=9999),
    month: int | None = Query(None, ge=1, le=12),
):
    today = datetime.now(timezone.utc)
    year = year or today.year
    month = month or today.month
    sessions = WorkoutSessionRepository(db).in_month(current.id, year, month)
    return ApiResponse(data=[CalendarDay(**day) for day in stats.calendar_days(sessions, year, month)])

@router.get("/{session_id}", response_model=ApiResponse[SessionRead])
def get_session(session_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    sess = WorkoutSessionRepository(db).get(session_id, current.id)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return ApiResponse(data=session_to_read(sess))

@router.post("", response_model=ApiResponse[SessionRead], status_code=status.HTTP_201_CREATED)
def create_session(payload: SessionCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    tpl = TemplateRepository(db).get_active(payload.template_id, current.id)
    if not tpl:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    records = _resolve_records(db, current.id, payload.exercises, set(tpl.exercise_ids))
    # nothing is written unless at least one record survives
    records = normalize_exercises(records)
    sess = WorkoutSessionRepository(db).create(current.id, template=tpl, date=payload.date, records=records)
    return ApiResponse(data=session_to_read(sess))

@router.put("/{session_id}", response_model=ApiResponse[SessionRead])
def update_session(
    session_id: str,
    payload: SessionUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    repo = WorkoutSessionRepository(db)
    sess = repo.get(session_id, current.id)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    # template may be archived or edited since; already recorded exercises stay editable
    tpl = TemplateRepository(db).get(sess.template_id, current.id)
    allowed = set(tpl.exercise_ids if tpl else []) | {r.exercise_id for r in sess.exercises}
    records = normalize_exercises(_resolve_records(db, current.id, payload.exercises, allowed))
    sess = repo.replace_exercises(sess, records, expected_version=payload.version)
    return ApiResponse(data=session_to_read(sess))

@router.delete("/{session_id}", response_model=ApiResponse[None])
def delete_session(session_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    repo = WorkoutSessionRepository(db)
    sess = repo.get(session_id, current.id)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    repo.delete(sess)
    return ApiResponse(data=None)
