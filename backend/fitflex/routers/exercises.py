from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from fitflex.db import get_db
from fitflex.deps.auth import get_current_user
from fitflex.errors import Conflict, ValidationFailed
from fitflex.models import ExerciseType, User
from fitflex.repositories.exercise_repo import ExerciseRepository
from fitflex.schemas.common import ApiResponse
from fitflex.schemas.exercise import ExerciseCreate, ExerciseGoalUpdate, ExerciseRead
from fitflex.settings import get_settings

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=ApiResponse[list[ExerciseRead]])
def list_exercises(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    type: ExerciseType | None = Query(None),
    search: str | None = Query(None, max_length=120),
):
    items = ExerciseRepository(db).list_visible(current.id, type=type, search=search)
    return ApiResponse(data=[ExerciseRead.model_validate(ex) for ex in items])

@router.post("", response_model=ApiResponse[ExerciseRead], status_code=status.HTTP_201_CREATED)
def create_exercise(
    payload: ExerciseCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    repo = ExerciseRepository(db)
    if repo.name_taken(current.id, payload.name,
                       case_insensitive=get_settings().EXERCISE_NAME_CASE_INSENSITIVE):
        raise Conflict("Exercise with this name already exists")
    ex = repo.create(
        current.id,
        name=payload.name,
        type=payload.type,
        goal=payload.goal,
        goal_due_date=payload.goal_due_date,
    )
    return ApiResponse(data=ExerciseRead.model_validate(ex))

@router.patch("/{exercise_id}/goal", response_model=ApiResponse[ExerciseRead])
def update_goal(
    exercise_id: str,
    payload: ExerciseGoalUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    repo = ExerciseRepository(db)
    # shared defaults have no owner, so they never match here
    ex = repo.get_owned(exercise_id, current.id)
    if not ex:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    if ex.type is not ExerciseType.counter:
        raise ValidationFailed("Only counter exercises have a goal")
    ex = repo.update_goal(ex, goal=payload.goal, goal_due_date=payload.goal_due_date)
    return ApiResponse(data=ExerciseRead.model_validate(ex))
