from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from fitflex.db import as_utc, get_db
from fitflex.deps.auth import get_current_user
from fitflex.errors import ValidationFailed
from fitflex.models import User, WorkoutTemplate
from fitflex.repositories.exercise_repo import ExerciseRepository
from fitflex.repositories.template_repo import TemplateRepository
from fitflex.schemas.common import ApiResponse
from fitflex.schemas.template import TemplateRead, TemplateWrite

router = APIRouter(prefix="/templates", tags=["templates"])

def _read(tpl: WorkoutTemplate, last_used_at) -> TemplateRead:
    return TemplateRead(
        id=tpl.id,
        name=tpl.name,
        status=tpl.status,
        exercise_ids=tpl.exercise_ids,
        created_at=as_utc(tpl.created_at),
        updated_at=as_utc(tpl.updated_at),
        last_used_at=as_utc(last_used_at) if last_used_at else None,
    )

def _check_exercises(db: Session, user_id: str, exercise_ids: list[str]) -> None:
    known = ExerciseRepository(db).visible_by_id(exercise_ids, user_id)
    unknown = [ex_id for ex_id in exercise_ids if ex_id not in known]
    if unknown:
        raise ValidationFailed(f"Unknown exercise id(s): {', '.join(dict.fromkeys(unknown))}")

@router.get("", response_model=ApiResponse[list[TemplateRead]])
def list_templates(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    rows = TemplateRepository(db).list_active(current.id)
    return ApiResponse(data=[_read(tpl, used) for tpl, used in rows])

@router.get("/{template_id}", response_model=ApiResponse[TemplateRead])
def get_template(template_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    repo = TemplateRepository(db)
    tpl = repo.get(template_id, current.id)
    if not tpl:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    return ApiResponse(data=_read(tpl, repo.last_used_at(tpl.id, current.id)))

@router.post("", response_model=ApiResponse[TemplateRead], status_code=status.HTTP_201_CREATED)
def create_template(payload: TemplateWrite, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    _check_exercises(db, current.id, payload.exercise_ids)
    tpl = TemplateRepository(db).create(current.id, name=payload.name, exercise_ids=payload.exercise_ids)
    return ApiResponse(data=_read(tpl, None))

@router.put("/{template_id}", response_model=ApiResponse[TemplateRead])
def update_template(
    template_id: str,
    payload: TemplateWrite,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    repo = TemplateRepository(db)
    tpl = repo.get_active(template_id, current.id)
    if not tpl:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    _check_exercises(db, current.id, payload.exercise_ids)
    tpl = repo.update(tpl, name=payload.name, exercise_ids=payload.exercise_ids)
    return ApiResponse(data=_read(tpl, repo.last_used_at(tpl.id, current.id)))

@router.delete("/{template_id}", response_model=ApiResponse[None])
def archive_template(template_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    repo = TemplateRepository(db)
    tpl = repo.get_active(template_id, current.id)
    if not tpl:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    repo.archive(tpl)
    return ApiResponse(data=None)
