from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from fitflex.db import get_db
from fitflex.deps.auth import get_current_user
from fitflex.models import User
from fitflex.repositories.measurement_repo import MeasurementRepository
from fitflex.schemas.common import ApiResponse
from fitflex.schemas.measurement import MeasurementCreate, MeasurementRead

router = APIRouter(prefix="/measurements", tags=["measurements"])

@router.get("", response_model=ApiResponse[list[MeasurementRead]])
def list_measurements(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    items = MeasurementRepository(db).list_by_user(current.id)
    return ApiResponse(data=[MeasurementRead.model_validate(m) for m in items])

@router.post("", response_model=ApiResponse[MeasurementRead], status_code=status.HTTP_201_CREATED)
def create_measurement(
    payload: MeasurementCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    m = MeasurementRepository(db).create(current.id, **payload.model_dump())
    return ApiResponse(data=MeasurementRead.model_validate(m))

# no update on purpose: a wrong entry is deleted and re-created
@router.delete("/{measurement_id}", response_model=ApiResponse[None])
def delete_measurement(measurement_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    repo = MeasurementRepository(db)
    m = repo.get_owned(measurement_id, current.id)
    if not m:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Measurement not found")
    repo.delete(m)
    return ApiResponse(data=None)
