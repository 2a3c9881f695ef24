from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.orm import Session
from fitflex.db import get_db
from fitflex.deps.auth import get_current_user
from fitflex.export import measurements_csv, workouts_csv
from fitflex.models import User
from fitflex.repositories.measurement_repo import MeasurementRepository
from fitflex.repositories.workout_session_repo import WorkoutSessionRepository

router = APIRouter(prefix="/export", tags=["export"])

def _csv_response(content: str, kind: str) -> Response:
    filename = f"fitflex-{kind}-{date.today().isoformat()}.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

@router.get("/workouts")
def export_workouts(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    sessions = WorkoutSessionRepository(db).all_for_user(current.id)
    if not sessions:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No workouts to export")
    return _csv_response(workouts_csv(sessions), "workouts")

@router.get("/measurements")
def export_measurements(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    items = MeasurementRepository(db).list_by_user(current.id)
    if not items:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No measurements to export")
    return _csv_response(measurements_csv(items), "measurements")
