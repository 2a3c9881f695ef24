from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from fitflex.db import get_db
from fitflex.deps.auth import get_current_user
from fitflex.errors import ValidationFailed
from fitflex.models import User
from fitflex.repositories.settings_repo import SettingsRepository
from fitflex.schemas.common import ApiResponse
from fitflex.schemas.preferences import SettingsRead, SettingsUpdate

router = APIRouter(prefix="/settings", tags=["settings"])

@router.get("", response_model=ApiResponse[SettingsRead])
def get_settings(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    prefs = SettingsRepository(db).get_or_create(current.id)
    return ApiResponse(data=SettingsRead.model_validate(prefs))

@router.put("", response_model=ApiResponse[SettingsRead])
def update_settings(
    payload: SettingsUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    # explicit nulls are ignored, the columns are not nullable except the color
    changes = {
        k: v for k, v in payload.model_dump(exclude_unset=True).items()
        if v is not None or k == "primary_color"
    }
    if not changes:
        raise ValidationFailed("No valid settings provided")
    prefs = SettingsRepository(db).update(current.id, changes)
    return ApiResponse(data=SettingsRead.model_validate(prefs))
