# promptvault/routers/settings.py
"""
Settings endpoints.

GET /v1/settings        - All settings
GET /v1/settings/{key}  - Read one setting (value is null when unset)
PUT /v1/settings/{key}  - Upsert a setting
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from promptvault.database import get_db
from promptvault.schemas.settings import SettingUpdate, SettingValue
from promptvault.services import settings_service

router = APIRouter(prefix="/v1/settings", tags=["settings"])


@router.get("", response_model=dict[str, str])
def list_settings(db: Session = Depends(get_db)) -> dict[str, str]:
    return settings_service.list_settings(db)


@router.get("/{key}", response_model=SettingValue)
def get_setting(key: str, db: Session = Depends(get_db)) -> SettingValue:
    return SettingValue(key=key, value=settings_service.get_setting(db, key))


@router.put("/{key}", response_model=SettingValue)
def set_setting(key: str, request: SettingUpdate, db: Session = Depends(get_db)) -> SettingValue:
    settings_service.set_setting(db, key, request.value)
    return SettingValue(key=key, value=request.value)
