"""
Hotel settings routes
Addressed by key; PUT creates the key when it does not exist.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_pms.database import MemoryStore, get_store
from hotel_pms.models.ontology import Setting
from hotel_pms.models.schemas import SettingUpsert
from hotel_pms.services.setting_service import SettingService

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=List[Setting])
def list_settings(store: MemoryStore = Depends(get_store)):
    return SettingService(store).get_settings()


@router.get("/{key}", response_model=Setting)
def get_setting(key: str, store: MemoryStore = Depends(get_store)):
    setting = SettingService(store).get_setting(key)
    if not setting:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Setting not found")
    return setting


@router.put("/{key}", response_model=Setting)
def upsert_setting(key: str, data: SettingUpsert, store: MemoryStore = Depends(get_store)):
    return SettingService(store).upsert_setting(key, data.value)
