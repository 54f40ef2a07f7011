"""
Channel manager integration routes (placeholder sync)
"""
from fastapi import APIRouter, Depends
from hotel_pms.config import Settings, get_settings
from hotel_pms.database import MemoryStore, get_store
from hotel_pms.models.schemas import SyncStatus, SyncResult
from hotel_pms.services.integration_service import IntegrationService

router = APIRouter(prefix="/integration", tags=["integration"])


@router.get("/sync-status", response_model=SyncStatus)
def get_sync_status(store: MemoryStore = Depends(get_store),
                    app_settings: Settings = Depends(get_settings)):
    service = IntegrationService(store, interval_minutes=app_settings.SYNC_INTERVAL_MINUTES)
    return SyncStatus(**service.get_sync_status())


@router.post("/sync", response_model=SyncResult)
def run_sync(store: MemoryStore = Depends(get_store),
             app_settings: Settings = Depends(get_settings)):
    service = IntegrationService(store, interval_minutes=app_settings.SYNC_INTERVAL_MINUTES)
    return SyncResult(**service.sync())
