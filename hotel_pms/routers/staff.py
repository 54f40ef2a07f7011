"""
Staff routes
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_pms.config import Settings, get_settings
from hotel_pms.database import MemoryStore, get_store
from hotel_pms.models.ontology import Staff
from hotel_pms.models.schemas import StaffCreate, StaffUpdate
from hotel_pms.services.staff_service import StaffService

router = APIRouter(prefix="/staff", tags=["staff"])


@router.get("", response_model=List[Staff])
def list_staff(store: MemoryStore = Depends(get_store)):
    return StaffService(store).get_staff()


@router.get("/active", response_model=List[Staff])
def list_active_staff(store: MemoryStore = Depends(get_store)):
    return StaffService(store).get_active_staff()


@router.get("/{staff_id}", response_model=Staff)
def get_staff_member(staff_id: str, store: MemoryStore = Depends(get_store)):
    member = StaffService(store).get_staff_member(staff_id)
    if not member:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Staff member not found")
    return member


@router.post("", response_model=Staff, status_code=status.HTTP_201_CREATED)
def create_staff_member(data: StaffCreate, store: MemoryStore = Depends(get_store),
                        app_settings: Settings = Depends(get_settings)):
    service = StaffService(store, enforce_unique=app_settings.ENFORCE_UNIQUE_KEYS)
    return service.create_staff_member(data)


@router.patch("/{staff_id}", response_model=Staff)
def update_staff_member(staff_id: str, data: StaffUpdate, store: MemoryStore = Depends(get_store),
                        app_settings: Settings = Depends(get_settings)):
    service = StaffService(store, enforce_unique=app_settings.ENFORCE_UNIQUE_KEYS)
    return service.update_staff_member(staff_id, data)
