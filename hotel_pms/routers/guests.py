"""
Guest routes
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_pms.database import MemoryStore, get_store
from hotel_pms.models.ontology import Guest
from hotel_pms.models.schemas import GuestCreate, GuestUpdate
from hotel_pms.services.guest_service import GuestService

router = APIRouter(prefix="/guests", tags=["guests"])


@router.get("", response_model=List[Guest])
def list_guests(vip_only: bool = False, store: MemoryStore = Depends(get_store)):
    return GuestService(store).get_guests(vip_only=vip_only)


@router.get("/email/{email}", response_model=Guest)
def get_guest_by_email(email: str, store: MemoryStore = Depends(get_store)):
    guest = GuestService(store).get_guest_by_email(email)
    if not guest:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Guest not found")
    return guest


@router.get("/{guest_id}", response_model=Guest)
def get_guest(guest_id: str, store: MemoryStore = Depends(get_store)):
    guest = GuestService(store).get_guest(guest_id)
    if not guest:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Guest not found")
    return guest


@router.post("", response_model=Guest, status_code=status.HTTP_201_CREATED)
def create_guest(data: GuestCreate, store: MemoryStore = Depends(get_store)):
    return GuestService(store).create_guest(data)


@router.patch("/{guest_id}", response_model=Guest)
def update_guest(guest_id: str, data: GuestUpdate, store: MemoryStore = Depends(get_store)):
    return GuestService(store).update_guest(guest_id, data)
