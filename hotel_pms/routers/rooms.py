"""
Room routes
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_pms.config import Settings, get_settings
from hotel_pms.database import MemoryStore, get_store
from hotel_pms.models.ontology import Room, RoomStatus
from hotel_pms.models.schemas import RoomCreate, RoomUpdate, RoomStatusUpdate, RoomStatusSummary
from hotel_pms.services.room_service import RoomService

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.get("", response_model=List[Room])
def list_rooms(
    status: Optional[RoomStatus] = None,
    floor: Optional[int] = None,
    store: MemoryStore = Depends(get_store)
):
    """List rooms"""
    return RoomService(store).get_rooms(status, floor)


@router.get("/status-summary", response_model=RoomStatusSummary)
def get_room_status_summary(store: MemoryStore = Depends(get_store)):
    """Room count per status"""
    return RoomStatusSummary(**RoomService(store).get_room_status_summary())


@router.get("/number/{number}", response_model=Room)
def get_room_by_number(number: str, store: MemoryStore = Depends(get_store)):
    room = RoomService(store).get_room_by_number(number)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    return room


@router.get("/{room_id}", response_model=Room)
def get_room(room_id: str, store: MemoryStore = Depends(get_store)):
    """Room detail"""
    room = RoomService(store).get_room(room_id)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    return room


@router.post("", response_model=Room, status_code=status.HTTP_201_CREATED)
def create_room(data: RoomCreate, store: MemoryStore = Depends(get_store),
                app_settings: Settings = Depends(get_settings)):
    """Create a room"""
    return RoomService(store, enforce_unique=app_settings.ENFORCE_UNIQUE_KEYS).create_room(data)


@router.patch("/{room_id}", response_model=Room)
def update_room(room_id: str, data: RoomUpdate, store: MemoryStore = Depends(get_store),
                app_settings: Settings = Depends(get_settings)):
    """Partial room update"""
    service = RoomService(store, enforce_unique=app_settings.ENFORCE_UNIQUE_KEYS)
    return service.update_room(room_id, data)


@router.patch("/{room_id}/status", response_model=Room)
def update_room_status(room_id: str, data: RoomStatusUpdate,
                       store: MemoryStore = Depends(get_store)):
    """Status-only update"""
    return RoomService(store).update_room_status(room_id, data.status, reason="status update")
