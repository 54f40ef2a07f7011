"""
Maintenance routes
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_pms.database import MemoryStore, get_store
from hotel_pms.models.ontology import MaintenanceRequest
from hotel_pms.models.schemas import (
    MaintenanceRequestCreate, MaintenanceRequestUpdate,
    MaintenanceComplete, MaintenanceCompletionResponse,
)
from hotel_pms.services.maintenance_service import MaintenanceService

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.get("", response_model=List[MaintenanceRequest])
def list_requests(store: MemoryStore = Depends(get_store)):
    return MaintenanceService(store).get_requests()


@router.get("/pending", response_model=List[MaintenanceRequest])
def list_pending_requests(store: MemoryStore = Depends(get_store)):
    return MaintenanceService(store).get_pending_requests()


@router.get("/room/{room_id}", response_model=List[MaintenanceRequest])
def list_room_requests(room_id: str, store: MemoryStore = Depends(get_store)):
    return MaintenanceService(store).get_requests_by_room(room_id)


@router.get("/{request_id}", response_model=MaintenanceRequest)
def get_request(request_id: str, store: MemoryStore = Depends(get_store)):
    request = MaintenanceService(store).get_request(request_id)
    if not request:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                            detail="Maintenance request not found")
    return request


@router.post("", response_model=MaintenanceRequest, status_code=status.HTTP_201_CREATED)
def create_request(data: MaintenanceRequestCreate, store: MemoryStore = Depends(get_store)):
    return MaintenanceService(store).create_request(data)


@router.patch("/{request_id}", response_model=MaintenanceRequest)
def update_request(request_id: str, data: MaintenanceRequestUpdate,
                   store: MemoryStore = Depends(get_store)):
    return MaintenanceService(store).update_request(request_id, data)


@router.post("/{request_id}/complete", response_model=MaintenanceCompletionResponse)
def complete_request(request_id: str, data: Optional[MaintenanceComplete] = None,
                     store: MemoryStore = Depends(get_store)):
    """Complete a request; cleaning also stamps the room's lastCleaned"""
    notes = data.notes if data else None
    request, room = MaintenanceService(store).complete_request(request_id, notes)
    return MaintenanceCompletionResponse(request=request, room=room)
