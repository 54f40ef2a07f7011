"""
Guest communication routes
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_pms.database import MemoryStore, get_store
from hotel_pms.models.ontology import GuestCommunication
from hotel_pms.models.schemas import CommunicationCreate, CommunicationUpdate
from hotel_pms.services.communication_service import CommunicationService

router = APIRouter(prefix="/communications", tags=["communications"])


@router.get("", response_model=List[GuestCommunication])
def list_communications(store: MemoryStore = Depends(get_store)):
    return CommunicationService(store).get_communications()


@router.get("/guest/{guest_id}", response_model=List[GuestCommunication])
def list_guest_communications(guest_id: str, store: MemoryStore = Depends(get_store)):
    return CommunicationService(store).get_communications_by_guest(guest_id)


@router.get("/booking/{booking_id}", response_model=List[GuestCommunication])
def list_booking_communications(booking_id: str, store: MemoryStore = Depends(get_store)):
    return CommunicationService(store).get_communications_by_booking(booking_id)


@router.get("/{communication_id}", response_model=GuestCommunication)
def get_communication(communication_id: str, store: MemoryStore = Depends(get_store)):
    communication = CommunicationService(store).get_communication(communication_id)
    if not communication:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                            detail="Guest communication not found")
    return communication


@router.post("", response_model=GuestCommunication, status_code=status.HTTP_201_CREATED)
def create_communication(data: CommunicationCreate, store: MemoryStore = Depends(get_store)):
    return CommunicationService(store).create_communication(data)


@router.patch("/{communication_id}", response_model=GuestCommunication)
def update_communication(communication_id: str, data: CommunicationUpdate,
                         store: MemoryStore = Depends(get_store)):
    return CommunicationService(store).update_communication(communication_id, data)
