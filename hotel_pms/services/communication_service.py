"""
Guest communication service
Log of emails, texts, calls and desk conversations with guests.
"""
from typing import List, Optional
from hotel_pms.database import MemoryStore
from hotel_pms.models.ontology import GuestCommunication
from hotel_pms.models.schemas import CommunicationCreate, CommunicationUpdate


class CommunicationService:
    """Guest communication service"""

    def __init__(self, store: MemoryStore):
        self.store = store

    def get_communications(self) -> List[GuestCommunication]:
        return self.store.communications.list()

    def get_communication(self, communication_id: str) -> Optional[GuestCommunication]:
        return self.store.communications.get(communication_id)

    def get_communications_by_guest(self, guest_id: str) -> List[GuestCommunication]:
        return self.store.communications.filter(lambda c: c.guest_id == guest_id)

    def get_communications_by_booking(self, booking_id: str) -> List[GuestCommunication]:
        return self.store.communications.filter(lambda c: c.booking_id == booking_id)

    def create_communication(self, data: CommunicationCreate) -> GuestCommunication:
        return self.store.communications.create(data.model_dump())

    def update_communication(self, communication_id: str,
                             data: CommunicationUpdate) -> GuestCommunication:
        """Mostly delivery status tracking: sent -> delivered -> read"""
        return self.store.communications.update(communication_id, data.changes())
