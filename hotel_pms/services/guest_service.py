"""
Guest service
"""
from typing import List, Optional
import logging
from hotel_pms.database import MemoryStore
from hotel_pms.models.ontology import Guest
from hotel_pms.models.schemas import GuestCreate, GuestUpdate

logger = logging.getLogger(__name__)


class GuestService:
    """Guest service"""

    def __init__(self, store: MemoryStore):
        self.store = store

    def get_guests(self, vip_only: bool = False) -> List[Guest]:
        if vip_only:
            return self.store.guests.filter(lambda g: g.vip_status)
        return self.store.guests.list()

    def get_guest(self, guest_id: str) -> Optional[Guest]:
        return self.store.guests.get(guest_id)

    def get_guest_by_email(self, email: str) -> Optional[Guest]:
        """Exact match, first guest wins"""
        return self.store.guests.find_first(lambda g: g.email == email)

    def create_guest(self, data: GuestCreate) -> Guest:
        guest = self.store.guests.create(data.model_dump())
        logger.info(f"Guest {guest.first_name} {guest.last_name} created ({guest.id})")
        return guest

    def update_guest(self, guest_id: str, data: GuestUpdate) -> Guest:
        """Partial update; preferences is replaced as a whole, not merged"""
        return self.store.guests.update(guest_id, data.changes())
