"""
In-memory store
One keyed collection per entity type, insertion ordered. Nothing is persisted
beyond the process lifetime and there is no locking: concurrent updates to the
same record are last-write-wins.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar
from uuid import uuid4
from fastapi import Request
from hotel_pms.exceptions import NotFoundError
from hotel_pms.models.ontology import (
    Entity, User, Room, RoomStatus, Guest, Booking, Staff,
    MaintenanceRequest, Payment, GuestCommunication, Setting,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)


def new_id() -> str:
    """Random, collision-resistant identifier"""
    return str(uuid4())


class Collection(Generic[T]):
    """Records of one entity type keyed by id"""

    def __init__(self, model: Type[T], label: str):
        self.model = model
        self.label = label
        self._items: Dict[str, T] = {}

    def __len__(self) -> int:
        return len(self._items)

    def list(self) -> List[T]:
        """All records in insertion order"""
        return list(self._items.values())

    def get(self, entity_id: str) -> Optional[T]:
        return self._items.get(entity_id)

    def create(self, data: dict) -> T:
        """
        Assign an id, apply store-owned defaults and insert

        Args:
            data: validated field values without id
        """
        entity = self.model(id=new_id(), **data)
        self._items[entity.id] = entity
        return entity

    def update(self, entity_id: str, changes: dict) -> T:
        """
        Shallow merge changes over the stored record

        Nested values (lists, dicts) are replaced wholesale.

        Raises:
            NotFoundError: unknown id, nothing is written
        """
        current = self._items.get(entity_id)
        if current is None:
            raise NotFoundError(f"{self.label} not found")
        changes = {k: v for k, v in changes.items() if k != "id"}
        updated = current.model_copy(update=changes)
        self._items[entity_id] = updated
        return updated

    def find_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Linear scan, first match"""
        return next((item for item in self._items.values() if predicate(item)), None)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Linear scan, every match in insertion order"""
        return [item for item in self._items.values() if predicate(item)]


class MemoryStore:
    """All collections of one running application"""

    def __init__(self):
        self.users: Collection[User] = Collection(User, "User")
        self.rooms: Collection[Room] = Collection(Room, "Room")
        self.guests: Collection[Guest] = Collection(Guest, "Guest")
        self.bookings: Collection[Booking] = Collection(Booking, "Booking")
        self.staff: Collection[Staff] = Collection(Staff, "Staff member")
        self.maintenance_requests: Collection[MaintenanceRequest] = Collection(
            MaintenanceRequest, "Maintenance request"
        )
        self.payments: Collection[Payment] = Collection(Payment, "Payment")
        self.communications: Collection[GuestCommunication] = Collection(
            GuestCommunication, "Guest communication"
        )
        self.settings: Collection[Setting] = Collection(Setting, "Setting")
        # channel-manager bookkeeping, not an entity
        self.last_sync: Optional[datetime] = None


SAMPLE_ROOMS = [
    ("101", "Standard King", RoomStatus.AVAILABLE, 1, 2, "285.00",
     ["WiFi", "TV", "Air Conditioning"]),
    ("102", "Standard Twin", RoomStatus.OCCUPIED, 1, 2, "275.00",
     ["WiFi", "TV", "Air Conditioning"]),
    ("103", "Deluxe King", RoomStatus.PENDING, 1, 2, "350.00",
     ["WiFi", "TV", "Air Conditioning", "Harbor View"]),
    ("203", "Deluxe King", RoomStatus.AVAILABLE, 2, 2, "350.00",
     ["WiFi", "TV", "Air Conditioning", "Harbor View"]),
    ("501", "Suite", RoomStatus.AVAILABLE, 5, 4, "550.00",
     ["WiFi", "TV", "Air Conditioning", "Harbor View", "Balcony", "Kitchenette"]),
]


def seed_sample_data(store: MemoryStore) -> None:
    """Load the sample rooms"""
    cleaned = datetime.now()
    for number, room_type, status, floor, occupancy, price, amenities in SAMPLE_ROOMS:
        store.rooms.create({
            "number": number,
            "type": room_type,
            "status": status,
            "floor": floor,
            "max_occupancy": occupancy,
            "base_price": Decimal(price),
            "amenities": amenities,
            "last_cleaned": cleaned,
        })
    logger.info(f"Seeded {len(SAMPLE_ROOMS)} sample rooms")


def init_store(seed: bool = False) -> MemoryStore:
    """Build the store once at start-up"""
    store = MemoryStore()
    if seed:
        seed_sample_data(store)
    return store


def get_store(request: Request) -> MemoryStore:
    """Dependency: the store owned by the running application"""
    return request.app.state.store
