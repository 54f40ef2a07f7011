"""
Room service
Manages Room records; publishes an event whenever a room's status changes.
Room status is a free-standing field: any status may be written from any status.
"""
from typing import Callable, List, Optional
from datetime import datetime
import logging
from hotel_pms.config import settings
from hotel_pms.database import MemoryStore
from hotel_pms.exceptions import DuplicateKeyError
from hotel_pms.models.ontology import Room, RoomStatus
from hotel_pms.models.schemas import RoomCreate, RoomUpdate
from hotel_pms.models.events import EventType, RoomStatusChangedData
from hotel_pms.services.event_bus import event_bus, Event, EventPublisher

logger = logging.getLogger(__name__)


class RoomService:
    """Room service"""

    def __init__(self, store: MemoryStore, event_publisher: Optional[EventPublisher] = None,
                 enforce_unique: Optional[bool] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self._publish_event = event_publisher or event_bus.publish
        self._clock = clock
        self.enforce_unique = settings.ENFORCE_UNIQUE_KEYS if enforce_unique is None else enforce_unique

    def get_rooms(self, status: Optional[RoomStatus] = None,
                  floor: Optional[int] = None) -> List[Room]:
        """All rooms in insertion order, optionally narrowed"""
        rooms = self.store.rooms.list()
        if status is not None:
            rooms = [r for r in rooms if r.status == status]
        if floor is not None:
            rooms = [r for r in rooms if r.floor == floor]
        return rooms

    def get_room(self, room_id: str) -> Optional[Room]:
        return self.store.rooms.get(room_id)

    def get_room_by_number(self, number: str) -> Optional[Room]:
        return self.store.rooms.find_first(lambda r: r.number == number)

    def create_room(self, data: RoomCreate) -> Room:
        if self.enforce_unique and self.get_room_by_number(data.number):
            raise DuplicateKeyError(f"Room number '{data.number}' already exists")

        room = self.store.rooms.create(data.model_dump())
        logger.info(f"Room {room.number} created ({room.id})")
        self._publish_event(Event(
            event_type=EventType.ROOM_CREATED,
            timestamp=self._clock(),
            data={"room_id": room.id, "room_number": room.number, "status": room.status.value},
            source="room_service"
        ))
        return room

    def update_room(self, room_id: str, data: RoomUpdate) -> Room:
        """Partial update; fields not supplied keep their values"""
        changes = data.changes()
        if self.enforce_unique and "number" in changes:
            existing = self.get_room_by_number(changes["number"])
            if existing and existing.id != room_id:
                raise DuplicateKeyError(f"Room number '{changes['number']}' already exists")

        before = self.get_room(room_id)
        room = self.store.rooms.update(room_id, changes)
        if before.status != room.status:
            self._status_changed(before, room, reason="room update")
        return room

    def update_room_status(self, room_id: str, status: RoomStatus, reason: str = "") -> Room:
        """Write the status field only"""
        before = self.get_room(room_id)
        room = self.store.rooms.update(room_id, {"status": status})
        if before.status != room.status:
            self._status_changed(before, room, reason=reason)
        return room

    def get_room_status_summary(self) -> dict:
        """Room count per status"""
        rooms = self.store.rooms.list()
        summary = {'total': len(rooms)}
        for status in RoomStatus:
            summary[status.value] = len([r for r in rooms if r.status == status])
        return summary

    def _status_changed(self, before: Room, after: Room, reason: str) -> None:
        logger.info(f"Room {after.number}: {before.status.value} -> {after.status.value}")
        self._publish_event(Event(
            event_type=EventType.ROOM_STATUS_CHANGED,
            timestamp=self._clock(),
            data=RoomStatusChangedData(
                room_id=after.id,
                room_number=after.number,
                old_status=before.status.value,
                new_status=after.status.value,
                reason=reason
            ).to_dict(),
            source="room_service"
        ))
