"""
Maintenance service
Cleaning, repair and inspection requests against rooms.
"""
from typing import List, Optional, Callable, Tuple
from datetime import datetime
import logging
from hotel_pms.database import MemoryStore
from hotel_pms.exceptions import NotFoundError, InvalidStateError
from hotel_pms.models.ontology import (
    MaintenanceRequest, MaintenanceStatus, MaintenanceType, Room,
)
from hotel_pms.models.schemas import (
    MaintenanceRequestCreate, MaintenanceRequestUpdate, RoomUpdate,
)
from hotel_pms.models.events import EventType, MaintenanceData
from hotel_pms.services.event_bus import event_bus, Event, EventPublisher
from hotel_pms.services.room_service import RoomService

logger = logging.getLogger(__name__)


class MaintenanceService:
    """Maintenance service"""

    def __init__(self, store: MemoryStore, event_publisher: Optional[EventPublisher] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self._publish_event = event_publisher or event_bus.publish
        self._clock = clock

    def get_requests(self) -> List[MaintenanceRequest]:
        return self.store.maintenance_requests.list()

    def get_request(self, request_id: str) -> Optional[MaintenanceRequest]:
        return self.store.maintenance_requests.get(request_id)

    def get_pending_requests(self) -> List[MaintenanceRequest]:
        return self.store.maintenance_requests.filter(
            lambda r: r.status == MaintenanceStatus.PENDING
        )

    def get_requests_by_room(self, room_id: str) -> List[MaintenanceRequest]:
        return self.store.maintenance_requests.filter(lambda r: r.room_id == room_id)

    def create_request(self, data: MaintenanceRequestCreate) -> MaintenanceRequest:
        request = self.store.maintenance_requests.create(data.model_dump())
        logger.info(
            f"Maintenance request {request.id} ({request.type.value}, {request.priority.value}) "
            f"for room {request.room_id}"
        )
        self._publish(EventType.MAINTENANCE_CREATED, request)
        return request

    def update_request(self, request_id: str, data: MaintenanceRequestUpdate) -> MaintenanceRequest:
        """Partial update; completedAt is only stamped by complete_request"""
        return self.store.maintenance_requests.update(request_id, data.changes())

    def complete_request(self, request_id: str,
                         notes: Optional[str] = None) -> Tuple[MaintenanceRequest, Optional[Room]]:
        """
        Mark a request completed

        A completed cleaning request also stamps the room's lastCleaned. The
        request is written first; a dangling room id leaves it completed and
        returns no room.
        """
        request = self.get_request(request_id)
        if not request:
            raise NotFoundError("Maintenance request not found")
        if request.status == MaintenanceStatus.COMPLETED:
            raise InvalidStateError("Maintenance request is already completed")

        now = self._clock()
        changes = {"status": MaintenanceStatus.COMPLETED, "completed_at": now}
        if notes:
            changes["notes"] = f"{request.notes}\n{notes}" if request.notes else notes
        request = self.store.maintenance_requests.update(request_id, changes)

        room = None
        if request.type == MaintenanceType.CLEANING:
            if self.store.rooms.get(request.room_id):
                rooms = RoomService(self.store, event_publisher=self._publish_event, clock=self._clock)
                room = rooms.update_room(request.room_id, RoomUpdate(last_cleaned=now))
            else:
                logger.warning(f"Cleaning request {request.id} references unknown room {request.room_id}")

        self._publish(EventType.MAINTENANCE_COMPLETED, request)
        return request, room

    def _publish(self, event_type: EventType, request: MaintenanceRequest) -> None:
        self._publish_event(Event(
            event_type=event_type,
            timestamp=self._clock(),
            data=MaintenanceData(
                request_id=request.id,
                room_id=request.room_id,
                request_type=request.type.value,
                priority=request.priority.value
            ).to_dict(),
            source="maintenance_service"
        ))
