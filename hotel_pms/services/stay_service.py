"""
Stay service - check-in, check-out and cancellation
Pairs the booking status write with the matching room status write:

    check-in:   booking confirmed  -> checked_in,  room -> occupied
    check-out:  booking checked_in -> checked_out, room -> available
    cancel:     booking confirmed | checked_in -> cancelled,
                room -> available only when the guest was checked in

The booking is written first and is authoritative. There is no transaction:
if the room write cannot happen (dangling room id) the booking change is kept,
a warning is logged and no room is returned. Room is also None when the
transition leaves the room alone. The plain PATCH /bookings/{id}
path remains available and skips all of this.
"""
from typing import Optional, Callable, Iterable, Tuple
from datetime import datetime
import logging
from hotel_pms.database import MemoryStore
from hotel_pms.exceptions import NotFoundError, InvalidStateError
from hotel_pms.models.ontology import Booking, BookingStatus, Room, RoomStatus
from hotel_pms.models.events import EventType, StayTransitionData
from hotel_pms.services.event_bus import event_bus, Event, EventPublisher
from hotel_pms.services.room_service import RoomService

logger = logging.getLogger(__name__)


class StayService:
    """Stay service"""

    def __init__(self, store: MemoryStore, event_publisher: Optional[EventPublisher] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self._publish_event = event_publisher or event_bus.publish
        self._clock = clock
        self._rooms = RoomService(store, event_publisher=self._publish_event, clock=clock)

    def check_in(self, booking_id: str) -> Tuple[Booking, Optional[Room]]:
        return self._transition(
            booking_id,
            allowed_from=(BookingStatus.CONFIRMED,),
            target=BookingStatus.CHECKED_IN,
            room_status=RoomStatus.OCCUPIED,
            event_type=EventType.BOOKING_CHECKED_IN,
            reason="check-in",
        )

    def check_out(self, booking_id: str) -> Tuple[Booking, Optional[Room]]:
        return self._transition(
            booking_id,
            allowed_from=(BookingStatus.CHECKED_IN,),
            target=BookingStatus.CHECKED_OUT,
            room_status=RoomStatus.AVAILABLE,
            event_type=EventType.BOOKING_CHECKED_OUT,
            reason="check-out",
        )

    def cancel(self, booking_id: str) -> Tuple[Booking, Optional[Room]]:
        booking = self._require_booking(booking_id)
        # only a checked-in guest is holding the room
        room_status = RoomStatus.AVAILABLE if booking.status == BookingStatus.CHECKED_IN else None
        return self._transition(
            booking_id,
            allowed_from=(BookingStatus.CONFIRMED, BookingStatus.CHECKED_IN),
            target=BookingStatus.CANCELLED,
            room_status=room_status,
            event_type=EventType.BOOKING_CANCELLED,
            reason="cancellation",
        )

    def _require_booking(self, booking_id: str) -> Booking:
        booking = self.store.bookings.get(booking_id)
        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    def _transition(self, booking_id: str, allowed_from: Iterable[BookingStatus],
                    target: BookingStatus, room_status: Optional[RoomStatus],
                    event_type: EventType, reason: str) -> Tuple[Booking, Optional[Room]]:
        booking = self._require_booking(booking_id)
        if booking.status not in allowed_from:
            raise InvalidStateError(
                f"Cannot move booking from '{booking.status.value}' to '{target.value}'"
            )

        booking = self.store.bookings.update(booking_id, {"status": target})
        logger.info(f"Booking {booking.id} -> {target.value}")

        room = None
        if room_status is not None:
            if self.store.rooms.get(booking.room_id) is None:
                logger.warning(
                    f"Booking {booking.id} is {target.value} but room {booking.room_id} "
                    f"does not exist; room status not updated"
                )
            else:
                room = self._rooms.update_room_status(booking.room_id, room_status, reason=reason)

        self._publish_event(Event(
            event_type=event_type,
            timestamp=self._clock(),
            data=StayTransitionData(
                booking_id=booking.id,
                room_id=booking.room_id,
                room_number=room.number if room else None,
                room_updated=room is not None
            ).to_dict(),
            source="stay_service"
        ))
        return booking, room
