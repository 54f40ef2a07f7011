"""
Booking service
Booking records and the date-based queries over them. Every query is a full
scan of the bookings collection; there is no index.

Times are local wall-clock; "today" is [local midnight, next local midnight).
"""
from typing import Callable, List, Optional, Tuple
from datetime import datetime, timedelta
import logging
from hotel_pms.database import MemoryStore
from hotel_pms.models.ontology import Booking, to_local_naive
from hotel_pms.models.schemas import BookingCreate, BookingUpdate
from hotel_pms.models.events import EventType, BookingStatusChangedData
from hotel_pms.services.event_bus import event_bus, Event, EventPublisher

logger = logging.getLogger(__name__)


def day_bounds(now: datetime) -> Tuple[datetime, datetime]:
    """Local midnight of now's day and of the following day"""
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return today, today + timedelta(days=1)


class BookingService:
    """Booking service"""

    def __init__(self, store: MemoryStore, event_publisher: Optional[EventPublisher] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self._publish_event = event_publisher or event_bus.publish
        self._clock = clock

    def get_bookings(self) -> List[Booking]:
        return self.store.bookings.list()

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        return self.store.bookings.get(booking_id)

    def get_bookings_by_guest(self, guest_id: str) -> List[Booking]:
        return self.store.bookings.filter(lambda b: b.guest_id == guest_id)

    def get_bookings_by_room(self, room_id: str) -> List[Booking]:
        return self.store.bookings.filter(lambda b: b.room_id == room_id)

    def get_bookings_by_date_range(self, start: datetime, end: datetime) -> List[Booking]:
        """
        Bookings lying entirely inside [start, end]

        Containment, not overlap: a stay that begins inside the range but
        ends after it is excluded.
        """
        start, end = to_local_naive(start), to_local_naive(end)
        return self.store.bookings.filter(
            lambda b: b.check_in >= start and b.check_out <= end
        )

    def get_todays_arrivals(self) -> List[Booking]:
        """Bookings whose check-in falls today"""
        today, tomorrow = day_bounds(self._clock())
        return self.store.bookings.filter(lambda b: today <= b.check_in < tomorrow)

    def get_todays_departures(self) -> List[Booking]:
        """Bookings whose check-out falls today"""
        today, tomorrow = day_bounds(self._clock())
        return self.store.bookings.filter(lambda b: today <= b.check_out < tomorrow)

    def create_booking(self, data: BookingCreate) -> Booking:
        """
        Store a booking as given

        Room and guest references are not checked and overlapping stays on
        the same room are not rejected.
        """
        booking = self.store.bookings.create(data.model_dump())
        if not self.store.rooms.get(booking.room_id):
            logger.warning(f"Booking {booking.id} references unknown room {booking.room_id}")
        if not self.store.guests.get(booking.guest_id):
            logger.warning(f"Booking {booking.id} references unknown guest {booking.guest_id}")

        self._publish_event(Event(
            event_type=EventType.BOOKING_CREATED,
            timestamp=self._clock(),
            data={
                "booking_id": booking.id,
                "room_id": booking.room_id,
                "guest_id": booking.guest_id,
                "check_in": booking.check_in.isoformat(),
                "channel": booking.channel,
            },
            source="booking_service"
        ))
        return booking

    def update_booking(self, booking_id: str, data: BookingUpdate) -> Booking:
        """
        Partial update, status included

        No transition rule is applied here and the room is left untouched;
        use StayService for the paired writes.
        """
        before = self.get_booking(booking_id)
        booking = self.store.bookings.update(booking_id, data.changes())
        if before.status != booking.status:
            self._publish_event(Event(
                event_type=EventType.BOOKING_STATUS_CHANGED,
                timestamp=self._clock(),
                data=BookingStatusChangedData(
                    booking_id=booking.id,
                    room_id=booking.room_id,
                    guest_id=booking.guest_id,
                    old_status=before.status.value,
                    new_status=booking.status.value
                ).to_dict(),
                source="booking_service"
            ))
        return booking
