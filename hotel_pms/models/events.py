"""
Domain events
Published by the services after a state change. Subscribers only observe;
no handler writes back into the store.
"""
from enum import Enum
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional, Dict, Any


class EventType(str, Enum):
    """Event types"""
    # Rooms
    ROOM_CREATED = "room.created"
    ROOM_STATUS_CHANGED = "room.status_changed"

    # Bookings
    BOOKING_CREATED = "booking.created"
    BOOKING_STATUS_CHANGED = "booking.status_changed"
    BOOKING_CHECKED_IN = "booking.checked_in"
    BOOKING_CHECKED_OUT = "booking.checked_out"
    BOOKING_CANCELLED = "booking.cancelled"

    # Maintenance
    MAINTENANCE_CREATED = "maintenance.created"
    MAINTENANCE_COMPLETED = "maintenance.completed"

    # Payments
    PAYMENT_RECORDED = "payment.recorded"

    # Settings
    SETTING_UPDATED = "setting.updated"


@dataclass
class BaseEventData:
    """Event payload base"""
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        for key, value in result.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
        return result


@dataclass
class RoomStatusChangedData(BaseEventData):
    room_id: str = ""
    room_number: str = ""
    old_status: str = ""
    new_status: str = ""
    reason: str = ""


@dataclass
class BookingStatusChangedData(BaseEventData):
    booking_id: str = ""
    room_id: str = ""
    guest_id: str = ""
    old_status: str = ""
    new_status: str = ""


@dataclass
class StayTransitionData(BaseEventData):
    """Check-in / check-out / cancel; room_updated is False when the room write was skipped"""
    booking_id: str = ""
    room_id: str = ""
    room_number: Optional[str] = None
    room_updated: bool = False


@dataclass
class MaintenanceData(BaseEventData):
    request_id: str = ""
    room_id: str = ""
    request_type: str = ""
    priority: str = ""


@dataclass
class PaymentRecordedData(BaseEventData):
    payment_id: str = ""
    booking_id: str = ""
    amount: str = ""
    method: str = ""


@dataclass
class SettingUpdatedData(BaseEventData):
    key: str = ""
    created: bool = False
