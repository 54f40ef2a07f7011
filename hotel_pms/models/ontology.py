"""
Entity definitions
Each model is one record type held by the in-memory store. Records are frozen:
updates produce a new record via model_copy, ids never change.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Dict, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel


def to_local_naive(value: datetime) -> datetime:
    """Aware timestamps become local wall-clock time; day boundaries are local"""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


LocalDateTime = Annotated[datetime, AfterValidator(to_local_naive)]


class RoomStatus(str, Enum):
    """Room status"""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    PENDING = "pending"            # awaiting housekeeping
    MAINTENANCE = "maintenance"


class BookingStatus(str, Enum):
    """Booking status"""
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    CANCELLED = "cancelled"


class Shift(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"


class MaintenanceType(str, Enum):
    CLEANING = "cleaning"
    REPAIR = "repair"
    INSPECTION = "inspection"


class MaintenancePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class MaintenanceStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "credit_card"
    CASH = "cash"
    BANK_TRANSFER = "bank_transfer"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class CommunicationType(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    IN_PERSON = "in_person"
    PHONE = "phone"


class CommunicationDirection(str, Enum):
    INBOUND = "inbound"
    OUTBOUND = "outbound"


class CommunicationStatus(str, Enum):
    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"
    FAILED = "failed"


class Entity(BaseModel):
    """Base record: opaque id, camelCase on the wire"""
    id: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class User(Entity):
    """Back-office user; password holds a bcrypt hash"""
    username: str
    password: str
    email: Optional[str] = None
    role: str = "staff"
    name: str
    payment_customer_id: Optional[str] = None
    payment_subscription_id: Optional[str] = None


class Room(Entity):
    number: str
    type: str
    status: RoomStatus = RoomStatus.AVAILABLE
    floor: int
    max_occupancy: int
    base_price: Decimal
    amenities: List[str] = Field(default_factory=list)
    last_cleaned: Optional[LocalDateTime] = None
    notes: Optional[str] = None


class Guest(Entity):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    id_number: Optional[str] = None
    nationality: Optional[str] = None
    preferences: Dict[str, JsonValue] = Field(default_factory=dict)
    vip_status: bool = False
    created_at: LocalDateTime = Field(default_factory=datetime.now)


class Booking(Entity):
    room_id: str
    guest_id: str
    check_in: LocalDateTime
    check_out: LocalDateTime
    adults: int
    children: int = 0
    total_amount: Decimal
    status: BookingStatus = BookingStatus.CONFIRMED
    channel: str                    # direct, booking.com, expedia, ...
    special_requests: Optional[str] = None
    created_at: LocalDateTime = Field(default_factory=datetime.now)
    external_sync_id: Optional[str] = None


class Staff(Entity):
    employee_id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    department: str
    position: str
    shift: Optional[Shift] = None
    is_active: bool = True
    start_date: LocalDateTime


class MaintenanceRequest(Entity):
    room_id: str
    staff_id: Optional[str] = None
    type: MaintenanceType
    priority: MaintenancePriority = MaintenancePriority.MEDIUM
    description: str
    status: MaintenanceStatus = MaintenanceStatus.PENDING
    created_at: LocalDateTime = Field(default_factory=datetime.now)
    completed_at: Optional[LocalDateTime] = None
    notes: Optional[str] = None


class Payment(Entity):
    booking_id: str
    amount: Decimal
    method: PaymentMethod
    status: PaymentStatus = PaymentStatus.PENDING
    external_charge_id: Optional[str] = None
    created_at: LocalDateTime = Field(default_factory=datetime.now)
    processed_at: Optional[LocalDateTime] = None


class GuestCommunication(Entity):
    guest_id: str
    booking_id: Optional[str] = None
    type: CommunicationType
    subject: Optional[str] = None
    message: str
    direction: CommunicationDirection
    status: CommunicationStatus = CommunicationStatus.SENT
    created_at: LocalDateTime = Field(default_factory=datetime.now)


class Setting(Entity):
    """Hotel setting, addressed by key rather than id"""
    key: str
    value: JsonValue
    updated_at: LocalDateTime = Field(default_factory=datetime.now)
