"""
Pydantic schemas
Request / response validation for the API. Create schemas omit the id and
store-owned fields; update schemas are patches where only the supplied
fields change.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, ClassVar, Dict, FrozenSet, List, Optional
from pydantic import BaseModel, ConfigDict, Field, JsonValue, model_validator
from pydantic.alias_generators import to_camel
from hotel_pms.models.ontology import (
    LocalDateTime, RoomStatus, BookingStatus, Shift,
    MaintenanceType, MaintenancePriority, MaintenanceStatus,
    PaymentMethod, PaymentStatus,
    CommunicationType, CommunicationDirection, CommunicationStatus,
    Room, Booking, MaintenanceRequest,
)

Money = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PatchModel(CamelModel):
    """
    Partial update body

    Unknown fields (including id and store-owned timestamps) are rejected.
    Explicit null is only accepted for fields listed in NULLABLE.
    """
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset()

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def reject_null_for_required(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.NULLABLE:
                raise ValueError(f"{to_camel(name)} may not be null")
        return self

    def changes(self) -> dict:
        """Only the fields the caller supplied"""
        return self.model_dump(exclude_unset=True)


# ============== Room Schemas ==============

class RoomCreate(CamelModel):
    number: str = Field(..., min_length=1, max_length=10)
    type: str = Field(..., min_length=1, max_length=50)
    status: RoomStatus = RoomStatus.AVAILABLE
    floor: int
    max_occupancy: int = Field(..., ge=1)
    base_price: Money
    amenities: List[str] = Field(default_factory=list)
    notes: Optional[str] = None


class RoomUpdate(PatchModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"notes", "last_cleaned"})

    number: Optional[str] = Field(None, min_length=1, max_length=10)
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    status: Optional[RoomStatus] = None
    floor: Optional[int] = None
    max_occupancy: Optional[int] = Field(None, ge=1)
    base_price: Optional[Money] = None
    amenities: Optional[List[str]] = None
    last_cleaned: Optional[LocalDateTime] = None
    notes: Optional[str] = None


class RoomStatusUpdate(CamelModel):
    status: RoomStatus


class RoomStatusSummary(CamelModel):
    total: int
    available: int
    occupied: int
    pending: int
    maintenance: int


# ============== Guest Schemas ==============

class GuestCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    id_number: Optional[str] = Field(None, max_length=50)
    nationality: Optional[str] = Field(None, max_length=50)
    preferences: Dict[str, JsonValue] = Field(default_factory=dict)
    vip_status: bool = False


class GuestUpdate(PatchModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"phone", "id_number", "nationality"})

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, min_length=3, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    id_number: Optional[str] = Field(None, max_length=50)
    nationality: Optional[str] = Field(None, max_length=50)
    preferences: Optional[Dict[str, JsonValue]] = None
    vip_status: Optional[bool] = None


# ============== Booking Schemas ==============

class BookingCreate(CamelModel):
    room_id: str
    guest_id: str
    check_in: LocalDateTime
    check_out: LocalDateTime
    adults: int = Field(..., ge=1)
    children: int = Field(default=0, ge=0)
    total_amount: Money
    status: BookingStatus = BookingStatus.CONFIRMED
    channel: str = Field(..., min_length=1, max_length=50)
    special_requests: Optional[str] = None

    @model_validator(mode="after")
    def check_out_after_check_in(self):
        if self.check_out <= self.check_in:
            raise ValueError("checkOut must be after checkIn")
        return self


class BookingUpdate(PatchModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"special_requests", "external_sync_id"})

    room_id: Optional[str] = None
    guest_id: Optional[str] = None
    check_in: Optional[LocalDateTime] = None
    check_out: Optional[LocalDateTime] = None
    adults: Optional[int] = Field(None, ge=1)
    children: Optional[int] = Field(None, ge=0)
    total_amount: Optional[Money] = None
    status: Optional[BookingStatus] = None
    channel: Optional[str] = Field(None, min_length=1, max_length=50)
    special_requests: Optional[str] = None
    external_sync_id: Optional[str] = None


class StayTransitionResponse(CamelModel):
    """Result of check-in / check-out / cancel; room is null when it could not be updated"""
    booking: Booking
    room: Optional[Room] = None


# ============== Staff Schemas ==============

class StaffCreate(CamelModel):
    employee_id: str = Field(..., min_length=1, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    department: str
    position: str
    shift: Optional[Shift] = None
    is_active: bool = True
    start_date: LocalDateTime


class StaffUpdate(PatchModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"phone", "shift"})

    employee_id: Optional[str] = Field(None, min_length=1, max_length=20)
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, min_length=3, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    department: Optional[str] = None
    position: Optional[str] = None
    shift: Optional[Shift] = None
    is_active: Optional[bool] = None
    start_date: Optional[LocalDateTime] = None


# ============== Maintenance Schemas ==============

class MaintenanceRequestCreate(CamelModel):
    room_id: str
    staff_id: Optional[str] = None
    type: MaintenanceType
    priority: MaintenancePriority = MaintenancePriority.MEDIUM
    description: str = Field(..., min_length=1)
    status: MaintenanceStatus = MaintenanceStatus.PENDING
    notes: Optional[str] = None


class MaintenanceRequestUpdate(PatchModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"staff_id", "completed_at", "notes"})

    room_id: Optional[str] = None
    staff_id: Optional[str] = None
    type: Optional[MaintenanceType] = None
    priority: Optional[MaintenancePriority] = None
    description: Optional[str] = Field(None, min_length=1)
    status: Optional[MaintenanceStatus] = None
    completed_at: Optional[LocalDateTime] = None
    notes: Optional[str] = None


class MaintenanceComplete(CamelModel):
    notes: Optional[str] = None


class MaintenanceCompletionResponse(CamelModel):
    request: MaintenanceRequest
    room: Optional[Room] = None


# ============== Payment Schemas ==============

class PaymentCreate(CamelModel):
    booking_id: str
    amount: Money
    method: PaymentMethod
    status: PaymentStatus = PaymentStatus.PENDING


class PaymentUpdate(PatchModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"external_charge_id", "processed_at"})

    amount: Optional[Money] = None
    method: Optional[PaymentMethod] = None
    status: Optional[PaymentStatus] = None
    external_charge_id: Optional[str] = None
    processed_at: Optional[LocalDateTime] = None


class PaymentIntentRequest(CamelModel):
    """Whole cents only; the smallest chargeable amount is 0.01"""
    amount: Decimal = Field(..., ge=Decimal("0.01"), max_digits=10, decimal_places=2)


class PaidTotal(CamelModel):
    booking_id: str
    paid_total: Decimal


class PaymentIntentResponse(CamelModel):
    client_secret: str


# ============== Communication Schemas ==============

class CommunicationCreate(CamelModel):
    guest_id: str
    booking_id: Optional[str] = None
    type: CommunicationType
    subject: Optional[str] = Field(None, max_length=200)
    message: str = Field(..., min_length=1)
    direction: CommunicationDirection
    status: CommunicationStatus = CommunicationStatus.SENT


class CommunicationUpdate(PatchModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"booking_id", "subject"})

    booking_id: Optional[str] = None
    subject: Optional[str] = Field(None, max_length=200)
    message: Optional[str] = Field(None, min_length=1)
    status: Optional[CommunicationStatus] = None


# ============== Setting Schemas ==============

class SettingUpsert(CamelModel):
    value: JsonValue


# ============== User Schemas ==============

class UserCreate(CamelModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)
    email: Optional[str] = Field(None, max_length=100)
    role: str = "staff"
    name: str = Field(..., min_length=1, max_length=100)


class UserResponse(CamelModel):
    """User without the password hash"""
    id: str
    username: str
    email: Optional[str] = None
    role: str
    name: str
    payment_customer_id: Optional[str] = None
    payment_subscription_id: Optional[str] = None


# ============== Dashboard / Integration Schemas ==============

class DashboardMetrics(CamelModel):
    occupancy_rate: int
    revenue: Decimal
    pending_checkins: int
    maintenance_requests: int
    total_rooms: int
    occupied_rooms: int
    available_rooms: int
    maintenance_rooms: int
    pending_rooms: int


class SyncStatus(CamelModel):
    last_sync: Optional[datetime] = None
    status: str
    next_sync: datetime


class SyncedItems(CamelModel):
    rooms: int
    bookings: int
    rates: int


class SyncResult(CamelModel):
    success: bool
    synced_at: datetime
    synced_items: SyncedItems
