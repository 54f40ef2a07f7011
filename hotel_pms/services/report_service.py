"""
Report service
Dashboard numbers, recomputed from full scans on every call.
"""
from typing import Callable, List
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from hotel_pms.database import MemoryStore
from hotel_pms.models.ontology import Booking, Room, RoomStatus
from hotel_pms.services.booking_service import BookingService
from hotel_pms.services.maintenance_service import MaintenanceService

CENT = Decimal("0.01")


def occupancy_rate(rooms: List[Room]) -> int:
    """
    Occupied share of all rooms as a whole percentage

    Halves round up. No rooms gives 0.
    """
    if not rooms:
        return 0
    occupied = len([r for r in rooms if r.status == RoomStatus.OCCUPIED])
    rate = Decimal(occupied * 100) / Decimal(len(rooms))
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def revenue_for_day(bookings: List[Booking], day: datetime) -> Decimal:
    """Total amount of bookings checking in on day's calendar date, to the cent"""
    total = sum(
        (b.total_amount for b in bookings if b.check_in.date() == day.date()),
        Decimal("0")
    )
    return total.quantize(CENT, rounding=ROUND_HALF_UP)


class ReportService:
    """Report service"""

    def __init__(self, store: MemoryStore, clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self._clock = clock

    def get_todays_revenue(self) -> Decimal:
        return revenue_for_day(self.store.bookings.list(), self._clock())

    def get_dashboard_metrics(self) -> dict:
        """Dashboard metrics"""
        rooms = self.store.rooms.list()
        arrivals = BookingService(self.store, clock=self._clock).get_todays_arrivals()
        pending_maintenance = MaintenanceService(self.store).get_pending_requests()

        return {
            'occupancy_rate': occupancy_rate(rooms),
            'revenue': self.get_todays_revenue(),
            'pending_checkins': len(arrivals),
            'maintenance_requests': len(pending_maintenance),
            'total_rooms': len(rooms),
            'occupied_rooms': len([r for r in rooms if r.status == RoomStatus.OCCUPIED]),
            'available_rooms': len([r for r in rooms if r.status == RoomStatus.AVAILABLE]),
            'maintenance_rooms': len([r for r in rooms if r.status == RoomStatus.MAINTENANCE]),
            'pending_rooms': len([r for r in rooms if r.status == RoomStatus.PENDING]),
        }
