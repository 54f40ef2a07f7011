"""
Report service tests
"""
import pytest
from datetime import datetime, timedelta
from decimal import Decimal

from hotel_pms.models.ontology import Room, Booking, RoomStatus
from hotel_pms.services.report_service import ReportService, occupancy_rate, revenue_for_day

TODAY = datetime(2026, 10, 17, 9, 0)


def rooms(*statuses):
    return [
        Room(id=str(i), number=str(100 + i), type="Standard", status=status,
             floor=1, max_occupancy=2, base_price=Decimal("100"))
        for i, status in enumerate(statuses)
    ]


def booking(check_in, amount):
    return Booking(id=amount, room_id="r", guest_id="g", check_in=check_in,
                   check_out=check_in + timedelta(days=1), adults=1,
                   total_amount=Decimal(amount), channel="direct")


class TestOccupancyRate:

    def test_no_rooms(self):
        assert occupancy_rate([]) == 0

    def test_quarter(self):
        assert occupancy_rate(rooms(RoomStatus.OCCUPIED, RoomStatus.AVAILABLE,
                                    RoomStatus.AVAILABLE, RoomStatus.MAINTENANCE)) == 25

    @pytest.mark.parametrize("occupied,total,expected", [
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),   # 12.5 rounds up
        (3, 3, 100),
    ])
    def test_rounding(self, occupied, total, expected):
        statuses = [RoomStatus.OCCUPIED] * occupied + [RoomStatus.AVAILABLE] * (total - occupied)

        assert occupancy_rate(rooms(*statuses)) == expected


class TestRevenue:

    def test_only_todays_check_ins(self):
        bookings = [
            booking(TODAY.replace(hour=0), "40.10"),
            booking(TODAY.replace(hour=23, minute=59), "59.90"),
            booking(TODAY - timedelta(days=1), "500.00"),
        ]

        assert revenue_for_day(bookings, TODAY) == Decimal("100.00")

    def test_no_bookings(self):
        assert revenue_for_day([], TODAY) == Decimal("0.00")

    def test_dashboard_uses_clock(self, store):
        store.bookings.create(booking(TODAY, "250.00").model_dump(exclude={"id"}))

        metrics = ReportService(store, clock=lambda: TODAY).get_dashboard_metrics()

        assert metrics["revenue"] == Decimal("250.00")
        assert metrics["pending_checkins"] == 1
        assert metrics["occupancy_rate"] == 0

    def test_decimal_exact_sum(self):
        bookings = [booking(TODAY, "99.99"), booking(TODAY.replace(hour=18), "0.01")]

        assert str(revenue_for_day(bookings, TODAY)) == "100.00"
