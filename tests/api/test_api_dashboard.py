"""
Dashboard API tests
"""
from datetime import datetime, timedelta
from decimal import Decimal
from fastapi.testclient import TestClient

from hotel_pms.models.ontology import RoomStatus, BookingStatus


def add_room(store, number, status):
    return store.rooms.create({
        "number": number, "type": "Standard King", "status": status,
        "floor": 1, "max_occupancy": 2, "base_price": Decimal("285.00"),
    })


def add_booking(store, room, check_in, amount, status=BookingStatus.CONFIRMED):
    return store.bookings.create({
        "room_id": room.id, "guest_id": "g1",
        "check_in": check_in, "check_out": check_in + timedelta(days=1),
        "adults": 1, "total_amount": Decimal(amount), "status": status, "channel": "direct",
    })


class TestDashboardMetrics:

    def test_empty_hotel(self, client: TestClient):
        response = client.get("/api/dashboard/metrics")

        assert response.status_code == 200
        data = response.json()
        assert data["occupancyRate"] == 0
        assert Decimal(data["revenue"]) == Decimal("0")
        assert data["totalRooms"] == 0

    def test_metrics(self, client: TestClient, store):
        occupied = add_room(store, "101", RoomStatus.OCCUPIED)
        add_room(store, "102", RoomStatus.AVAILABLE)
        add_room(store, "103", RoomStatus.AVAILABLE)
        add_room(store, "104", RoomStatus.MAINTENANCE)
        today = datetime.now().replace(hour=12, minute=0, second=0, microsecond=0)
        add_booking(store, occupied, today, "100.00")
        add_booking(store, occupied, today - timedelta(days=1), "999.00")
        store.maintenance_requests.create({
            "room_id": occupied.id, "type": "repair", "description": "Lamp",
        })

        data = client.get("/api/dashboard/metrics").json()

        assert data["occupancyRate"] == 25
        assert data["revenue"] == "100.00"
        assert data["pendingCheckins"] == 1
        assert data["maintenanceRequests"] == 1
        assert data["totalRooms"] == 4
        assert data["occupiedRooms"] == 1
        assert data["availableRooms"] == 2
        assert data["maintenanceRooms"] == 1
        assert data["pendingRooms"] == 0

    def test_revenue_includes_cancelled_arrivals(self, client: TestClient, store):
        room = add_room(store, "101", RoomStatus.AVAILABLE)
        today = datetime.now().replace(hour=9, minute=0, second=0, microsecond=0)
        add_booking(store, room, today, "80.50")
        add_booking(store, room, today, "19.50", status=BookingStatus.CANCELLED)

        assert client.get("/api/dashboard/metrics").json()["revenue"] == "100.00"
