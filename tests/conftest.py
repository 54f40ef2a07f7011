"""
Pytest configuration and shared fixtures
"""
import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from fastapi.testclient import TestClient

from hotel_pms.database import MemoryStore, get_store
from hotel_pms.models.ontology import RoomStatus, BookingStatus
from hotel_pms.main import app


@pytest.fixture(scope="function")
def store():
    """Empty store, one per test"""
    return MemoryStore()


@pytest.fixture(scope="function")
def client(store):
    """Test client running against the per-test store"""
    def override_get_store():
        return store

    app.dependency_overrides[get_store] = override_get_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def events():
    """Collects whatever a service publishes"""
    received = []
    return received


# ============== Data Fixtures ==============

@pytest.fixture
def sample_room(store):
    return store.rooms.create({
        "number": "101",
        "type": "Standard King",
        "status": RoomStatus.AVAILABLE,
        "floor": 1,
        "max_occupancy": 2,
        "base_price": Decimal("285.00"),
        "amenities": ["WiFi", "TV"],
    })


@pytest.fixture
def sample_guest(store):
    return store.guests.create({
        "first_name": "Sarah",
        "last_name": "Johnson",
        "email": "sarah.johnson@example.com",
        "phone": "+61 400 000 000",
        "nationality": "Australian",
        "preferences": {"pillow": "firm"},
        "vip_status": False,
    })


@pytest.fixture
def sample_booking(store, sample_room, sample_guest):
    """Confirmed booking arriving today at 14:00, leaving in two days"""
    today = datetime.now().replace(hour=14, minute=0, second=0, microsecond=0)
    return store.bookings.create({
        "room_id": sample_room.id,
        "guest_id": sample_guest.id,
        "check_in": today,
        "check_out": today + timedelta(days=2),
        "adults": 2,
        "children": 0,
        "total_amount": Decimal("570.00"),
        "status": BookingStatus.CONFIRMED,
        "channel": "direct",
    })


@pytest.fixture
def sample_staff(store):
    return store.staff.create({
        "employee_id": "EMP001",
        "first_name": "Tom",
        "last_name": "Reid",
        "email": "tom.reid@example.com",
        "department": "Housekeeping",
        "position": "Attendant",
        "is_active": True,
        "start_date": datetime(2024, 1, 15),
    })
