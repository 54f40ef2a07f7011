"""
Maintenance service tests
"""
import pytest
from datetime import datetime

from hotel_pms.exceptions import InvalidStateError
from hotel_pms.models.ontology import MaintenanceStatus, MaintenanceType
from hotel_pms.models.schemas import MaintenanceRequestCreate
from hotel_pms.models.events import EventType
from hotel_pms.services.maintenance_service import MaintenanceService

NOW = datetime(2026, 10, 17, 15, 45)


@pytest.fixture
def service(store, events):
    return MaintenanceService(store, event_publisher=events.append, clock=lambda: NOW)


def new_request(service, room_id, request_type=MaintenanceType.CLEANING, notes=None):
    return service.create_request(MaintenanceRequestCreate(
        room_id=room_id, type=request_type, description="Turnover", notes=notes,
    ))


class TestMaintenanceService:

    def test_create_publishes_event(self, service, events, sample_room):
        request = new_request(service, sample_room.id)

        assert events[0].event_type == EventType.MAINTENANCE_CREATED
        assert events[0].data["request_id"] == request.id

    def test_complete_cleaning(self, service, store, events, sample_room):
        request = new_request(service, sample_room.id)

        completed, room = service.complete_request(request.id)

        assert completed.status == MaintenanceStatus.COMPLETED
        assert completed.completed_at == NOW
        assert room.last_cleaned == NOW
        assert store.rooms.get(sample_room.id).last_cleaned == NOW
        assert events[-1].event_type == EventType.MAINTENANCE_COMPLETED
        assert all(e.timestamp == NOW for e in events)

    def test_complete_appends_notes(self, service, sample_room):
        request = new_request(service, sample_room.id, MaintenanceType.REPAIR, notes="Tap drips")

        completed, room = service.complete_request(request.id, "Washer replaced")

        assert completed.notes == "Tap drips\nWasher replaced"
        assert room is None

    def test_cleaning_with_dangling_room(self, service):
        request = new_request(service, "gone")

        completed, room = service.complete_request(request.id)

        assert completed.status == MaintenanceStatus.COMPLETED
        assert room is None

    def test_already_completed(self, service, sample_room):
        request = new_request(service, sample_room.id)
        service.complete_request(request.id)

        with pytest.raises(InvalidStateError):
            service.complete_request(request.id)
