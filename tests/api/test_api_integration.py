"""
Channel manager integration API tests
"""
from datetime import datetime, timedelta
from fastapi.testclient import TestClient


class TestIntegration:

    def test_status_before_first_sync(self, client: TestClient):
        response = client.get("/api/integration/sync-status")

        assert response.status_code == 200
        data = response.json()
        assert data["lastSync"] is None
        assert data["status"] == "connected"
        assert data["nextSync"]

    def test_sync_stamps_bookings(self, client: TestClient, store, sample_booking, sample_room):
        response = client.post("/api/integration/sync")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["syncedItems"] == {"rooms": 1, "bookings": 1, "rates": 1}
        assert store.bookings.get(sample_booking.id).external_sync_id.startswith("sync-")

    def test_sync_keeps_existing_sync_id(self, client: TestClient, store, sample_booking):
        client.post("/api/integration/sync")
        first_id = store.bookings.get(sample_booking.id).external_sync_id

        client.post("/api/integration/sync")

        assert store.bookings.get(sample_booking.id).external_sync_id == first_id

    def test_status_after_sync(self, client: TestClient):
        synced = client.post("/api/integration/sync").json()

        data = client.get("/api/integration/sync-status").json()

        assert data["lastSync"] == synced["syncedAt"]
        last_sync = datetime.fromisoformat(data["lastSync"])
        assert datetime.fromisoformat(data["nextSync"]) - last_sync == timedelta(minutes=5)
