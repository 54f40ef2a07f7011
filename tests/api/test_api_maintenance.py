"""
Maintenance API tests
"""
from fastapi.testclient import TestClient


class TestMaintenanceRequests:

    def test_create_request_defaults(self, client: TestClient, sample_room):
        response = client.post("/api/maintenance", json={
            "roomId": sample_room.id,
            "type": "repair",
            "description": "Leaking tap",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["priority"] == "medium"
        assert data["status"] == "pending"
        assert data["completedAt"] is None
        assert data["createdAt"]

    def test_invalid_priority(self, client: TestClient, sample_room):
        response = client.post("/api/maintenance", json={
            "roomId": sample_room.id,
            "type": "repair",
            "priority": "whenever",
            "description": "Leaking tap",
        })

        assert response.status_code == 400

    def test_pending_and_by_room(self, client: TestClient, sample_room):
        first = client.post("/api/maintenance", json={
            "roomId": sample_room.id, "type": "cleaning", "description": "Turnover",
        }).json()
        client.post("/api/maintenance", json={
            "roomId": "other-room", "type": "inspection",
            "description": "Fire check", "status": "in_progress",
        })

        pending = client.get("/api/maintenance/pending").json()
        by_room = client.get(f"/api/maintenance/room/{sample_room.id}").json()

        assert [r["id"] for r in pending] == [first["id"]]
        assert [r["id"] for r in by_room] == [first["id"]]
        assert len(client.get("/api/maintenance").json()) == 2

    def test_get_missing_request(self, client: TestClient):
        response = client.get("/api/maintenance/unknown")

        assert response.status_code == 404
        assert response.json()["message"] == "Maintenance request not found"

    def test_update_request(self, client: TestClient, sample_room, sample_staff):
        created = client.post("/api/maintenance", json={
            "roomId": sample_room.id, "type": "repair", "description": "Broken lamp",
        }).json()

        response = client.patch(f"/api/maintenance/{created['id']}", json={
            "staffId": sample_staff.id, "status": "in_progress",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["staffId"] == sample_staff.id
        assert data["status"] == "in_progress"
        assert data["description"] == "Broken lamp"


class TestMaintenanceCompletion:

    def test_complete_cleaning_stamps_room(self, client: TestClient, sample_room):
        created = client.post("/api/maintenance", json={
            "roomId": sample_room.id, "type": "cleaning", "description": "Turnover",
        }).json()

        response = client.post(f"/api/maintenance/{created['id']}/complete", json={"notes": "Done"})

        assert response.status_code == 200
        data = response.json()
        assert data["request"]["status"] == "completed"
        assert data["request"]["completedAt"] is not None
        assert data["request"]["notes"] == "Done"
        assert data["room"]["lastCleaned"] == data["request"]["completedAt"]

    def test_complete_repair_without_body(self, client: TestClient, sample_room):
        created = client.post("/api/maintenance", json={
            "roomId": sample_room.id, "type": "repair", "description": "Lamp",
        }).json()

        response = client.post(f"/api/maintenance/{created['id']}/complete")

        assert response.status_code == 200
        assert response.json()["room"] is None

    def test_complete_twice_rejected(self, client: TestClient, sample_room):
        created = client.post("/api/maintenance", json={
            "roomId": sample_room.id, "type": "repair", "description": "Lamp",
        }).json()
        client.post(f"/api/maintenance/{created['id']}/complete")

        response = client.post(f"/api/maintenance/{created['id']}/complete")

        assert response.status_code == 400

    def test_complete_missing_request(self, client: TestClient):
        assert client.post("/api/maintenance/unknown/complete").status_code == 404
