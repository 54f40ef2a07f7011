"""
Guest API tests
"""
from fastapi.testclient import TestClient


class TestGuests:

    def test_create_guest(self, client: TestClient):
        response = client.post("/api/guests", json={
            "firstName": "Liam",
            "lastName": "Chen",
            "email": "liam.chen@example.com",
            "preferences": {"floor": "high", "newspaper": True},
            "vipStatus": True,
        })

        assert response.status_code == 201
        data = response.json()
        assert data["firstName"] == "Liam"
        assert data["preferences"] == {"floor": "high", "newspaper": True}
        assert data["vipStatus"] is True
        assert data["createdAt"]

    def test_create_guest_missing_name(self, client: TestClient):
        response = client.post("/api/guests", json={"lastName": "Chen", "email": "a@b.c"})

        assert response.status_code == 400
        assert "firstName" in response.json()["message"]

    def test_list_and_vip_filter(self, client: TestClient, sample_guest):
        client.post("/api/guests", json={
            "firstName": "Liam", "lastName": "Chen",
            "email": "liam.chen@example.com", "vipStatus": True,
        })

        assert len(client.get("/api/guests").json()) == 2
        vips = client.get("/api/guests", params={"vip_only": True}).json()
        assert [g["firstName"] for g in vips] == ["Liam"]

    def test_get_guest(self, client: TestClient, sample_guest):
        response = client.get(f"/api/guests/{sample_guest.id}")

        assert response.status_code == 200
        assert response.json()["email"] == "sarah.johnson@example.com"

    def test_get_missing_guest(self, client: TestClient):
        response = client.get("/api/guests/unknown")

        assert response.status_code == 404
        assert response.json()["message"] == "Guest not found"

    def test_get_by_email(self, client: TestClient, sample_guest):
        response = client.get("/api/guests/email/sarah.johnson@example.com")

        assert response.status_code == 200
        assert response.json()["id"] == sample_guest.id

    def test_update_guest(self, client: TestClient, sample_guest):
        response = client.patch(f"/api/guests/{sample_guest.id}", json={"vipStatus": True})

        assert response.status_code == 200
        data = response.json()
        assert data["vipStatus"] is True
        assert data["lastName"] == "Johnson"
        assert data["preferences"] == {"pillow": "firm"}

    def test_update_clears_nullable_field(self, client: TestClient, sample_guest):
        data = client.patch(f"/api/guests/{sample_guest.id}", json={"phone": None}).json()

        assert data["phone"] is None

    def test_update_missing_guest(self, client: TestClient):
        response = client.patch("/api/guests/unknown", json={"vipStatus": True})

        assert response.status_code == 404
        assert response.json()["message"] == "Guest not found"
