"""
Hotel settings API tests
"""
from fastapi.testclient import TestClient


class TestSettings:

    def test_put_creates_key(self, client: TestClient):
        response = client.put("/api/settings/check_in_time", json={"value": "14:00"})

        assert response.status_code == 200
        data = response.json()
        assert data["key"] == "check_in_time"
        assert data["value"] == "14:00"
        assert data["updatedAt"]

    def test_put_replaces_value_wholesale(self, client: TestClient):
        first = client.put("/api/settings/taxes", json={"value": {"gst": 10, "city": 2}}).json()

        second = client.put("/api/settings/taxes", json={"value": {"gst": 12}}).json()

        assert second["id"] == first["id"]
        assert second["value"] == {"gst": 12}
        assert len(client.get("/api/settings").json()) == 1

    def test_get_setting(self, client: TestClient):
        client.put("/api/settings/currency", json={"value": "AUD"})

        response = client.get("/api/settings/currency")

        assert response.status_code == 200
        assert response.json()["value"] == "AUD"

    def test_get_missing_setting(self, client: TestClient):
        response = client.get("/api/settings/nothing")

        assert response.status_code == 404
        assert response.json() == {"message": "Setting not found"}

    def test_value_required(self, client: TestClient):
        assert client.put("/api/settings/currency", json={}).status_code == 400
