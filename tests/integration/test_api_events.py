"""
Integration tests for event ingestion (X-API-Key) and event queries (session).
"""
import pytest

from fakes import TEST_INGESTION_KEY

pytestmark = pytest.mark.integration

INGEST_HEADERS = {"X-API-Key": TEST_INGESTION_KEY}


def reading(happened_at: str = "2024-01-15T12:00:00Z", **overrides) -> dict:
    payload = {
        "mac_address": "AA:BB:CC:DD:EE:FF",
        "ip_address": "192.168.1.20",
        "soil_moisture": 40.5,
        "humidity": 61.0,
        "temperature": 21.3,
        "light_intensity": 300.0,
        "happened_at": happened_at,
    }
    payload.update(overrides)
    return payload


def events_url(serial_number: str) -> str:
    return f"/api/v1/devices/{serial_number}/events"


class TestIngestionAPI:
    def test_ingest_creates_device_on_first_event(self, client, device_repo):
        response = client.post(events_url("S1"), json=reading("2024-01-15T12:00:00Z"), headers=INGEST_HEADERS)

        assert response.status_code == 201
        data = response.json()
        assert data["device_id"] == next(iter(device_repo.devices))
        assert data["ip_address"] == "192.168.1.20"

    @pytest.mark.parametrize("headers", [{}, {"X-API-Key": "wrong"}])
    def test_ingest_without_valid_key_is_forbidden(self, client, device_repo, headers):
        response = client.post(events_url("S1"), json=reading("2024-01-15T12:00:00Z"), headers=headers)
        assert response.status_code == 403
        assert device_repo.devices == {}

    def test_session_token_does_not_authorize_ingestion(self, client, alice_headers):
        response = client.post(events_url("S1"), json=reading("2024-01-15T12:00:00Z"), headers=alice_headers)
        assert response.status_code == 403

    def test_missing_readings_are_accepted(self, client):
        payload = reading("2024-01-15T12:00:00Z")
        del payload["humidity"]
        payload["temperature"] = None

        response = client.post(events_url("S1"), json=payload, headers=INGEST_HEADERS)
        assert response.status_code == 201
        assert response.json()["humidity"] is None

    @pytest.mark.parametrize(
        "overrides",
        [
            {"happened_at": "2024-01-15T12:00:00"},
            {"happened_at": "not a date"},
            {"ip_address": "999.1.1.1"},
            {"temperature": "hot"},
        ],
    )
    def test_invalid_reading(self, client, overrides):
        response = client.post(events_url("S1"), json=reading(**overrides), headers=INGEST_HEADERS)
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request"

    def test_key_is_checked_before_body_is_parsed(self, client, device_repo):
        response = client.post(
            events_url("S1"),
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 403
        assert device_repo.devices == {}

    def test_wrong_key_with_invalid_reading_is_forbidden(self, client):
        response = client.post(events_url("S1"), json={"temperature": "hot"}, headers={"X-API-Key": "wrong"})
        assert response.status_code == 403

    def test_unparsable_body_with_key_is_bad_request(self, client, device_repo):
        response = client.post(
            events_url("S1"),
            content=b"{not json",
            headers={**INGEST_HEADERS, "Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert device_repo.devices == {}


class TestEventQueryAPI:
    def _seed(self, client, headers, serial_number="S1"):
        for happened_at in ("2024-02-01T00:00:00Z", "2023-12-31T00:00:00Z", "2024-01-15T00:00:00Z"):
            response = client.post(events_url(serial_number), json=reading(happened_at), headers=INGEST_HEADERS)
            assert response.status_code == 201
        client.post("/api/v1/devices", json={"serial_number": serial_number}, headers=headers)

    def test_full_history_in_order(self, client, alice_headers):
        self._seed(client, alice_headers)

        response = client.get(events_url("S1"), headers=alice_headers)
        assert response.status_code == 200
        assert [e["happened_at"][:10] for e in response.json()] == ["2023-12-31", "2024-01-15", "2024-02-01"]

    def test_january_window(self, client, alice_headers):
        self._seed(client, alice_headers)

        response = client.get(
            events_url("S1"),
            params={"startDate": "2024-01-01T00:00:00Z", "endDate": "2024-01-31T23:59:59Z"},
            headers=alice_headers,
        )
        assert response.status_code == 200
        assert [e["happened_at"][:10] for e in response.json()] == ["2024-01-15"]

    def test_start_only_window(self, client, alice_headers):
        self._seed(client, alice_headers)

        response = client.get(events_url("S1"), params={"startDate": "2024-01-15T00:00:00Z"}, headers=alice_headers)
        assert [e["happened_at"][:10] for e in response.json()] == ["2024-01-15", "2024-02-01"]

    def test_end_only_window(self, client, alice_headers):
        self._seed(client, alice_headers)

        response = client.get(events_url("S1"), params={"endDate": "2024-01-15T00:00:00Z"}, headers=alice_headers)
        assert [e["happened_at"][:10] for e in response.json()] == ["2023-12-31", "2024-01-15"]

    def test_malformed_window(self, client, alice_headers):
        self._seed(client, alice_headers)

        response = client.get(events_url("S1"), params={"startDate": "yesterday"}, headers=alice_headers)
        assert response.status_code == 400
        assert "startDate" in response.json()["detail"]

    def test_foreign_device_looks_missing(self, client, alice_headers, bob_headers):
        self._seed(client, bob_headers)

        foreign = client.get(events_url("S1"), headers=alice_headers)
        missing = client.get(events_url("NOPE"), headers=alice_headers)
        assert foreign.status_code == missing.status_code == 404
        assert foreign.json() == missing.json()

    def test_ingestion_key_does_not_authorize_queries(self, client):
        assert client.get(events_url("S1"), headers=INGEST_HEADERS).status_code == 401

    def test_deleting_device_removes_its_events(self, client, alice_headers):
        self._seed(client, alice_headers)
        device_id = client.get("/api/v1/devices", headers=alice_headers).json()[0]["id"]

        assert client.delete(f"/api/v1/devices/{device_id}", headers=alice_headers).status_code == 204
        client.post("/api/v1/devices", json={"serial_number": "S1"}, headers=alice_headers)
        assert client.get(events_url("S1"), headers=alice_headers).json() == []
