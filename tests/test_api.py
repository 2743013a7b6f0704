"""
HTTP-level tests: status codes, JSON shapes and the error body contract.
"""

from fastapi.testclient import TestClient

from pokerlog.presentation.api.dependencies import get_session_service


def _session_body(**overrides) -> dict:
    body = {
        "date": "2025-01-10",
        "location": "Casino Barcelona",
        "game_type": "NLHE 1/2",
        "buy_in": 100,
        "cash_out": 150,
        "duration_minutes": 60,
        "notes": "",
    }
    body.update(overrides)
    return body


class TestHealth:

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "timestamp" in data


class TestSessionsEndpoints:

    def test_create_returns_201_with_profit(self, client):
        response = client.post("/api/sessions", json=_session_body())
        assert response.status_code == 201
        data = response.json()
        assert data["id"] is not None
        assert data["profit"] == 50.0
        assert data["buy_in"] == 100.0
        assert data["date"] == "2025-01-10"
        assert data["created_at"] is not None

    def test_create_minimal_body(self, client):
        response = client.post(
            "/api/sessions", json={"date": "2025-01-10", "buy_in": 20, "cash_out": 0},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["location"] == ""
        assert data["game_type"] == ""
        assert data["duration_minutes"] == 0
        assert data["profit"] == -20.0

    def test_missing_date_is_400(self, client):
        response = client.post("/api/sessions", json=_session_body(date=None))
        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
        assert client.get("/api/sessions").json() == []

    def test_negative_amount_is_400(self, client):
        response = client.post("/api/sessions", json=_session_body(buy_in=-5))
        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_non_numeric_amount_is_400(self, client):
        response = client.post("/api/sessions", json=_session_body(buy_in="abc"))
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert "buy_in" in body["message"]

    def test_out_of_range_values_are_400(self, client):
        response = client.post(
            "/api/sessions", json={"date": "2025-01-01", "buy_in": "1e27", "cash_out": 0},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

        response = client.post("/api/sessions", json=_session_body(duration_minutes=10**20))
        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
        assert client.get("/api/sessions").json() == []

    def test_unpadded_date_is_400(self, client):
        response = client.post("/api/sessions", json=_session_body(date="2025-1-5"))
        assert response.status_code == 400

    def test_get_update_delete_roundtrip(self, client):
        created = client.post("/api/sessions", json=_session_body()).json()
        url = f"/api/sessions/{created['id']}"

        assert client.get(url).json()["notes"] == ""

        response = client.put(url, json=_session_body(cash_out=80, notes="tilt"))
        assert response.status_code == 200
        assert response.json()["profit"] == -20.0
        assert response.json()["created_at"] == created["created_at"]

        response = client.delete(url)
        assert response.status_code == 200
        assert "message" in response.json()

        response = client.get(url)
        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_missing_ids_are_404(self, client):
        assert client.get("/api/sessions/77").status_code == 404
        assert client.put("/api/sessions/77", json=_session_body()).status_code == 404
        assert client.delete("/api/sessions/77").status_code == 404

    def test_invalid_update_of_missing_id_is_400(self, client):
        response = client.put("/api/sessions/77", json=_session_body(date=None))
        assert response.status_code == 400

    def test_list_newest_first(self, client):
        for day in ("2025-01-01", "2025-01-03", "2025-01-02"):
            client.post("/api/sessions", json=_session_body(date=day))
        dates = [s["date"] for s in client.get("/api/sessions").json()]
        assert dates == ["2025-01-03", "2025-01-02", "2025-01-01"]


class TestStatsEndpoint:

    def test_empty(self, client):
        data = client.get("/api/stats").json()
        assert data["total_sessions"] == 0
        assert data["total_profit"] == 0
        assert data["avg_hourly_rate"] == 0
        assert data["by_location"] == []
        assert data["by_game_type"] == []

    def test_aggregates(self, client):
        client.post("/api/sessions", json=_session_body(
            date="2025-01-01", buy_in=100, cash_out=150, duration_minutes=60,
            location="A", game_type="",
        ))
        client.post("/api/sessions", json=_session_body(
            date="2025-01-02", buy_in=200, cash_out=150, duration_minutes=30,
            location="B", game_type="",
        ))

        data = client.get("/api/stats").json()
        assert data["total_sessions"] == 2
        assert data["total_profit"] == 0
        assert data["winning_sessions"] == 1
        assert data["losing_sessions"] == 1
        assert data["win_rate"] == 50.0
        assert data["total_hours"] == 1.5
        assert data["avg_hourly_rate"] == 0
        assert data["best_session"] == 50.0
        assert data["worst_session"] == -50.0
        assert [b["location"] for b in data["by_location"]] == ["A", "B"]
        assert data["by_game_type"] == [
            {"game_type": None, "label": "Unknown", "sessions": 2, "profit": 0.0},
        ]
        assert [p["cumulative_profit"] for p in data["profit_curve"]] == [50.0, 0.0]


class TestLocationsEndpoints:

    def test_create_and_list(self, client):
        assert client.post("/api/locations", json={"name": " Stars "}).status_code == 201
        assert client.post("/api/locations", json={"name": "Bellagio"}).status_code == 201

        names = [loc["name"] for loc in client.get("/api/locations").json()]
        assert names == ["Bellagio", "Stars"]

    def test_duplicate_is_409(self, client):
        client.post("/api/locations", json={"name": "Stars"})
        response = client.post("/api/locations", json={"name": "Stars"})
        assert response.status_code == 409
        assert response.json()["error"] == "CONFLICT"

    def test_blank_name_is_400(self, client):
        response = client.post("/api/locations", json={"name": "  "})
        assert response.status_code == 400
        assert client.post("/api/locations", json={}).status_code == 400


class _BrokenService:

    async def list_sessions(self):
        raise RuntimeError("disk on fire")


class TestUnexpectedErrors:

    def test_unexpected_exception_is_opaque_500(self, app):
        async def broken_service():
            yield _BrokenService()

        app.dependency_overrides[get_session_service] = broken_service
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/sessions")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "INTERNAL_ERROR"
        assert "disk on fire" not in body["message"]
