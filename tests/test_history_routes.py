from fastapi.testclient import TestClient

from iris_monitor.app import app
from iris_monitor.config import settings


def _enable_mock_history(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(settings, "telemetry_source", "mock")
    monkeypatch.setattr(settings, "mock_delay_sec", 0.0)
    monkeypatch.setattr(settings, "telemetry_interval_sec", 0.01)
    monkeypatch.setattr(settings, "history_enabled", True)
    monkeypatch.setattr(settings, "history_path", str(tmp_path / "bdd" / "readings_history.jsonl"))


def test_ws_telemetry_streams_and_records_history(monkeypatch, tmp_path):
    _enable_mock_history(monkeypatch, tmp_path)
    with TestClient(app) as client:
        assert client.get("/health").json()["source"] == "mock"
        with client.websocket_connect("/ws/telemetry") as websocket:
            first = websocket.receive_json()
            second = websocket.receive_json()
        assert first["type"] == "reading"
        assert second["type"] == "reading"
        assert 0 <= second["targetPosition"] < 2048

        last = client.get("/api/history/last").json()["reading"]
        assert last is not None
        assert set(last) == {
            "lux",
            "smoothedLux",
            "luxChange",
            "adjustedSpeed",
            "adjustedAcceleration",
            "targetPosition",
            "currentPosition",
        }

        response = client.post("/api/history/reset")
        assert response.status_code == 200
        assert response.json() == {"ok": True, "history_cleared": True}
        assert client.get("/api/history/last").json() == {"reading": None}
