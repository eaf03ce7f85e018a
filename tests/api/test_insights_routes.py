"""Tests for the insights API routes."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
from fastapi.testclient import TestClient

from mood_insights.api.main import app
from mood_insights.api.routes.insights_routes import get_insights_service
from mood_insights.core.analysis.anomaly_detection import AnomalyDetector
from mood_insights.core.analysis.mood_prediction import MoodPredictor
from mood_insights.core.analysis.pattern_recognition import PatternRecognizer
from mood_insights.core.repositories.data_repository import MOOD_FILE, DataRepository
from mood_insights.core.services.insights_service import InsightsService


def _mood(intensity: float, day: int, hour: int = 12, activities: str = "") -> dict:
    return {
        "mood_id": "m",
        "mood_label": "m",
        "intensity": intensity,
        "timestamp": f"2026-03-{day:02d}T{hour:02d}:00:00",
        "activities": activities,
    }


@pytest.fixture
def client(tmp_path: Path):
    repository = DataRepository(str(tmp_path))
    repository.save_records(MOOD_FILE, pd.DataFrame(
        [dict(_mood(5 + (day % 3), day), user_id="alice") for day in range(1, 11)]
    ))
    service = InsightsService(repository, MoodPredictor(), PatternRecognizer(), AnomalyDetector())
    app.dependency_overrides[get_insights_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRoutes:
    def test_root(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Welcome to the Mood Insights API"
        assert "/insights/predict" in body["endpoints"]

    def test_predict_empty_history(self, client: TestClient) -> None:
        response = client.post("/insights/predict", json={"history": []})
        assert response.status_code == 200
        body = response.json()
        assert body["predicted_mood"]["mood_label"] == "Neutral"
        assert body["predicted_mood"]["confidence_score"] == 0.5

    def test_predict_with_context(self, client: TestClient) -> None:
        response = client.post("/insights/predict", json={
            "user_id": "alice",
            "history": [_mood(5, day) for day in range(2, 9)],
            "context": {"day_of_week": 3, "is_weekend": False, "hour_of_day": 14},
        })
        assert response.status_code == 200
        assert response.json()["predicted_mood"]["mood_id"] == "neutral"

    def test_patterns(self, client: TestClient) -> None:
        history = [_mood(8, day, hour=8, activities="yoga") for day in range(1, 11)]
        response = client.post("/insights/patterns", json={"user_id": "alice", "mood_history": history})
        assert response.status_code == 200
        assert [p["pattern_type"] for p in response.json()] == ["circadian", "trigger"]

    def test_anomalies(self, client: TestClient) -> None:
        history = [_mood(5, day) for day in range(1, 10)] + [_mood(10, 10)]
        response = client.post("/insights/anomalies", json={"user_id": "alice", "mood_history": history})
        assert response.status_code == 200
        anomalies = response.json()
        assert len(anomalies) == 1
        assert anomalies[0]["anomaly_type"] == "mood_spike"
        assert anomalies[0]["severity"] == "medium"

    def test_mixed_timestamp_offsets(self, client: TestClient) -> None:
        history = [_mood(5, day) for day in range(1, 10)] + [_mood(10, 10)]
        history[0] = dict(history[0], timestamp="2026-03-01T12:00:00Z")
        for path in ("/insights/predict", "/insights/anomalies"):
            key = "history" if path.endswith("predict") else "mood_history"
            response = client.post(path, json={"user_id": "alice", key: history})
            assert response.status_code == 200

    def test_invalid_record_rejected(self, client: TestClient) -> None:
        bad = dict(_mood(5, 1), timestamp="yesterday")
        response = client.post("/insights/anomalies", json={"user_id": "alice", "mood_history": [bad]})
        assert response.status_code == 422

    def test_report(self, client: TestClient) -> None:
        response = client.get("/insights/report/alice", params={"days": 30})
        assert response.status_code == 200
        body = response.json()
        assert body["user_id"] == "alice"
        assert body["availability"]["predictions_available"] is True

    def test_report_unknown_user(self, client: TestClient) -> None:
        response = client.get("/insights/report/bob")
        assert response.status_code == 404
        assert "bob" in response.json()["detail"]
