"""Tests for the input record models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from mood_insights.core.analysis.anomaly_detection import AnomalyDetector
from mood_insights.core.analysis.mood_prediction import MoodPredictor
from mood_insights.core.analysis.mood_trends import calculate_mood_trend
from mood_insights.core.models.data_models import ActivityObservation, MoodObservation, SleepObservation


def _mixed_offset_history() -> list[dict]:
    """Alternate UTC-suffixed and naive ISO timestamps."""
    history = []
    for day in range(1, 11):
        suffix = "Z" if day % 2 else ""
        history.append({
            "mood_id": "m",
            "mood_label": "m",
            "intensity": 10 if day == 10 else 5,
            "timestamp": f"2026-03-{day:02d}T09:00:00{suffix}",
        })
    return history


class TestTimestamps:
    def test_naive_timestamp_gets_utc(self) -> None:
        mood = MoodObservation(mood_id="m", mood_label="m", intensity=5, timestamp="2026-03-01T09:00:00")
        assert mood.timestamp == datetime(2026, 3, 1, 9, tzinfo=timezone.utc)

    def test_offset_wall_clock_is_kept(self) -> None:
        mood = MoodObservation(mood_id="m", mood_label="m", intensity=5, timestamp="2026-03-01T23:30:00+05:00")
        assert mood.timestamp.hour == 23
        assert mood.timestamp.utcoffset() == timedelta(hours=5)

    def test_predict_with_mixed_offsets(self) -> None:
        result = MoodPredictor().predict(_mixed_offset_history())
        assert result.predicted_mood.mood_id in {"neutral", "calm"}

    def test_detect_anomalies_with_mixed_offsets(self) -> None:
        anomalies = AnomalyDetector().detect_anomalies("u1", _mixed_offset_history())
        assert [a.id for a in anomalies] == ["mood_spike_u1_9"]

    def test_trend_with_mixed_offsets(self) -> None:
        assert calculate_mood_trend(_mixed_offset_history()).trend == "improving"


class TestNumericBounds:
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_intensity_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError):
            MoodObservation(mood_id="m", mood_label="m", intensity=value, timestamp="2026-03-01T09:00:00")

    def test_intensity_clamped(self) -> None:
        high = MoodObservation(mood_id="m", mood_label="m", intensity=14, timestamp="2026-03-01T09:00:00")
        low = MoodObservation(mood_id="m", mood_label="m", intensity=-2, timestamp="2026-03-01T09:00:00")
        assert (high.intensity, low.intensity) == (10.0, 1.0)

    def test_non_finite_durations_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SleepObservation(date="2026-03-01", duration_minutes=float("nan"))
        with pytest.raises(ValidationError):
            ActivityObservation(date="2026-03-01", steps=100, active_minutes=float("inf"))
