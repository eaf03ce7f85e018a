"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from mood_insights.config.config_manager import ConfigManager
from mood_insights.core.models.config_models import (
    AnomalyDetectionConfig,
    MoodPredictionConfig,
    PatternRecognitionConfig,
)

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config" / "analytics_config.yaml"


def _write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "analytics.yaml"
    path.write_text(text)
    return path


class TestConfigManager:
    def test_dot_notation(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, "repository:\n  data_dir: /tmp/moods\n")
        config = ConfigManager(str(path))
        assert config.get("repository.data_dir") == "/tmp/moods"
        assert config.get("repository.missing", "fallback") == "fallback"
        assert config.get("nothing.here") is None

    def test_partial_section_keeps_defaults(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, "anomaly_detection:\n  z_score_threshold: 2.5\n")
        detection = ConfigManager(str(path)).anomaly_detection_config()
        assert detection.z_score_threshold == 2.5
        assert detection.min_data_points == 7
        assert detection.lookback_days == 30

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        config = ConfigManager(str(tmp_path / "absent.yaml"))
        assert config.config == {}
        assert config.mood_prediction_config() == MoodPredictionConfig()
        assert config.pattern_recognition_config() == PatternRecognitionConfig()

    def test_empty_file(self, tmp_path: Path) -> None:
        config = ConfigManager(str(_write_config(tmp_path, "")))
        assert config.config == {}

    def test_env_var_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _write_config(tmp_path, "mood_prediction:\n  sequence_length: 14\n")
        monkeypatch.setenv("MOOD_INSIGHTS_CONFIG", str(path))
        assert ConfigManager().mood_prediction_config().sequence_length == 14

    def test_shipped_config_matches_defaults(self) -> None:
        config = ConfigManager(str(REPO_CONFIG))
        assert config.mood_prediction_config() == MoodPredictionConfig()
        assert config.pattern_recognition_config() == PatternRecognitionConfig()
        assert config.anomaly_detection_config() == AnomalyDetectionConfig()


class TestConfigModels:
    def test_overrides_drop_none(self) -> None:
        config = PatternRecognitionConfig.from_overrides({"min_confidence": None, "min_occurrences": 5})
        assert config.min_confidence == 0.6
        assert config.min_occurrences == 5

    def test_unknown_keys_ignored(self) -> None:
        assert MoodPredictionConfig.from_overrides({"model_path": "x"}).sequence_length == 7

    def test_invalid_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AnomalyDetectionConfig.from_overrides({"z_score_threshold": 0})

    def test_frozen(self) -> None:
        config = MoodPredictionConfig()
        with pytest.raises(ValidationError):
            config.sequence_length = 3
