"""Tests for record validation of DataFrames and files."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pandas as pd
import pytest
from pydantic import ValidationError

from mood_insights.core.models.data_models import MoodObservation, SleepObservation, WellnessSession
from mood_insights.utils.data_validation import FileValidator


def _mood_frame() -> pd.DataFrame:
    return pd.DataFrame([
        {"mood_id": "calm", "mood_label": "calm", "intensity": 6.5,
         "timestamp": "2026-03-01T09:00:00", "activities": "yoga;music"},
        {"mood_id": "tired", "mood_label": "tired", "intensity": 3,
         "timestamp": "2026-03-02T21:00:00", "activities": np.nan},
        {"mood_id": "bad", "mood_label": "bad", "intensity": "high",
         "timestamp": "2026-03-03T09:00:00", "activities": np.nan},
    ])


class TestValidateDataframe:
    def test_filters_invalid_rows(self) -> None:
        records = FileValidator.validate_dataframe(_mood_frame(), MoodObservation)
        assert [r.mood_id for r in records] == ["calm", "tired"]
        assert records[0].activities == ["yoga", "music"]
        assert records[1].activities == []

    def test_raise_mode(self) -> None:
        with pytest.raises(ValidationError):
            FileValidator.validate_dataframe(_mood_frame(), MoodObservation, error_handling="raise")

    def test_empty_frame(self) -> None:
        assert FileValidator.validate_dataframe(pd.DataFrame(), MoodObservation) == []
        assert FileValidator.validate_dataframe(None, MoodObservation) == []

    def test_missing_optional_value(self) -> None:
        df = pd.DataFrame([{"date": "2026-03-01", "duration_minutes": 410, "sleep_score": np.nan}])
        records = FileValidator.validate_dataframe(df, SleepObservation)
        assert records[0].sleep_score is None


class TestValidateFiles:
    def test_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "sleep.csv"
        pd.DataFrame([
            {"date": "2026-03-01", "duration_minutes": 410},
            {"date": "03/02/2026", "duration_minutes": 400},
        ]).to_csv(path, index=False)
        records = FileValidator.validate_csv(str(path), SleepObservation)
        assert [r.date for r in records] == ["2026-03-01"]

    def test_missing_csv(self, tmp_path: Path) -> None:
        assert FileValidator.validate_csv(str(tmp_path / "absent.csv"), SleepObservation) == []
        with pytest.raises(FileNotFoundError):
            FileValidator.validate_csv(str(tmp_path / "absent.csv"), SleepObservation, error_handling="raise")

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "sessions.json"
        path.write_text(json.dumps([
            {"session_type": "yoga", "completed_at": "2026-03-01T07:30:00"},
            {"session_type": "music"},
        ]))
        records = FileValidator.validate_json(str(path), WellnessSession)
        assert [r.session_type for r in records] == ["yoga"]

    def test_json_must_be_a_list(self, tmp_path: Path) -> None:
        path = tmp_path / "sessions.json"
        path.write_text(json.dumps({"session_type": "yoga"}))
        with pytest.raises(ValueError, match="Expected a list"):
            FileValidator.validate_json(str(path), WellnessSession)
