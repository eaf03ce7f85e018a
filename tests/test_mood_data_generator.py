"""Tests for synthetic data generation."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from mood_insights.core.repositories.data_repository import ACTIVITY_FILE, MOOD_FILE, SLEEP_FILE, DataRepository
from mood_insights.data_generation.mood_data_generator import MoodDataGenerator

CONFIG_PATH = str(Path(__file__).resolve().parents[1] / "config" / "data_generation_config.yaml")


class TestMoodDataGenerator:
    def test_frames_per_user_and_day(self) -> None:
        data = MoodDataGenerator(CONFIG_PATH, seed=7).generate(user_count=2, days=5, start_date="2026-03-01")
        assert len(data["sleep"]) == 10
        assert len(data["activity"]) == 10
        assert data["moods"]["user_id"].nunique() == 2
        # One to three entries per day
        assert 10 <= len(data["moods"]) <= 30

    def test_values_in_range(self) -> None:
        data = MoodDataGenerator(CONFIG_PATH, seed=3).generate(user_count=1, days=20)
        moods = data["moods"]
        assert moods["intensity"].between(1, 10).all()
        assert set(moods["mood_id"]) <= {"happy", "calm", "neutral", "tired", "anxious"}
        assert (data["sleep"]["duration_minutes"] >= 120).all()
        assert (data["activity"]["steps"] >= 0).all()

    def test_seed_is_reproducible(self) -> None:
        first = MoodDataGenerator(CONFIG_PATH, seed=11).generate(user_count=2, days=4)
        second = MoodDataGenerator(CONFIG_PATH, seed=11).generate(user_count=2, days=4)
        for key in ("moods", "sleep", "activity"):
            pd.testing.assert_frame_equal(first[key], second[key])

    def test_saved_records_load_cleanly(self, tmp_path: Path) -> None:
        data = MoodDataGenerator(CONFIG_PATH, seed=5).generate(user_count=1, days=10, start_date="2026-03-01")
        repository = DataRepository(str(tmp_path))
        repository.save_records(MOOD_FILE, data["moods"])
        repository.save_records(SLEEP_FILE, data["sleep"])
        repository.save_records(ACTIVITY_FILE, data["activity"])

        user_id = repository.get_user_ids()[0]
        assert len(repository.get_mood_data(user_id)) == len(data["moods"])
        assert len(repository.get_sleep_data(user_id)) == 10
        assert len(repository.get_activity_data(user_id)) == 10
