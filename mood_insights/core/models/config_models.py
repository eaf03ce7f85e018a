# mood_insights/core/models/config_models.py

from pydantic import BaseModel, ConfigDict, Field


class AnalyticsConfig(BaseModel):
    """Threshold settings; any subset of fields may be supplied"""
    model_config = ConfigDict(frozen=True, extra='ignore')

    @classmethod
    def from_overrides(cls, overrides=None):
        """Build a config from a partial dict, dropping None values"""
        overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        return cls(**overrides)


class MoodPredictionConfig(AnalyticsConfig):
    sequence_length: int = Field(7, ge=1)


class PatternRecognitionConfig(AnalyticsConfig):
    min_occurrences: int = Field(3, ge=1)
    min_confidence: float = Field(0.6, ge=0.0, le=1.0)
    min_strength: float = Field(0.4, ge=0.0, le=1.0)
    time_window_days: int = Field(30, ge=1)


class AnomalyDetectionConfig(AnalyticsConfig):
    z_score_threshold: float = Field(2.0, gt=0)
    sensitivity: float = Field(0.5, ge=0.0, le=1.0)
    min_data_points: int = Field(7, ge=1)
    lookback_days: int = Field(30, ge=1)
