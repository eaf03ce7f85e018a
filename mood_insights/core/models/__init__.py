"""
Data, output and configuration models for mood insights.
"""

from mood_insights.core.models.config_models import (
    AnomalyDetectionConfig,
    MoodPredictionConfig,
    PatternRecognitionConfig,
)
from mood_insights.core.models.data_models import (
    ActivityObservation,
    MoodObservation,
    PredictionContext,
    SleepObservation,
    WellnessSession,
)
from mood_insights.core.models.output_models import (
    DetectedAnomaly,
    DetectedPattern,
    HealthCorrelation,
    InsightsReport,
    MoodPredictionOutput,
)

__all__ = [
    'AnomalyDetectionConfig', 'MoodPredictionConfig', 'PatternRecognitionConfig',
    'ActivityObservation', 'MoodObservation', 'PredictionContext', 'SleepObservation',
    'WellnessSession', 'DetectedAnomaly', 'DetectedPattern', 'HealthCorrelation',
    'InsightsReport', 'MoodPredictionOutput',
]
