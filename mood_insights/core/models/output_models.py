# mood_insights/core/models/output_models.py

from datetime import datetime
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PatternType(str, Enum):
    CIRCADIAN = "circadian"
    WEEKLY = "weekly"
    CORRELATION = "correlation"
    TRIGGER = "trigger"


class AnomalyType(str, Enum):
    MOOD_SPIKE = "mood_spike"
    BEHAVIORAL_SHIFT = "behavioral_shift"
    SLEEP_DISRUPTION = "sleep_disruption"
    ACTIVITY_DROP = "activity_drop"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AnalyticsResult(BaseModel):
    """Base model for analytics outputs; results never change once built"""
    model_config = ConfigDict(frozen=True, use_enum_values=True)


# Evidence variants
class _EvidenceBase(AnalyticsResult):
    description: str
    value: str


class DataPointEvidence(_EvidenceBase):
    type: Literal['data_point'] = 'data_point'


class CorrelationEvidence(_EvidenceBase):
    type: Literal['correlation'] = 'correlation'


class StatisticEvidence(_EvidenceBase):
    type: Literal['statistic'] = 'statistic'


class TimeSeriesEvidence(_EvidenceBase):
    type: Literal['time_series'] = 'time_series'


EvidenceItem = Annotated[
    Union[DataPointEvidence, CorrelationEvidence, StatisticEvidence, TimeSeriesEvidence],
    Field(discriminator='type'),
]


# Pattern recognition
class DetectedPattern(AnalyticsResult):
    id: str
    user_id: Optional[str] = None
    pattern_type: PatternType
    name: str
    description: str
    strength: float = Field(..., ge=0.0, le=1.0)
    confidence: float = Field(..., ge=0.0, le=1.0)
    evidence: List[EvidenceItem] = []
    occurrence_count: int
    frequency_description: Optional[str] = None
    is_active: bool = True
    actionable: bool = True
    recommendation: Optional[str] = None


class HealthCorrelation(AnalyticsResult):
    metric_a: str
    metric_b: str
    correlation_type: Literal['positive', 'negative', 'none']
    correlation_strength: float = Field(..., ge=-1.0, le=1.0)
    p_value: Optional[float] = None
    sample_size: int
    time_range_days: int
    description: str
    implications: List[str] = []


# Anomaly detection
class ExpectedRange(AnalyticsResult):
    min: float
    max: float


class DetectedAnomaly(AnalyticsResult):
    id: str
    user_id: str
    anomaly_type: AnomalyType
    severity: Severity
    metric_name: str
    expected_range: ExpectedRange
    observed_value: float
    deviation_score: float
    description: str
    possible_causes: List[str]
    recommendations: List[str]
    requires_attention: bool


# Mood prediction
class PredictedMood(AnalyticsResult):
    mood_id: str
    mood_label: str
    confidence_score: float = Field(..., ge=0.0, le=1.0)


class MoodProbability(AnalyticsResult):
    mood_id: str
    mood_label: str
    probability: float


class ContributingFactor(AnalyticsResult):
    factor: str
    impact: float
    description: str


class Intervention(AnalyticsResult):
    type: str
    description: str
    expected_impact: str


class MoodPredictionOutput(AnalyticsResult):
    user_id: Optional[str] = None
    predicted_mood: PredictedMood
    mood_probabilities: List[MoodProbability]
    contributing_factors: List[ContributingFactor]
    recommended_interventions: List[Intervention]
    model_version: str = 'rule-based-v1.0'


# Lighter summaries
class MoodTrend(AnalyticsResult):
    trend: Literal['improving', 'stable', 'declining']
    volatility: float
    average_intensity: float
    prediction: str


class OptimalTiming(AnalyticsResult):
    best_time_for_meditation: str
    best_time_for_yoga: str
    best_time_for_music: str
    high_risk_times: List[str] = []


class AnalysisAvailability(AnalyticsResult):
    predictions_available: bool
    patterns_available: bool
    recommendations_available: bool
    minimum_entries_needed: int


class InsightsReport(BaseModel):
    """Complete insights bundle for one user"""
    generated_at: datetime = Field(default_factory=datetime.now)
    user_id: str
    period_days: Optional[int] = None
    prediction: MoodPredictionOutput
    patterns: List[DetectedPattern] = []
    anomalies: List[DetectedAnomaly] = []
    correlations: List[HealthCorrelation] = []
    trend: MoodTrend
    availability: AnalysisAvailability
