"""
Anomaly detection over mood, sleep and activity histories.

Mood and sleep use population z-scores over the full history and flag points
inside the lookback window whose |z| exceeds the threshold. Activity compares
the last week's average step count against the all-time average.
"""

import logging

from mood_insights.core.analysis.statistics import mean, population_std, z_score
from mood_insights.core.models.config_models import AnomalyDetectionConfig
from mood_insights.core.models.data_models import (
    ActivityObservation,
    MoodObservation,
    SleepObservation,
    coerce_records,
)
from mood_insights.core.models.output_models import DetectedAnomaly, ExpectedRange
from mood_insights.utils.constants import (
    activity_drop_ratio,
    anomaly_templates,
    low_sleep_attention_minutes,
    recent_activity_window,
    severe_activity_drop_ratio,
    severity_thresholds,
)

logger = logging.getLogger(__name__)


def classify_severity(deviation):
    """Map a z-score to low/medium/high"""
    magnitude = abs(deviation)
    if magnitude > severity_thresholds['high']:
        return 'high'
    if magnitude > severity_thresholds['medium']:
        return 'medium'
    return 'low'


class AnomalyDetector:
    """Flags unusual points in a user's mood, sleep and activity records"""

    def __init__(self, config=None):
        if isinstance(config, dict):
            config = AnomalyDetectionConfig.from_overrides(config)
        self.config = config or AnomalyDetectionConfig()

    def detect_anomalies(self, user_id, mood_history, sleep_data=None, activity_data=None):
        """
        Run the mood, sleep and activity detectors and concatenate their results.

        Records are ordered oldest first (by timestamp or date) before the
        lookback window is applied.

        Returns:
            list: DetectedAnomaly records
        """
        mood_history = sorted(coerce_records(mood_history, MoodObservation), key=lambda m: m.timestamp)
        sleep_data = sorted(coerce_records(sleep_data, SleepObservation), key=lambda s: s.date)
        activity_data = sorted(coerce_records(activity_data, ActivityObservation), key=lambda a: a.date)

        anomalies = []
        anomalies.extend(self.detect_mood_anomalies(user_id, mood_history))

        if len(sleep_data) >= self.config.min_data_points:
            anomalies.extend(self.detect_sleep_anomalies(user_id, sleep_data))

        if len(activity_data) >= self.config.min_data_points:
            anomalies.extend(self.detect_activity_anomalies(user_id, activity_data))

        logger.debug(f"Detected {len(anomalies)} anomalies for user {user_id}")
        return anomalies

    def _outlier_indices(self, values):
        """Yield (index, z, mean, std) for points in the lookback window beyond the threshold"""
        center = mean(values)
        spread = population_std(values)
        start = max(0, len(values) - self.config.lookback_days)
        for i in range(start, len(values)):
            deviation = z_score(values[i], center, spread)
            if abs(deviation) > self.config.z_score_threshold:
                yield i, deviation, center, spread

    def detect_mood_anomalies(self, user_id, mood_history):
        """Z-score outliers in mood intensity"""
        intensities = [m.intensity for m in mood_history]
        if len(intensities) < self.config.min_data_points:
            return []

        threshold = self.config.z_score_threshold
        anomalies = []
        for i, deviation, center, spread in self._outlier_indices(intensities):
            is_high = deviation > 0
            severity = classify_severity(deviation)
            template = anomaly_templates['mood_high' if is_high else 'mood_low']
            observed = intensities[i]

            anomalies.append(DetectedAnomaly(
                id=f"mood_{'spike' if is_high else 'drop'}_{user_id}_{i}",
                user_id=user_id,
                anomaly_type='mood_spike' if is_high else 'behavioral_shift',
                severity=severity,
                metric_name='mood_intensity',
                expected_range=ExpectedRange(
                    min=max(1.0, center - threshold * spread),
                    max=min(10.0, center + threshold * spread)
                ),
                observed_value=observed,
                deviation_score=deviation,
                description=(f"Unusually high mood intensity of {observed:g}" if is_high
                             else f"Unusually low mood intensity of {observed:g}"),
                possible_causes=list(template['possible_causes']),
                recommendations=list(template['recommendations']),
                requires_attention=severity == 'high'
            ))

        return anomalies

    def detect_sleep_anomalies(self, user_id, sleep_data):
        """Z-score outliers in nightly sleep duration"""
        durations = [s.duration_minutes for s in sleep_data]
        if len(durations) < self.config.min_data_points:
            return []

        threshold = self.config.z_score_threshold
        anomalies = []
        for i, deviation, center, spread in self._outlier_indices(durations):
            is_low = deviation < 0
            severity = classify_severity(deviation)
            template = anomaly_templates['sleep_low' if is_low else 'sleep_high']
            observed = durations[i]
            hours = round(observed / 60)

            anomalies.append(DetectedAnomaly(
                id=f"sleep_disruption_{user_id}_{i}",
                user_id=user_id,
                anomaly_type='sleep_disruption',
                severity=severity,
                metric_name='sleep_duration',
                expected_range=ExpectedRange(
                    min=max(0.0, center - threshold * spread),
                    max=center + threshold * spread
                ),
                observed_value=observed,
                deviation_score=deviation,
                description=(f"Unusually low sleep of {hours}h" if is_low
                             else f"Unusually high sleep of {hours}h"),
                possible_causes=list(template['possible_causes']),
                recommendations=list(template['recommendations']),
                # Very short nights need attention whatever the z-score tier
                requires_attention=severity == 'high' or (is_low and observed < low_sleep_attention_minutes)
            ))

        return anomalies

    def detect_activity_anomalies(self, user_id, activity_data):
        """Compare the last week's average step count against the all-time average"""
        steps = [a.steps for a in activity_data]
        if len(steps) < recent_activity_window:
            return []

        overall = mean(steps)
        recent = mean(steps[-recent_activity_window:])

        if overall == 0 or recent >= overall * activity_drop_ratio:
            return []

        severe = recent < overall * severe_activity_drop_ratio
        template = anomaly_templates['activity_drop']
        logger.debug(f"Activity drop for user {user_id}: recent {recent:.0f} vs overall {overall:.0f} steps")

        return [DetectedAnomaly(
            id=f"activity_drop_{user_id}",
            user_id=user_id,
            anomaly_type='activity_drop',
            severity='high' if severe else 'medium',
            metric_name='daily_steps',
            expected_range=ExpectedRange(min=overall * 0.5, max=overall * 1.5),
            observed_value=recent,
            deviation_score=(overall - recent) / overall,
            description='Significant decrease in physical activity',
            possible_causes=list(template['possible_causes']),
            recommendations=list(template['recommendations']),
            requires_attention=severe
        )]
