"""
Pattern recognition over mood history.

Four independent detectors scan the history:
- circadian: the hour of day with the best average mood
- weekly: the day of week with the best average mood
- correlation: sleep duration versus mood on aligned dates
- trigger: activity tags that tend to come with a good mood

Each detector emits at most a handful of DetectedPattern records; the results
are concatenated and filtered on confidence.
"""

import logging
from collections import defaultdict

from mood_insights.core.analysis.statistics import (
    align_by_date,
    correlation_p_value,
    date_span_days,
    mean,
    pearson_correlation,
)
from mood_insights.core.models.config_models import PatternRecognitionConfig
from mood_insights.core.models.data_models import (
    ActivityObservation,
    MoodObservation,
    SleepObservation,
    coerce_records,
    day_of_week_index,
)
from mood_insights.core.models.output_models import (
    CorrelationEvidence,
    DetectedPattern,
    HealthCorrelation,
    StatisticEvidence,
)
from mood_insights.utils.constants import (
    confidence_divisors,
    day_names,
    min_aligned_days_for_correlation,
    min_days_for_weekly_pattern,
    positive_intensity_threshold,
    trigger_positive_ratio,
)

logger = logging.getLogger(__name__)


class PatternRecognizer:
    """Detects recurring mood patterns in a user's history"""

    def __init__(self, config=None):
        if isinstance(config, dict):
            config = PatternRecognitionConfig.from_overrides(config)
        self.config = config or PatternRecognitionConfig()

    def analyze_patterns(self, mood_history, sleep_data=None, activity_data=None, user_id=None):
        """
        Run all pattern detectors.

        Args:
            mood_history: MoodObservation records (or dicts)
            sleep_data: Optional SleepObservation records
            activity_data: Optional ActivityObservation records
            user_id: Optional user identifier used in pattern ids

        Returns:
            list: DetectedPattern records with confidence >= min_confidence
        """
        mood_history = coerce_records(mood_history, MoodObservation)

        patterns = []
        patterns.extend(self.detect_circadian_patterns(mood_history, user_id))
        patterns.extend(self.detect_weekly_patterns(mood_history, user_id))

        # Correlation needs both supplementary series
        if sleep_data and activity_data:
            patterns.extend(self.detect_correlations(mood_history, sleep_data, activity_data, user_id))

        patterns.extend(self.detect_trigger_patterns(mood_history, user_id))

        kept = [p for p in patterns if p.confidence >= self.config.min_confidence]
        logger.debug(f"Detected {len(patterns)} patterns, {len(kept)} above confidence {self.config.min_confidence}")
        return kept

    def detect_circadian_patterns(self, mood_history, user_id=None):
        """Find the hour of day with the highest average intensity"""
        mood_history = coerce_records(mood_history, MoodObservation)
        hourly = self._bucket_averages(mood_history, lambda m: m.timestamp.hour)

        if not hourly:
            return []

        peak = hourly[0]
        if peak['count'] < self.config.min_occurrences:
            return []

        hour = peak['key']
        time_label = 'morning' if hour < 12 else 'afternoon' if hour < 17 else 'evening'
        avg_text = f"{peak['avg_intensity']:.1f}"

        return [DetectedPattern(
            id=self._pattern_id('circadian', time_label, user_id),
            user_id=user_id,
            pattern_type='circadian',
            name=f"{time_label.capitalize()} Energy Peak",
            description=f"You tend to feel best during the {time_label} (around {hour}:00)",
            strength=peak['avg_intensity'] / 10,
            confidence=min(peak['count'] / confidence_divisors['circadian'], 1.0),
            evidence=[StatisticEvidence(
                description=f"Average mood intensity of {avg_text} during {time_label}",
                value=avg_text
            )],
            occurrence_count=peak['count'],
            frequency_description=f"{peak['count']} occurrences detected",
            recommendation='Schedule important activities during your peak hours'
        )]

    def detect_weekly_patterns(self, mood_history, user_id=None):
        """
        Find the day of week with the highest average intensity.

        The lowest-scoring day is not reported; only the best day can produce
        a pattern.
        """
        mood_history = coerce_records(mood_history, MoodObservation)
        daily = self._bucket_averages(mood_history, lambda m: day_of_week_index(m.timestamp))

        if len(daily) < min_days_for_weekly_pattern:
            return []

        best_day = daily[0]
        if best_day['count'] < self.config.min_occurrences:
            return []

        day_name = day_names[best_day['key']]
        avg_text = f"{best_day['avg_intensity']:.1f}"

        return [DetectedPattern(
            id=self._pattern_id('weekly', day_name, user_id),
            user_id=user_id,
            pattern_type='weekly',
            name=f"{day_name} Mood Boost",
            description=f"Your mood tends to be best on {day_name}s",
            strength=best_day['avg_intensity'] / 10,
            confidence=min(best_day['count'] / confidence_divisors['weekly'], 1.0),
            evidence=[StatisticEvidence(
                description=f"Average intensity of {avg_text} on {day_name}",
                value=avg_text
            )],
            occurrence_count=best_day['count'],
            recommendation=f"Plan enjoyable activities for {day_name}s"
        )]

    def detect_correlations(self, mood_history, sleep_data, activity_data, user_id=None):
        """Correlate sleep duration with mood on dates present in all three series"""
        mood_history = coerce_records(mood_history, MoodObservation)
        sleep_data = coerce_records(sleep_data, SleepObservation)
        activity_data = coerce_records(activity_data, ActivityObservation)

        aligned = align_by_date(mood_history, sleep_data, activity_data)
        if len(aligned) < min_aligned_days_for_correlation:
            logger.debug(f"Only {len(aligned)} aligned days, skipping correlation detection")
            return []

        correlation = pearson_correlation([d['sleep'] for d in aligned], [d['mood'] for d in aligned])
        if abs(correlation) <= self.config.min_strength:
            return []

        corr_text = f"{correlation:.1f}"
        positive = correlation > 0

        return [DetectedPattern(
            id=self._pattern_id('correlation', 'sleep_mood', user_id),
            user_id=user_id,
            pattern_type='correlation',
            name='Sleep-Mood Connection',
            description='Better sleep correlates with better mood' if positive else 'Sleep-mood relationship varies',
            strength=abs(correlation),
            confidence=min(len(aligned) / confidence_divisors['correlation'], 1.0),
            evidence=[CorrelationEvidence(
                description=f"Correlation coefficient: {corr_text}",
                value=corr_text
            )],
            occurrence_count=len(aligned),
            recommendation='Prioritize 7-9 hours of sleep' if positive else 'Focus on sleep quality'
        )]

    def detect_trigger_patterns(self, mood_history, user_id=None):
        """
        Find activity tags that are usually logged with a good mood.

        An observation counts toward every activity it lists. Activities that
        go with a low mood are not reported.
        """
        mood_history = coerce_records(mood_history, MoodObservation)

        activity_moods = defaultdict(list)
        for mood in mood_history:
            for activity in mood.activities:
                activity_moods[activity].append(mood.intensity)

        patterns = []
        for activity, intensities in activity_moods.items():
            if len(intensities) < self.config.min_occurrences:
                continue

            positive_count = sum(1 for i in intensities if i >= positive_intensity_threshold)
            positive_ratio = positive_count / len(intensities)
            if positive_ratio < trigger_positive_ratio:
                continue

            percent_text = f"{positive_ratio * 100:.0f}%"
            patterns.append(DetectedPattern(
                id=self._pattern_id('trigger_positive', activity, user_id),
                user_id=user_id,
                pattern_type='trigger',
                name=f"{activity} Boost",
                description=f"Doing {activity} tends to improve your mood",
                strength=positive_ratio,
                confidence=min(len(intensities) / confidence_divisors['trigger'], 1.0),
                evidence=[StatisticEvidence(
                    description=f"{percent_text} positive mood after {activity}",
                    value=percent_text
                )],
                occurrence_count=len(intensities),
                frequency_description=f"{len(intensities)} occurrences",
                recommendation=f"Consider incorporating {activity} more regularly"
            ))

        return patterns

    def health_correlations(self, mood_history, sleep_data, activity_data):
        """
        Describe how sleep duration and active minutes co-vary with mood.

        Returns:
            list: HealthCorrelation records (sleep vs mood, activity vs mood), empty
            when fewer than five dates are shared by all three series
        """
        mood_history = coerce_records(mood_history, MoodObservation)
        sleep_data = coerce_records(sleep_data, SleepObservation)
        activity_data = coerce_records(activity_data, ActivityObservation)

        aligned = align_by_date(mood_history, sleep_data, activity_data)
        if len(aligned) < min_aligned_days_for_correlation:
            return []

        moods = [d['mood'] for d in aligned]
        span = date_span_days([d['date'] for d in aligned])

        correlations = []
        for metric, key, subject in [('sleep_duration', 'sleep', 'sleep'),
                                     ('active_minutes', 'activity', 'activity')]:
            r = pearson_correlation([d[key] for d in aligned], moods)
            correlations.append(self._health_correlation(metric, subject, r, len(aligned), span))
        return correlations

    def _health_correlation(self, metric, subject, r, sample_size, span):
        if abs(r) <= self.config.min_strength:
            correlation_type = 'none'
            description = f"No clear link between {subject} and mood"
            implications = [f"Other factors matter more than {subject} for your mood right now"]
        elif r > 0:
            correlation_type = 'positive'
            description = f"More {subject} tends to go with a better mood"
            implications = [f"Protecting your {subject} routine may help your mood"]
        else:
            correlation_type = 'negative'
            description = f"More {subject} tends to go with a lower mood"
            implications = [f"Look at the quality of your {subject}, not just the amount"]

        return HealthCorrelation(
            metric_a=metric,
            metric_b='mood_intensity',
            correlation_type=correlation_type,
            correlation_strength=r,
            p_value=correlation_p_value(r, sample_size),
            sample_size=sample_size,
            time_range_days=span,
            description=description,
            implications=implications
        )

    @staticmethod
    def _bucket_averages(mood_history, key_func):
        """
        Group intensities by key and average them.

        Returns:
            list: Dicts with key, avg_intensity and count, highest average first.
            Equal averages keep ascending key order.
        """
        buckets = defaultdict(list)
        for mood in mood_history:
            buckets[key_func(mood)].append(mood.intensity)

        averages = [
            {'key': key, 'avg_intensity': mean(values), 'count': len(values)}
            for key, values in sorted(buckets.items())
        ]
        averages.sort(key=lambda b: b['avg_intensity'], reverse=True)
        return averages

    @staticmethod
    def _pattern_id(kind, label, user_id):
        return f"{kind}_{label}_{user_id}" if user_id else f"{kind}_{label}"
