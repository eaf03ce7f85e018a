"""
Module for lighter mood summaries: recent trend, best practice times and
which insight features have enough data to be shown.
"""

from collections import Counter, defaultdict

from mood_insights.core.analysis.statistics import mean, population_std
from mood_insights.core.models.data_models import MoodObservation, WellnessSession, coerce_records
from mood_insights.core.models.output_models import AnalysisAvailability, MoodTrend, OptimalTiming
from mood_insights.utils.constants import (
    availability_thresholds,
    high_risk_intensity,
    high_risk_min_entries,
    trend_change_threshold,
    trend_messages,
    trend_min_entries,
    trend_window,
)


def calculate_mood_trend(mood_history):
    """
    Summarize the direction and volatility of the most recent moods.

    Args:
        mood_history: MoodObservation records (or dicts), any order

    Returns:
        MoodTrend: trend label, volatility (population std), average intensity
        and a short message
    """
    history = sorted(coerce_records(mood_history, MoodObservation), key=lambda m: m.timestamp)

    if len(history) < trend_min_entries:
        return MoodTrend(
            trend='stable',
            volatility=0.0,
            average_intensity=5.0,
            prediction=trend_messages['insufficient']
        )

    intensities = [m.intensity for m in history[-trend_window:]]
    average_intensity = mean(intensities)

    # Change from the oldest to the newest entry, spread over the window
    change = (intensities[-1] - intensities[0]) / len(intensities)

    if change > trend_change_threshold:
        trend = 'improving'
    elif change < -trend_change_threshold:
        trend = 'declining'
    else:
        trend = 'stable'

    return MoodTrend(
        trend=trend,
        volatility=population_std(intensities),
        average_intensity=average_intensity,
        prediction=trend_messages[trend]
    )


def _format_hour(hour):
    if hour == 0:
        return 'Midnight'
    if hour == 12:
        return 'Noon'
    if hour < 12:
        return f"{hour} AM"
    return f"{hour - 12} PM"


def _best_time_for(sessions, session_type):
    """Most common completion hour for a session type; ties go to the earliest hour"""
    hours = Counter(s.completed_at.hour for s in sessions if s.session_type == session_type)
    if not hours:
        return 'Not enough data'
    best_hour = max(sorted(hours), key=lambda h: hours[h])
    return _format_hour(best_hour)


def find_optimal_timing(wellness_sessions, mood_history):
    """
    Find the usual practice time for each session type and the hours of day
    when mood tends to be low.

    Args:
        wellness_sessions: WellnessSession records (or dicts)
        mood_history: MoodObservation records (or dicts)

    Returns:
        OptimalTiming
    """
    sessions = coerce_records(wellness_sessions, WellnessSession)
    history = coerce_records(mood_history, MoodObservation)

    high_risk_times = []
    if len(history) >= high_risk_min_entries:
        by_hour = defaultdict(list)
        for mood in history:
            by_hour[mood.timestamp.hour].append(mood.intensity)

        low_hours = [
            (hour, mean(values)) for hour, values in sorted(by_hour.items())
            if mean(values) < high_risk_intensity
        ]
        low_hours.sort(key=lambda item: item[1])

        for hour, _ in low_hours[:2]:
            label = _format_hour(hour)
            high_risk_times.append(f"Around {label.lower()}" if hour in (0, 12) else f"Around {label}")

    return OptimalTiming(
        best_time_for_meditation=_best_time_for(sessions, 'meditation'),
        best_time_for_yoga=_best_time_for(sessions, 'yoga'),
        best_time_for_music=_best_time_for(sessions, 'music'),
        high_risk_times=high_risk_times
    )


def check_availability(mood_history):
    """Which insight features have enough logged entries to be shown"""
    count = len(mood_history or [])
    return AnalysisAvailability(
        predictions_available=count >= availability_thresholds['predictions'],
        patterns_available=count >= availability_thresholds['patterns'],
        recommendations_available=count >= availability_thresholds['recommendations'],
        minimum_entries_needed=availability_thresholds['recommendations']
    )
