"""
Analysis module for mood data insights.

This module contains the rule-based mood predictor, the pattern recognizer,
the anomaly detector and a few lighter mood summaries.
"""

from mood_insights.core.analysis.anomaly_detection import AnomalyDetector
from mood_insights.core.analysis.mood_prediction import MoodPredictor
from mood_insights.core.analysis.mood_trends import (
    calculate_mood_trend,
    check_availability,
    find_optimal_timing,
)
from mood_insights.core.analysis.pattern_recognition import PatternRecognizer

__all__ = [
    'AnomalyDetector', 'MoodPredictor', 'PatternRecognizer',
    'calculate_mood_trend', 'check_availability', 'find_optimal_timing',
]
