"""
Synthetic data generation for mood, sleep and activity records.
"""

from mood_insights.data_generation.mood_data_generator import MoodDataGenerator

__all__ = ['MoodDataGenerator']
