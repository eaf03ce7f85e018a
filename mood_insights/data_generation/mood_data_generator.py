# mood_insights/data_generation/mood_data_generator.py

import logging
from datetime import datetime, timedelta

import numpy as np
import pandas as pd
import yaml
from faker import Faker

from mood_insights.core.analysis.mood_prediction import MoodPredictor

logger = logging.getLogger(__name__)


class MoodDataGenerator:
    """Generates synthetic mood, sleep and activity records for demo users"""

    def __init__(self, config_path='config/data_generation_config.yaml', seed=None):
        """Initialize the generator with configuration"""
        self.config = self._load_config(config_path)
        self.rng = np.random.default_rng(seed)
        self.faker = Faker()
        if seed is not None:
            self.faker.seed_instance(seed)

    def _load_config(self, config_path):
        """Load configuration from YAML file"""
        with open(config_path, 'r') as file:
            return yaml.safe_load(file)

    def generate(self, user_count=None, days=None, start_date=None):
        """
        Generate records for several users.

        Args:
            user_count: Number of users (defaults to config)
            days: Number of days per user (defaults to config)
            start_date: First day as YYYY-MM-DD (defaults to config)

        Returns:
            dict: 'moods', 'sleep' and 'activity' DataFrames
        """
        user_config = self.config['users']
        user_count = user_count or user_config['count']
        days = days or user_config['days']
        start = datetime.strptime(start_date or user_config['start_date'], '%Y-%m-%d')

        moods, sleep, activity = [], [], []
        for _ in range(user_count):
            user_id = self.faker.unique.user_name()
            user_moods, user_sleep, user_activity = self.generate_user(user_id, start, days)
            moods.extend(user_moods)
            sleep.extend(user_sleep)
            activity.extend(user_activity)

        logger.info(f"Generated {len(moods)} moods, {len(sleep)} sleep and {len(activity)} activity records "
                    f"for {user_count} users")

        return {
            'moods': pd.DataFrame(moods),
            'sleep': pd.DataFrame(sleep),
            'activity': pd.DataFrame(activity),
        }

    def generate_user(self, user_id, start, days):
        """Generate one user's daily sleep, activity and mood entries"""
        mood_cfg = self.config['mood']
        sleep_cfg = self.config['sleep']
        activity_cfg = self.config['activity']
        activity_effects = mood_cfg['activities']

        moods, sleep, activity = [], [], []
        for offset in range(days):
            day = start + timedelta(days=offset)
            date_str = day.strftime('%Y-%m-%d')
            is_weekend = day.weekday() >= 5

            duration = max(120.0, self.rng.normal(sleep_cfg['mean_minutes'], sleep_cfg['std_minutes']))
            steps = int(max(0, self.rng.normal(activity_cfg['mean_steps'], activity_cfg['std_steps'])))
            active_minutes = round(steps / 1000 * activity_cfg['minutes_per_thousand_steps'], 1)

            sleep.append({'user_id': user_id, 'date': date_str, 'duration_minutes': round(duration, 1),
                          'sleep_score': round(min(100.0, duration / 480 * 85), 1)})
            activity.append({'user_id': user_id, 'date': date_str, 'steps': steps,
                             'active_minutes': active_minutes})

            low, high = mood_cfg['entries_per_day']
            entry_count = int(self.rng.integers(low, high + 1))
            hours = sorted(self.rng.choice(mood_cfg['logging_hours'], size=entry_count, replace=False))

            for hour in hours:
                tags = [name for name in activity_effects
                        if self.rng.random() < mood_cfg['activity_probability']]

                intensity = mood_cfg['base_intensity'] + self.rng.normal(0, mood_cfg['noise_std'])
                intensity += (duration - sleep_cfg['mean_minutes']) * sleep_cfg['mood_coupling']
                intensity += sum(activity_effects[t] for t in tags)
                if hour >= 18:
                    intensity += mood_cfg['evening_dip']
                if is_weekend:
                    intensity += mood_cfg['weekend_lift']
                intensity = round(float(np.clip(intensity, 1, 10)), 1)

                label = MoodPredictor.get_mood_label(intensity)
                timestamp = day.replace(hour=int(hour), minute=int(self.rng.integers(0, 60)))
                moods.append({
                    'user_id': user_id,
                    'mood_id': label,
                    'mood_label': label,
                    'intensity': intensity,
                    'timestamp': timestamp.strftime('%Y-%m-%dT%H:%M:%S'),
                    'activities': ';'.join(tags),
                })

        return moods, sleep, activity
