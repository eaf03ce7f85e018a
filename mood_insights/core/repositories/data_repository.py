# mood_insights/core/repositories/data_repository.py
import logging
import os

import pandas as pd

from mood_insights.core.models.data_models import ActivityObservation, MoodObservation, SleepObservation
from mood_insights.utils.data_validation import FileValidator

logger = logging.getLogger(__name__)

MOOD_FILE = 'moods.csv'
SLEEP_FILE = 'sleep.csv'
ACTIVITY_FILE = 'activity.csv'


class DataRepository:
    """Data access layer for mood, sleep and activity records stored as CSV"""

    def __init__(self, data_dir='data/sample'):
        self.data_dir = data_dir
        self.cache = {}

    def _load_frame(self, file_name, dtype=None):
        """Read a CSV once per repository instance"""
        if file_name in self.cache:
            return self.cache[file_name]

        path = os.path.join(self.data_dir, file_name)
        if not os.path.exists(path):
            logger.warning(f"Data file not found: {path}")
            return pd.DataFrame()

        df = pd.read_csv(path, dtype=dtype)
        self.cache[file_name] = df
        return df

    @staticmethod
    def _filter(df, user_id, days, date_column):
        """Filter by user and keep the last `days` days before the user's latest record"""
        if len(df) == 0:
            return df

        if user_id is not None and 'user_id' in df.columns:
            df = df[df['user_id'] == str(user_id)]

        if days and len(df) > 0:
            # Naive timestamps count as UTC, as in the record models
            dates = pd.to_datetime(df[date_column], utc=True, format='ISO8601')
            cutoff = dates.max().normalize() - pd.Timedelta(days=days - 1)
            df = df[dates >= cutoff]

        return df

    def get_mood_data(self, user_id=None, days=None):
        """Get validated mood observations, oldest first"""
        df = self._filter(self._load_frame(MOOD_FILE, {'user_id': str, 'mood_id': str}), user_id, days, 'timestamp')
        if len(df) > 0:
            df = df.assign(_ts=pd.to_datetime(df['timestamp'], utc=True, format='ISO8601')).sort_values('_ts', kind='stable').drop(columns='_ts')
        return FileValidator.validate_dataframe(df, MoodObservation)

    def get_sleep_data(self, user_id=None, days=None):
        """Get validated sleep observations, oldest first"""
        df = self._filter(self._load_frame(SLEEP_FILE, {'user_id': str, 'date': str}), user_id, days, 'date')
        if len(df) > 0:
            df = df.sort_values('date', kind='stable')
        return FileValidator.validate_dataframe(df, SleepObservation)

    def get_activity_data(self, user_id=None, days=None):
        """Get validated activity observations, oldest first"""
        df = self._filter(self._load_frame(ACTIVITY_FILE, {'user_id': str, 'date': str}), user_id, days, 'date')
        if len(df) > 0:
            df = df.sort_values('date', kind='stable')
        return FileValidator.validate_dataframe(df, ActivityObservation)

    def get_user_ids(self):
        """All user ids that have logged at least one mood"""
        df = self._load_frame(MOOD_FILE, {'user_id': str, 'mood_id': str})
        if len(df) == 0 or 'user_id' not in df.columns:
            return []
        return sorted(df['user_id'].dropna().unique().tolist())

    def save_records(self, file_name, records):
        """Write a DataFrame of records, replacing the existing file"""
        os.makedirs(self.data_dir, exist_ok=True)
        path = os.path.join(self.data_dir, file_name)
        records.to_csv(path, index=False)
        self.cache.pop(file_name, None)
        logger.info(f"Saved {len(records)} records to {path}")
        return path
