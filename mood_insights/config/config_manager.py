# mood_insights/config/config_manager.py
import logging
import os

import yaml

from mood_insights.core.models.config_models import (
    AnomalyDetectionConfig,
    MoodPredictionConfig,
    PatternRecognitionConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'config/analytics_config.yaml'
CONFIG_PATH_ENV_VAR = 'MOOD_INSIGHTS_CONFIG'


class ConfigManager:
    """Central configuration manager"""

    def __init__(self, config_path=None):
        self.config_path = config_path or os.environ.get(CONFIG_PATH_ENV_VAR, DEFAULT_CONFIG_PATH)
        self.config = self._load_config()

    def _load_config(self):
        """Load configuration from file"""
        if not os.path.exists(self.config_path):
            logger.warning(f"Config file {self.config_path} not found, using defaults")
            return {}
        with open(self.config_path, 'r') as file:
            return yaml.safe_load(file) or {}

    def get(self, key, default=None):
        """Get configuration value"""
        # Support nested keys with dot notation
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def mood_prediction_config(self):
        return MoodPredictionConfig.from_overrides(self.get('mood_prediction', {}))

    def pattern_recognition_config(self):
        return PatternRecognitionConfig.from_overrides(self.get('pattern_recognition', {}))

    def anomaly_detection_config(self):
        return AnomalyDetectionConfig.from_overrides(self.get('anomaly_detection', {}))
