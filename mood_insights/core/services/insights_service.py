# mood_insights/core/services/insights_service.py
import logging
from datetime import datetime

from mood_insights.core.analysis.mood_trends import calculate_mood_trend, check_availability
from mood_insights.core.models.output_models import InsightsReport

logger = logging.getLogger(__name__)


class InsightsService:
    """Service layer combining the repository with the three analytics components"""

    def __init__(self, repository, mood_predictor, pattern_recognizer, anomaly_detector):
        self.repository = repository
        self.mood_predictor = mood_predictor
        self.pattern_recognizer = pattern_recognizer
        self.anomaly_detector = anomaly_detector

    async def predict_mood(self, history, sleep=None, context=None, user_id=None):
        return self.mood_predictor.predict(history, sleep, context, user_id=user_id)

    async def analyze_patterns(self, mood_history, sleep_data=None, activity_data=None, user_id=None):
        return self.pattern_recognizer.analyze_patterns(mood_history, sleep_data, activity_data, user_id=user_id)

    async def detect_anomalies(self, user_id, mood_history, sleep_data=None, activity_data=None):
        return self.anomaly_detector.detect_anomalies(user_id, mood_history, sleep_data, activity_data)

    async def generate_report(self, user_id: str, days: int = 30):
        """Build the full insights report for a user from stored records"""
        mood_history = self.repository.get_mood_data(user_id, days)
        if len(mood_history) == 0:
            return {"status": "error", "message": f"No mood data found for user with ID {user_id}"}

        sleep_data = self.repository.get_sleep_data(user_id, days)
        activity_data = self.repository.get_activity_data(user_id, days)
        logger.info(
            f"Generating report for {user_id}: {len(mood_history)} moods, "
            f"{len(sleep_data)} sleep records, {len(activity_data)} activity records"
        )

        prediction = await self.predict_mood(mood_history, sleep_data, user_id=user_id)
        patterns = await self.analyze_patterns(mood_history, sleep_data, activity_data, user_id=user_id)
        anomalies = await self.detect_anomalies(user_id, mood_history, sleep_data, activity_data)

        correlations = []
        if sleep_data and activity_data:
            correlations = self.pattern_recognizer.health_correlations(mood_history, sleep_data, activity_data)

        return InsightsReport(
            generated_at=datetime.now(),
            user_id=user_id,
            period_days=days,
            prediction=prediction,
            patterns=patterns,
            anomalies=anomalies,
            correlations=correlations,
            trend=calculate_mood_trend(mood_history),
            availability=check_availability(mood_history)
        )
