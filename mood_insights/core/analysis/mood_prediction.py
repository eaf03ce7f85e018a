"""
Rule-based mood prediction.

Estimates the next day's mood from the most recent mood observations, an
optional sleep history and the time/day the prediction is for. The model is a
fixed weighted heuristic (recent average, trend, sleep, time of day, weekend),
not a trained model, so results are fully deterministic.
"""

import logging

from mood_insights.core.analysis.statistics import mean
from mood_insights.core.models.config_models import MoodPredictionConfig
from mood_insights.core.models.data_models import (
    MoodObservation,
    PredictionContext,
    SleepObservation,
    coerce_records,
)
from mood_insights.core.models.output_models import (
    ContributingFactor,
    Intervention,
    MoodPredictionOutput,
    MoodProbability,
    PredictedMood,
)
from mood_insights.utils.constants import (
    default_mood_probabilities,
    fallback_mood_label,
    intervention_templates,
    model_version,
    mood_label_thresholds,
    prediction_adjustments,
)

logger = logging.getLogger(__name__)


class MoodPredictor:
    """Predicts the likely mood label and intensity for the next day"""

    def __init__(self, config=None):
        if isinstance(config, dict):
            config = MoodPredictionConfig.from_overrides(config)
        self.config = config or MoodPredictionConfig()

    def predict(self, history, sleep=None, context=None, user_id=None):
        """
        Predict the next mood.

        Args:
            history: MoodObservation records (or dicts); ordered internally by timestamp
            sleep: Optional SleepObservation records
            context: PredictionContext (or dict) for the target moment. Defaults to
                one day after the latest observation.
            user_id: Optional user identifier echoed in the output

        Returns:
            MoodPredictionOutput
        """
        history = sorted(coerce_records(history, MoodObservation), key=lambda m: m.timestamp)
        sleep = coerce_records(sleep, SleepObservation)

        if not history:
            logger.debug("No mood history supplied, returning default prediction")
            return self._default_prediction(user_id)

        if context is None:
            context = PredictionContext.for_day_after(history[-1].timestamp)
        elif isinstance(context, dict):
            context = PredictionContext.model_validate(context)

        adj = prediction_adjustments

        # Most recent window of observations
        recent = history[-self.config.sequence_length:]
        intensities = [m.intensity for m in recent]
        avg_intensity = mean(intensities)

        # Sum of consecutive deltas, positive means improving
        trend = sum(intensities[i] - intensities[i - 1] for i in range(1, len(intensities)))

        sleep_factor = self._sleep_factor(sleep)

        morning_start, morning_end = adj['morning_hours']
        time_factor = adj['morning_factor'] if morning_start <= context.hour_of_day <= morning_end else 0.0
        weekend_factor = adj['weekend_factor'] if context.is_weekend else 0.0

        predicted_intensity = max(1.0, min(10.0,
            avg_intensity + trend * adj['trend_weight'] + sleep_factor + time_factor + weekend_factor
        ))

        label = self.get_mood_label(predicted_intensity)
        confidence = min(
            adj['base_confidence'] + (len(recent) / self.config.sequence_length) * adj['confidence_span'],
            adj['max_confidence']
        )

        logger.debug(
            f"Predicted intensity {predicted_intensity:.2f} ({label}) from {len(recent)} observations, "
            f"trend={trend}, sleep={sleep_factor}, time={time_factor}, weekend={weekend_factor}"
        )

        contributing_factors = [
            ContributingFactor(
                factor='Recent mood trend',
                impact=trend * adj['trend_weight'],
                description='Improving mood pattern' if trend > 0 else 'Declining mood pattern'
            ),
            ContributingFactor(
                factor='Sleep quality',
                impact=sleep_factor,
                description=self._sleep_description(sleep_factor)
            ),
            ContributingFactor(
                factor='Time of day',
                impact=time_factor,
                description='Morning hours can boost mood'
            ),
        ]

        return MoodPredictionOutput(
            user_id=user_id,
            predicted_mood=PredictedMood(mood_id=label, mood_label=label, confidence_score=confidence),
            mood_probabilities=self.calculate_mood_probabilities(predicted_intensity, confidence),
            contributing_factors=contributing_factors,
            recommended_interventions=self.generate_interventions(label, predicted_intensity),
            model_version=model_version
        )

    def _sleep_factor(self, sleep):
        """Step adjustment from the average sleep duration"""
        if not sleep:
            return 0.0
        adj = prediction_adjustments
        avg_sleep = mean([s.duration_minutes for s in sleep])
        if avg_sleep < adj['short_sleep_minutes']:
            return adj['short_sleep_factor']
        if avg_sleep > adj['long_sleep_minutes']:
            return adj['long_sleep_factor']
        return 0.0

    @staticmethod
    def _sleep_description(sleep_factor):
        if sleep_factor == 0:
            return 'No sleep data'
        return 'Good sleep duration' if sleep_factor > 0 else 'Insufficient sleep'

    def _default_prediction(self, user_id):
        return MoodPredictionOutput(
            user_id=user_id,
            predicted_mood=PredictedMood(
                mood_id='neutral',
                mood_label='Neutral',
                confidence_score=prediction_adjustments['base_confidence']
            ),
            mood_probabilities=[
                MoodProbability(mood_id=mood_id, mood_label=mood_label, probability=probability)
                for mood_id, mood_label, probability in default_mood_probabilities
            ],
            contributing_factors=[
                ContributingFactor(
                    factor='Insufficient data',
                    impact=0.0,
                    description='Not enough historical data for accurate prediction'
                )
            ],
            recommended_interventions=self._interventions_for('tracking'),
            model_version=model_version
        )

    @staticmethod
    def get_mood_label(intensity):
        """Map an intensity on the 1-10 scale to a mood label"""
        for threshold, label in mood_label_thresholds:
            if intensity >= threshold:
                return label
        return fallback_mood_label

    @staticmethod
    def calculate_mood_probabilities(predicted_intensity, confidence):
        """
        Four-bucket heuristic distribution. These are display weights, not a
        calibrated probability model, and they need not sum to 1.
        """
        i = predicted_intensity
        return [
            MoodProbability(mood_id='happy', mood_label='Happy', probability=max(0.0, (10 - i) / 10) * confidence),
            MoodProbability(mood_id='calm', mood_label='Calm', probability=0.3 * confidence),
            MoodProbability(mood_id='neutral', mood_label='Neutral', probability=0.3 * confidence),
            MoodProbability(mood_id='tired', mood_label='Tired', probability=max(0.0, i / 10 - 0.3) * confidence),
        ]

    def generate_interventions(self, mood, intensity):
        """Pick suggestion templates for the predicted mood"""
        interventions = []

        if mood == 'anxious' or intensity < 4:
            interventions.extend(self._interventions_for('low_mood'))

        if mood == 'tired':
            interventions.extend(self._interventions_for('tired'))

        if intensity >= 7:
            interventions.extend(self._interventions_for('high_mood'))

        return interventions

    @staticmethod
    def _interventions_for(key):
        return [
            Intervention(type=kind, description=description, expected_impact=impact)
            for kind, description, impact in intervention_templates[key]
        ]
