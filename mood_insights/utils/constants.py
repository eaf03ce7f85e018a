"""
Constants used throughout the mood insights package.
This includes label thresholds, template text for interventions and anomalies,
and other default values.
"""

# Intensity thresholds for mapping a predicted intensity to a mood label,
# checked from the top down
mood_label_thresholds = [
    (8, 'happy'),
    (6, 'calm'),
    (4, 'neutral'),
    (2, 'tired'),
]
fallback_mood_label = 'anxious'

# Day names indexed with 0=Sunday
day_names = ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']

# Mood prediction adjustments
prediction_adjustments = {
    'trend_weight': 0.1,
    'short_sleep_minutes': 360,
    'long_sleep_minutes': 480,
    'short_sleep_factor': -0.3,
    'long_sleep_factor': 0.2,
    'morning_hours': (9, 11),
    'morning_factor': 0.1,
    'weekend_factor': 0.1,
    'base_confidence': 0.5,
    'confidence_span': 0.4,
    'max_confidence': 0.9,
}

model_version = 'rule-based-v1.0'

# Fallback distribution when there is no history at all
default_mood_probabilities = [
    ('neutral', 'Neutral', 0.4),
    ('happy', 'Happy', 0.25),
    ('calm', 'Calm', 0.2),
    ('tired', 'Tired', 0.15),
]

# Interventions suggested by the predictor: (type, description, expected impact)
intervention_templates = {
    'low_mood': [
        ('breathing', 'Try a 4-7-8 breathing exercise', 'Reduced anxiety'),
        ('activity', 'Take a short walk outside', 'Mood improvement'),
    ],
    'tired': [
        ('rest', 'Consider a short 15-minute rest', 'Increased energy'),
        ('hydration', 'Drink a glass of water', 'Quick energy boost'),
    ],
    'high_mood': [
        ('gratitude', "Write down 3 things you're grateful for", 'Sustained positive mood'),
    ],
    'tracking': [
        ('tracking', 'Continue logging your mood daily', 'Improved predictions over time'),
    ],
}

# Pattern recognition
positive_intensity_threshold = 7
trigger_positive_ratio = 0.6
min_days_for_weekly_pattern = 3
min_aligned_days_for_correlation = 5
confidence_divisors = {
    'circadian': 10,
    'weekly': 7,
    'correlation': 14,
    'trigger': 7,
}

# Anomaly detection
severity_thresholds = {
    'high': 3.0,
    'medium': 2.5,
}
low_sleep_attention_minutes = 300
activity_drop_ratio = 0.5
severe_activity_drop_ratio = 0.3
recent_activity_window = 7

anomaly_templates = {
    'mood_high': {
        'possible_causes': ['Positive life events', 'Medication effects', 'Manic episode', 'Social activities'],
        'recommendations': ['Maintain consistent routines', 'Monitor for pattern changes', 'Enjoy the positive period'],
    },
    'mood_low': {
        'possible_causes': ['Stress or burnout', 'Health issues', 'Sleep problems', 'Life challenges'],
        'recommendations': ['Consider speaking with a friend', 'Review recent stressors', 'Ensure adequate rest',
                            'Professional support if persistent'],
    },
    'sleep_low': {
        'possible_causes': ['Stress', 'Late activities', 'Sleep environment'],
        'recommendations': ['Establish consistent bedtime', 'Reduce evening screen time'],
    },
    'sleep_high': {
        'possible_causes': ['Illness recovery', 'Schedule changes'],
        'recommendations': ['Evaluate sleep quality', 'Check underlying issues'],
    },
    'activity_drop': {
        'possible_causes': ['Illness or injury', 'Busy period at work', 'Lack of motivation', 'Schedule changes'],
        'recommendations': ['Start with gentle activities', 'Set small, achievable goals', 'Find an activity buddy'],
    },
}

# Feature gating by number of logged entries
availability_thresholds = {
    'predictions': 7,
    'patterns': 14,
    'recommendations': 3,
}

# Mood trend summary
trend_window = 7
trend_min_entries = 3
trend_change_threshold = 0.3
high_risk_min_entries = 10
high_risk_intensity = 5
trend_messages = {
    'insufficient': 'Not enough data for trend analysis',
    'improving': 'Your mood has been trending upward. Keep up the positive momentum!',
    'declining': 'Your mood has been declining. Consider trying some wellness activities.',
    'stable': 'Your mood has been stable. Great consistency!',
}
