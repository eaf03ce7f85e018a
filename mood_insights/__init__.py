"""
Mood insights package for the wellness tracking app.

This package contains the functionality for:
- Mood prediction
- Pattern recognition (circadian, weekly, correlation, trigger)
- Anomaly detection on mood, sleep and activity data
- Data access, services and the HTTP API
"""

__version__ = "0.3.0"
