"""Core analytics, models, services and data access for mood insights."""
