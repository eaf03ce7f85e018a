from mood_insights.core.repositories.data_repository import DataRepository

__all__ = ['DataRepository']
