from mood_insights.core.services.insights_service import InsightsService

__all__ = ['InsightsService']
