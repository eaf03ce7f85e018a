from mood_insights.config.config_manager import ConfigManager

__all__ = ['ConfigManager']
