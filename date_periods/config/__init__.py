"""
Configuration loading for date periods.
"""

from date_periods.config.manager import ConfigManager

__all__ = ["ConfigManager"]
