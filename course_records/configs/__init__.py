"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from course_records.configs.database import DatabaseSettings
from course_records.configs.server import ServerSettings
from course_records.configs.settings import Settings, get_settings

__all__ = ["DatabaseSettings", "ServerSettings", "Settings", "get_settings"]
