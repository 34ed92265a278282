"""
Configuration for graphql_fetch.

Pydantic models for client and logging settings, and a loader that reads
them from files and environment variables.
"""

from .loader import ConfigLoader, load_config
from .models import ClientConfig, LoggingConfig, LogLevel

__all__ = [
    "ClientConfig",
    "LoggingConfig",
    "LogLevel",
    "ConfigLoader",
    "load_config",
]
