"""
Configuration for the OpenCelliD key provider.
"""

from .settings import Environment, LogLevel, KeyProviderConfig
from .environment import EnvironmentLoader
from .validation import ConfigValidator

__all__ = [
    "Environment",
    "LogLevel",
    "KeyProviderConfig",
    "EnvironmentLoader",
    "ConfigValidator",
]
