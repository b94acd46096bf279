"""
Configuration module - Settings and configuration management
"""

from .config_properties import ConfigProperties
from .server_config import ServerConfig, RunMode

__all__ = [
    'ConfigProperties',
    'ServerConfig',
    'RunMode',
]
