"""
Settings and logging configuration.
"""

from .logging import bootstrap_logging, get_logger
from .settings import ClientSettings, SETTINGS_ENV_VARS, get_setting, load_config_file, load_settings

__all__ = [
    'ClientSettings',
    'SETTINGS_ENV_VARS',
    'bootstrap_logging',
    'get_logger',
    'get_setting',
    'load_config_file',
    'load_settings',
]
