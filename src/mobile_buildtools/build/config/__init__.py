"""
Configuration management for mobile-buildtools build tasks.
"""

from .models import (
    BuildContext,
    BuildToolsConfig,
    EnvironmentSettings,
    Platform,
    SecretsConfig,
    TemplatedManifest,
    ValueConfig,
)
from .loading import (
    config_exists,
    get_config_file_path,
    get_secrets_config,
    load_config,
    save_config,
    save_default_config,
)

__all__ = [
    'BuildContext',
    'BuildToolsConfig',
    'EnvironmentSettings',
    'Platform',
    'SecretsConfig',
    'TemplatedManifest',
    'ValueConfig',
    'config_exists',
    'get_config_file_path',
    'get_secrets_config',
    'load_config',
    'save_config',
    'save_default_config',
]
