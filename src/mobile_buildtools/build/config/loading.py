"""
Loading and saving of buildtools.json.

The configuration file lives in the solution directory. A missing file is
replaced by a default configuration the first time it is loaded.
"""
import logging
import threading
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .constants import (
    BUILD_TOOLS_CONFIG_FILE_NAME,
    DEFAULT_MANIFEST_TOKEN,
    SECRETS_CONFIG_FILE_NAME,
)
from .exceptions import ConfigFileParseException
from .models import BuildToolsConfig, EnvironmentSettings, SecretsConfig, TemplatedManifest

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_lock = threading.Lock()


def get_config_file_path(path: PathLike) -> Path:
    """Return the buildtools.json path for a directory (or the file itself)."""
    path = Path(path)
    if path.name == BUILD_TOOLS_CONFIG_FILE_NAME:
        return path
    return path / BUILD_TOOLS_CONFIG_FILE_NAME


def config_exists(path: PathLike) -> bool:
    return get_config_file_path(path).is_file()


def load_config(path: PathLike) -> BuildToolsConfig:
    """Load buildtools.json, writing the default configuration first if it is missing.

    Raises:
        ConfigFileParseException: If the file is not valid configuration JSON
    """
    file_path = get_config_file_path(path)
    if not file_path.exists():
        logger.info(f"No {BUILD_TOOLS_CONFIG_FILE_NAME} found at {file_path}, creating default configuration")
        save_default_config(file_path)

    with _lock:
        content = file_path.read_text(encoding='utf-8-sig')

    try:
        return BuildToolsConfig.model_validate_json(content)
    except ValidationError as e:
        raise ConfigFileParseException(f"Failed to parse {file_path}: {e}", path=str(file_path)) from e


def save_config(config: BuildToolsConfig, path: PathLike) -> Path:
    """Write the configuration as indented JSON and return the file written."""
    file_path = get_config_file_path(path)
    content = config.model_dump_json(by_alias=True, exclude_none=True, indent=2)
    with _lock:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content + "\n", encoding='utf-8')
    logger.debug(f"Saved build tools configuration to {file_path}")
    return file_path


def default_config() -> BuildToolsConfig:
    return BuildToolsConfig(
        manifests=TemplatedManifest(
            disable=False,
            token=DEFAULT_MANIFEST_TOKEN,
            missing_tokens_as_errors=False,
            variable_prefix="Manifest_",
        ),
        environment=EnvironmentSettings(defaults={}, configuration={}),
    )


def save_default_config(path: PathLike) -> Path:
    return save_config(default_config(), path)


def get_secrets_config(project_name: Optional[str], project_dir: PathLike,
                       config: Optional[BuildToolsConfig]) -> Optional[SecretsConfig]:
    """Find the secrets settings for a project.

    A secrets.config.json next to the project wins over the ProjectSecrets
    section of buildtools.json.
    """
    config_path = Path(project_dir) / SECRETS_CONFIG_FILE_NAME
    if config_path.is_file():
        logger.debug(f"Using project secrets configuration from {config_path}")
        try:
            return SecretsConfig.model_validate_json(config_path.read_text(encoding='utf-8-sig'))
        except ValidationError as e:
            raise ConfigFileParseException(f"Failed to parse {config_path}: {e}", path=str(config_path)) from e

    if config is not None and config.project_secrets and project_name in config.project_secrets:
        return config.project_secrets[project_name]

    return None


def dump_config(config: BuildToolsConfig) -> dict:
    """Plain dict form of the configuration, keyed the way buildtools.json is."""
    return config.model_dump(mode='json', by_alias=True, exclude_none=True)
