"""
Building blocks for the environment mapping.

Every merge here is gap-filling: a key that is already present in the target
mapping is never replaced.
"""
import json
import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from ..config.exceptions import SecretsFileParseException
from ..config.models import EnvironmentSettings, stringify_value

logger = logging.getLogger(__name__)


def read_environment() -> Dict[str, str]:
    """Snapshot of the OS environment."""
    return dict(os.environ)


def load_secrets(path: Union[str, Path], env: Dict[str, str]) -> None:
    """Fold the top-level keys of a JSON object file into env.

    Args:
        path: Secrets or manifest file; a missing file is skipped
        env: Mapping updated in place, existing keys win

    Raises:
        SecretsFileParseException: If the file exists but is not a JSON object
    """
    path = Path(path)
    if not path.is_file():
        logger.debug(f"Secrets file not found: {path}")
        return

    try:
        secrets = json.loads(path.read_text(encoding='utf-8-sig'))
    except json.JSONDecodeError as e:
        raise SecretsFileParseException(f"Invalid JSON: {e}", path=str(path)) from e

    if not isinstance(secrets, dict):
        raise SecretsFileParseException(
            f"Expected a JSON object but found {type(secrets).__name__}", path=str(path))

    added = 0
    for key, value in secrets.items():
        if key not in env:
            env[key] = stringify_value(value)
            added += 1

    logger.debug(f"Loaded {added} of {len(secrets)} keys from {path}")


def update_variables(settings: Optional[Mapping[str, str]], output: Dict[str, str]) -> None:
    """Insert settings into output without replacing existing keys."""
    if not settings:
        return

    for key, value in settings.items():
        if key not in output:
            output[key] = value


def environment_overlay(settings: Optional[EnvironmentSettings], build_configuration: str) -> Dict[str, str]:
    """Defaults with the overrides for build_configuration written on top.

    Returns a new mapping; the settings object is left untouched.
    """
    if settings is None:
        return {}

    overlay = dict(settings.defaults or {})
    if settings.configuration and build_configuration in settings.configuration:
        for key, value in settings.configuration[build_configuration].items():
            overlay[key] = value

    return overlay
