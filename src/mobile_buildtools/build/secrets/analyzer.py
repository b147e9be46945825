"""
Environment and secrets resolution for a build invocation.

Sources are merged from highest to lowest precedence, each one only filling
keys that are still missing:

    OS environment
    <project>/secrets.json
    <project>/secrets.<Configuration>.json
    <solution>/secrets.json
    <solution>/secrets.<Configuration>.json
    <project>/manifest.json, <solution>/manifest.json   (include_manifest only)
    Environment section of buildtools.json
"""
import logging
from typing import Dict, Iterable, List, Optional

from ..config.constants import (
    MANIFEST_JSON_FILE_NAME,
    SECRETS_JSON_CONFIGURATION_FILE_FORMAT,
    SECRETS_JSON_FILE_NAME,
)
from ..config.exceptions import DuplicateSecretKeyException
from ..config.models import BuildContext
from .environment import environment_overlay, load_secrets, read_environment, update_variables
from .prefixes import secret_prefixes

logger = logging.getLogger(__name__)


def _apply_environment_section(context: BuildContext, output: Dict[str, str]) -> None:
    config = context.configuration
    if config is None or config.environment is None:
        return

    overlay = environment_overlay(config.environment, context.build_configuration)
    logger.debug(f"Applying {len(overlay)} configured defaults for '{context.build_configuration}'")
    update_variables(overlay, output)


def gather_environment_variables(context: Optional[BuildContext] = None,
                                 include_manifest: bool = False) -> Dict[str, str]:
    """Build the merged variable mapping for a build.

    Args:
        context: Build being resolved; without one only the OS environment is returned
        include_manifest: Also read manifest.json from the project and solution

    Returns:
        Mapping of variable name to value

    Raises:
        SecretsFileParseException: If any existing secrets/manifest file is malformed
    """
    env = read_environment()

    if context is None:
        return env

    project_dir = context.project_directory
    solution_dir = context.solution_directory
    configuration_file = SECRETS_JSON_CONFIGURATION_FILE_FORMAT.format(context.build_configuration)

    load_secrets(project_dir / SECRETS_JSON_FILE_NAME, env)
    load_secrets(project_dir / configuration_file, env)
    load_secrets(solution_dir / SECRETS_JSON_FILE_NAME, env)
    load_secrets(solution_dir / configuration_file, env)

    if include_manifest:
        load_secrets(project_dir / MANIFEST_JSON_FILE_NAME, env)
        load_secrets(solution_dir / MANIFEST_JSON_FILE_NAME, env)

    _apply_environment_section(context, env)

    return env


def get_secret_keys(prefixes: Iterable[str], variables: Optional[Dict[str, str]] = None) -> List[str]:
    """Names of OS environment variables that start with any of the prefixes."""
    prefixes = tuple(prefixes)
    if variables is None:
        variables = gather_environment_variables()
    return [key for key in variables if key.startswith(prefixes)]


def get_secrets(context: BuildContext, known_prefix: Optional[str] = None) -> Dict[str, str]:
    """Collect prefixed OS environment variables with their prefixes removed.

    Only the OS environment is scanned; secrets files are not. Values declared in
    the Environment section of buildtools.json fill in names that are still
    missing afterwards.

    Args:
        context: Build being resolved (platform selects the prefixes)
        known_prefix: Extra project specific prefix to accept

    Returns:
        Mapping of de-prefixed name to value

    Raises:
        DuplicateSecretKeyException: If two variables strip down to the same name
    """
    prefixes = secret_prefixes(context.platform)
    if known_prefix and known_prefix not in prefixes:
        prefixes.append(known_prefix)

    variables = gather_environment_variables()
    keys = get_secret_keys(prefixes, variables)

    output = {}
    for prefix in prefixes:
        for key in keys:
            if not key.startswith(prefix):
                continue

            name = key[len(prefix):]
            if name in output:
                raise DuplicateSecretKeyException(
                    f"Secret '{name}' from '{key}' is already defined",
                    key=name,
                    prefix=prefix,
                )
            output[name] = variables[key]

    logger.debug(f"Found {len(output)} secrets for platform {context.platform.value} using prefixes {prefixes}")

    _apply_environment_section(context, output)

    return output
