"""
Secrets handed to a project's generated code.
"""
import logging
from typing import Dict

from ..config.exceptions import MissingSecretValueException
from ..config.loading import get_secrets_config
from ..config.models import BuildContext
from .analyzer import get_secrets

logger = logging.getLogger(__name__)


def resolve_project_secrets(context: BuildContext) -> Dict[str, str]:
    """Resolve the secrets for the project in context.

    Without a secrets configuration every discovered secret is returned. With
    declared properties only those are returned, falling back to each property's
    DefaultValue.

    Raises:
        MissingSecretValueException: If a declared property has no value or default
        DuplicateSecretKeyException: If two variables strip down to the same name
    """
    secrets_config = get_secrets_config(context.project_name, context.project_directory, context.configuration)

    if secrets_config is not None and secrets_config.disable:
        logger.info(f"Secrets are disabled for project '{context.project_name}'")
        return {}

    known_prefix = secrets_config.prefix if secrets_config is not None else None
    secrets = get_secrets(context, known_prefix)

    if secrets_config is None or not secrets_config.properties:
        return secrets

    output = {}
    for prop in secrets_config.properties:
        if prop.name in secrets:
            output[prop.name] = secrets[prop.name]
        elif prop.default_value is not None:
            logger.debug(f"Using default value for secret '{prop.name}'")
            output[prop.name] = prop.default_value
        else:
            raise MissingSecretValueException(
                f"No value found for secret '{prop.name}'",
                key=prop.name,
                project_name=context.project_name,
            )

    return output
