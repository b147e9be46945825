"""
Token replacement for platform manifests.

Tokens look like ``$$ApiKey$$`` (the delimiter is configurable). A token is
resolved from the variables gathered with manifest.json included, first by its
exact name and then by each manifest prefix followed by the name. The file is
treated as plain text, so any manifest format can be templated.
"""
import codecs
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .config.exceptions import ManifestTokenMissingException
from .config.models import BuildContext, TemplatedManifest
from .secrets.analyzer import gather_environment_variables
from .secrets.prefixes import manifest_prefixes

logger = logging.getLogger(__name__)


def _token_pattern(token: str) -> re.Pattern:
    delimiter = re.escape(token)
    return re.compile(f"{delimiter}(\\w+){delimiter}")


def resolve_token(name: str, variables: Dict[str, str], prefixes: List[str]) -> Optional[str]:
    if name in variables:
        return variables[name]
    for prefix in prefixes:
        key = f"{prefix}{name}"
        if key in variables:
            return variables[key]
    return None


def replace_tokens(content: str, variables: Dict[str, str], prefixes: List[str],
                   settings: TemplatedManifest) -> Tuple[str, List[str]]:
    """Replace every resolvable token in content.

    Returns:
        Tuple of (new content, names of tokens that had no value)
    """
    missing = []

    def _replace(match):
        name = match.group(1)
        value = resolve_token(name, variables, prefixes)
        if value is None:
            if name not in missing:
                missing.append(name)
            return match.group(0)
        return value

    return _token_pattern(settings.token).sub(_replace, content), missing


def template_manifest(context: BuildContext, manifest_path: Optional[Union[str, Path]]) -> bool:
    """Replace manifest tokens in place.

    Args:
        context: Build being resolved
        manifest_path: Manifest file to rewrite

    Returns:
        True if the manifest was rewritten

    Raises:
        ManifestTokenMissingException: If a token has no value and MissingTokensAsErrors is set
    """
    if not manifest_path:
        logger.warning("No value was provided for the Manifest. Unable to process Manifest Tokens")
        return False

    manifest_path = Path(manifest_path)
    if not manifest_path.is_file():
        logger.warning(f"Unable to process Manifest Tokens, no manifest was found at the path '{manifest_path}'")
        return False

    settings = TemplatedManifest()
    if context.configuration is not None and context.configuration.manifests is not None:
        settings = context.configuration.manifests

    if settings.disable:
        logger.info("Manifest token replacement is disabled")
        return False

    if not settings.token or not settings.token.strip():
        logger.warning("Manifest token delimiter is empty. Unable to process Manifest Tokens")
        return False

    variables = gather_environment_variables(context, include_manifest=True)
    prefixes = manifest_prefixes(context.platform, settings.variable_prefix)

    encoding = 'utf-8-sig' if manifest_path.read_bytes().startswith(codecs.BOM_UTF8) else 'utf-8'
    original = manifest_path.read_text(encoding=encoding)
    content, missing = replace_tokens(original, variables, prefixes, settings)

    for name in missing:
        if settings.missing_tokens_as_errors:
            raise ManifestTokenMissingException(
                f"No value found for token '{name}'", key=name, path=str(manifest_path))
        logger.warning(f"No value found for manifest token '{name}' in {manifest_path}")

    if content == original:
        logger.debug(f"No tokens replaced in {manifest_path}")
        return False

    manifest_path.write_text(content, encoding=encoding)
    logger.info(f"Processed manifest tokens in {manifest_path}")
    return True
