"""
Build variable and secrets resolution.

Merges the OS environment with secrets.json / manifest.json files and the
Environment section of buildtools.json, and extracts platform secrets by
prefix.
"""

from .analyzer import gather_environment_variables, get_secret_keys, get_secrets
from .environment import load_secrets, read_environment, update_variables
from .injection import resolve_project_secrets
from .prefixes import (
    PREFIXES,
    manifest_prefixes,
    platform_secret_prefixes,
    secret_prefixes,
)

__all__ = [
    # Resolution
    'gather_environment_variables',
    'get_secret_keys',
    'get_secrets',
    'resolve_project_secrets',

    # Merge helpers
    'load_secrets',
    'read_environment',
    'update_variables',

    # Prefixes
    'PREFIXES',
    'manifest_prefixes',
    'platform_secret_prefixes',
    'secret_prefixes',
]
