"""
Build package for mobile-buildtools.

Resolution of build variables and secrets, manifest templating, and the
invoke tasks that expose them.
"""

from .context import create_build_context
from .manifest import template_manifest
from .solution import is_in_git_repo, locate_solution

__all__ = [
    'create_build_context',
    'template_manifest',
    'is_in_git_repo',
    'locate_solution',
]
