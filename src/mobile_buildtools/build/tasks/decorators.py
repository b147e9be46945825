"""
Task decorators and helpers shared by the build tasks.
"""
import functools
import sys
from typing import Optional

from ..config.exceptions import ConfigException
from ..config.logging import bootstrap_logging
from ..config.models import BuildContext
from ..context import create_build_context

# Help text for the options every context-aware task accepts
CONTEXT_HELP = {
    'project_dir': 'Project directory (default: current directory)',
    'solution_dir': 'Solution directory (default: nearest parent with a .sln file or .git directory)',
    'configuration': 'Build configuration name, e.g. Debug or Release',
    'platform': 'Target platform: Android, iOS, UWP, macOS, Tizen or Unsupported',
    'project_name': 'Project name (default: name of the project directory)',
}


def handle_config_error(e: ConfigException):
    """Print the built-in guidance of a configuration error and exit."""
    print(e.guidance, file=sys.stderr)
    sys.exit(1)


def config_errors(func):
    """Decorator that bootstraps logging and turns ConfigException into guidance + exit 1.

    Other exceptions bubble up.
    """
    @functools.wraps(func)
    def wrapper(ctx, *args, **kwargs):
        bootstrap_logging(func.__module__)
        try:
            return func(ctx, *args, **kwargs)
        except ConfigException as e:
            handle_config_error(e)
    return wrapper


def context_from_options(project_dir: str = '.', solution_dir: Optional[str] = None,
                         configuration: Optional[str] = None, platform: Optional[str] = None,
                         project_name: Optional[str] = None) -> BuildContext:
    """Build a BuildContext from task options."""
    return create_build_context(
        project_dir or '.',
        solution_dir=solution_dir,
        configuration=configuration,
        platform=platform,
        project_name=project_name,
    )
