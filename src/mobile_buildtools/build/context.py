"""
Construction of the BuildContext handed to every build step.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from .config.constants import DEFAULT_BUILD_CONFIGURATION
from .config.loading import config_exists, load_config
from .config.models import BuildContext, Platform
from .solution import locate_solution

logger = logging.getLogger(__name__)


def create_build_context(project_dir: Union[str, Path],
                         solution_dir: Optional[Union[str, Path]] = None,
                         configuration: Optional[str] = None,
                         platform: Optional[Union[str, Platform]] = None,
                         project_name: Optional[str] = None) -> BuildContext:
    """Describe a build of the project in project_dir.

    Args:
        project_dir: Directory of the project being built
        solution_dir: Solution root; located from project_dir when omitted
        configuration: Build configuration name (default: Debug)
        platform: Target platform name; unknown names mean Unsupported
        project_name: Defaults to the name of project_dir

    Returns:
        BuildContext with buildtools.json from the solution directory, if present
    """
    project_dir = Path(project_dir).resolve()
    if solution_dir is None:
        solution_dir = locate_solution(project_dir)
    solution_dir = Path(solution_dir).resolve()

    build_config = None
    if config_exists(solution_dir):
        build_config = load_config(solution_dir)
    else:
        logger.debug(f"No build tools configuration in {solution_dir}")

    context = BuildContext(
        project_directory=project_dir,
        solution_directory=solution_dir,
        build_configuration=configuration or DEFAULT_BUILD_CONFIGURATION,
        platform=Platform.parse(platform),
        project_name=project_name or project_dir.name,
        configuration=build_config,
    )
    logger.debug(f"Build context: {context.project_name} {context.build_configuration} ({context.platform.value})")
    return context
