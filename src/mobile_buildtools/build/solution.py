"""
Upward directory searches used to find the solution root of a project.
"""
import logging
from pathlib import Path
from typing import Union

from .config.constants import GIT_DIRECTORY_NAME, SOLUTION_FILE_PATTERN

logger = logging.getLogger(__name__)


def _has_git_directory(directory: Path) -> bool:
    return (directory / GIT_DIRECTORY_NAME).is_dir()


def _has_solution_file(directory: Path) -> bool:
    return any(p.is_file() for p in directory.glob(SOLUTION_FILE_PATTERN))


def locate_solution(search_directory: Union[str, Path]) -> Path:
    """Find the closest directory containing a *.sln file or a .git directory.

    Walks from search_directory towards the filesystem root, which is returned
    when no directory matches.
    """
    directory = Path(search_directory).resolve()

    for _ in range(len(directory.parts)):
        if _has_solution_file(directory) or _has_git_directory(directory):
            logger.debug(f"Solution root located at {directory}")
            return directory
        if directory == directory.parent:
            break
        directory = directory.parent

    logger.debug(f"No solution root found above {search_directory}, using {directory}")
    return directory


def is_in_git_repo(project_path: Union[str, Path]) -> bool:
    """Whether project_path is inside a git working tree.

    The search stops at the filesystem root and also at the user's home
    directory; directories above $HOME are never inspected.
    """
    directory = Path(project_path).resolve()
    home = Path.home().resolve()

    for _ in range(len(directory.parts)):
        if _has_git_directory(directory):
            return True
        if directory == directory.parent or directory == home:
            return False
        directory = directory.parent

    return False
