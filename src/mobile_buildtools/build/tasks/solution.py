"""
Solution discovery tasks.
"""

import sys

from invoke import task

from ..solution import is_in_git_repo, locate_solution


@task(help={'path': 'Directory to start from (default: current directory)'})
def locate(ctx, path='.'):
    """Print the solution root above a directory."""
    print(locate_solution(path))


@task(help={'path': 'Directory to start from (default: current directory)'})
def git(ctx, path='.'):
    """Print whether a directory is inside a git repository; exits 1 when it is not."""
    in_repo = is_in_git_repo(path)
    print(str(in_repo).lower())
    if not in_repo:
        sys.exit(1)
