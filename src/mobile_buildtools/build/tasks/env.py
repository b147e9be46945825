"""
Environment display task.

Shows the merged build variables with their values hashed.
"""

import sys

import yaml
from invoke import task

from ..secrets.analyzer import gather_environment_variables
from ..secrets.models import SecretInfo
from .decorators import CONTEXT_HELP, config_errors, context_from_options


@task(help={
    **CONTEXT_HELP,
    'manifest': 'Include manifest.json values',
    'prefix': 'Only show variables whose name starts with this prefix',
    'show': 'Show actual values (default: show hash)',
})
@config_errors
def show(ctx, project_dir='.', solution_dir=None, configuration=None, platform=None,
         project_name=None, manifest=False, prefix=None, show=False):
    """
    Show the variables resolved for a build.

    Outputs:
        stdout: YAML mapping of variable name to value (or hash)
        stderr: Diagnostic information
    """
    context = context_from_options(project_dir, solution_dir, configuration, platform, project_name)

    print(f"🔍 Resolving variables for {context.project_name} "
          f"({context.build_configuration}, {context.platform.value})", file=sys.stderr)
    print(f"📍 Solution directory: {context.solution_directory}", file=sys.stderr)

    variables = gather_environment_variables(context, include_manifest=manifest)
    if prefix:
        variables = {k: v for k, v in variables.items() if k.startswith(prefix)}

    display = {}
    for name, value in variables.items():
        info = SecretInfo.create(name, value, show=show)
        display[name] = info.value if show else info.hash

    yaml.safe_dump(display, sys.stdout, default_flow_style=False, sort_keys=True)
