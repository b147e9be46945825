"""
Build tools configuration tasks.
"""

import sys

import yaml
from invoke import task

from ..config.loading import config_exists, dump_config, get_config_file_path, load_config, save_default_config
from .decorators import config_errors


@task(help={
    'path': 'Solution directory or path to buildtools.json (default: current directory)',
    'force': 'Overwrite an existing configuration',
})
@config_errors
def init(ctx, path='.', force=False):
    """
    Write a default buildtools.json.

    Examples:
        invoke config.init
        invoke config.init --path=src --force
    """
    file_path = get_config_file_path(path)
    if config_exists(path) and not force:
        print(f"⚠️  {file_path} already exists (use --force to overwrite)", file=sys.stderr)
        sys.exit(1)

    save_default_config(path)
    print(f"✅ Created {file_path}")


@task(help={
    'path': 'Solution directory or path to buildtools.json (default: current directory)',
})
@config_errors
def show(ctx, path='.'):
    """
    Show the build tools configuration.

    Outputs:
        stdout: YAML configuration (parseable)
        stderr: Diagnostic information
    """
    file_path = get_config_file_path(path)
    print(f"🔍 Loading configuration from: {file_path}", file=sys.stderr)

    config = load_config(path)

    yaml.safe_dump(dump_config(config), sys.stdout, default_flow_style=False, sort_keys=True)
