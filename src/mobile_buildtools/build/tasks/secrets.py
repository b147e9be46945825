"""Secrets tasks.

Resolve de-prefixed secrets for a project and report them as JSON. Values are
shown as hashes unless --show is given.
"""

import json
import sys
from pathlib import Path

from invoke import task

from ..secrets.analyzer import get_secret_keys
from ..secrets.injection import resolve_project_secrets
from ..secrets.models import SecretsResponse
from ..secrets.prefixes import secret_prefixes
from .decorators import CONTEXT_HELP, config_errors, context_from_options


@task(help={
    **CONTEXT_HELP,
    'show': 'Show the actual secret values (default: show hash)',
    'output': 'Write the resolved secrets as a JSON object to this file',
})
@config_errors
def get(ctx, project_dir='.', solution_dir=None, configuration=None, platform=None,
        project_name=None, show=False, output=None):
    """
    Resolve the secrets for a project.

    Examples:
        invoke secrets.get --platform=Android --configuration=Release
        invoke secrets.get --platform=iOS --output=obj/secrets.json
    """
    context = context_from_options(project_dir, solution_dir, configuration, platform, project_name)
    secrets = resolve_project_secrets(context)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(secrets, indent=2, sort_keys=True) + "\n", encoding='utf-8')
        print(f"✅ Wrote {len(secrets)} secrets to {output_path}", file=sys.stderr)

    response = SecretsResponse.from_mapping(
        secrets,
        show=show,
        project=context.project_name,
        platform=context.platform.value,
        configuration=context.build_configuration,
    )
    print(response.model_dump_json(indent=2, exclude_none=True))


@task(help={
    'platform': CONTEXT_HELP['platform'],
    'known_prefix': 'Additional prefix to match',
})
@config_errors
def keys(ctx, platform=None, known_prefix=None):
    """
    List the environment variables that would be picked up as secrets.

    Examples:
        invoke secrets.keys --platform=Android
    """
    prefixes = secret_prefixes(platform)
    if known_prefix:
        prefixes.append(known_prefix)

    print(f"🔍 Prefixes: {', '.join(prefixes)}", file=sys.stderr)
    for key in sorted(get_secret_keys(prefixes)):
        print(key)
