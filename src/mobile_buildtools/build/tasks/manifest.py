"""
Manifest templating task.
"""

from invoke import task

from ..manifest import template_manifest
from .decorators import CONTEXT_HELP, config_errors, context_from_options


@task(help={
    **CONTEXT_HELP,
    'manifest_path': 'Manifest file whose tokens should be replaced',
})
@config_errors
def template(ctx, manifest_path=None, project_dir='.', solution_dir=None, configuration=None,
             platform=None, project_name=None):
    """
    Replace $$Token$$ placeholders in a manifest with build variables.

    Examples:
        invoke manifest.template --manifest-path=Properties/AndroidManifest.xml --platform=Android
    """
    context = context_from_options(project_dir, solution_dir, configuration, platform, project_name)
    if template_manifest(context, manifest_path):
        print(f"✅ Updated {manifest_path}")
