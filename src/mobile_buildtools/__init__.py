"""
Mobile build tools: environment and secrets resolution for mobile app builds.
"""

__version__ = '0.1.0'

from invoke import Collection

from .build.tasks import config, env, manifest, secrets, solution

# Each task module becomes a nested namespace: secrets.get, manifest.template, ...
namespace = Collection()
for submodule in [config, env, manifest, secrets, solution]:
    namespace.add_collection(Collection.from_module(submodule), name=submodule.__name__.rsplit('.', 1)[-1])
