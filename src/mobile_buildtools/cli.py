"""
Console entry point exposing the build tasks as ``mobile-buildtools``.
"""

from invoke import Program

from . import __version__, namespace
from .build.config.logging import bootstrap_logging

program = Program(name='mobile-buildtools', binary='mobile-buildtools', namespace=namespace, version=__version__)


def main():
    bootstrap_logging()
    program.run()
