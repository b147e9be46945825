"""Base test class for tests that need a project on disk and a controlled environment."""

import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from mobile_buildtools.build.config.models import BuildContext, BuildToolsConfig, Platform


# Base path identifier for all test directories
TEST_BASE_IDENTIFIER = "mobile-buildtools-unit-testing"


class BaseBuildTest(unittest.TestCase):
    """Creates <tmp>/solution/App and starts every test with an empty OS environment."""

    def setUp(self):
        """Set up test environment."""
        self.root = Path(tempfile.mkdtemp(prefix=f'{TEST_BASE_IDENTIFIER}-'))
        self.solution_dir = self.root / 'solution'
        self.project_dir = self.solution_dir / 'App'
        self.project_dir.mkdir(parents=True)
        self.addCleanup(shutil.rmtree, self.root, True)

        env_patch = patch.dict(os.environ, {}, clear=True)
        env_patch.start()
        self.addCleanup(env_patch.stop)

    def set_env(self, **values):
        os.environ.update(values)

    def write_json(self, path: Path, data) -> Path:
        path.write_text(json.dumps(data), encoding='utf-8')
        return path

    def make_context(self, platform: Platform = Platform.UNSUPPORTED, build_configuration: str = 'Debug',
                     configuration: BuildToolsConfig = None) -> BuildContext:
        return BuildContext(
            project_directory=self.project_dir,
            solution_directory=self.solution_dir,
            build_configuration=build_configuration,
            platform=platform,
            project_name='App',
            configuration=configuration,
        )
