"""
Root pytest configuration for mobile-buildtools.
"""

import os

# Auto-bootstrap logging for all tests
os.environ.setdefault('LOG_LEVEL', 'DEBUG')
from mobile_buildtools.build.config.logging import bootstrap_logging
bootstrap_logging()
