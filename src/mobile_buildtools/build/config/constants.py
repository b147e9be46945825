"""
File name conventions shared by the build steps.
"""

BUILD_TOOLS_CONFIG_FILE_NAME = "buildtools.json"
SECRETS_CONFIG_FILE_NAME = "secrets.config.json"

SECRETS_JSON_FILE_NAME = "secrets.json"
SECRETS_JSON_CONFIGURATION_FILE_FORMAT = "secrets.{}.json"
MANIFEST_JSON_FILE_NAME = "manifest.json"

SOLUTION_FILE_PATTERN = "*.sln"
GIT_DIRECTORY_NAME = ".git"

DEFAULT_BUILD_CONFIGURATION = "Debug"
DEFAULT_MANIFEST_TOKEN = "$$"
