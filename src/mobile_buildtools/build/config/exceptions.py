"""
Exception classes with built-in guidance for build configuration errors.
"""
import sys


class ConfigException(Exception):
    """Base exception for all configuration errors."""
    def __init__(self, message: str, error_type: str = None, path: str = None,
                 key: str = None, project_name: str = None):
        super().__init__(message)
        self.error_type = error_type
        self.path = path
        self.key = key
        self.project_name = project_name
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            else:
                return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Configuration error: {self}
💡 Check your configuration and try again
"""


class SecretsFileParseException(ConfigException):
    """Raised when an existing secrets or manifest file is not a JSON object."""
    def __init__(self, message: str, path: str, **kwargs):
        super().__init__(message, error_type="secrets_file_parse", path=path, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Unable to read '{self.path}': {self}
💡 Secrets and manifest files must contain a single flat JSON object, for example:
   {{"BuildTools_ApiKey": "value"}}
   Fix or delete the file and run the build again.
"""


class ConfigFileParseException(ConfigException):
    """Raised when buildtools.json (or secrets.config.json) cannot be parsed."""
    def __init__(self, message: str, path: str, **kwargs):
        super().__init__(message, error_type="config_file_parse", path=path, **kwargs)

    def _generate_guidance(self):
        command = self._get_current_command()
        return f"""
❌ Invalid build tools configuration in '{self.path}': {self}
💡 Resolve this in one of the following ways:
   1. Fix the JSON in '{self.path}'
   2. Or move it aside and regenerate a default: {command.split(' ')[0]} config.init
"""


class DuplicateSecretKeyException(ConfigException):
    """Raised when two prefixed variables strip down to the same secret name."""
    def __init__(self, message: str, key: str, prefix: str = None, **kwargs):
        self.prefix = prefix
        super().__init__(message, error_type="duplicate_secret_key", key=key, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Secret '{self.key}' is defined by more than one prefixed environment variable
💡 The variable with prefix '{self.prefix}' produces a name that is already taken.
   Remove one of the variables so that '{self.key}' is defined only once, e.g. keep
   either the platform specific variable or the SharedSecret_ variable.
"""


class MissingSecretValueException(ConfigException):
    """Raised when a declared secret property has no value and no default."""
    def __init__(self, message: str, key: str, project_name: str = None, **kwargs):
        super().__init__(message, error_type="missing_secret", key=key,
                         project_name=project_name, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Secret '{self.key}' is required by project '{self.project_name}' but has no value
💡 You must do one of the following:
   1. Export a prefixed environment variable: export BuildTools_{self.key}=your-value
   2. Or add "{self.key}" to secrets.json in the project or solution directory
   3. Or give the property a DefaultValue in the project's secrets configuration
"""


class ManifestTokenMissingException(ConfigException):
    """Raised when a manifest token cannot be resolved and missing tokens are errors."""
    def __init__(self, message: str, key: str, path: str = None, **kwargs):
        super().__init__(message, error_type="manifest_token_missing", key=key,
                         path=path, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ No value found for manifest token '{self.key}' in '{self.path}'
💡 Resolve this in one of the following ways:
   1. Export a variable named {self.key} or Manifest_{self.key}
   2. Or add "{self.key}" to manifest.json in the project or solution directory
   3. Or set "MissingTokensAsErrors": false in the Manifests section of buildtools.json
"""
