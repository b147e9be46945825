"""
Pydantic models for the build tools configuration and build context.
"""
import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_BUILD_CONFIGURATION, DEFAULT_MANIFEST_TOKEN


def stringify_value(value: Any) -> str:
    """String form of a JSON value: strings verbatim, null as "", the rest as compact JSON."""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    return json.dumps(value, separators=(',', ':'))


def _stringify_mapping(values):
    if isinstance(values, dict):
        return {key: stringify_value(value) for key, value in values.items()}
    return values


class Platform(str, Enum):
    """Target platform of a build."""
    ANDROID = "Android"
    IOS = "iOS"
    UWP = "UWP"
    MACOS = "macOS"
    TIZEN = "Tizen"
    UNSUPPORTED = "Unsupported"

    @classmethod
    def parse(cls, value: Optional[str]) -> 'Platform':
        """Case-insensitive lookup; anything unrecognised is Unsupported."""
        if isinstance(value, cls):
            return value
        if value:
            for platform in cls:
                if platform.value.lower() == value.strip().lower():
                    return platform
        return cls.UNSUPPORTED


class _PascalModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class EnvironmentSettings(_PascalModel):
    """Declared environment defaults plus per-configuration overrides."""
    defaults: Optional[Dict[str, str]] = Field(default=None, alias="Defaults")
    configuration: Optional[Dict[str, Dict[str, str]]] = Field(default=None, alias="Configuration")

    @field_validator("defaults", mode="before")
    @classmethod
    def _stringify_defaults(cls, value):
        return _stringify_mapping(value)

    @field_validator("configuration", mode="before")
    @classmethod
    def _stringify_configuration(cls, value):
        if isinstance(value, dict):
            return {name: _stringify_mapping(settings) for name, settings in value.items()}
        return value


class TemplatedManifest(_PascalModel):
    """Settings for manifest token replacement."""
    disable: bool = Field(default=False, alias="Disable")
    token: str = Field(default=DEFAULT_MANIFEST_TOKEN, alias="Token")
    missing_tokens_as_errors: bool = Field(default=False, alias="MissingTokensAsErrors")
    variable_prefix: Optional[str] = Field(default="Manifest_", alias="VariablePrefix")


class ValueConfig(_PascalModel):
    """A secret property a project expects to receive."""
    name: str = Field(alias="Name")
    type: str = Field(default="String", alias="Type")
    is_array: bool = Field(default=False, alias="IsArray")
    default_value: Optional[str] = Field(default=None, alias="DefaultValue")

    @field_validator("default_value", mode="before")
    @classmethod
    def _stringify_default_value(cls, value):
        if value is None:
            return None
        return stringify_value(value)


class SecretsConfig(_PascalModel):
    """Per-project secrets settings."""
    disable: bool = Field(default=False, alias="Disable")
    class_name: Optional[str] = Field(default=None, alias="ClassName")
    namespace: Optional[str] = Field(default=None, alias="Namespace")
    delimiter: str = Field(default=";", alias="Delimiter")
    prefix: Optional[str] = Field(default=None, alias="Prefix")
    properties: List[ValueConfig] = Field(default_factory=list, alias="Properties")


class BuildToolsConfig(_PascalModel):
    """Contents of buildtools.json.

    Sections this package does not interpret are kept as extra fields so that a
    load/save round trip does not drop them.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    manifests: Optional[TemplatedManifest] = Field(default=None, alias="Manifests")
    environment: Optional[EnvironmentSettings] = Field(default=None, alias="Environment")
    project_secrets: Optional[Dict[str, SecretsConfig]] = Field(default=None, alias="ProjectSecrets")


class BuildContext(BaseModel):
    """Everything a build step knows about the current build invocation."""
    model_config = ConfigDict(frozen=True)

    project_directory: Path
    solution_directory: Path
    build_configuration: str = DEFAULT_BUILD_CONFIGURATION
    platform: Platform = Platform.UNSUPPORTED
    project_name: Optional[str] = None
    configuration: Optional[BuildToolsConfig] = None
