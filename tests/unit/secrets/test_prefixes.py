"""Tests for the secret and manifest prefix sets."""

import dataclasses

import pytest

from mobile_buildtools.build.config.models import Platform
from mobile_buildtools.build.secrets.prefixes import (
    PREFIXES,
    manifest_prefixes,
    platform_secret_prefixes,
    secret_prefixes,
)


class TestPlatformSecretPrefixes:

    @pytest.mark.parametrize("platform, expected", [
        (Platform.ANDROID, "DroidSecret_"),
        (Platform.IOS, "iOSSecret_"),
        (Platform.UWP, "UWPSecret_"),
        (Platform.MACOS, "MacSecret_"),
        (Platform.TIZEN, "TizenSecret_"),
    ])
    def test_named_platform_has_single_prefix(self, platform, expected):
        assert platform_secret_prefixes(platform) == [expected]

    def test_unsupported_uses_default_and_legacy(self):
        assert platform_secret_prefixes(Platform.UNSUPPORTED) == ["BuildTools_", "Secret_"]

    def test_unknown_platform_name_falls_back(self):
        assert platform_secret_prefixes("Windows") == ["BuildTools_", "Secret_"]


class TestSecretPrefixes:

    def test_android(self):
        assert secret_prefixes(Platform.ANDROID) == ["DroidSecret_", "SharedSecret_", "PlatformSecret_"]

    def test_unsupported_has_no_platform_secret(self):
        assert secret_prefixes(Platform.UNSUPPORTED) == ["BuildTools_", "Secret_", "SharedSecret_"]

    def test_force_include_default_on_named_platform(self):
        assert secret_prefixes(Platform.IOS, force_include_default=True) == [
            "iOSSecret_", "SharedSecret_", "PlatformSecret_", "BuildTools_", "MBManifest_"
        ]

    def test_force_include_default_does_not_duplicate(self):
        prefixes = secret_prefixes(Platform.UNSUPPORTED, force_include_default=True)
        assert prefixes == ["BuildTools_", "Secret_", "SharedSecret_"]
        assert "MBManifest_" not in prefixes

    def test_returns_fresh_list(self):
        first = secret_prefixes(Platform.ANDROID)
        first.append("Mine_")
        assert "Mine_" not in secret_prefixes(Platform.ANDROID)


class TestManifestPrefixes:

    def test_android_with_known_prefix(self):
        assert manifest_prefixes(Platform.ANDROID, "App_") == [
            "DroidSecret_", "SharedSecret_", "PlatformSecret_", "BuildTools_", "MBManifest_",
            "Manifest_", "App_", "DroidManifest_",
        ]

    def test_unsupported_without_known_prefix(self):
        assert manifest_prefixes(Platform.UNSUPPORTED, None) == [
            "BuildTools_", "Secret_", "SharedSecret_", "Manifest_",
        ]

    def test_empty_known_prefix_is_ignored(self):
        assert "" not in manifest_prefixes(Platform.MACOS, "")
        assert manifest_prefixes(Platform.MACOS, "")[-1] == "MacManifest_"


def test_registry_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        PREFIXES.default_secret = "Other_"
    with pytest.raises(TypeError):
        PREFIXES.platform_secrets[Platform.ANDROID] = "Other_"
