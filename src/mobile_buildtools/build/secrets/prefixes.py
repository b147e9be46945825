"""
Prefix conventions identifying secret and manifest variables.

All prefixes come from one registry built at import time so every call site
agrees on the same strings.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional

from ..config.models import Platform


@dataclass(frozen=True)
class PrefixRegistry:
    """Immutable table of the prefix strings."""
    default_secret: str = "BuildTools_"
    legacy_secret: str = "Secret_"
    shared_secret: str = "SharedSecret_"
    platform_secret: str = "PlatformSecret_"
    default_manifest: str = "Manifest_"
    platform_secrets: Mapping[Platform, str] = field(default_factory=lambda: MappingProxyType({
        Platform.ANDROID: "DroidSecret_",
        Platform.IOS: "iOSSecret_",
        Platform.UWP: "UWPSecret_",
        Platform.MACOS: "MacSecret_",
        Platform.TIZEN: "TizenSecret_",
    }))
    platform_manifests: Mapping[Platform, str] = field(default_factory=lambda: MappingProxyType({
        Platform.ANDROID: "DroidManifest_",
        Platform.IOS: "iOSManifest_",
        Platform.UWP: "UWPManifest_",
        Platform.MACOS: "MacManifest_",
        Platform.TIZEN: "TizenManifest_",
    }))

    @property
    def default_manifest_variant(self) -> str:
        """Manifest flavour of the default prefix, e.g. MBManifest_."""
        return f"MB{self.default_manifest}"


PREFIXES = PrefixRegistry()


def platform_secret_prefixes(platform: Platform) -> List[str]:
    """Prefixes owned by a platform, or the generic pair for Unsupported."""
    prefix = PREFIXES.platform_secrets.get(Platform.parse(platform))
    if prefix:
        return [prefix]
    return [PREFIXES.default_secret, PREFIXES.legacy_secret]


def platform_manifest_prefix(platform: Platform) -> Optional[str]:
    return PREFIXES.platform_manifests.get(Platform.parse(platform))


def secret_prefixes(platform: Platform, force_include_default: bool = False) -> List[str]:
    """Prefixes scanned when collecting secrets for a platform.

    Args:
        platform: Target platform
        force_include_default: Also accept the default BuildTools_ prefix (and its
            manifest variant) on named platforms, used when resolving manifests

    Returns:
        Ordered list of prefixes
    """
    platform = Platform.parse(platform)
    prefixes = platform_secret_prefixes(platform)
    prefixes.append(PREFIXES.shared_secret)

    if platform != Platform.UNSUPPORTED:
        prefixes.append(PREFIXES.platform_secret)

    if force_include_default and PREFIXES.default_secret not in prefixes:
        prefixes.append(PREFIXES.default_secret)
        prefixes.append(PREFIXES.default_manifest_variant)

    return prefixes


def manifest_prefixes(platform: Platform, known_prefix: Optional[str] = None) -> List[str]:
    """Prefixes accepted when substituting manifest tokens."""
    prefixes = secret_prefixes(platform, force_include_default=True)
    prefixes.append(PREFIXES.default_manifest)

    if known_prefix:
        prefixes.append(known_prefix)

    platform_prefix = platform_manifest_prefix(platform)
    if platform_prefix and platform_prefix.strip():
        prefixes.append(platform_prefix)

    return prefixes
