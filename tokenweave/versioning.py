"""
Package version synchronization between npm and NuGet manifests.

The design system ships as both an npm package (``package.json``) and a
NuGet package (``.csproj``). Both must carry the same version.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .exceptions import InvalidVersionError, ManifestError, VersionMismatchError

logger = logging.getLogger(__name__)

SEMVER_PATTERN = re.compile(r"^\d+\.\d+\.\d+$")
CSPROJ_VERSION_PATTERN = re.compile(r"<Version>([\d.]+)</Version>")

PathLike = Union[str, Path]


@dataclass(frozen=True)
class VersionStatus:
    """Versions read from both manifests."""
    npm: Optional[str]
    nuget: Optional[str]

    @property
    def synchronized(self) -> bool:
        return self.npm is not None and self.npm == self.nuget


def validate_version(version: str) -> bool:
    """Check for MAJOR.MINOR.PATCH."""
    return bool(SEMVER_PATTERN.match(version))


def _read_manifest(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(str(path), f"{type(e).__name__}: {e}") from e


def _load_package_json(path: Path) -> dict:
    content = _read_manifest(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(str(path), f"{type(e).__name__}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(str(path), "top level must be a JSON object")
    return data


def read_npm_version(package_json: PathLike) -> Optional[str]:
    """Version field of ``package.json``."""
    version = _load_package_json(Path(package_json)).get("version")
    return version if isinstance(version, str) else None


def read_nuget_version(csproj: PathLike) -> Optional[str]:
    """``<Version>`` element of a ``.csproj``; None when absent."""
    match = CSPROJ_VERSION_PATTERN.search(_read_manifest(Path(csproj)))
    return match.group(1) if match else None


def check_versions(package_json: PathLike, csproj: PathLike) -> VersionStatus:
    """Read both manifests and report their versions."""
    return VersionStatus(
        npm=read_npm_version(package_json),
        nuget=read_nuget_version(csproj),
    )


def ensure_synchronized(package_json: PathLike, csproj: PathLike) -> VersionStatus:
    """
    Verify both manifests agree.

    A ``.csproj`` without a ``<Version>`` element only logs a warning.

    Raises:
        VersionMismatchError: If both versions are present and differ.
    """
    status = check_versions(package_json, csproj)
    if status.nuget is None:
        logger.warning(f"Could not find version in {csproj}")
        return status
    if not status.synchronized:
        raise VersionMismatchError(status.npm, status.nuget)
    logger.info(f"Version: {status.npm} (synchronized)")
    return status


def sync_versions(version: str, package_json: PathLike, csproj: PathLike) -> VersionStatus:
    """
    Write ``version`` into both manifests.

    Raises:
        InvalidVersionError: If ``version`` is not MAJOR.MINOR.PATCH.
        ManifestError: If a manifest cannot be read or written.
    """
    if not validate_version(version):
        raise InvalidVersionError(version)

    package_path = Path(package_json)
    csproj_path = Path(csproj)
    data = _load_package_json(package_path)
    content = _read_manifest(csproj_path)

    data["version"] = version
    try:
        package_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise ManifestError(str(package_path), f"{type(e).__name__}: {e}") from e
    logger.info(f"Updated {package_path} to version {version}")

    try:
        csproj_path.write_text(
            CSPROJ_VERSION_PATTERN.sub(f"<Version>{version}</Version>", content, count=1),
            encoding="utf-8",
        )
    except OSError as e:
        raise ManifestError(str(csproj_path), f"{type(e).__name__}: {e}") from e
    logger.info(f"Updated {csproj_path} to version {version}")

    return check_versions(package_path, csproj_path)
