"""
Version management for aiapi.

Resolution order:
1. Installed distribution metadata (pip install / pip install -e)
2. pyproject.toml next to the package (source checkout)
Git hash comes from ``git rev-parse`` when a checkout is available.
"""

import subprocess
import tomllib
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "aiapi"

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _version_from_pyproject() -> str:
    try:
        with open(_PROJECT_ROOT / "pyproject.toml", "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return "unknown"
    return data.get("project", {}).get("version", "unknown")


def get_version_info() -> tuple[str, str]:
    """Get version and git hash information.

    Returns:
        tuple: (version: str, git_hash: str)
    """
    try:
        version = metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        version = _version_from_pyproject()

    git_hash = "unknown"
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            timeout=5,
            check=True,
            cwd=_PROJECT_ROOT,
        )
        git_hash = result.stdout.strip() or "unknown"
    except (OSError, subprocess.SubprocessError):
        pass

    return version, git_hash


def get_version() -> str:
    """Get version string.

    Returns:
        str: Version string or 'unknown' if not found
    """
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return _version_from_pyproject()


def get_git_hash() -> str:
    """Get current git commit hash (short version)."""
    _, git_hash = get_version_info()
    return git_hash


def get_version_string() -> str:
    """Get full version string with git hash.

    Returns:
        str: Version string in format 'version (git: hash)'
    """
    version, git_hash = get_version_info()
    return f"{version} (git: {git_hash})"
