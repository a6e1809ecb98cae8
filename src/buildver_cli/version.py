"""Version management for buildver-cli."""

import re
from importlib import metadata
from pathlib import Path

# Build-time version constant (set by release packaging)
__BUILD_VERSION__ = None

DISTRIBUTION_NAME = "buildver-cli"


def get_version() -> str:
    """
    Get the current version of the tool.

    First tries the build-time constant, then installed package metadata,
    then pyproject.toml for source checkouts.

    Returns:
        str: Version string, or "unknown"
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__

    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        content = pyproject_path.read_text(encoding="utf-8")
        match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
        if match:
            return match.group(1)

    return "unknown"


__version__ = get_version()
