"""Persisted build identifier under `<output root>/assets/`."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .utils.helpers import atomic_write

ASSETS_DIRNAME = "assets"
DEFAULT_MANIFEST_FILENAME = "build-version.txt"


@dataclass
class ManifestWrite:
    """Outcome of persisting a build identifier."""
    path: Path
    build_id: str
    created_assets_dir: bool


def manifest_path(out_dir: Union[str, Path], filename: str = DEFAULT_MANIFEST_FILENAME) -> Path:
    """Return the manifest location for an output root."""
    name = Path(filename)
    if name.name != filename or filename in ("", ".", ".."):
        raise ValueError(f"Manifest filename must be a plain file name, got {filename!r}")
    return Path(out_dir) / ASSETS_DIRNAME / filename


def write_manifest(out_dir: Union[str, Path], filename: str, build_id: str) -> ManifestWrite:
    """Write build_id as the whole content of the manifest file.

    The assets directory is created when missing. Prior content is
    overwritten. OS errors propagate to the caller.
    """
    path = manifest_path(out_dir, filename)
    assets_dir = path.parent
    created = not assets_dir.is_dir()
    if created:
        assets_dir.mkdir(parents=True, exist_ok=True)

    atomic_write(path, build_id)
    return ManifestWrite(path=path, build_id=build_id, created_assets_dir=created)


def read_manifest(
    out_dir: Union[str, Path],
    filename: str = DEFAULT_MANIFEST_FILENAME,
    default: Optional[str] = None,
) -> Optional[str]:
    """Read a persisted build identifier.

    Args:
        out_dir: Output root the manifest was written under.
        filename: Manifest file name.
        default: Returned when the manifest is missing or empty.
    Returns:
        The stripped identifier, or default.
    """
    path = manifest_path(out_dir, filename)
    if not path.is_file():
        return default
    value = path.read_text(encoding="utf-8").strip()
    return value or default
