"""Helper utility functions for buildver-cli."""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Union


def atomic_write(path: Path, data: Union[str, bytes], encoding: str = "utf-8") -> None:
    """Atomically write text or bytes to path.

    The data lands in a temporary sibling first and is then moved over the
    target, so readers never see a half-written file. An existing target
    keeps its permission bits.

    Args:
        path (Path): File to create or overwrite.
        data (str | bytes): Content to write.
        encoding (str): Encoding used when data is text.
    """
    path = Path(path)
    if isinstance(data, str):
        data = data.encode(encoding)

    fd, tmp_name = tempfile.mkstemp(prefix=".buildver-", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        if path.exists():
            shutil.copymode(path, tmp_name)
        else:
            # mkstemp creates 0600; give new files the usual umask-derived mode
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(tmp_name, 0o666 & ~umask)
        os.replace(tmp_name, path)
    except Exception:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


def to_posix_relative(path: Path, root: Path) -> str:
    """Return path relative to root using forward slashes."""
    return Path(path).relative_to(root).as_posix()
