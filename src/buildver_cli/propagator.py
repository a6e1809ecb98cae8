"""Final-pass propagation of the build identifier.

Runs once after every artifact of the final build pass has been written:
derive the authoritative identifier, persist it, then rewrite the
placeholder assignment in every output file that still carries one.

Interrupting a run leaves some files rewritten and others not; a full
rebuild is the recovery path.
"""
from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Literal, Optional, Tuple, Union

from .fingerprint import DEFAULT_ID_LENGTH, derive_build_id
from .manifest import DEFAULT_MANIFEST_FILENAME, ManifestWrite, write_manifest
from .placeholder import substitute, validate_var_name
from .utils.console import _rich_info, _rich_success
from .utils.helpers import atomic_write

DEFAULT_VAR_NAME = "BUILD_ID"

RewriteStatus = Literal["UPDATED", "UNCHANGED"]

# Lossless for any byte sequence, so binary assets survive a rewrite untouched
_TEXT_ENCODING = "utf-8"
_TEXT_ERRORS = "surrogateescape"


@dataclass
class FileRewrite:
    """A file in which the placeholder pattern matched."""
    path: Path
    matches: int
    status: RewriteStatus


@dataclass
class PropagationResult:
    """Result of one final-pass run."""
    build_id: str
    manifest: ManifestWrite
    files_scanned: int = 0
    rewrites: List[FileRewrite] = field(default_factory=list)

    @property
    def updated_files(self) -> List[Path]:
        return [r.path for r in self.rewrites if r.status == "UPDATED"]


def _raise_walk_error(err: OSError) -> None:
    raise err


def iter_output_files(root: Union[str, Path]) -> Iterator[Path]:
    """Yield every regular file under root in a stable order.

    Directories, symlinks and other non-regular entries are skipped.
    A directory that cannot be listed raises instead of being skipped.
    """
    root = Path(root)
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if stat.S_ISREG(os.lstat(path).st_mode):
                yield path


def rewrite_file(path: Path, var_name: str, build_id: str) -> Optional[FileRewrite]:
    """Rewrite placeholder assignments in a single file.

    Returns:
        None when the file has no assignment to var_name, else a FileRewrite.
        The file is only written when its content actually changes.
    """
    raw = path.read_bytes()
    content = raw.decode(_TEXT_ENCODING, _TEXT_ERRORS)
    new_content, count = substitute(content, var_name, build_id)
    if count == 0:
        return None
    if new_content == content:
        return FileRewrite(path=path, matches=count, status="UNCHANGED")

    atomic_write(path, new_content.encode(_TEXT_ENCODING, _TEXT_ERRORS))
    return FileRewrite(path=path, matches=count, status="UPDATED")


def propagate_placeholder(
    root: Union[str, Path],
    var_name: str,
    build_id: str,
    verbose: bool = False,
) -> Tuple[int, List[FileRewrite]]:
    """Replace the placeholder for var_name in every file under root.

    Args:
        root: Output root to scan recursively.
        var_name: Variable whose assignment is rewritten.
        build_id: Value written into every matching assignment.
        verbose: Announce each scanned file.
    Returns:
        (files_scanned, rewrites)
    """
    validate_var_name(var_name)
    scanned = 0
    rewrites: List[FileRewrite] = []
    for path in iter_output_files(root):
        scanned += 1
        if verbose:
            _rich_info(f"Looking for placeholder in {path}", symbol="search")
        rewrite = rewrite_file(path, var_name, build_id)
        if rewrite is None:
            continue
        rewrites.append(rewrite)
        if rewrite.status == "UPDATED":
            _rich_success(f"Replaced placeholder in {path}", symbol="check")
    return scanned, rewrites


class BuildVersionWriter:
    """Derive, persist and propagate the build identifier for one output root."""

    def __init__(
        self,
        filename: str = DEFAULT_MANIFEST_FILENAME,
        var_name: str = DEFAULT_VAR_NAME,
        id_length: int = DEFAULT_ID_LENGTH,
        propagate: bool = True,
        verbose: bool = False,
    ):
        """Initialize the writer.

        Args:
            filename (str): Manifest file name under `<out_dir>/assets/`.
            var_name (str): Placeholder variable rewritten in output files.
            id_length (int): Number of hex characters in the identifier.
            propagate (bool): Rewrite placeholders after persisting.
            verbose (bool): Announce every scanned file.
        """
        self.filename = filename
        self.var_name = validate_var_name(var_name)
        self.id_length = id_length
        self.propagate = propagate
        self.verbose = verbose

    def derive(self, artifact_names: Iterable[str]) -> str:
        """Compute the authoritative identifier for a final artifact set."""
        return derive_build_id(artifact_names, length=self.id_length)

    def write(self, out_dir: Union[str, Path], artifact_names: Iterable[str]) -> PropagationResult:
        """Run the final pass against out_dir.

        OS errors from directory creation, the manifest write or any file
        rewrite are not caught.
        """
        out_dir = Path(out_dir)
        build_id = self.derive(artifact_names)

        manifest = write_manifest(out_dir, self.filename, build_id)
        if manifest.created_assets_dir:
            _rich_info(f"Created assets directory {manifest.path.parent}", symbol="folder")
        _rich_success(f"Build version written to {manifest.path}: {build_id}", symbol="check")

        result = PropagationResult(build_id=build_id, manifest=manifest)
        if not self.propagate:
            return result

        result.files_scanned, result.rewrites = propagate_placeholder(
            out_dir, self.var_name, build_id, verbose=self.verbose
        )
        _rich_info(
            f"Done looking for placeholders: {len(result.updated_files)} of "
            f"{result.files_scanned} file(s) updated"
        )
        return result
