"""Post-build plugins that persist and propagate the build identifier."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Optional

from ..fingerprint import DEFAULT_ID_LENGTH
from ..manifest import DEFAULT_MANIFEST_FILENAME
from ..propagator import DEFAULT_VAR_NAME, BuildVersionWriter, PropagationResult
from .base import BuildPlugin

DEFAULT_BUILD_ID_FILENAME = "build-id.txt"
DEFAULT_OUT_DIRNAME = "dist"


def resolve_out_dir(output_options: Mapping[str, Any]) -> Path:
    """Return the output root from host options, defaulting to `<cwd>/dist`."""
    out_dir = output_options.get("dir") if output_options else None
    if out_dir:
        return Path(out_dir)
    return Path(os.getcwd()).resolve() / DEFAULT_OUT_DIRNAME


class BuildIdPlugin(BuildPlugin):
    """Write the build identifier under `assets/` without touching other files."""

    name = "build-id"
    enforce = "post"
    apply = "build"

    def __init__(self, filename: str = DEFAULT_BUILD_ID_FILENAME, id_length: int = DEFAULT_ID_LENGTH):
        self._use_writer(BuildVersionWriter(filename=filename, id_length=id_length, propagate=False))

    def _use_writer(self, writer: BuildVersionWriter) -> None:
        self.writer = writer
        self.last_result: Optional[PropagationResult] = None

    def write_bundle(self, output_options: Mapping[str, Any], bundle: Mapping[str, Any]) -> None:
        self.last_result = self.writer.write(resolve_out_dir(output_options), bundle.keys())


class WriteBuildVersionPlugin(BuildIdPlugin):
    """Write the build identifier and rewrite placeholders across the output root."""

    name = "build-version-write"

    def __init__(
        self,
        filename: str = DEFAULT_MANIFEST_FILENAME,
        var_name: str = DEFAULT_VAR_NAME,
        id_length: int = DEFAULT_ID_LENGTH,
        verbose: bool = False,
    ):
        self._use_writer(BuildVersionWriter(
            filename=filename,
            var_name=var_name,
            id_length=id_length,
            propagate=True,
            verbose=verbose,
        ))
