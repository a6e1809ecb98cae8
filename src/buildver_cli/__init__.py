"""Deterministic build version derivation and propagation for bundled web output."""

from .config import BuildVersionConfig
from .fingerprint import derive_build_id, is_fingerprinted
from .manifest import read_manifest, write_manifest
from .placeholder import render_assignment, substitute
from .plugins import (
    BuildIdPlugin,
    VersionModulePlugin,
    WriteBuildVersionPlugin,
    build_id_plugin,
    build_version_plugin,
    write_build_version_plugin,
)
from .propagator import BuildVersionWriter, PropagationResult, propagate_placeholder
from .version import __version__

__all__ = [
    'BuildVersionConfig',
    'derive_build_id',
    'is_fingerprinted',
    'read_manifest',
    'write_manifest',
    'render_assignment',
    'substitute',
    'BuildIdPlugin',
    'VersionModulePlugin',
    'WriteBuildVersionPlugin',
    'build_id_plugin',
    'build_version_plugin',
    'write_build_version_plugin',
    'BuildVersionWriter',
    'PropagationResult',
    'propagate_placeholder',
    '__version__'
]
