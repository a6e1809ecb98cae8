"""Build-host plugins for build version derivation and propagation."""

from ..fingerprint import DEFAULT_ID_LENGTH
from ..manifest import DEFAULT_MANIFEST_FILENAME
from ..propagator import DEFAULT_VAR_NAME
from .base import BuildPlugin
from .version_module import (
    DEFAULT_INITIAL_VALUE,
    VersionModulePlugin,
    VIRTUAL_MODULE_ID,
    render_version_module,
    virtual_module_id,
)
from .version_write import (
    DEFAULT_BUILD_ID_FILENAME,
    BuildIdPlugin,
    WriteBuildVersionPlugin,
    resolve_out_dir,
)


def build_version_plugin(filename: str = DEFAULT_MANIFEST_FILENAME, var_name: str = DEFAULT_VAR_NAME,
                         initial_value: str = DEFAULT_INITIAL_VALUE) -> VersionModulePlugin:
    """Create the virtual-module plugin for early build passes."""
    return VersionModulePlugin(filename=filename, var_name=var_name, initial_value=initial_value)


def write_build_version_plugin(filename: str = DEFAULT_MANIFEST_FILENAME, var_name: str = DEFAULT_VAR_NAME,
                               id_length: int = DEFAULT_ID_LENGTH,
                               verbose: bool = False) -> WriteBuildVersionPlugin:
    """Create the final-pass plugin that persists and propagates the identifier."""
    return WriteBuildVersionPlugin(filename=filename, var_name=var_name, id_length=id_length, verbose=verbose)


def build_id_plugin(filename: str = DEFAULT_BUILD_ID_FILENAME,
                    id_length: int = DEFAULT_ID_LENGTH) -> BuildIdPlugin:
    """Create the final-pass plugin that only persists the identifier."""
    return BuildIdPlugin(filename=filename, id_length=id_length)


__all__ = [
    'BuildPlugin',
    'VersionModulePlugin',
    'BuildIdPlugin',
    'WriteBuildVersionPlugin',
    'VIRTUAL_MODULE_ID',
    'render_version_module',
    'virtual_module_id',
    'resolve_out_dir',
    'build_version_plugin',
    'write_build_version_plugin',
    'build_id_plugin'
]
