"""Virtual module exposing the best-known build identifier to application code."""
from __future__ import annotations

from typing import Optional

from ..manifest import DEFAULT_MANIFEST_FILENAME
from ..placeholder import quote_value, validate_placeholder_value, validate_var_name
from ..propagator import DEFAULT_VAR_NAME
from .base import BuildPlugin

VIRTUAL_MODULE_ID = "virtual:build-version"
# Prefix no file system path can start with
RESOLVED_ID_PREFIX = "\0"
DEFAULT_INITIAL_VALUE = "dev"


def virtual_module_id(var_name: str = DEFAULT_VAR_NAME) -> str:
    """Return the specifier application code imports for var_name."""
    if var_name == DEFAULT_VAR_NAME:
        return VIRTUAL_MODULE_ID
    return f"{VIRTUAL_MODULE_ID}/{var_name}"


def render_version_module(var_name: str, value: str) -> str:
    """Render the generated module source."""
    return f"export const {validate_var_name(var_name)} = {quote_value(value)};"


class VersionModulePlugin(BuildPlugin):
    """Serve `export const <VAR> = "<value>";` from a reserved specifier.

    Code compiled in an early pass cannot know the final identifier, so the
    module carries initial_value (the placeholder). The final pass rewrites
    the emitted assignment in place; the value held here never changes.
    """

    name = "build-version"

    def __init__(
        self,
        filename: str = DEFAULT_MANIFEST_FILENAME,
        var_name: str = DEFAULT_VAR_NAME,
        initial_value: str = DEFAULT_INITIAL_VALUE,
    ):
        self.filename = filename
        self.var_name = validate_var_name(var_name)
        self.initial_value = validate_placeholder_value(initial_value)
        self.module_id = virtual_module_id(self.var_name)
        self.resolved_id = f"{RESOLVED_ID_PREFIX}{self.module_id}?file={filename}"

    def resolve_id(self, source: str) -> Optional[str]:
        if source == self.module_id:
            return self.resolved_id
        return None

    def load(self, resolved_id: str) -> Optional[str]:
        if resolved_id == self.resolved_id:
            return render_version_module(self.var_name, self.initial_value)
        return None
