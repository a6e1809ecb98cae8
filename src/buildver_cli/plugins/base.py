"""Base interface for build-host plugins."""

from abc import ABC
from typing import Any, Mapping, Optional


class BuildPlugin(ABC):
    """Base class for plugins driven by a bundler-style build host.

    The host calls the hooks below during a build; a hook returning None
    means the plugin does not handle that request. Subclasses override only
    the hooks they need.
    """

    name: str = ""
    # "pre", "post" or None: ordering relative to other plugins
    enforce: Optional[str] = None
    # "build", "serve" or None (both)
    apply: Optional[str] = None

    def resolve_id(self, source: str) -> Optional[str]:
        """Map a module specifier to a resolved id."""
        return None

    def load(self, resolved_id: str) -> Optional[str]:
        """Return source text for a resolved id."""
        return None

    def write_bundle(self, output_options: Mapping[str, Any], bundle: Mapping[str, Any]) -> None:
        """Called once after every output file of a build pass is on disk.

        Args:
            output_options: Host output options; "dir" is the output root.
            bundle: Output file name to host metadata for the pass.
        """
        return None

    def applies_to(self, command: str) -> bool:
        """Return True if the plugin runs for a host command ("build"/"serve")."""
        return self.apply is None or self.apply == command

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
