"""Configuration for build version derivation and propagation."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .fingerprint import DEFAULT_ID_LENGTH
from .manifest import DEFAULT_MANIFEST_FILENAME, manifest_path
from .placeholder import validate_placeholder_value, validate_var_name
from .propagator import DEFAULT_VAR_NAME

CONFIG_FILE = "buildver.yml"
CONFIG_SECTION = "build_version"


@dataclass
class BuildVersionConfig:
    """Settings shared by the early and final build passes."""
    filename: str = DEFAULT_MANIFEST_FILENAME
    var_name: str = DEFAULT_VAR_NAME
    initial_value: str = "dev"
    id_length: int = DEFAULT_ID_LENGTH
    output_dir: str = "dist"

    def __post_init__(self):
        """Reject values the pipeline could not use."""
        validate_var_name(self.var_name)
        manifest_path(".", self.filename)
        if isinstance(self.id_length, bool) or not isinstance(self.id_length, int):
            raise ValueError(f"id_length must be an integer, got {self.id_length!r}")
        if not 1 <= self.id_length <= 64:
            raise ValueError(f"id_length must be between 1 and 64, got {self.id_length}")
        validate_placeholder_value(self.initial_value)

    @classmethod
    def from_yml(cls, path: Optional[str] = None, **overrides) -> 'BuildVersionConfig':
        """Create configuration from buildver.yml with command-line overrides.

        Args:
            path: Config file to read. Defaults to ./buildver.yml; a missing
                file means defaults.
            **overrides: Command-line values; None means "not given".

        Returns:
            BuildVersionConfig: Config file values with overrides applied.

        Raises:
            ValueError: If the file is not valid YAML or holds invalid values.
        """
        values = {}
        config_path = Path(path or CONFIG_FILE)
        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}")
            if not isinstance(data, dict):
                raise ValueError(f"{config_path} must contain a mapping")

            section = data.get(CONFIG_SECTION, {}) or {}
            if not isinstance(section, dict):
                raise ValueError(f"'{CONFIG_SECTION}' in {config_path} must be a mapping")

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(section) - known)
            if unknown:
                raise ValueError(f"Unknown {CONFIG_SECTION} setting(s) in {config_path}: {', '.join(unknown)}")
            values.update(section)

        # Command-line overrides win over the config file
        for key, value in overrides.items():
            if value is not None:
                values[key] = value

        return cls(**values)
