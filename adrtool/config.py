"""Configuration management for adrtool."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError

from adrtool.errors import ConfigError

CONFIG_FILE_NAME = ".adr.yaml"


class Config(BaseModel):
    """adrtool configuration."""

    marker_file: str = ".adr_file"
    resources_dir: Path = Path("resources")
    init_template: str = "init.md"
    record_template: str = "template.md"

    def get_marker_path(self, working_dir: Path) -> Path:
        """Get the marker file path for a working directory.

        Args:
            working_dir: Directory the tool was invoked from

        Returns:
            Path to the marker file
        """
        return working_dir / self.marker_file

    def get_init_template_path(self, working_dir: Path) -> Path:
        """Get the template copied into a freshly initialized directory."""
        return self._resolve_resource(working_dir, self.init_template)

    def get_record_template_path(self, working_dir: Path) -> Path:
        """Get the template every new record is copied from."""
        return self._resolve_resource(working_dir, self.record_template)

    def _resolve_resource(self, working_dir: Path, name: str) -> Path:
        # Relative resource dirs are resolved against the working directory
        if self.resources_dir.is_absolute():
            return self.resources_dir / name
        return working_dir / self.resources_dir / name


def find_config_file(start_path: Path) -> Optional[Path]:
    """Find .adr.yaml file by walking up directory tree.

    Args:
        start_path: Directory to start searching from

    Returns:
        Path to config file, or None if not found
    """
    current = start_path.resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Optional[Path] = None, config_file: Optional[Path] = None) -> Config:
    """Load configuration from .adr.yaml file.

    Args:
        path: Directory to start searching from (default: current directory)
        config_file: Explicit config file, skips the search when given

    Returns:
        Loaded configuration (or default if file not found)

    Raises:
        ConfigError: If the file isn't valid YAML or has invalid values
    """
    if config_file is None:
        if path is None:
            path = Path.cwd()
        config_file = find_config_file(path)

    if config_file is None:
        return Config()

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(config_file, str(e)) from e

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(config_file, "expected a mapping of settings")

    try:
        return Config(**data)
    except ValidationError as e:
        raise ConfigError(config_file, str(e)) from e
