"""
Configuration module for the DWML extractor.

Loads configuration from a JSON file and environment variables.
"""

import json
import logging
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants

_PARAMETER_KINDS = (constants.PARAMETER_KIND_ICON, constants.PARAMETER_KIND_NUMERIC)


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json' (optional when not requested explicitly)
        """
        self._explicit = bool(config_file or os.getenv("CONFIG_FILE"))
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("DWML_INPUT_FILE"):
            self.config.setdefault("input", {})["file"] = os.getenv("DWML_INPUT_FILE")

        if os.getenv("DWML_OUTPUT_FILE"):
            self.config.setdefault("output", {})["file"] = os.getenv("DWML_OUTPUT_FILE")

        if os.getenv("LOG_LEVEL"):
            self.config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("LOG_FILE"):
            self.config.setdefault("logging", {})["file"] = os.getenv("LOG_FILE")

    def _validate_config(self) -> None:
        """Validate configured values."""
        level = self.log_level
        if not isinstance(logging.getLevelName(level.upper()), int):
            raise ValueError(f"Invalid logging level: {level}")

        element_map = self.get("parameters.element_map", {})
        if not isinstance(element_map, dict):
            raise ValueError("parameters.element_map must be a dictionary")

        invalid = [
            f"{name}={kind}"
            for name, kind in element_map.items()
            if kind not in _PARAMETER_KINDS
        ]
        if invalid:
            raise ValueError(
                f"Unknown parameter kinds in parameters.element_map: {', '.join(invalid)} "
                f"(expected one of: {', '.join(_PARAMETER_KINDS)})"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'output.file')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def input_file(self) -> Optional[str]:
        """Get DWML input file path."""
        return self.get("input.file")

    @property
    def output_file(self) -> Optional[str]:
        """Get JSON output file path."""
        return self.get("output.file")

    @property
    def json_indent(self) -> int:
        """Get JSON output indentation."""
        return self.get("output.indent", constants.DEFAULT_JSON_INDENT)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    @property
    def element_map(self) -> Dict[str, str]:
        """Get extra element name to parameter kind mappings."""
        return dict(self.get("parameters.element_map", {}))

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, input={self.input_file})"
