"""Configuration management."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_OUTPUT_FILENAME = "TASKS.md"
DEFAULT_CONFIG_FILENAME = ".tasks.yaml"


@dataclass
class Config:
    """Application configuration."""

    root_path: Path = field(default_factory=lambda: Path("."))
    output_filename: str = DEFAULT_OUTPUT_FILENAME
    link_to_source: bool = True
    log_level: str = "INFO"

    @property
    def output_path(self) -> Path:
        return self.root_path / self.output_filename

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from YAML file.

        Recognized keys:
        - output_filename: Report file name, also excluded from scanning
        - link_to_source: Render tasks as links back to their source file
        - log_level: DEBUG, INFO, WARNING or ERROR
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a YAML mapping")

        log_level = str(data.get("log_level", "INFO")).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown log_level '{log_level}' in {path}")

        output_filename = data.get("output_filename", DEFAULT_OUTPUT_FILENAME)
        if not isinstance(output_filename, str) or not output_filename:
            raise ValueError(f"output_filename in {path} must be a non-empty string")

        link_to_source = data.get("link_to_source", True)
        if not isinstance(link_to_source, bool):
            raise ValueError(f"link_to_source in {path} must be true or false")

        return cls(
            output_filename=output_filename,
            link_to_source=link_to_source,
            log_level=log_level,
        )
