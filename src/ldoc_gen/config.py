# src/ldoc_gen/config.py

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR_NAME = ".ldoc_gen"


@dataclass(frozen=True)
class ConverterConfig:
    """Configuration for a conversion run.

    Immutable. Explicit. No magic defaults from environment.
    """

    source_dir: Path = Path(".")
    out_dir: Path = Path(".")
    output_dir_name: str = DEFAULT_OUTPUT_DIR_NAME  # skipped while walking
    extension: str = ".lua"
    strict_parse: bool = True  # reject files with syntax errors

    def __post_init__(self) -> None:
        if not self.extension.startswith(".") or len(self.extension) < 2:
            raise ValueError("extension must start with '.'")
        if not self.output_dir_name or Path(self.output_dir_name).name != (
            self.output_dir_name
        ):
            raise ValueError("output_dir_name must be a plain directory name")

    @property
    def output_path(self) -> Path:
        return self.out_dir / self.output_dir_name


class ConfigFile(BaseModel):
    """Shape of a YAML config file. Every key is optional."""

    source_dir: Path | None = None
    out_dir: Path | None = None
    output_dir_name: str | None = None
    extension: str | None = None
    strict_parse: bool | None = None

    class Config:
        extra = "forbid"


def load_config(path: str | Path | None = None, **overrides: Any) -> ConverterConfig:
    """Build a config from an optional YAML file plus explicit overrides.

    Relative directories in the file are taken relative to the file itself.
    Overrides that are None are ignored, so unset command line flags do not
    clobber file values.
    """
    values: dict[str, Any] = {}

    if path is not None:
        file_path = Path(path)
        logger.info("Loading config from %s", file_path)
        with open(file_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {file_path} must contain a mapping")

        config_file = ConfigFile(**data)
        for key, value in config_file.model_dump().items():
            if value is None:
                continue
            if key in ("source_dir", "out_dir") and not value.is_absolute():
                value = file_path.parent / value
            values[key] = value

    values.update({key: value for key, value in overrides.items() if value is not None})
    for key in ("source_dir", "out_dir"):
        if key in values:
            values[key] = Path(values[key])

    return ConverterConfig(**values)
