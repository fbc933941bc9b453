# src/kova/config/loader.py
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kova.config.models import ValidationConfig
from kova.errors import ConfigError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    @brief
    Loader responsible for reading and validating validation configuration.

    @details
    Reads YAML from disk, parses it into a mapping, resolves relative
    `message_dirs` against the file's directory, validates structure against
    the Pydantic `ValidationConfig` schema, and raises structured
    `ConfigError` instances for all failure modes. The logging hook is not
    representable in YAML and is passed separately.
    """

    def load(
        self, path: Path, hook: Callable[[Any], None] | None = None
    ) -> ValidationConfig:
        """
        @brief
        Load and validate configuration from YAML file.

        @params
            path : Path
                Filesystem path to configuration file (.yaml or .yml).
            hook : Callable | None
                Optional logging hook attached to the resulting config.

        @returns
            Validated ValidationConfig instance.

        @raises
            ConfigError
                Raised if file is missing, malformed, or fails schema validation.
        """
        # (1) Read and parse YAML configuration file
        data = self._read_yaml(path)

        # (2) Anchor relative bundle directories at the config file
        dirs = data.get("message_dirs")
        if isinstance(dirs, list):
            data["message_dirs"] = [self._anchor(path.parent, d) for d in dirs]

        # (3) Validate mapping against Pydantic schema
        config = self._validate(data, hook)
        logger.debug("Loaded validation config from %s", path)
        return config

    @staticmethod
    def _anchor(base: Path, entry: Any) -> Any:
        if not isinstance(entry, str):
            return entry
        p = Path(entry)
        return p if p.is_absolute() else base / p

    def _read_yaml(self, path: Path) -> dict[str, Any]:
        """
        @brief
        Read YAML file into Python mapping with strict checks.

        @raises
            ConfigError
                Raised on invalid path type, missing file, wrong extension,
                I/O error, syntax error, empty file, or non-mapping structure.
        """
        # (1) Validate path type and existence
        if not isinstance(path, Path):
            raise ConfigError(
                message=f"Invalid path type: expected pathlib.Path, got {type(path).__name__}",
                source="ConfigLoader._read_yaml",
                suggested_action="Pass a pathlib.Path object pointing to kova.yaml.",
            )

        if not path.exists():
            raise ConfigError(
                message=f"Configuration file not found: {path}",
                source="ConfigLoader._read_yaml",
                suggested_action="Ensure the configuration file exists and the path is correct.",
            )

        # (2) Enforce correct file extension
        if path.suffix.lower() not in {".yaml", ".yml"}:
            raise ConfigError(
                message=f"Invalid configuration file extension: {path.suffix}",
                source="ConfigLoader._read_yaml",
                suggested_action="Use .yaml or .yml extension for configuration files.",
            )

        # (3) Read and parse YAML content
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(
                message=f"YAML parsing failed: {e}",
                source="ConfigLoader._read_yaml",
                suggested_action="Fix YAML syntax/indentation.",
            ) from e
        except OSError as e:
            raise ConfigError(
                message=f"Unable to read configuration file: {e}",
                source="ConfigLoader._read_yaml",
                suggested_action="Check file permissions and path accessibility.",
            ) from e

        # (4) Validate structural integrity of parsed data
        if data is None:
            raise ConfigError(
                message="Configuration file is empty.",
                source="ConfigLoader._read_yaml",
                suggested_action="Populate the file with fail_fast / locale / message_dirs.",
            )

        if not isinstance(data, Mapping):
            raise ConfigError(
                message="Configuration root must be a mapping (key: value pairs).",
                source="ConfigLoader._read_yaml",
                suggested_action="Ensure top-level YAML structure uses key: value mappings.",
            )

        return dict(data)

    def _validate(
        self, data: dict[str, Any], hook: Callable[[Any], None] | None
    ) -> ValidationConfig:
        """Build `ValidationConfig`, wrapping Pydantic errors into ConfigError."""
        if "logger" in data:
            raise ConfigError(
                message="The logging hook cannot be set from a configuration file.",
                source="ConfigLoader._validate",
                suggested_action="Remove `logger` and pass the hook to ConfigLoader.load().",
            )
        try:
            return ValidationConfig(**data, logger=hook)
        except ValidationError as e:
            raise ConfigError(
                message=f"Invalid configuration structure: {e}",
                source="ConfigLoader._validate",
                suggested_action=(
                    "Check field names and types. "
                    "Remove unknown keys (extra fields are forbidden)."
                ),
            ) from e


__all__ = ["ConfigLoader"]
