"""
Normtmp Configuration

Settings for warning reporting and for the external short-name query.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

import yaml

from normtmp.errors import ConfigError


REPORTING_DISABLED = "disabled"
REPORTING_DEFAULT = "default"
REPORTING_CHOICES = (REPORTING_DISABLED, REPORTING_DEFAULT)


@dataclass
class NormtmpConfig:
    """
    Configuration for tmpdir normalization.

    Attributes:
        reporting: "disabled" (no warnings) or "default" (warn on stderr)
            when the temp directory keeps a short segment
        query_command: Program used to expand one short segment
        query_timeout: Seconds to wait for each query (None = wait forever)
    """

    reporting: str = REPORTING_DISABLED
    query_command: str = "attrib.exe"
    query_timeout: Optional[float] = None

    def validate(self, file_path: Optional[str] = None) -> None:
        """Raise ConfigError for out-of-range values."""
        if self.reporting not in REPORTING_CHOICES:
            raise ConfigError(
                f"reporting must be one of {', '.join(REPORTING_CHOICES)}, got {self.reporting!r}",
                file_path=file_path,
            )
        if not isinstance(self.query_command, str) or not self.query_command:
            raise ConfigError("query_command must be a non-empty string", file_path=file_path)
        if self.query_timeout is not None:
            if isinstance(self.query_timeout, bool) or not isinstance(self.query_timeout, (int, float)):
                raise ConfigError(
                    f"query_timeout must be a number of seconds, got {self.query_timeout!r}",
                    file_path=file_path,
                )
            if self.query_timeout <= 0:
                raise ConfigError("query_timeout must be positive", file_path=file_path)


# Default configuration
_config = NormtmpConfig()


def get_config() -> NormtmpConfig:
    """Get the current configuration."""
    return _config


def set_config(config: NormtmpConfig) -> None:
    """Set the configuration."""
    global _config
    config.validate()
    _config = config


def configure(**kwargs) -> None:
    """Update individual settings of the current configuration."""
    global _config
    known = {f.name for f in fields(NormtmpConfig)}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise ConfigError(f"unknown setting(s): {', '.join(unknown)}")
    updated = replace(_config, **kwargs)
    updated.validate()
    _config = updated


def load_config(path: Union[str, Path]) -> NormtmpConfig:
    """
    Load a configuration from a YAML file.

    The file holds a mapping with any of the NormtmpConfig attributes;
    missing keys keep their defaults. An empty file yields the defaults.

    Raises:
        ConfigError: If the file is unreadable, not valid YAML, or has
            unknown keys or invalid values
    """
    config_path = Path(path)
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read file: {e}", file_path=str(config_path))

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML syntax error: {e}", file_path=str(config_path))

    if not isinstance(data, dict):
        raise ConfigError("top level must be a mapping", file_path=str(config_path))

    known = {f.name for f in fields(NormtmpConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(f"unknown key(s): {', '.join(unknown)}", file_path=str(config_path))

    # YAML reads "off"/"no" as False
    if data.get("reporting") is False:
        data["reporting"] = REPORTING_DISABLED
    elif data.get("reporting") is True:
        data["reporting"] = REPORTING_DEFAULT

    config = NormtmpConfig(**data)
    config.validate(file_path=str(config_path))
    return config
