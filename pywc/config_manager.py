"""
Configuration management for pywc.
Settings come from defaults, environment variables (PYWC_*), a .env file
and an optional YAML file, in increasing order of precedence.
"""
import codecs
import os
import re
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

from pywc.errors import ConfigError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

# ${VAR_NAME} or ${VAR_NAME:default_value}
ENV_VAR_PATTERN = re.compile(r'\$\{([^:}]+)(?::([^}]*))?\}')


def lookup_text_encoding(encoding: str) -> str:
    """
    Canonical name of a codec that decodes bytes to text.

    Raises:
        LookupError: Unknown codec, or a bytes-to-bytes codec such as base64
    """
    info = codecs.lookup(encoding)
    if not getattr(info, "_is_text_encoding", True):
        raise LookupError(f"Not a text encoding: {encoding}")
    return info.name


class WcSettings(BaseSettings):
    """Counting and logging settings."""

    encoding: str = Field(default="utf-8", description="Encoding used to decode characters")
    tab_width: int = Field(default=8, ge=1, description="Columns between tab stops")
    chunk_size: int = Field(default=65536, ge=1, description="Bytes read per call")
    log_level: str = Field(default="WARNING", description="Diagnostics level")
    log_file: Optional[str] = Field(None, description="Optional diagnostics log file")

    @field_validator('encoding')
    @classmethod
    def encoding_known(cls, v):
        try:
            return lookup_text_encoding(v)
        except LookupError as e:
            raise ValueError(str(e))

    @field_validator('log_level')
    @classmethod
    def log_level_known(cls, v):
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    class Config:
        env_prefix = "PYWC_"


def _replace_env_vars(value: Any) -> Any:
    """Replace ${VAR} patterns with environment variables."""
    if isinstance(value, str):
        def replacer(match):
            env_value = os.getenv(match.group(1))
            if env_value is not None:
                return env_value
            if match.group(2) is not None:
                return match.group(2)
            return match.group(0)  # Keep original if no env var

        return ENV_VAR_PATTERN.sub(replacer, value)
    elif isinstance(value, dict):
        return {k: _replace_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_replace_env_vars(item) for item in value]
    return value


def _read_yaml(config_file: Path) -> Dict[str, Any]:
    with open(config_file, 'r', encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must hold a mapping")

    # Accept both a flat mapping and one nested under "pywc"
    if isinstance(data.get("pywc"), dict):
        data = data["pywc"]
    return _replace_env_vars(data)


def load_config(config_path: Optional[str] = None) -> WcSettings:
    """
    Load settings from file or environment variables.

    Args:
        config_path: Optional path to YAML configuration file

    Returns:
        WcSettings object

    Example:
        >>> settings = load_config("pywc.yaml")
        >>> settings = load_config()  # Defaults and environment only
    """
    # Load .env file if exists
    load_dotenv()

    values: Dict[str, Any] = {}
    if config_path:
        config_file = Path(config_path)
        if not config_file.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        values = _read_yaml(config_file)

    try:
        return WcSettings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
