"""
Dashboard configuration using pydantic-settings.

Settings can be overridden via environment variables with NETDASH_ prefix.
Example: NETDASH_POLL_INTERVAL_S=2.5
"""

from enum import Enum
from pathlib import Path

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from netdash.configs.constants import DRAG_ALPHA_TARGET, MAX_GRID_DIM, REHEAT_ALPHA
from netdash.configs.errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigTypeConversionError,
)


class WireFormat(str, Enum):
    """Serialization used by the polled endpoint."""

    AUTO = "auto"
    DELTA_TAG = "delta_tag"
    JSON = "json"


class DashboardSettings(BaseSettings):
    """Dashboard settings with environment variable support."""

    # Endpoint
    base_url: str = "http://127.0.0.1:8080"
    data_path: str = "data"
    wire_format: WireFormat = WireFormat.AUTO
    fetch_timeout_s: float = Field(default=5.0, gt=0)

    # Polling
    poll_interval_s: float = Field(default=1.0, gt=0)
    size_retry_delay_s: float = Field(default=0.1, gt=0)

    # Layout
    max_grid_dim: int = Field(default=MAX_GRID_DIM, ge=1)
    single_topology: bool = False
    prune_stale_topologies: bool = False

    # Physics energy
    reheat_alpha: float = Field(default=REHEAT_ALPHA, ge=0, le=1)
    drag_alpha_target: float = Field(default=DRAG_ALPHA_TARGET, gt=0, le=1)

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    class Config:
        """Pydantic settings configuration."""

        env_prefix = "NETDASH_"

    @property
    def data_url(self) -> str:
        """Absolute URL of the snapshot endpoint."""
        return f"{self.base_url.rstrip('/')}/{self.data_path.lstrip('/')}"


def load_settings(path: str | Path) -> DashboardSettings:
    """
    Load dashboard settings from a YAML file.

    Values in the file take precedence over NETDASH_ environment variables.

    :param path: Path to a YAML file holding a mapping of setting names
    :return: Validated settings
    :raises ConfigFileNotFoundError: If the file does not exist
    :raises ConfigParseError: If the file is not valid YAML or not a mapping
    :raises ConfigTypeConversionError: If a value fails validation
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigFileNotFoundError(f"Settings file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML in {config_path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigParseError(
            f"Settings file {config_path} must contain a mapping, got {type(raw).__name__}"
        )

    try:
        return DashboardSettings(**raw)
    except ValidationError as e:
        raise ConfigTypeConversionError(f"Invalid settings in {config_path}: {e}") from e
