"""CLI configuration management."""

import os
from dataclasses import dataclass
from typing import Optional

from ..client import PivnetClient

OUTPUT_FORMATS = ("table", "json", "yaml")


@dataclass
class CLIConfig:
    """Settings for the pivnet command-line interface."""

    api_token: str = ""
    host: str = PivnetClient.DEFAULT_HOST
    output_format: str = "table"
    verbose: bool = False
    skip_ssl_validation: bool = False

    @classmethod
    def from_env(cls) -> "CLIConfig":
        """Create config from environment variables."""
        return cls(
            api_token=os.getenv("PIVNET_API_TOKEN") or "",
            host=os.getenv("PIVNET_HOST") or PivnetClient.DEFAULT_HOST,
            output_format=os.getenv("PIVNET_FORMAT") or "table",
        )


# Global config instance, set by the CLI callback
_config: Optional[CLIConfig] = None


def get_config() -> CLIConfig:
    """Get or create the global CLI configuration."""
    global _config
    if _config is None:
        _config = CLIConfig.from_env()
    return _config


def set_config(config: Optional[CLIConfig]) -> None:
    """Set the global CLI configuration."""
    global _config
    _config = config
