"""
Centralized configuration for signal connections.

Configuration sources (priority order):
1. Environment variables (CONNECTIONS_*)
2. Default values

Environment variables:
- CONNECTIONS_LOG_LEVEL: Log level (default: INFO)
- CONNECTIONS_LOG_FORMAT: "console" or "json" (default: console)
- CONNECTIONS_DESTROY_EVENT: Event watched for source teardown (default: destroy)
"""

import os
from dataclasses import dataclass

__all__ = ["RegistryConfig", "config", "DEFAULT_DESTROY_EVENT", "LOG_FORMATS"]

DEFAULT_DESTROY_EVENT = "destroy"
LOG_FORMATS = ("console", "json")


def _get_env(key: str, default: str) -> str:
    """Get environment variable with CONNECTIONS_ prefix."""
    return os.environ.get(f"CONNECTIONS_{key}", default)


@dataclass(frozen=True)
class RegistryConfig:
    """Immutable registry configuration."""

    log_level: str = _get_env("LOG_LEVEL", "INFO")
    log_format: str = _get_env("LOG_FORMAT", "console")
    destroy_event: str = _get_env("DESTROY_EVENT", DEFAULT_DESTROY_EVENT)

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ValueError(
                f"Unknown log format: {self.log_format} (expected one of {', '.join(LOG_FORMATS)})"
            )
        if not self.destroy_event:
            raise ValueError("destroy_event must not be empty")

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Re-read the environment (class defaults are bound at import time)."""
        return cls(
            log_level=_get_env("LOG_LEVEL", "INFO"),
            log_format=_get_env("LOG_FORMAT", "console"),
            destroy_event=_get_env("DESTROY_EVENT", DEFAULT_DESTROY_EVENT),
        )


# Global singleton
config = RegistryConfig()
