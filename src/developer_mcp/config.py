"""Configuration and logging setup for the developer MCP server."""

import logging
import os
import sys

from pydantic import BaseModel, field_validator

# Define environment variable names
ENV_WORKDIR = "DEVELOPER_MCP_WORKDIR"
ENV_LOG_LEVEL = "DEVELOPER_MCP_LOG_LEVEL"
ENV_SERVER_NAME = "DEVELOPER_MCP_SERVER_NAME"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class ServerConfig(BaseModel):
    """Runtime settings for the server."""
    workdir: str
    log_level: str = "INFO"
    server_name: str = "developer"

    @field_validator("workdir")
    @classmethod
    def _workdir_must_exist(cls, value: str) -> str:
        if not value or not os.path.isdir(value):
            raise ValueError(f"Valid, existing working directory is required, got: {value}")
        return os.path.abspath(os.path.realpath(value))

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_config() -> ServerConfig:
    """Loads server configuration from environment variables."""
    # Pydantic model - validation happens here
    return ServerConfig(
        workdir=os.getenv(ENV_WORKDIR) or os.getcwd(),
        log_level=os.getenv(ENV_LOG_LEVEL, "INFO"),
        server_name=os.getenv(ENV_SERVER_NAME, "developer"),
    )


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr; stdout is reserved for the MCP protocol."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
