"""Observability configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class LoggingConfig(BaseModel):
    """Configuration for the agent's own structured logs."""

    level: LogLevel = Field(default="INFO", description="Minimum log level")
    format: LogFormat = Field(default="json", description="Log output format")
    redact_secrets: bool = Field(
        default=True,
        description="Mask license keys and credentials in log output",
    )
