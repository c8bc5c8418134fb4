"""Records published by the agent bootstrap.

Both models are frozen: they are built once at startup and only read
afterwards.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr

Label = tuple[str, str]


class ResolvedConfig(BaseModel):
    """Connection and identity configuration of the agent."""

    model_config = ConfigDict(frozen=True)

    log: str | None = Field(default=None, description="Agent log destination")
    host: str | None = Field(default=None, description="Explicit collector host override")
    license_key: SecretStr | None = Field(default=None, description="Account license key")
    port: int = Field(default=443, description="Collector port")
    scheme: str = Field(default="https", description="Collector URL scheme")
    app_names: list[str] | None = Field(default=None, description="Reported application names")
    harvest_enabled: bool = Field(default=True, description="Whether harvest cycles run")
    collector_host: str = Field(..., description="Collector host the agent connects to")
    region_prefix: str | None = Field(
        default=None, description="Data residency region derived from the license key"
    )
    automatic_attributes: dict[str, Any] = Field(
        default_factory=dict, description="Attributes attached to every event"
    )
    labels: list[Label] = Field(default_factory=list, description="Ordered (key, value) labels")
    telemetry_hosts: dict[str, str] = Field(
        default_factory=dict, description="Telemetry endpoint URL by purpose"
    )


class FeatureFlags(BaseModel):
    """Instrumentation features enabled for this process."""

    model_config = ConfigDict(frozen=True)

    error_collector: bool = True
    db_query_collection: bool = True
    ecto_instrumentation: bool = True
    redix_instrumentation: bool = True
    function_argument_collection: bool = True
    request_queuing_metrics: bool = True
