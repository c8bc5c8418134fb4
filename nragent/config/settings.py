"""Static application config table for the agent."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from nragent.config.models.attributes import AttributeSource, coerce_attribute_source
from nragent.config.models.observability import LoggingConfig

# Module-level variable to store TOML config for settings source
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that reads from TOML configuration."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        """Get field value from TOML config."""
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        """Return the TOML config values."""
        return _toml_config.copy()


class Settings(BaseSettings):
    """Application-level defaults for every agent config key.

    Values here are the fallback for the NEW_RELIC_* environment variables,
    which the resolver overlays key by key. A field left unset (None) means
    the resolver's own default applies.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{NEW_RELIC_CONFIG_ENV}.toml (environment overrides)
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    # Connection and identity
    log: str | None = Field(default=None, description="Agent log destination")
    host: str | None = Field(default=None, description="Explicit collector host")
    license_key: str | None = Field(default=None, description="Account license key")
    port: int | str | None = Field(default=None, description="Collector port")
    scheme: str | None = Field(default=None, description="Collector URL scheme")
    app_name: str | None = Field(
        default=None, description="Application names separated by ';'"
    )
    harvest_enabled: bool | str | None = Field(
        default=None, description="Whether harvest cycles run"
    )
    labels: str | None = Field(
        default=None, description="Labels as 'key:value;key:value'"
    )
    automatic_attributes: dict[str, AttributeSource] = Field(
        default_factory=dict,
        description="Attributes attached to every event, by name",
    )

    # Feature defaults
    error_collector_enabled: bool | None = None
    sql_collection_enabled: bool | None = None
    db_query_collection_enabled: bool | None = None
    ecto_instrumentation_enabled: bool | None = None
    redix_instrumentation_enabled: bool | None = None
    function_argument_collection_enabled: bool | None = None
    request_queuing_metrics_enabled: bool | None = None

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Agent logging configuration",
    )

    @field_validator("automatic_attributes", mode="before")
    @classmethod
    def _coerce_attributes(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {name: coerce_attribute_source(raw) for name, raw in value.items()}
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML config.

        Priority order (highest to lowest):
        1. init_settings (constructor arguments)
        2. toml_settings (config/*.toml files)
        3. (defaults from model)

        NEW_RELIC_* environment variables are not read here; ConfigResolver
        applies them per key with its own parsing rules.
        """
        return (
            init_settings,
            TomlConfigSettingsSource(settings_cls),
        )
