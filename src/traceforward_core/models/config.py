from typing import Literal, Optional

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from pydantic import Field, SecretStr


class BaseConfig(BaseSettings):
    """Base class for configuration values."""

    pass


class TelemetryConfig(BaseConfig):
    """Configuration values for the telemetry client based on Open Telemetry. All env variables must start with traceforward_telemetry_"""

    enable: bool = False
    """Enable sending telemetry to the ingestion service. Default False."""

    instrumentation_key: Optional[str] = None
    """Instrumentation key of the telemetry resource receiving the data. Default None."""

    api_key: Optional[SecretStr] = Field(exclude=True, default=None)
    """The authentication key sent along with every export."""

    endpoint: str = 'http://localhost:4318/'
    """The base url of the Open Telemetry collector endpoint."""

    traces_endpoint: str = Field(
        default_factory=lambda data: f'{data["endpoint"].rstrip("/")}/v1/traces'
    )
    """The endpoint for the traces exporter. Default 'http://localhost:4318/v1/traces'."""

    authentication_header: str = 'Authorization'
    """The header in which the api key needs to be included for authentication purposes."""

    service_name: str = 'traceforward'
    """The service name reported with every exported span."""

    timeout_seconds: int = 10
    """The client timeout when sending telemetry. Default 10 seconds."""

    verbose: bool = False
    """Log when telemetry is sent. Useful for CLI to show activity. Default False."""

    model_config = SettingsConfigDict(
        env_prefix='traceforward_telemetry_',
        env_file='.env',
        extra='ignore',
    )


class TraceForwardConfig(BaseConfig):
    """Configuration values for TraceForward. All env variables must start with traceforward_"""

    logging_level: Optional[int] = logging.INFO
    """The logging level. Default "logging.INFO"."""

    logging_file: Optional[str] = None
    """The log file path. Specify to save logs to file. Default "None"."""

    theme: Optional[Literal['light', 'dark']] = None
    """The console theme to use. Set to 'light' for light terminals or 'dark' for dark terminals. Default None (auto-detect)."""

    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)
    """Telemetry client configuration"""

    model_config = SettingsConfigDict(
        env_prefix='traceforward_',
        env_file='.env',
        extra='ignore',
        nested_model_default_partial_update=True,
    )
