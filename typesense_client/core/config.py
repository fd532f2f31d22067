"""
typesense-client - Configuration

Patterns Applied:
- Pydantic Settings with SettingsConfigDict
- Environment variable prefix TYPESENSE_

The client itself never reads the environment. Settings exist for embedding
applications that want to build a NodeDescriptor from TYPESENSE_* variables
or a .env file, and to switch on logging and tracing from the same source;
everyone else constructs NodeDescriptor directly.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from typesense_client.core.exceptions import ConfigurationError
from typesense_client.core.logging import configure_logging, get_logger
from typesense_client.core.tracing import configure_tracing
from typesense_client.models.node import NodeDescriptor


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    All settings can be overridden via environment variables with TYPESENSE_ prefix.
    Example: TYPESENSE_HOST=search.internal, TYPESENSE_PORT=8108
    """

    # Node configuration
    protocol: str = "http"
    host: str = "localhost"
    port: int = 8108
    api_key: str = ""

    # Logging configuration
    log_level: str = "INFO"
    log_json: bool = True

    # Tracing configuration
    tracing_enabled: bool = False
    tracing_console_export: bool = False

    model_config = SettingsConfigDict(
        env_prefix="TYPESENSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def configure_observability(self) -> None:
        """Configure structlog and, when enabled, OpenTelemetry from these settings.

        Logging always follows log_level/log_json. Tracing is installed only
        when tracing_enabled is set. Both helpers are idempotent, so calling
        this more than once is harmless.
        """
        configure_logging(log_level=self.log_level, json_output=self.log_json)

        if self.tracing_enabled:
            configure_tracing(console_export=self.tracing_console_export)
            get_logger(__name__).info("tracing_configured")

    def node_descriptor(self) -> NodeDescriptor:
        """Build the immutable node descriptor for a client.

        Returns:
            NodeDescriptor with protocol, host, port and API key

        Raises:
            ConfigurationError: If no API key is configured
        """
        if not self.api_key:
            raise ConfigurationError("TYPESENSE_API_KEY is not set")
        return NodeDescriptor(
            protocol=self.protocol,
            host=self.host,
            port=self.port,
            api_key=self.api_key,
        )


def get_settings() -> Settings:
    """Get settings instance.

    Returns:
        Settings instance with values from environment
    """
    return Settings()
