"""
Exchange client configuration using Pydantic Settings.

This module provides configuration management for exchange adapters,
allowing environment-based configuration with type validation and defaults.
"""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConnectionConfig(BaseSettings):
    """HTTP connection configuration."""

    model_config = SettingsConfigDict(env_prefix="EXCHANGE_CONNECTION_")

    # Endpoint override (empty = use the adapter's own API URL)
    api_url: str = Field(default="", description="REST API base URL override")

    # Transport settings
    timeout: float = Field(
        default=10.0,
        gt=0.0,
        le=120.0,
        description="Total request timeout in seconds",
    )
    enable_rate_limit: bool = Field(
        default=True,
        description="Throttle requests to the rate limit",
    )
    rate_limit_ms: int = Field(
        default=1000,
        ge=0,
        le=60_000,
        description="Minimum delay between requests in milliseconds (default: the adapter's)",
    )


class CredentialsConfig(BaseSettings):
    """API credentials for private endpoints."""

    model_config = SettingsConfigDict(env_prefix="EXCHANGE_CREDENTIALS_")

    uid: str = Field(default="", description="Client id issued by the exchange")
    api_key: str = Field(default="", description="Public API key")
    secret: str = Field(default="", description="Private API key used for signing")


class ExchangeSettings(BaseSettings):
    """Root configuration combining all sub-configs."""

    model_config = SettingsConfigDict(env_prefix="EXCHANGE_")

    # Sub-configurations
    connection: ConnectionConfig = Field(default_factory=ConnectionConfig)
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)

    # Global settings
    exchange: str = Field(default="coinmate", description="Exchange identifier")
    debug: bool = False
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    @classmethod
    def from_env(cls) -> "ExchangeSettings":
        """
        Load configuration from environment variables.

        Returns:
            Configured ExchangeSettings instance

        """
        return cls(
            connection=ConnectionConfig(),
            credentials=CredentialsConfig(),
        )

    def to_exchange_config(self) -> dict[str, Any]:
        """
        Translate the settings into exchange constructor options.

        The adapter's own API URL and rate limit apply unless they were set
        explicitly.

        Returns:
            ccxt constructor options (camelCase keys)

        """
        connection = self.connection
        credentials = self.credentials
        options: dict[str, Any] = {
            "apiKey": credentials.api_key,
            "secret": credentials.secret,
            "uid": credentials.uid,
            "enableRateLimit": connection.enable_rate_limit,
            "timeout": int(connection.timeout * 1000),
            "verbose": self.debug,
        }
        if connection.api_url:
            options["urls"] = {"api": connection.api_url}
        if "rate_limit_ms" in connection.model_fields_set:
            options["rateLimit"] = connection.rate_limit_ms
        return options
