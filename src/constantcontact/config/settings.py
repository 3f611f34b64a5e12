"""Configuration settings for the Constant Contact SDK.

This module defines the configuration settings for the SDK, including
credentials, the API base URL, HTTP timeouts, and logging. Settings are
loaded from environment variables and .env files.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Credentials are optional here so that the settings object can be
    created in any environment; the client facade checks for them when
    it is built from settings.

    :param api_key: Constant Contact API key
    :type api_key: Optional[str]
    :param access_token: OAuth2 access token issued for the API key
    :type access_token: Optional[str]
    :param base_url: Base URL for the Constant Contact API
    :type base_url: str
    :param connect_timeout: Connection timeout in seconds
    :type connect_timeout: float
    :param read_timeout: Read timeout in seconds
    :type read_timeout: float
    :param user_agent: User-Agent header sent with every request
    :type user_agent: str
    :param log_level: Logging level for the SDK
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    :param configure_logging: Whether the client installs its own log handler
    :type configure_logging: bool
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
        populate_by_name=True,
    )

    # Credentials
    api_key: Optional[str] = Field(
        None, alias="CTCT_API_KEY", description="Constant Contact API key"
    )
    access_token: Optional[str] = Field(
        None,
        alias="CTCT_ACCESS_TOKEN",
        description="OAuth2 access token for the API key",
    )

    # API Configuration
    base_url: str = Field(
        "https://api.constantcontact.com",
        alias="CTCT_BASE_URL",
        description="Constant Contact API base URL",
    )
    connect_timeout: float = Field(
        5.0, alias="CTCT_CONNECT_TIMEOUT", description="Connect timeout (seconds)"
    )
    read_timeout: float = Field(
        30.0, alias="CTCT_READ_TIMEOUT", description="Read timeout (seconds)"
    )
    user_agent: str = Field(
        "constantcontact-sdk-python",
        alias="CTCT_USER_AGENT",
        description="User-Agent header value",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", alias="LOG_LEVEL", description="Logging level"
    )
    configure_logging: bool = Field(
        False,
        alias="CTCT_CONFIGURE_LOGGING",
        description="Install a sanitizing stdout log handler on client creation",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so endpoint paths can be appended.

        :param v: The configured base URL
        :type v: str
        :return: Base URL without trailing slash
        :rtype: str
        """
        return v.rstrip("/")

    @property
    def has_credentials(self) -> bool:
        """Whether both the API key and access token are present.

        :return: True if both credentials are configured and non-blank
        :rtype: bool
        """
        return bool(
            self.api_key
            and self.api_key.strip()
            and self.access_token
            and self.access_token.strip()
        )


settings = Settings()
"""Global settings instance for the SDK.

Created once at import time from the process environment.
"""
