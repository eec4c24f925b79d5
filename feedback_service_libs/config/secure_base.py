"""Base settings class shared by feedback services."""

from __future__ import annotations

from feedback_common.config_enums import Environment
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


class SecureServiceSettings(BaseSettings):
    """
    Common settings for services that call other internal services.

    Subclasses declare their own ``model_config`` with an env prefix.
    """

    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",
        description="Runtime environment for the service",
    )
    INTERNAL_API_KEY: SecretStr = Field(
        default=SecretStr("dev-internal-api-key"),
        description="Shared key presented to internal service APIs",
    )

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION

    def is_development(self) -> bool:
        return self.ENVIRONMENT in (Environment.DEVELOPMENT, Environment.TESTING)

    def get_internal_api_key(self) -> str:
        """Return the internal API key, refusing the development default in production."""
        key = self.INTERNAL_API_KEY.get_secret_value()
        if self.is_production() and key == "dev-internal-api-key":
            raise ValueError("INTERNAL_API_KEY must be configured in production")
        return key
