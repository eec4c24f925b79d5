"""Configuration for Feedback Submission Service.

Uses Pydantic settings for environment-based configuration.
"""

from __future__ import annotations

from dotenv import find_dotenv, load_dotenv
from feedback_service_libs.config import SecureServiceSettings
from pydantic import Field
from pydantic_settings import SettingsConfigDict

# Load .env file from repository root, regardless of current working directory
load_dotenv(find_dotenv(".env"))


class FeedbackSubmissionSettings(SecureServiceSettings):
    """Configuration settings for Feedback Submission Service.

    These settings can be overridden via environment variables prefixed with
    FEEDBACK_SUBMISSION_SERVICE_.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FEEDBACK_SUBMISSION_SERVICE_",
        case_sensitive=False,
        extra="ignore",
    )

    SERVICE_NAME: str = "feedback-submission-service"

    HOST: str = Field(default="0.0.0.0", description="HTTP server host")
    PORT: int = Field(default=4120, description="HTTP server port")

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins for the web frontend",
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(
        default=True, description="Allow credentials in CORS requests"
    )
    CORS_ALLOW_METHODS: list[str] = Field(
        default=["GET", "POST", "OPTIONS"], description="Allowed HTTP methods for CORS"
    )
    CORS_ALLOW_HEADERS: list[str] = Field(
        default=["*"], description="Allowed headers for CORS requests"
    )

    LOGIC_SERVICE_URL: str = Field(
        default="http://course_logic_service:5010",
        description="Course logic service base URL",
    )

    MAX_RESPONSES_PER_QUESTION: int = Field(
        default=500,
        description="Upper bound accepted for questionresponsetotal-<i> in a save request",
    )

    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="HTTP client request timeout in seconds",
    )
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="HTTP client connection timeout in seconds",
    )


# Global settings instance
settings = FeedbackSubmissionSettings()
