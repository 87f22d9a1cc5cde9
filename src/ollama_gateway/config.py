"""
Configuration settings for Ollama Gateway.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from ollama_gateway.models.inference_models import BackendConfig
from ollama_gateway.retry.policy import RetryPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Ollama Gateway"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"  # "production" switches logs to JSON
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # === Ollama Backend ===
    OLLAMA_API_URL: str = "http://localhost:11434/api/generate"
    OLLAMA_MODEL: str = "deepseek-coder:1.3b"  # Core default for blank model
    OLLAMA_TIMEOUT: float = 300  # seconds, connect and read

    # === HTTP Boundary ===
    API_DEFAULT_MODEL: str = "llama3:8b"  # Default when ?model= is omitted
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # === Retry ===
    RETRY_MAX_ATTEMPTS: int = 3  # initial attempt + 2 retries
    RETRY_INITIAL_DELAY: float = 1.0  # seconds
    RETRY_MULTIPLIER: float = 2.0
    RETRY_MAX_DELAY: float = 10.0  # seconds

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True

    def backend_config(self) -> BackendConfig:
        """Immutable backend config for the inference client."""
        return BackendConfig(
            endpoint_url=self.OLLAMA_API_URL,
            default_model=self.OLLAMA_MODEL,
            timeout=self.OLLAMA_TIMEOUT,
        )

    def retry_policy(self) -> RetryPolicy:
        """Immutable retry policy for the retry executor."""
        return RetryPolicy(
            max_attempts=self.RETRY_MAX_ATTEMPTS,
            initial_delay=self.RETRY_INITIAL_DELAY,
            multiplier=self.RETRY_MULTIPLIER,
            max_delay=self.RETRY_MAX_DELAY,
        )


# Global settings instance
settings = Settings()
