"""
Configuration for the prompt assistant back-end.

Settings are read from the environment (and ``.env`` once ``app`` has loaded
it). Variable names carry no prefix so the deployment's existing
``GEMINI_API_KEY`` / ``OPENROUTER_API_KEY`` / ``CORS_ORIGINS`` keep working.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PromptAssistantConfig(BaseSettings):
    """Configuration settings for the prompt assistant."""

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    # Provider selection
    default_provider: str = Field(default="gemini", description="Provider used when a request names none (gemini, openrouter)")
    provider_timeout: float = Field(default=15.0, description="Provider request timeout in seconds")
    llm_max_retries: int = Field(default=1, ge=1, description="Attempts per provider call")

    # Gemini settings
    gemini_api_key: Optional[str] = Field(default=None, description="Gemini API key")
    gemini_api_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta", description="Gemini API base URL")
    gemini_model: str = Field(default="gemini-2.5-pro", description="Gemini model name")

    # OpenRouter settings
    openrouter_api_key: Optional[str] = Field(default=None, description="OpenRouter API key")
    openrouter_api_url: str = Field(default="https://openrouter.ai/api/v1/chat/completions", description="OpenRouter chat completions URL")
    openrouter_model: str = Field(default="mistralai/mistral-7b-instruct:free", description="Default OpenRouter model")

    # HTTP settings
    cors_origins: str = Field(default="", description="Comma-separated allowed origins (empty allows any)")
    port: int = Field(default=8787, description="Port for start_backend")
    max_content_length: int = Field(default=1024 * 1024, description="Max request body in bytes (1MB)")

    # Rate limiting (per client, per window)
    rate_limit_window_seconds: int = Field(default=600, description="Rate limit window (10 minutes)")
    rate_limit_storage_uri: str = Field(default="memory://", description="Flask-Limiter storage backend (memory://, redis://...)")
    styles_rate_limit: int = Field(default=20, description="Style suggestion requests per window")
    questions_rate_limit: int = Field(default=20, description="Clarifying question requests per window")
    optimize_rate_limit: int = Field(default=10, description="Optimize requests per window")

    # Input / output handling
    max_input_length: int = Field(default=9000, description="Sanitized text length cap")
    strict_validation: bool = Field(default=False, description="Validate recovered responses field-by-field")

    log_level: str = Field(default="INFO", description="Root log level")

    def get_cors_origins(self) -> List[str]:
        """Parse the allowed origins list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def provider_configured(self, provider: str) -> bool:
        """Check whether an API key is present for a provider."""
        if provider == "gemini":
            return bool(self.gemini_api_key)
        if provider == "openrouter":
            return bool(self.openrouter_api_key)
        return False

    def get_provider_status(self) -> dict:
        return {
            "gemini": self.provider_configured("gemini"),
            "openrouter": self.provider_configured("openrouter"),
        }


# Global configuration instance
config = PromptAssistantConfig()
