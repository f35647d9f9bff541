"""
Configuration module - centralized settings for the entire application.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To override in production, set environment variables:
        export ACTIVE_PROVIDER=openai
        export OPENAI_API_KEY=sk-...
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",        # Load from .env file in project root
        env_file_encoding="utf-8",
        extra="ignore",         # Ignore extra env vars not defined here
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and logging
    APP_NAME: str = "ContentAI Core"

    # DEBUG: Enable debug mode (more verbose errors)
    DEBUG: bool = False

    # LOG_LEVEL: Level for the contentai.* loggers
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # AI/LLM PROVIDER SETTINGS
    # ---------------------------------------------------------------------------
    # ACTIVE_PROVIDER: Which provider the orchestrator calls ("gemini" or "openai")
    # - Only one provider is active at a time
    # - Without a credential for it, every request is served by the local synthesizer
    ACTIVE_PROVIDER: str = "gemini"

    # GEMINI_API_KEY: Google's Gemini API key
    GEMINI_API_KEY: str = ""

    # OPENAI_API_KEY: OpenAI's API key
    OPENAI_API_KEY: str = ""

    # ---------------------------------------------------------------------------
    # AI MODEL CONFIGURATION
    # ---------------------------------------------------------------------------
    # Default models, used when a request names a catalog model
    # (e.g. "creative-writer") instead of a concrete provider model
    GEMINI_MODEL: str = "gemini-2.5-flash"
    OPENAI_MODEL: str = "gpt-4o-mini"

    # AI Request timeout in seconds; on expiry the orchestrator falls back
    AI_REQUEST_TIMEOUT: float = 30.0

    # ---------------------------------------------------------------------------
    # SIMULATION (DEMO MODE) SETTINGS
    # ---------------------------------------------------------------------------
    # Bounds of the synthetic delay applied before returning simulated content.
    # Set both to 0 to disable the delay (tests do this).
    SIMULATION_DELAY_MIN: float = 0.5
    SIMULATION_DELAY_MAX: float = 1.5

    # ---------------------------------------------------------------------------
    # CREDENTIAL STORAGE
    # ---------------------------------------------------------------------------
    # CREDENTIALS_FILE: Local JSON file holding API keys keyed by provider name
    # - Read once at startup and whenever a key is set through the API
    # - Keys set here take precedence over the *_API_KEY environment values
    CREDENTIALS_FILE: str = "~/.contentai/credentials.json"

    # ---------------------------------------------------------------------------
    # VOICE COMMAND SETTINGS
    # ---------------------------------------------------------------------------
    # DEFAULT_VOICE_LANGUAGE: Language used when a request does not specify one
    DEFAULT_VOICE_LANGUAGE: str = "en"


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from contentai.core.config import settings
settings = Settings()
