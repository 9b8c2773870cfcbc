from pydantic_settings import BaseSettings, SettingsConfigDict

from pcm_silence.config.constants import DEFAULT_MIN_SILENCE_MS, DEFAULT_SILENCE_THRESHOLD_DB


class AppSettings(BaseSettings):
    """
    Centralized application settings.
    Reads from environment variables automatically.
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    # --- Server Settings ---
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 7018
    MCP_HOST: str = "0.0.0.0"
    MCP_PORT: int = 7019

    # --- Silence Detection ---
    MIN_SILENCE_MS: int = DEFAULT_MIN_SILENCE_MS
    SILENCE_THRESHOLD_DB: int = DEFAULT_SILENCE_THRESHOLD_DB


# Create a single, importable instance of the settings
settings = AppSettings()
