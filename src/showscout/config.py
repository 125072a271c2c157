"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Telegram
    telegram_bot_token: str = ""
    telegram_chat_id: str = ""
    telegram_timeout: int = 30

    # Monitoring
    check_interval_minutes: int = 60
    retry_interval_minutes: int = 10
    movie_delay_seconds: float = 3.0

    # Browser settings
    browser_timeout: int = 45  # seconds
    expand_wait_seconds: float = 3.0
    viewport_width: int = 1366
    viewport_height: int = 768
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    # Extraction
    low_count_threshold: int = 10

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    def validate_telegram(self) -> None:
        """Raise ValueError if Telegram delivery is not configured."""
        if not self.telegram_bot_token:
            raise ValueError("TELEGRAM_BOT_TOKEN is required in .env file")
        if not self.telegram_chat_id:
            raise ValueError("TELEGRAM_CHAT_ID is required in .env file")


# Global settings instance
settings = Settings()
