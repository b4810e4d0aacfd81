"""Application configuration using Pydantic settings."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Telegram (checked at startup, see main.py)
    TELEGRAM_BOT_TOKEN: str = ""

    # Rate limiting
    RATE_LIMIT_WINDOW_MS: int = 2000

    # Aptos fullnode REST endpoints
    APTOS_TESTNET_URL: str = "https://api.testnet.aptoslabs.com/v1"
    APTOS_MAINNET_URL: str = "https://api.mainnet.aptoslabs.com/v1"

    # Links shown to users
    EXPLORER_BASE_URL: str = "https://explorer.aptoslabs.com"
    FAUCET_URL: str = "https://aptoslabs.com/testnet-faucet"

    # Health check server
    HEALTH_ENABLED: bool = True
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""
    LOG_MAX_BYTES: int = 10_485_760
    LOG_BACKUP_COUNT: int = 5

    def explorer_account_url(self, address: str, network: str = "testnet") -> str:
        """Build an explorer link for an account."""
        return f"{self.EXPLORER_BASE_URL}/account/{address}?network={network}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
