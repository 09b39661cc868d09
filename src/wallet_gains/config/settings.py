"""Application settings and configuration."""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".wallet-gains"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Solana Meme Gains Calculator"
    app_version: str = "0.1.0"

    # Browser origins allowed to call the API
    cors_origins: list[str] = ["*"]

    # Chain
    solana_rpc_url: str = "https://api.mainnet-beta.solana.com"
    rpc_timeout_seconds: float = 10.0

    # Price sources
    coingecko_api_url: str = "https://api.coingecko.com/api/v3"
    coingecko_api_key: Optional[str] = None
    dexscreener_api_url: str = "https://api.dexscreener.com/latest/dex"
    dexscreener_api_key: Optional[str] = None
    raydium_api_url: str = "https://price-api.raydium.io/api/v1"
    price_source_timeout_seconds: float = 5.0

    # Cache TTLs per category
    price_cache_ttl_seconds: int = 300
    metadata_cache_ttl_seconds: int = 3600
    transaction_cache_ttl_seconds: int = 600
    cache_max_entries: int = 10_000

    # Cost basis storage
    data_dir: Optional[Path] = None
    cost_basis_backend: Literal["json", "sqlite"] = "json"
    cost_basis_path: Optional[Path] = None
    database_url: Optional[str] = None

    # Value returned by the placeholder eligibility signals
    eligibility_signal_default: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Optional[Path] = None

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_cost_basis_path(self) -> Path:
        """Get the JSON cost-basis file location."""
        return self.cost_basis_path or self.get_data_dir() / "cost-basis.json"

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "cost-basis.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
