"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.section_engine import EngineConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Engine
    premium_designations: list[str] = ["Rajdhani", "Vande Bharat"]
    premium_tiers: list[str] = []
    default_horizon_minutes: float = 15.0

    def engine_config(self) -> EngineConfig:
        """Engine configuration derived from these settings."""
        return EngineConfig(
            premium_designations=tuple(self.premium_designations),
            premium_tiers=tuple(self.premium_tiers),
            default_horizon_minutes=self.default_horizon_minutes,
        )


settings = Settings()
