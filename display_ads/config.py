from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    APP_NAME: str = "Display Ads Store"
    ENABLE_DB: bool = True
    DATABASE_URL: Optional[str] = "sqlite:///display_ads.db"  # any SQLAlchemy URL
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env")

settings = Settings()
