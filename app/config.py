"""Application configuration"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""
    
    # Application
    APP_NAME: str = "Currency Converter"
    DEBUG: bool = True
    API_V1_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"
    
    # Exchange rates
    EXCHANGE_RATE_API_BASE_URL: str = "https://api.exchangerate-api.com/v4/latest"
    EXCHANGE_RATE_TIMEOUT_SECONDS: float = 10.0
    # 0 disables caching: every conversion does a fresh lookup
    EXCHANGE_RATE_CACHE_TTL_SECONDS: int = 0
    
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


settings = Settings()
