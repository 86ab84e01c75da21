from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import List, Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""
    
    # Application
    APP_NAME: str = "Transaction Gateway"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    
    # Astra DB REST
    ASTRA_DB_REST_ENDPOINT: str = Field(..., min_length=1)
    ASTRA_DB_REST_KEYSPACE: str = Field(..., min_length=1)
    ASTRA_DB_REST_TOKEN: str = Field(..., min_length=1, repr=False)
    ASTRA_DB_REST_TIMEOUT_SECONDS: float = Field(10.0, gt=0)
    
    # CORS
    ALLOWED_ORIGINS: List[str] = ["*"]
    ALLOW_CREDENTIALS: bool = True
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    SENTRY_DSN: Optional[str] = None
    
    class Config:
        env_file = ".env"
        case_sensitive = True
        frozen = True
    
    @field_validator("ASTRA_DB_REST_ENDPOINT", "ASTRA_DB_REST_KEYSPACE", "ASTRA_DB_REST_TOKEN")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value
    
    @field_validator("ASTRA_DB_REST_ENDPOINT")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
