from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = True
    log_level: str = "INFO"
    cors_origins: str = "*"

    # Upload Configuration (advisory only, nothing is rejected)
    max_file_size_mb: int = 50
    allowed_file_types: str = "pdf"

    # Simulated latency, in seconds
    simulate_latency: bool = True
    upload_delay: float = 3.0
    ask_delay: float = 1.5
    ask_jitter: float = 1.0
    search_delay: float = 2.0
    search_jitter: float = 1.0
    import_delay: float = 3.0
    agent_delay: float = 1.5
    agent_jitter: float = 1.0

    @field_validator('log_level', mode='after')
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper()

    def get_allowed_file_types(self) -> List[str]:
        """Get allowed file types as a list"""
        return [ft.strip().lower() for ft in self.allowed_file_types.split(',') if ft.strip()]

    def get_cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(',') if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
