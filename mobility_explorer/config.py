"""
Configuration settings for the Mobility Explorer
"""
from pathlib import Path
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RULES_PATH = Path(__file__).parent / "data" / "visa_rules.json"
DEFAULT_WORLD_URL = "https://cdn.jsdelivr.net/npm/world-atlas@2/countries-110m.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    # Application Configuration
    app_name: str = Field(default="Mobility Explorer")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=True)
    log_level: str = Field(default="INFO")
    
    # Data sources (http(s) URL or local path)
    rules_source: str = Field(default=str(DEFAULT_RULES_PATH))
    geometry_source: str = Field(default=DEFAULT_WORLD_URL)
    fetch_timeout_seconds: float = Field(default=10.0, gt=0)
    load_on_startup: bool = Field(default=True)
    
    # API Configuration
    cors_origins: str = Field(default="http://localhost:3000,http://localhost:8080")
    
    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        if ',' in self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(',')]
        return [self.cors_origins.strip()]
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Create global settings instance
settings = Settings()
