"""
Application Settings for SmartAdmit

Centralized configuration using Pydantic Settings with .env support.
All environment variables are validated at startup.
"""

from functools import lru_cache
from typing import Optional
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Supabase issues the bearer tokens verified by the API; the College
    Scorecard key is only needed by the recommendations endpoint.
    """
    
    # Supabase Configuration
    supabase_url: str = "http://localhost:54321"
    supabase_jwt_secret: Optional[str] = None
    
    # College Scorecard Configuration
    college_scorecard_api_key: Optional[str] = None
    scorecard_timeout_seconds: float = 30.0
    
    # Application Settings
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    
    # CORS Configuration
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    
    # Recommendation Configuration
    # Max Scorecard lookups per request
    max_candidate_colleges: int = 20
    default_top_n: int = 4
    default_colleges: list[str] = [
        "Harvard University",
        "MIT",
        "Yale University",
        "Brown University",
        "Stanford University",
        "Princeton University",
        "Columbia University",
        "Duke University",
    ]
    
    # Scorecard does not publish these, so candidates get placeholders
    default_college_avg_gpa: float = 3.7
    default_college_avg_extracurriculars: float = 5.0
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Validate recommendation limits."""
        if self.max_candidate_colleges < 1:
            raise ValueError("MAX_CANDIDATE_COLLEGES must be at least 1")
        if self.default_top_n < 1:
            raise ValueError("DEFAULT_TOP_N must be at least 1")
        
        self.supabase_url = self.supabase_url.rstrip("/")
        return self
    
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"
    

@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience export for direct import
settings = get_settings()
