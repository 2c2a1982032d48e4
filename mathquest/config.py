"""
Math Quest - Configuration and Settings
Centralized configuration management using Pydantic Settings
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Supabase Configuration
    supabase_url: str
    supabase_key: str

    # OpenAI Configuration
    openai_api_key: str
    openai_timeout_seconds: float = 30.0

    # AI Settings
    problem_model: str = "gpt-4o-mini"
    feedback_model: str = "gpt-4o-mini"
    problem_temperature: float = 0.7
    feedback_temperature: float = 0.7

    # Database Tables
    sessions_table: str = "math_problem_sessions"
    submissions_table: str = "math_problem_submissions"

    # Application Settings
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Dependency to get settings"""
    return Settings()
