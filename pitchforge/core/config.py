"""Configuration management for PitchForge."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ===========================================
    # Application
    # ===========================================
    APP_NAME: str = Field(default="PitchForge", description="Service display name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # ===========================================
    # Pitch Composition
    # ===========================================
    INCLUSION_THRESHOLD: int = Field(
        default=60,
        ge=0,
        le=100,
        description="Minimum relevance score for a case study to be cited in a pitch"
    )
    MAX_CITED_CASE_STUDIES: int = Field(
        default=2,
        ge=0,
        description="Maximum number of case studies cited in a composed pitch"
    )
    TITLE_SEED: Optional[int] = Field(
        default=None,
        description="Seed for the pitch title keyword draw (unset = random)"
    )

    # ===========================================
    # Recommendations
    # ===========================================
    RECOMMENDATION_LIMIT: int = Field(
        default=3,
        ge=1,
        description="Default number of case studies returned as recommendations"
    )
    PITCH_CANDIDATE_LIMIT: int = Field(
        default=3,
        ge=1,
        description="Number of top-ranked case studies handed to the composer"
    )
    MAX_CASE_STUDIES: int = Field(
        default=1000,
        ge=1,
        description="Upper bound on case studies scored in one request"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
