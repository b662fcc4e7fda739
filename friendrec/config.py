"""Configuration module for the friend recommender."""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None


@dataclass
class RecommendationConfig:
    """Recommendation defaults."""
    # Hop bound used when a caller does not pass one
    max_distance: int = field(default_factory=lambda: _env_int("FRIENDREC_MAX_DISTANCE", 2))

    def __post_init__(self):
        if self.max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {self.max_distance}")


@dataclass
class ApiConfig:
    """HTTP API server settings."""
    host: str = field(default_factory=lambda: os.getenv("FRIENDREC_API_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _env_int("FRIENDREC_API_PORT", 8000))


@dataclass
class Config:
    """Main configuration container."""
    recommendation: RecommendationConfig = field(default_factory=RecommendationConfig)
    api: ApiConfig = field(default_factory=ApiConfig)

    log_level: str = field(default_factory=lambda: os.getenv("FRIENDREC_LOG_LEVEL", "INFO").upper())


def load_config() -> Config:
    """Load configuration from environment variables."""
    return Config()
