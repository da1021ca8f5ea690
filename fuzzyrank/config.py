"""Configuration du moteur de classement flou."""
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration de l'application."""

    # Scoring - Pondérations du score composite
    LEXICAL_WEIGHT: float = 0.6
    DISTANCE_WEIGHT: float = 0.4
    FALLBACK_WEIGHT: float = 0.2

    # Limites
    DEFAULT_TOP_K: int = 5
    MAX_TOP_K: int = 100
    MIN_SCORE: float = 0.0

    # Distance de Levenshtein
    # "c" -> extension Levenshtein, "python" -> programmation dynamique pure
    DISTANCE_BACKEND: Literal["c", "python"] = "c"
    DISTANCE_CACHE_SIZE: int = 4096

    # Performance
    PARALLEL_SCORING: bool = False
    PARALLEL_MIN_CANDIDATES: int = 256
    MAX_WORKERS: int = 4

    # Logs
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
