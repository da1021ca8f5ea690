"""Modèles Pydantic pour les requêtes et réponses."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fuzzyrank.config import settings


class CandidateEntry(BaseModel): # pylint: disable=too-few-public-methods
    """Un candidat et sa charge utile opaque (nombre d'occurrences, identifiant de lancement...)."""
    name: str
    payload: Dict[str, Any] = Field(default_factory=dict)


class RankOptions(BaseModel): # pylint: disable=too-few-public-methods
    """Options de classement."""
    top_k: int = Field(default=settings.DEFAULT_TOP_K, gt=0, le=settings.MAX_TOP_K)
    min_score: float = Field(default=settings.MIN_SCORE, ge=0.0)
    parallel: Optional[bool] = None


class RankRequest(BaseModel): # pylint: disable=too-few-public-methods
    """Requête de classement."""
    query: str
    candidates: List[CandidateEntry] = Field(default_factory=list)
    options: RankOptions = Field(default_factory=RankOptions)

    @field_validator("candidates", mode="before")
    @classmethod
    def _coerce_candidates(cls, value: Any) -> Any:
        """Accepte aussi une simple liste de chaînes."""
        if not isinstance(value, list):
            return value
        return [{"name": v} if isinstance(v, str) else v for v in value]


class RankedHit(BaseModel): # pylint: disable=too-few-public-methods
    """Un candidat classé."""
    name: str
    score: float
    rank: int
    index: int
    payload: Dict[str, Any] = Field(default_factory=dict)


class RankResponse(BaseModel): # pylint: disable=too-few-public-methods
    """Réponse de classement."""
    hits: List[RankedHit]
    total: int # Nombre de candidats reçus, avant top_k et min_score
    best: Optional[RankedHit] = None
    query_time_ms: float

    model_config = ConfigDict(extra="allow")


class ScoreRequest(BaseModel): # pylint: disable=too-few-public-methods
    """Requête de score pour une paire (saisie, candidat)."""
    query: str
    candidate: str


class ScoreResponse(BaseModel): # pylint: disable=too-few-public-methods
    """Détail du score d'une paire."""
    query: str
    candidate: str
    score: float
    token_score: float
    substring_score: float
    distance: int
    distance_score: float
    has_lexical_evidence: bool
