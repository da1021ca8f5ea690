# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from fuzzyrank.scoring.distance import StringDistance
from fuzzyrank.scoring.ranking import Ranker
from fuzzyrank.scoring.scorer import SimilarityScorer


# --- Composants du moteur ---

@pytest.fixture
def scorer():
    """Scoreur avec les pondérations par défaut et un cache neuf."""
    return SimilarityScorer(distance_calculator=StringDistance(backend="c"))


@pytest.fixture
def python_scorer():
    """Scoreur utilisant la distance en Python pur."""
    return SimilarityScorer(distance_calculator=StringDistance(backend="python"))


@pytest.fixture
def ranker(scorer):
    return Ranker(scorer=scorer, parallel=False)


# --- Service et API ---

@pytest.fixture
def match_service(ranker):
    from fuzzyrank.service.match_service import MatchService
    return MatchService(ranker=ranker)


@pytest.fixture
def client(match_service, monkeypatch):
    """
    Client FastAPI dont le service est remplacé par une instance
    construite sur les fixtures ci-dessus.
    """
    from fuzzyrank import main

    monkeypatch.setattr(main, "service", match_service)
    return TestClient(main.app)


@pytest.fixture
def process_names():
    """Noms de processus tels qu'un énumérateur pourrait les fournir."""
    return [
        "explorer",
        "chrome",
        "Google Chrome Helper",
        "firefox",
        "notepad",
        "notepad++",
        "Code",
        "python3",
        "spotify",
    ]
