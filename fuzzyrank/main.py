"""Main module for the FastAPI application."""
import json
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, status

from .config import settings
from .exceptions import FuzzyRankError
from .logger import logger
from .models import RankRequest, RankResponse, ScoreRequest, ScoreResponse
from .service.match_service import MatchService

# Service de classement (sera remplacé dans les tests)
match_service: MatchService = MatchService()
# Alias `service` pour les tests qui patchent `main.service`
service = match_service


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Handle FastAPI startup and shutdown events."""
    logger.info(
        "Starting up fuzzyrank API (distance backend: {backend})...",
        backend=settings.DISTANCE_BACKEND,
    )
    yield
    logger.info("Shutting down fuzzyrank API...")


app = FastAPI(
    title="fuzzyrank - Fuzzy name ranking service",
    lifespan=lifespan
)


def get_service() -> MatchService:
    """Dépendance FastAPI pour obtenir l'instance du service de classement."""
    return service


@app.post("/rank", response_model=RankResponse)
async def rank(req: RankRequest, svc: MatchService = Depends(get_service)):
    """POST /rank endpoint."""
    try:
        pretty_request_body = json.dumps(req.model_dump(), indent=2, ensure_ascii=False)
        logger.debug("Received request:\n{request_body}", request_body=pretty_request_body)

        return await svc.rank(
            query=req.query,
            candidates=req.candidates,
            options=req.options,
        )
    except FuzzyRankError as e:
        logger.warning("Invalid rank request: {error}", error=e)
        raise HTTPException(
            status_code=422, detail={"error": str(e)}
        ) from e
    except Exception as e:
        logger.exception("Error processing rank request")
        raise HTTPException(status_code=500, detail={"error": str(e)}) from e


@app.post("/score", response_model=ScoreResponse)
async def score(req: ScoreRequest, svc: MatchService = Depends(get_service)):
    """POST /score endpoint : détail du score d'une paire."""
    try:
        return await svc.score(query=req.query, candidate=req.candidate)
    except Exception as e:
        logger.exception("Error processing score request")
        raise HTTPException(status_code=500, detail={"error": str(e)}) from e


@app.get("/")
def root():
    """Root endpoint to check API status."""
    return {"status": "ok", "message": "fuzzyrank API is running 🚀"}


@app.get("/health", status_code=status.HTTP_200_OK, tags=["Monitoring"])
async def health_check():
    """
    Health check endpoint.

    Scores a tiny pair to make sure the engine and its distance backend load.
    """
    try:
        await service.score("ok", "ok")
    except Exception as e:
        logger.error("Health check failed: {error}", error=e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"engine": "error"},
        ) from e
    return {"engine": "ok", "distance_backend": settings.DISTANCE_BACKEND}
