"""Module contenant le service de classement principal."""
# fuzzyrank/service/match_service.py
import asyncio
import time
from dataclasses import dataclass
from typing import List, Optional

from fuzzyrank.logger import logger
from fuzzyrank.models import (
    CandidateEntry,
    RankedHit,
    RankOptions,
    RankResponse,
    ScoreResponse,
)
from fuzzyrank.scoring.ranking import Ranker, ScoredCandidate, ranker as default_ranker


@dataclass
class MatchContext:
    """Contexte partagé pour une opération de classement."""
    query: str
    candidates: List[CandidateEntry]
    options: RankOptions
    start_time: float


class MatchService:
    """Service de classement : moteur fuzzyrank + charges utiles des appelants."""

    def __init__(self, ranker: Optional[Ranker] = None):
        self.ranker = ranker or default_ranker

    def _to_hits(self, ctx: MatchContext, scored: List[ScoredCandidate]) -> List[RankedHit]:
        """Associe chaque résultat à la charge utile de son candidat d'origine."""
        hits = []
        for sc in scored:
            if sc.score < ctx.options.min_score:
                continue
            hits.append(RankedHit(
                name=sc.candidate,
                score=sc.score,
                rank=len(hits) + 1,
                index=sc.index,
                payload=ctx.candidates[sc.index].payload,
            ))
        return hits

    def _rank_sync(self, ctx: MatchContext) -> List[ScoredCandidate]:
        names = [c.name for c in ctx.candidates]
        return self.ranker.rank_scored(
            ctx.query, names, ctx.options.top_k, parallel=ctx.options.parallel
        )

    async def rank(
            self,
            query: str,
            candidates: List[CandidateEntry],
            options: Optional[RankOptions] = None) -> RankResponse:
        """Classe les candidats pour une saisie et construit la réponse."""
        ctx = MatchContext(
            query=query,
            candidates=candidates,
            options=options or RankOptions(),
            start_time=time.time(),
        )
        logger.info(
            "Ranking {n} candidates for {query!r} (top_k={top_k})",
            n=len(candidates), query=query, top_k=ctx.options.top_k,
        )

        # Le moteur est synchrone : on le sort de la boucle d'événements
        scored = await asyncio.to_thread(self._rank_sync, ctx)
        hits = self._to_hits(ctx, scored)

        query_time_ms = round((time.time() - ctx.start_time) * 1000, 2)
        if hits:
            logger.info(
                "Best match for {query!r}: {name!r} ({score:.4f})",
                query=query, name=hits[0].name, score=hits[0].score,
            )
        else:
            logger.warning("No match for {query!r}", query=query)

        return RankResponse(
            hits=hits,
            total=len(candidates),
            best=hits[0] if hits else None,
            query_time_ms=query_time_ms,
        )

    async def score(self, query: str, candidate: str) -> ScoreResponse:
        """Détail du score d'une paire."""
        breakdown = self.ranker.scorer.explain(query, candidate)
        return ScoreResponse(
            query=query,
            candidate=candidate,
            score=breakdown.score,
            token_score=breakdown.token_score,
            substring_score=breakdown.substring_score,
            distance=breakdown.distance,
            distance_score=breakdown.distance_score,
            has_lexical_evidence=breakdown.has_lexical_evidence,
        )
