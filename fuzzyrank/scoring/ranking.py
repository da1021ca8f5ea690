"""Classement des candidats par score décroissant."""
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence

from fuzzyrank.config import settings
from fuzzyrank.exceptions import InvalidTopKError, ensure_str
from fuzzyrank.logger import logger
from fuzzyrank.scoring.scorer import SimilarityScorer, similarity_scorer


@dataclass(frozen=True)
class ScoredCandidate:
    """Un candidat, son score et sa position d'origine."""
    candidate: str
    score: float
    index: int


class Ranker:
    """Applique le scoreur à tous les candidats et garde les top_k meilleurs."""

    def __init__(
            self,
            scorer: Optional[SimilarityScorer] = None,
            parallel: bool = settings.PARALLEL_SCORING,
            parallel_min_candidates: int = settings.PARALLEL_MIN_CANDIDATES,
            max_workers: int = settings.MAX_WORKERS):
        self.scorer = scorer or similarity_scorer
        self.parallel = parallel
        self.parallel_min_candidates = parallel_min_candidates
        self.max_workers = max_workers

    @staticmethod
    def _check_top_k(top_k: int) -> None:
        # bool est un int en Python, on le refuse explicitement
        if isinstance(top_k, bool) or not isinstance(top_k, int) or top_k <= 0:
            raise InvalidTopKError(top_k)

    def _score_all(self, query: str, candidates: Sequence[str], parallel: bool) -> List[float]:
        """Score chaque candidat ; l'ordre du résultat suit celui des candidats."""
        if parallel and len(candidates) >= self.parallel_min_candidates:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(
                    lambda c: self.scorer.score(query, c), candidates
                ))
        return [self.scorer.score(query, c) for c in candidates]

    def rank_scored(
            self,
            query: str,
            candidates: Sequence[str],
            top_k: int,
            parallel: Optional[bool] = None) -> List[ScoredCandidate]:
        """
        Classe les candidats et conserve les scores.

        Args:
            query: Saisie de l'utilisateur
            candidates: Candidats, dans l'ordre fourni par l'appelant
            top_k: Nombre maximal de résultats (> 0)
            parallel: Force ou désactive le scoring multi-thread

        Returns:
            Au plus top_k ScoredCandidate, score décroissant ; à score égal,
            l'ordre d'origine est conservé.
        """
        self._check_top_k(top_k)
        ensure_str(query, "query")
        candidates = list(candidates)
        for c in candidates:
            ensure_str(c, "candidate")

        start = time.perf_counter()
        use_parallel = self.parallel if parallel is None else parallel
        scores = self._score_all(query, candidates, use_parallel)

        scored = [
            ScoredCandidate(candidate=c, score=s, index=i)
            for i, (c, s) in enumerate(zip(candidates, scores))
        ]
        # Tri stable : les ex aequo gardent leur ordre d'origine
        ranked = sorted(scored, key=lambda x: -x.score)[:top_k]

        logger.debug(
            "Ranked {n} candidates for {query!r} (top_k={top_k}) in {ms:.2f} ms",
            n=len(scored), query=query, top_k=top_k,
            ms=(time.perf_counter() - start) * 1000,
        )
        return ranked

    def rank(
            self,
            query: str,
            candidates: Sequence[str],
            top_k: int,
            parallel: Optional[bool] = None) -> List[str]:
        """Renvoie les top_k candidats, meilleur en premier."""
        return [sc.candidate for sc in self.rank_scored(query, candidates, top_k, parallel)]

    def best_match(self, query: str, candidates: Sequence[str]) -> Optional[ScoredCandidate]:
        """Politique 'rang 1' : le meilleur candidat, ou None si la liste est vide."""
        ranked = self.rank_scored(query, candidates, 1)
        return ranked[0] if ranked else None


ranker = Ranker()


def rank(query: str, candidates: Sequence[str], top_k: int) -> List[str]:
    """Point d'entrée principal du moteur."""
    return ranker.rank(query, candidates, top_k)


def rank_scored(query: str, candidates: Sequence[str], top_k: int) -> List[ScoredCandidate]:
    return ranker.rank_scored(query, candidates, top_k)


def best_match(query: str, candidates: Sequence[str]) -> Optional[ScoredCandidate]:
    return ranker.best_match(query, candidates)
