"""Score de similarité composite entre une saisie et un candidat."""
from dataclasses import dataclass
from typing import Optional

from fuzzyrank.config import settings
from fuzzyrank.exceptions import ensure_str
from fuzzyrank.scoring.distance import StringDistance, string_distance as default_distance
from fuzzyrank.scoring.tokenizer import Tokenizer, tokenizer as default_tokenizer


@dataclass(frozen=True)
class ScoreBreakdown:
    """Signaux intermédiaires d'un calcul de score."""
    token_score: float
    substring_score: float
    distance: int
    distance_score: float
    has_lexical_evidence: bool
    score: float


class SimilarityScorer:
    """
    Scoreur directionnel : mesure à quel point `candidate` correspond à `query`.

    Le recouvrement de tokens et l'inclusion littérale pèsent bien plus que la
    distance d'édition seule, plafonnée à FALLBACK_WEIGHT sans indice lexical.
    """

    def __init__(
            self,
            lexical_weight: float = settings.LEXICAL_WEIGHT,
            distance_weight: float = settings.DISTANCE_WEIGHT,
            fallback_weight: float = settings.FALLBACK_WEIGHT,
            distance_calculator: Optional[StringDistance] = None,
            tokenizer: Optional[Tokenizer] = None):
        self.lexical_weight = lexical_weight
        self.distance_weight = distance_weight
        self.fallback_weight = fallback_weight
        self.distance_calculator = distance_calculator or default_distance
        self.tokenizer = tokenizer or default_tokenizer

    def token_score(self, query: str, candidate: str) -> float:
        """Part des tokens de la saisie présents parmi ceux du candidat."""
        q_tokens = self.tokenizer.tokenize(query)
        c_tokens = set(self.tokenizer.tokenize(candidate))
        if not q_tokens or not c_tokens:
            return 0.0
        found = sum(1 for t in q_tokens if t in c_tokens)
        return found / len(q_tokens)

    @staticmethod
    def substring_score(query: str, candidate: str) -> float:
        """len(query)/len(candidate) si query est incluse telle quelle dans candidate."""
        # Comparaison sensible à la casse, sur les chaînes d'origine
        if not candidate or query not in candidate:
            return 0.0
        return len(query) / len(candidate)

    def explain(self, query: str, candidate: str) -> ScoreBreakdown:
        """
        Calcule le score et renvoie le détail de chaque signal.

        Args:
            query: Saisie de l'utilisateur
            candidate: Chaîne candidate

        Returns:
            ScoreBreakdown avec le score final dans `score`
        """
        ensure_str(query, "query")
        ensure_str(candidate, "candidate")

        token_score = self.token_score(query, candidate)
        substring_score = self.substring_score(query, candidate)

        dist = self.distance_calculator.distance(query, candidate)
        max_len = max(len(query), len(candidate))
        distance_score = 1.0 if max_len == 0 else 1.0 - dist / max_len

        lexical = token_score > 0 or substring_score > 0
        if lexical:
            score = (
                max(token_score, substring_score) * self.lexical_weight
                + distance_score * self.distance_weight
            )
        else:
            score = distance_score * self.fallback_weight

        return ScoreBreakdown(
            token_score=token_score,
            substring_score=substring_score,
            distance=dist,
            distance_score=distance_score,
            has_lexical_evidence=lexical,
            score=score,
        )

    def score(self, query: str, candidate: str) -> float:
        """Score composite de `candidate` pour la saisie `query`."""
        return self.explain(query, candidate).score


similarity_scorer = SimilarityScorer()


def score(query: str, candidate: str) -> float:
    """Score composite via le scoreur global."""
    return similarity_scorer.score(query, candidate)


def explain(query: str, candidate: str) -> ScoreBreakdown:
    """Détail du score via le scoreur global."""
    return similarity_scorer.explain(query, candidate)
