"""
fuzzyrank - classement flou de noms saisis par l'utilisateur.

Exemple :
    >>> from fuzzyrank import rank
    >>> rank("note", ["notepad", "firefox", "notion"], 2)
    ['notepad', 'notion']
"""
from fuzzyrank.exceptions import FuzzyRankError, InvalidInputError, InvalidTopKError
from fuzzyrank.scoring.distance import StringDistance, distance, levenshtein
from fuzzyrank.scoring.ranking import Ranker, ScoredCandidate, best_match, rank, rank_scored
from fuzzyrank.scoring.scorer import ScoreBreakdown, SimilarityScorer, explain, score
from fuzzyrank.scoring.tokenizer import Tokenizer, tokenize

__all__ = [
    "tokenize",
    "distance",
    "levenshtein",
    "score",
    "explain",
    "rank",
    "rank_scored",
    "best_match",
    "Tokenizer",
    "StringDistance",
    "SimilarityScorer",
    "Ranker",
    "ScoredCandidate",
    "ScoreBreakdown",
    "FuzzyRankError",
    "InvalidInputError",
    "InvalidTopKError",
]
