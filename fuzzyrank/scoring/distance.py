"""Calcul de distance Levenshtein optimisé."""
from functools import lru_cache

import Levenshtein as lev

from fuzzyrank.config import settings
from fuzzyrank.exceptions import ensure_str


def levenshtein(a: str, b: str) -> int:
    """
    Distance de Levenshtein par programmation dynamique (une seule ligne).

    Insertion, suppression et substitution coûtent 1. Travaille sur les
    points de code, pas sur les octets.
    """
    # La ligne courante est indexée par la chaîne la plus courte
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            ))
        previous = current
    return previous[-1]


class StringDistance:
    """Classe pour calculer les distances entre chaînes."""

    def __init__(
            self,
            backend: str = settings.DISTANCE_BACKEND,
            cache_size: int = settings.DISTANCE_CACHE_SIZE):
        if backend not in ("c", "python"):
            raise ValueError(f"Unknown distance backend: {backend!r}")
        self.backend = backend
        self._impl = lev.distance if backend == "c" else levenshtein
        # Cache par instance : les résultats ne dépendent que de (s1, s2)
        self._cached = lru_cache(maxsize=cache_size)(self._compute)

    def _compute(self, s1: str, s2: str) -> int:
        if not s1 or not s2:
            return max(len(s1), len(s2))
        return self._impl(s1, s2)

    def distance(self, s1: str, s2: str) -> int:
        """
        Calcule la distance de Levenshtein entre deux chaînes.

        Args:
            s1: Première chaîne
            s2: Deuxième chaîne

        Returns:
            Distance de Levenshtein (entier positif ou nul)
        """
        ensure_str(s1, "s1")
        ensure_str(s2, "s2")
        return self._cached(s1, s2)

    def cache_info(self):
        """Statistiques du cache LRU."""
        return self._cached.cache_info()


# Instance globale réutilisable
string_distance = StringDistance()


def distance(a: str, b: str) -> int:
    """Distance de Levenshtein via l'instance globale."""
    return string_distance.distance(a, b)
