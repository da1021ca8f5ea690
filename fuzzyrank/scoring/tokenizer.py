"""Tokenisation normalisée des chaînes à comparer."""
import re
from typing import List

from fuzzyrank.exceptions import ensure_str

_NON_WORD = re.compile(r'[^\w\s]')
_SPACES = re.compile(r'\s+')


def tokenize(s: str) -> List[str]:
    """
    Découpe une chaîne en mots normalisés.

    Minuscules, ponctuation remplacée par des espaces, espaces fusionnés.
    Les doublons sont conservés.

    Args:
        s: Chaîne à tokeniser

    Returns:
        Liste des tokens, vide si la chaîne ne contient aucun mot
    """
    ensure_str(s, "s")
    cleaned = _NON_WORD.sub(' ', s.lower())
    cleaned = _SPACES.sub(' ', cleaned).strip()
    return [t for t in cleaned.split(' ') if t]


class Tokenizer:
    """Tokeniseur sans état, injectable dans le scoreur."""

    def tokenize(self, s: str) -> List[str]:
        return tokenize(s)


tokenizer = Tokenizer()
