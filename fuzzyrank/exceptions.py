"""Exceptions du moteur de classement."""


class FuzzyRankError(Exception):
    """Erreur de base de fuzzyrank."""


class InvalidInputError(FuzzyRankError, TypeError):
    """Une entrée ou un candidat n'est pas une chaîne (None compris)."""


class InvalidTopKError(FuzzyRankError, ValueError):
    """top_k doit être un entier strictement positif."""

    def __init__(self, top_k):
        self.top_k = top_k
        super().__init__(f"top_k must be a positive integer, got {top_k!r}")


def ensure_str(value, name: str) -> str:
    """Vérifie la précondition 'chaîne obligatoire' et renvoie la valeur."""
    if not isinstance(value, str):
        raise InvalidInputError(
            f"{name} must be a str, got {type(value).__name__}"
        )
    return value
