"""Utility functions for search text normalization."""

import unicodedata


def fold_accents(text: str) -> str:
    """Remove diacritics from text.

    Decomposes characters (NFKD) and drops the combining marks
    (e.g., "Évoli" → "Evoli", "Salamèche" → "Salameche").

    Args:
        text: Text to fold

    Returns:
        Text without combining marks
    """
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def normalize_search_text(text: str, accent_insensitive: bool = False) -> str:
    """Normalize a query or candidate name for matching.

    Lower-cases and trims the text, optionally folding accents.

    Args:
        text: Text to normalize
        accent_insensitive: Whether to remove diacritics as well

    Returns:
        Normalized text for matching
    """
    normalized = text.strip().lower()
    if accent_insensitive:
        normalized = fold_accents(normalized)
    return normalized
