"""Name matching: substring containment or Jaro-Winkler similarity."""

from __future__ import annotations

from rapidfuzz.distance import JaroWinkler

from fuzzywhich.models import MatchScore


def similarity(a: str, b: str) -> float:
    """Jaro-Winkler similarity of two strings, in ``[0.0, 1.0]``."""
    return JaroWinkler.similarity(a, b)


def is_match(name_lower: str, pattern_lower: str, threshold: float) -> bool:
    """Return True when ``name_lower`` contains the pattern or is similar enough.

    Both arguments must already be lower-cased. Containment is checked first so
    the similarity score is only computed for names that do not contain the
    pattern.
    """
    if pattern_lower in name_lower:
        return True
    return similarity(name_lower, pattern_lower) >= threshold


def score(name: str, pattern: str) -> MatchScore:
    """Compute both match signals for ``name`` without short-circuiting."""
    name_lower = name.lower()
    pattern_lower = pattern.lower()
    return MatchScore(
        contains=pattern_lower in name_lower,
        similarity=similarity(name_lower, pattern_lower),
    )
