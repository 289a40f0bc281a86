# src/suggestion_refiner/suggest/scoring.py
from __future__ import annotations

"""
scoring.py

Does: Normalize a lookup score against the typed word so it can be compared with
      the auto-correction threshold.
Returns: calc_normalized_score() float in [0, ~2147], suggestion_exceeds_threshold() bool.
Used by: autocorrect policy and the pipeline's debug annotations.
"""

import logging
from typing import Optional

from rapidfuzz.distance import OSA  # adjacent transpositions count as one edit

from suggestion_refiner.suggest.types import Candidate, CandidateKind

__all__ = [
    "SCORE_SCALE",
    "edit_distance",
    "calc_normalized_score",
    "suggestion_exceeds_threshold",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SCORE_SCALE = 1_000_000.0


def edit_distance(before: str, after: str) -> int:
    """
    Does: Case-insensitive optimal-string-alignment distance
          (insert / delete / substitute / swap adjacent).
    """
    return OSA.distance(before.lower(), after.lower())


def calc_normalized_score(before: str, after: str, score: int) -> float:
    """
    Does: Weight `score` by how close `after` (the suggestion) is to `before`
          (the typed word): score / SCORE_SCALE * (1 - distance / len(after)).
    Returns: 0.0 for empty input, all-space suggestions, non-positive scores,
             or when the edit distance covers the whole suggestion.
    """
    if not before or not after:
        return 0.0
    if after.count(" ") == len(after):
        return 0.0

    distance = edit_distance(before, after)
    if score <= 0 or distance >= len(after):
        return 0.0

    weight = 1.0 - distance / len(after)
    return score / SCORE_SCALE * weight


def suggestion_exceeds_threshold(
    suggestion: Optional[Candidate],
    considered_word: str,
    threshold: float,
) -> bool:
    """
    Does: True for a whitelisted suggestion, otherwise when its normalized score
          against `considered_word` reaches `threshold`.
    """
    if suggestion is None:
        return False
    if suggestion.is_kind_of(CandidateKind.WHITELIST):
        return True

    normalized = calc_normalized_score(considered_word, suggestion.text, suggestion.score)
    log.debug(
        "Normalized score %r -> %r: %.4f (threshold %.4f)",
        considered_word,
        suggestion.text,
        normalized,
        threshold,
    )
    return normalized >= threshold
