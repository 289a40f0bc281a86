# src/suggestion_refiner/suggest/dedup.py
from __future__ import annotations

"""
dedup.py.

Does: Remove duplicate candidates (and the typed word itself) from a ranked list,
      and drop distractors whose score sits on the suppression floor.
Returns: New tuples preserving the relative order of survivors.
Used by: Suggest pipeline.
"""

import logging
from typing import Iterable, Optional, Tuple

from suggestion_refiner.suggest.types import Candidate
from suggestion_refiner.utils.log import debug

__all__ = [
    "SUPPRESS_SUGGEST_THRESHOLD",
    "remove_duplicates",
    "suppress_distractors",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# Close to -2**31
SUPPRESS_SUGGEST_THRESHOLD = -2_000_000_000


def remove_duplicates(
    typed_word: Optional[str],
    candidates: Iterable[Candidate],
) -> Tuple[Tuple[Candidate, ...], bool]:
    """
    Does: Keep the first occurrence of each text (case-sensitive) and drop every
          candidate equal to `typed_word` when it is non-empty.
    Returns: (surviving candidates, whether the typed word was removed).
    """
    seen: set[str] = set()
    out: list[Candidate] = []
    removed_typed_word = False
    for c in candidates:
        if typed_word and c.text == typed_word:
            removed_typed_word = True
            continue
        if c.text in seen:
            continue
        seen.add(c.text)
        out.append(c)

    if removed_typed_word:
        debug(f"typed word {typed_word!r} found among candidates", topic="dedup")
    return tuple(out), removed_typed_word


def suppress_distractors(candidates: Iterable[Candidate]) -> Tuple[Candidate, ...]:
    """Does: Drop candidates scored at or below SUPPRESS_SUGGEST_THRESHOLD."""
    out = []
    for c in candidates:
        if c.score <= SUPPRESS_SUGGEST_THRESHOLD:
            log.debug("Suppressing distractor %r (score=%d)", c.text, c.score)
            continue
        out.append(c)
    return tuple(out)
