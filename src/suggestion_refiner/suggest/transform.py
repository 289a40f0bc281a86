# src/suggestion_refiner/suggest/transform.py
from __future__ import annotations

"""
transform.py.

Does: Apply capitalization inheritance and trailing-quote repair to candidates,
      using the casing rules of each candidate's dictionary locale.
Returns: New Candidate objects / tuples; inputs are never modified.
Used by: Suggest pipeline (typing and gesture paths).
"""

import logging
from typing import Iterable, Optional, Tuple

from suggestion_refiner.suggest.types import Candidate, Locale
from suggestion_refiner.utils.log import debug

__all__ = [
    "QUOTE",
    "upper_case",
    "capitalize_first_code_point",
    "count_trailing_quotes",
    "strip_trailing_quotes",
    "transform_candidate",
    "transform_candidates",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

QUOTE = "'"

# Languages whose dotted/dotless i pair upper-cases differently from the Unicode default.
_DOTTED_I_LANGUAGES = frozenset({"tr", "az"})


# ─────────────────────────────────────────────────────────────────────────────
# Locale-aware casing
# ─────────────────────────────────────────────────────────────────────────────
def upper_case(text: str, locale: Optional[Locale]) -> str:
    """
    Does: Upper-case `text` with the casing rules of `locale`.
          Turkish/Azerbaijani map 'i' to 'İ'; everything else follows the
          Unicode default mapping (which may grow the string, e.g. 'ß' → 'SS').
    """
    if locale is not None and locale.language in _DOTTED_I_LANGUAGES:
        text = text.replace("i", "İ")
    return text.upper()


def capitalize_first_code_point(text: str, locale: Optional[Locale]) -> str:
    """Does: Upper-case only the first code point of `text`."""
    if len(text) <= 1:
        return upper_case(text, locale)
    return upper_case(text[0], locale) + text[1:]


# ─────────────────────────────────────────────────────────────────────────────
# Trailing quotes
# ─────────────────────────────────────────────────────────────────────────────
def count_trailing_quotes(text: str) -> int:
    """Does: Count the apostrophes ending `text` ("didn't''" → 2)."""
    return len(text) - len(text.rstrip(QUOTE))


def strip_trailing_quotes(text: str) -> Tuple[str, int]:
    """Does: Return (`text` without trailing apostrophes, number stripped)."""
    count = count_trailing_quotes(text)
    return (text[: len(text) - count] if count else text), count


def _quotes_to_append(original: str, trailing_quote_count: int) -> int:
    # a word that already has a quote ("didn't") gets one fewer
    n = trailing_quote_count - (1 if QUOTE in original else 0)
    return max(n, 0)


# ─────────────────────────────────────────────────────────────────────────────
# Candidate transformation
# ─────────────────────────────────────────────────────────────────────────────
def transform_candidate(
    candidate: Candidate,
    locale: Optional[Locale],
    *,
    all_upper_case: bool = False,
    first_char_capitalized: bool = False,
    trailing_quote_count: int = 0,
) -> Candidate:
    """
    Does: Case-transform and quote-repair one candidate.
    Returns: A new Candidate; every field except `text` is copied unchanged.
    """
    if all_upper_case:
        text = upper_case(candidate.text, locale)
    elif first_char_capitalized:
        text = capitalize_first_code_point(candidate.text, locale)
    else:
        text = candidate.text

    text += QUOTE * _quotes_to_append(candidate.text, trailing_quote_count)
    if text == candidate.text:
        return candidate
    return candidate.with_text(text)


def transform_candidates(
    candidates: Iterable[Candidate],
    default_locale: Optional[Locale],
    *,
    all_upper_case: bool = False,
    first_char_capitalized: bool = False,
    trailing_quote_count: int = 0,
) -> Tuple[Candidate, ...]:
    """
    Does: Map transform_candidate over `candidates`, resolving each candidate's
          locale from its source dictionary and falling back to `default_locale`.
    Returns: New tuple in the same order.
    """
    candidates = tuple(candidates)
    if not (all_upper_case or first_char_capitalized or trailing_quote_count):
        return candidates

    out = tuple(
        transform_candidate(
            c,
            c.locale if c.locale is not None else default_locale,
            all_upper_case=all_upper_case,
            first_char_capitalized=first_char_capitalized,
            trailing_quote_count=trailing_quote_count,
        )
        for c in candidates
    )
    debug(
        f"transformed {len(out)} candidates (upper={all_upper_case}, "
        f"first={first_char_capitalized}, quotes={trailing_quote_count})",
        topic="transform",
    )
    return out
