# src/suggestion_refiner/suggest/autocorrect.py
from __future__ import annotations

"""
autocorrect.py
==============

Does: Decide whether the top lookup candidate may silently replace the typed word.
      Two pieces:
        - SpaceLimitFilter: blocks long multi-word (space-containing) suggestions
          in languages with a configured limit (German: 12).
        - AutoCorrectionPolicy: the hard deny-gates (settings, typed-word shape,
          dictionary availability, shortcut kind), then the score threshold and
          the space filter.
Returns: bool decisions; nothing here mutates a candidate list.
Used by: Suggest non-batch pipeline.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from suggestion_refiner.suggest.scoring import suggestion_exceeds_threshold
from suggestion_refiner.suggest.types import Candidate, CandidateKind
from suggestion_refiner.utils.log import debug

__all__ = [
    "SpaceLimitFilter",
    "AutoCorrectionInputs",
    "AutoCorrectionPolicy",
    "allows_to_be_auto_corrected",
]

__docformat__ = "google"

log = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# 1) Space-limit filter
# ─────────────────────────────────────────────────────────────────────────────
class SpaceLimitFilter:
    """
    Per-language cap on auto-correcting to suggestions that contain a space.

    In concatenative languages the dictionary often lacks the long compound the
    user is typing and offers a multi-word split instead; those splits are kept
    as suggestions but never auto-corrected to once they exceed the limit.
    """

    def __init__(self, max_length_by_language: Mapping[str, int]):
        self._limits = max_length_by_language

    def max_length_for(self, language: str) -> Optional[int]:
        return self._limits.get(language.lower())

    def allows(self, candidate: Candidate) -> bool:
        locale = candidate.locale
        if locale is None:
            return True
        limit = self.max_length_for(locale.language)
        if limit is None:
            return True
        return len(candidate.text) <= limit or " " not in candidate.text


# ─────────────────────────────────────────────────────────────────────────────
# 2) Policy
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class AutoCorrectionInputs:
    """Everything the policy reads for one request."""

    is_correction_enabled: bool
    whitelisted_word: Optional[str]
    considered_word: str
    did_remove_typed_word: bool
    results_are_predictions: bool
    top_candidate: Optional[Candidate]
    has_digits: bool = False
    is_mostly_caps: bool = False
    is_resumed: bool = False
    has_main_dictionary: bool = True


def allows_to_be_auto_corrected(
    whitelisted_word: Optional[str],
    considered_word: str,
    did_remove_typed_word: bool,
) -> bool:
    """
    Does: A word may be auto-corrected when a whitelisted replacement exists, or
          when it is longer than one char and the lookup did not return it.
    """
    return whitelisted_word is not None or (
        len(considered_word) > 1 and not did_remove_typed_word
    )


class AutoCorrectionPolicy:
    """Stateless ALLOW/DENY decision; the threshold is passed per call."""

    def __init__(self, space_filter: SpaceLimitFilter):
        self.space_filter = space_filter

    def denial_reason(self, inputs: AutoCorrectionInputs) -> Optional[str]:
        """Returns: the first hard gate that denies auto-correction, or None."""
        top = inputs.top_candidate
        if not inputs.is_correction_enabled:
            return "correction disabled"
        if not allows_to_be_auto_corrected(
            inputs.whitelisted_word, inputs.considered_word, inputs.did_remove_typed_word
        ):
            return "typed word not eligible"
        if inputs.results_are_predictions:
            return "prediction request"
        if top is None:
            return "no candidates"
        if inputs.has_digits:
            return "typed word has digits"
        if inputs.is_mostly_caps:
            return "typed word is mostly caps"
        if inputs.is_resumed:
            return "resumed composition"
        # A contact name matching a common word would otherwise auto-correct
        # with no main dictionary around.
        if not inputs.has_main_dictionary:
            return "no main dictionary"
        if top.is_kind_of(CandidateKind.SHORTCUT):
            return "top candidate is a shortcut"
        return None

    def decide(self, inputs: AutoCorrectionInputs, threshold: float) -> bool:
        """
        Does: Run the hard gates, then require the top candidate to clear
              `threshold` and the space-limit filter.
        Returns: True to auto-correct.
        """
        reason = self.denial_reason(inputs)
        if reason is not None:
            debug(f"auto-correction denied: {reason}", topic="autocorrect")
            return False

        top = inputs.top_candidate
        assert top is not None
        if not suggestion_exceeds_threshold(top, inputs.considered_word, threshold):
            debug(f"auto-correction denied: {top.text!r} under threshold", topic="autocorrect")
            return False
        if not self.space_filter.allows(top):
            debug(f"auto-correction denied: {top.text!r} blocked by space limit", topic="autocorrect")
            return False
        return True
