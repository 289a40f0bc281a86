# src/suggestion_refiner/suggest/pipeline.py
from __future__ import annotations

"""
pipeline.py
===========

Does: Turn raw lookup candidates into the final suggestion strip for one request.
      Two modes, picked from the typed-word state:
        - typing / recorrection / prediction: quote stripping, case + quote
          transform, dedup against the typed word, auto-correction decision,
          synthetic TYPED entry at index 0.
        - batch (gesture): case transform, demotion of a previously rejected
          top suggestion, dedup, distractor suppression; never auto-corrects.
Returns: Suggest.get_suggested_words(...) -> SuggestionResult (and an optional
         callback invoked exactly once with that same result).
Used by: Input engines owning a LookupCollaborator; demo CLI.
"""

import logging
from typing import Any, Optional, Tuple

from suggestion_refiner.suggest.autocorrect import (
    AutoCorrectionInputs,
    AutoCorrectionPolicy,
    SpaceLimitFilter,
    allows_to_be_auto_corrected,
)
from suggestion_refiner.suggest.config import SuggestConfig, load_suggest_config
from suggestion_refiner.suggest.dedup import remove_duplicates, suppress_distractors
from suggestion_refiner.suggest.lookup import LookupCollaborator, SuggestionCallback
from suggestion_refiner.suggest.scoring import calc_normalized_score
from suggestion_refiner.suggest.transform import strip_trailing_quotes, transform_candidates
from suggestion_refiner.suggest.types import (
    MAX_SCORE,
    USER_TYPED_DICTIONARY,
    Candidate,
    CandidateKind,
    InputStyle,
    SessionId,
    SuggestionResult,
    TypedWordState,
)
from suggestion_refiner.utils.log import debug

__all__ = ["Suggest"]

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================


def _whitelisted_word_or_none(suggestions: Tuple[Candidate, ...]) -> Optional[str]:
    if suggestions and suggestions[0].is_kind_of(CandidateKind.WHITELIST):
        return suggestions[0].text
    return None


def _typed_word_candidate(typed_word: str) -> Candidate:
    return Candidate(
        typed_word,
        MAX_SCORE,
        CandidateKind.TYPED,
        USER_TYPED_DICTIONARY,
    )


def _demote_rejected(
    suggestions: Tuple[Candidate, ...], rejected: Optional[str]
) -> Tuple[Candidate, ...]:
    """Move a top suggestion the user already rejected to the second slot."""
    if len(suggestions) > 1 and rejected is not None and suggestions[0].text == rejected:
        return (suggestions[1], suggestions[0]) + suggestions[2:]
    return suggestions


def _with_debug_info(typed_word: str, suggestions: Tuple[Candidate, ...]) -> Tuple[Candidate, ...]:
    """Annotate each suggestion with its raw and normalized score; index 0 gets '+'."""
    out = [suggestions[0].with_debug_string("+")]
    for cur in suggestions[1:]:
        normalized = calc_normalized_score(typed_word, cur.text, cur.score)
        if normalized > 0:
            info = f"{cur.score} ({normalized:4.2f}), {cur.source.dict_type}"
        else:
            info = str(cur.score)
        out.append(cur.with_debug_string(info))
    return tuple(out)


# =============================================================================
# Orchestrator
# =============================================================================


class Suggest:
    """
    Suggestion post-processor bound to one lookup collaborator.

    The config (space limits, debug flag) is read once here and never changes;
    the threshold can be updated between requests with
    set_auto_correction_threshold().
    """

    def __init__(self, lookup: LookupCollaborator, config: Optional[SuggestConfig] = None):
        self.lookup = lookup
        self.config = config if config is not None else load_suggest_config()
        self.policy = AutoCorrectionPolicy(
            SpaceLimitFilter(self.config.max_auto_correct_with_space_length)
        )
        self._auto_correction_threshold = self.config.auto_correction_threshold

    @property
    def auto_correction_threshold(self) -> float:
        return self._auto_correction_threshold

    def set_auto_correction_threshold(self, threshold: float) -> None:
        self._auto_correction_threshold = float(threshold)

    # ── Entry point ──────────────────────────────────────────────────────────
    def get_suggested_words(
        self,
        typed_word_state: TypedWordState,
        ngram_context: Any = None,
        proximity_info: Any = None,
        settings: Any = None,
        *,
        is_correction_enabled: bool = True,
        input_style: InputStyle = InputStyle.TYPING,
        sequence_number: int = 0,
        callback: Optional[SuggestionCallback] = None,
    ) -> SuggestionResult:
        """
        Does: Build the suggestion result for one request.
        Returns: SuggestionResult carrying `sequence_number` unchanged; when
                 `callback` is given it receives the same object once.
        """
        if typed_word_state.is_batch_mode:
            result = self._get_suggested_words_for_batch_input(
                typed_word_state,
                ngram_context,
                proximity_info,
                settings,
                input_style,
                sequence_number,
            )
        else:
            result = self._get_suggested_words_for_non_batch_input(
                typed_word_state,
                ngram_context,
                proximity_info,
                settings,
                input_style,
                is_correction_enabled,
                sequence_number,
            )
        if callback is not None:
            callback(result)
        return result

    # ── Typing, recorrection, predictions ────────────────────────────────────
    def _get_suggested_words_for_non_batch_input(
        self,
        state: TypedWordState,
        ngram_context: Any,
        proximity_info: Any,
        settings: Any,
        input_style_if_not_prediction: InputStyle,
        is_correction_enabled: bool,
        sequence_number: int,
    ) -> SuggestionResult:
        typed_word = state.text
        considered_word, trailing_quotes = strip_trailing_quotes(typed_word)

        results = self.lookup.get_suggestion_results(
            state, ngram_context, proximity_info, settings, SessionId.TYPING
        )
        # candidates from no dictionary are cased with the most probable locale
        transformed = transform_candidates(
            results.candidates,
            self.lookup.get_most_probable_locale(),
            all_upper_case=state.is_all_upper_case and not state.is_resumed,
            first_char_capitalized=state.is_or_will_be_only_first_char_capitalized,
            trailing_quote_count=trailing_quotes,
        )
        suggestions, did_remove_typed_word = remove_duplicates(typed_word, transformed)

        whitelisted_word = _whitelisted_word_or_none(suggestions)
        results_are_predictions = not state.is_composing
        allows = allows_to_be_auto_corrected(
            whitelisted_word, considered_word, did_remove_typed_word
        )

        will_auto_correct = self.policy.decide(
            AutoCorrectionInputs(
                is_correction_enabled=is_correction_enabled,
                whitelisted_word=whitelisted_word,
                considered_word=considered_word,
                did_remove_typed_word=did_remove_typed_word,
                results_are_predictions=results_are_predictions,
                top_candidate=results.first(),
                has_digits=state.has_digits,
                is_mostly_caps=state.is_mostly_caps,
                is_resumed=state.is_resumed,
                has_main_dictionary=self.lookup.has_at_least_one_initialized_main_dictionary(),
            ),
            self._auto_correction_threshold,
        )

        if typed_word:
            suggestions = (_typed_word_candidate(typed_word),) + suggestions

        if self.config.debug_suggestions and suggestions:
            suggestions = _with_debug_info(typed_word, suggestions)

        if results_are_predictions:
            input_style = (
                InputStyle.BEGINNING_OF_SENTENCE_PREDICTION
                if results.is_beginning_of_sentence
                else InputStyle.PREDICTION
            )
        else:
            input_style = input_style_if_not_prediction

        debug(
            f"#{sequence_number} {typed_word!r}: {len(suggestions)} suggestions, "
            f"auto-correct={will_auto_correct}",
            topic="pipeline",
        )
        # Known wart: a whitelisted typed word that is itself a real word is
        # still reported as typed_word_valid=False here.
        return SuggestionResult(
            suggestions=suggestions,
            raw_suggestions=results.raw,
            typed_word_valid=not results_are_predictions and not allows,
            will_auto_correct=will_auto_correct,
            is_obsolete=False,
            input_style=input_style,
            sequence_number=sequence_number,
        )

    # ── Gesture ──────────────────────────────────────────────────────────────
    def _get_suggested_words_for_batch_input(
        self,
        state: TypedWordState,
        ngram_context: Any,
        proximity_info: Any,
        settings: Any,
        input_style: InputStyle,
        sequence_number: int,
    ) -> SuggestionResult:
        results = self.lookup.get_suggestion_results(
            state, ngram_context, proximity_info, settings, SessionId.GESTURE
        )
        suggestions = transform_candidates(
            results.candidates,
            self.lookup.get_most_probable_locale(),
            all_upper_case=state.is_all_upper_case,
            first_char_capitalized=state.was_shifted_no_lock,
        )
        suggestions = _demote_rejected(suggestions, state.rejected_batch_suggestion)
        suggestions, _ = remove_duplicates(None, suggestions)
        suggestions = suppress_distractors(suggestions)

        logger.debug("Batch request #%d: %d suggestions", sequence_number, len(suggestions))
        # The top gesture suggestion acts as the typed word, so it is valid and
        # never flagged for auto-correction.
        return SuggestionResult(
            suggestions=suggestions,
            raw_suggestions=results.raw,
            typed_word_valid=True,
            will_auto_correct=False,
            is_obsolete=False,
            input_style=input_style,
            sequence_number=sequence_number,
        )
