"""
lookup.py.

Does: Define the boundary with the dictionary lookup collaborator and the result
      callback, plus StaticLookup, an in-memory collaborator that serves a fixed
      candidate list (demo CLI, tests).
Used by: Suggest pipeline.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Protocol, runtime_checkable

from suggestion_refiner.suggest.types import (
    Candidate,
    CandidateList,
    Locale,
    SessionId,
    SuggestionResult,
    TypedWordState,
)

__all__ = [
    "LookupCollaborator",
    "SuggestionCallback",
    "StaticLookup",
]


@runtime_checkable
class LookupCollaborator(Protocol):
    """
    Structural contract for the dictionary facilitator feeding the pipeline.

    - get_suggestion_results(...): ranked raw candidates for the composition.
      Must not raise; an empty CandidateList means "nothing found".
    - get_most_probable_locale(): locale used to case-transform candidates that
      carry no dictionary locale.
    - has_at_least_one_initialized_main_dictionary(): gates auto-correction.

    TYPING and GESTURE sessions may share one resource pool (see
    SessionId.pool_id); thread safety across them is the collaborator's job.
    """

    def get_suggestion_results(
        self,
        typed_word_state: TypedWordState,
        ngram_context: Any,
        proximity_info: Any,
        settings: Any,
        session_id: SessionId,
    ) -> CandidateList: ...

    def get_most_probable_locale(self) -> Locale: ...

    def has_at_least_one_initialized_main_dictionary(self) -> bool: ...


@runtime_checkable
class SuggestionCallback(Protocol):
    def __call__(self, result: SuggestionResult) -> None: ...


class StaticLookup:
    """Serve the same candidates for every request and record the sessions used."""

    def __init__(
        self,
        candidates: Iterable[Candidate] = (),
        *,
        locale: Optional[Locale] = None,
        is_beginning_of_sentence: bool = False,
        has_main_dictionary: bool = True,
    ):
        self.results = CandidateList(tuple(candidates), is_beginning_of_sentence)
        self.locale = locale or Locale("en", "US")
        self.has_main_dictionary = has_main_dictionary
        self.sessions: List[SessionId] = []

    def get_suggestion_results(
        self,
        typed_word_state: TypedWordState,
        ngram_context: Any,
        proximity_info: Any,
        settings: Any,
        session_id: SessionId,
    ) -> CandidateList:
        self.sessions.append(session_id)
        return self.results

    def get_most_probable_locale(self) -> Locale:
        return self.locale

    def has_at_least_one_initialized_main_dictionary(self) -> bool:
        return self.has_main_dictionary
