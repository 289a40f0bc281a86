# src/suggestion_refiner/suggest/__init__.py
"""
suggest.

Does: Facade over the suggestion post-processing stages: data model, candidate
      transform, dedup/distractor filters, auto-correction policy, config, and
      the Suggest orchestrator.
Returns: Stable public API for input engines and the demo CLI.
Used by: suggestion_refiner.demo, tests, embedding engines.
"""

from __future__ import annotations

# ── Data model ───────────────────────────────────────────────────────────────
from .types import (
    MAX_SCORE,
    NOT_A_CONFIDENCE,
    NOT_AN_INDEX,
    SHARED_SESSION_POOL,
    USER_TYPED_DICTIONARY,
    Candidate,
    CandidateKind,
    CandidateList,
    CapsMode,
    InputStyle,
    Locale,
    SessionId,
    SourceDictionary,
    SuggestionResult,
    TypedWordState,
)

# ── Stages ───────────────────────────────────────────────────────────────────
from .autocorrect import (
    AutoCorrectionInputs,
    AutoCorrectionPolicy,
    SpaceLimitFilter,
    allows_to_be_auto_corrected,
)
from .dedup import SUPPRESS_SUGGEST_THRESHOLD, remove_duplicates, suppress_distractors
from .scoring import calc_normalized_score, suggestion_exceeds_threshold
from .transform import (
    count_trailing_quotes,
    strip_trailing_quotes,
    transform_candidate,
    transform_candidates,
)

# ── Config / boundary / orchestration ────────────────────────────────────────
from .config import SuggestConfig, load_suggest_config
from .lookup import LookupCollaborator, StaticLookup, SuggestionCallback
from .pipeline import Suggest

__all__ = [
    # Data model
    "MAX_SCORE",
    "NOT_AN_INDEX",
    "NOT_A_CONFIDENCE",
    "SHARED_SESSION_POOL",
    "USER_TYPED_DICTIONARY",
    "Candidate",
    "CandidateKind",
    "CandidateList",
    "CapsMode",
    "InputStyle",
    "Locale",
    "SessionId",
    "SourceDictionary",
    "SuggestionResult",
    "TypedWordState",
    # Stages
    "transform_candidate",
    "transform_candidates",
    "count_trailing_quotes",
    "strip_trailing_quotes",
    "remove_duplicates",
    "suppress_distractors",
    "SUPPRESS_SUGGEST_THRESHOLD",
    "calc_normalized_score",
    "suggestion_exceeds_threshold",
    "SpaceLimitFilter",
    "AutoCorrectionInputs",
    "AutoCorrectionPolicy",
    "allows_to_be_auto_corrected",
    # Config / boundary / orchestration
    "SuggestConfig",
    "load_suggest_config",
    "LookupCollaborator",
    "SuggestionCallback",
    "StaticLookup",
    "Suggest",
]

__docformat__ = "google"
