# src/suggestion_refiner/suggest/types.py
from __future__ import annotations

"""
types.py.

Does: Immutable data model shared by every suggest stage: locales, source
      dictionaries, scored candidates, candidate lists, the caller's typed-word
      state, and the final suggestion result.
Used by: transform, dedup, autocorrect, pipeline, lookup collaborators, tests.
"""

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator, Optional, Tuple

__all__ = [
    "MAX_SCORE",
    "NOT_AN_INDEX",
    "NOT_A_CONFIDENCE",
    "Locale",
    "SourceDictionary",
    "USER_TYPED_DICTIONARY",
    "CandidateKind",
    "Candidate",
    "CandidateList",
    "CapsMode",
    "TypedWordState",
    "InputStyle",
    "SessionId",
    "SHARED_SESSION_POOL",
    "SuggestionResult",
]

__docformat__ = "google"

# ── Score / auxiliary sentinels ──────────────────────────────────────────────
MAX_SCORE = 2**31 - 1
NOT_AN_INDEX = -1
NOT_A_CONFIDENCE = -1

_LOCALE_SPLIT_RE = re.compile(r"[-_]")


# ─────────────────────────────────────────────────────────────────────────────
# Locale / dictionaries
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Locale:
    language: str
    country: str = ""

    @classmethod
    def parse(cls, tag: str) -> "Locale":
        """Does: Build a Locale from 'de', 'de_DE' or 'en-US' (language lower-cased)."""
        parts = [p for p in _LOCALE_SPLIT_RE.split((tag or "").strip()) if p]
        if not parts:
            return cls("")
        return cls(parts[0].lower(), parts[1].upper() if len(parts) > 1 else "")

    def __str__(self) -> str:
        return f"{self.language}_{self.country}" if self.country else self.language


@dataclass(frozen=True)
class SourceDictionary:
    """Identity of the dictionary a candidate came from."""

    dict_type: str
    locale: Optional[Locale] = None

    # well-known dictionary types
    MAIN = "main"
    USER = "user"
    USER_HISTORY = "user_history"
    CONTACTS = "contacts"
    USER_TYPED = "user_typed"
    APPLICATION_DEFINED = "application_defined"
    HARDCODED = "hardcoded"


USER_TYPED_DICTIONARY = SourceDictionary(SourceDictionary.USER_TYPED)


# ─────────────────────────────────────────────────────────────────────────────
# Candidates
# ─────────────────────────────────────────────────────────────────────────────
class CandidateKind(Enum):
    TYPED = "typed"
    CORRECTION = "correction"
    COMPLETION = "completion"
    WHITELIST = "whitelist"
    BLACKLIST = "blacklist"
    HARDCODED = "hardcoded"
    APP_DEFINED = "app_defined"
    SHORTCUT = "shortcut"
    PREDICTION = "prediction"
    RESUMED = "resumed"


@dataclass(frozen=True)
class Candidate:
    """
    A scored word proposal from the lookup stage.

    The two auxiliary fields only matter for gesture multi-word commit and are
    carried through every transformation untouched.
    """

    text: str
    score: int
    kind: CandidateKind = CandidateKind.CORRECTION
    source: SourceDictionary = USER_TYPED_DICTIONARY
    index_of_touch_point_of_second_word: int = NOT_AN_INDEX
    auto_commit_first_word_confidence: int = NOT_A_CONFIDENCE
    debug_string: str = field(default="", compare=False)

    @property
    def locale(self) -> Optional[Locale]:
        return self.source.locale

    def is_kind_of(self, kind: CandidateKind) -> bool:
        return self.kind is kind

    def with_text(self, text: str) -> "Candidate":
        return replace(self, text=text)

    def with_debug_string(self, debug_string: str) -> "Candidate":
        return replace(self, debug_string=debug_string)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class CandidateList:
    """
    Ordered lookup output. Index 0 is the lookup engine's best candidate.

    `raw` keeps the untransformed candidates for diagnostics and defaults to
    `candidates` when not given.
    """

    candidates: Tuple[Candidate, ...] = ()
    is_beginning_of_sentence: bool = False
    raw: Optional[Tuple[Candidate, ...]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "candidates", tuple(self.candidates))
        raw = self.candidates if self.raw is None else tuple(self.raw)
        object.__setattr__(self, "raw", raw)

    @classmethod
    def of(cls, *candidates: Candidate, is_beginning_of_sentence: bool = False) -> "CandidateList":
        return cls(tuple(candidates), is_beginning_of_sentence)

    def first(self) -> Optional[Candidate]:
        return self.candidates[0] if self.candidates else None

    def is_empty(self) -> bool:
        return not self.candidates

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)

    def __len__(self) -> int:
        return len(self.candidates)

    def __getitem__(self, index: int) -> Candidate:
        return self.candidates[index]


# ─────────────────────────────────────────────────────────────────────────────
# Typed word
# ─────────────────────────────────────────────────────────────────────────────
class CapsMode(Enum):
    OFF = "off"
    SHIFTED = "shifted"  # first char, no lock
    SHIFT_LOCKED = "shift_locked"  # all caps


@dataclass(frozen=True)
class TypedWordState:
    """
    Read-only snapshot of the user's composition, owned by the caller.

    Digit and caps counts are derived from `text`; `caps_mode` carries the shift
    state the keyboard was in when the word started.
    """

    text: str = ""
    caps_mode: CapsMode = CapsMode.OFF
    is_resumed: bool = False
    is_batch_mode: bool = False
    rejected_batch_suggestion: Optional[str] = None

    @property
    def is_composing(self) -> bool:
        return len(self.text) > 0

    @property
    def has_digits(self) -> bool:
        return any(ch.isdigit() for ch in self.text)

    @property
    def caps_count(self) -> int:
        return sum(1 for ch in self.text if ch.isupper())

    @property
    def is_mostly_caps(self) -> bool:
        return self.caps_count > 1

    @property
    def is_all_upper_case(self) -> bool:
        if len(self.text) <= 1:
            return self.caps_mode is CapsMode.SHIFT_LOCKED
        return self.caps_count == len(self.text)

    @property
    def is_or_will_be_only_first_char_capitalized(self) -> bool:
        if self.is_composing:
            return self.text[0].isupper() and self.caps_count == 1
        return self.caps_mode is not CapsMode.OFF

    @property
    def was_shifted_no_lock(self) -> bool:
        return self.caps_mode is CapsMode.SHIFTED


# ─────────────────────────────────────────────────────────────────────────────
# Request / result
# ─────────────────────────────────────────────────────────────────────────────
class InputStyle(Enum):
    NONE = "none"
    TYPING = "typing"
    UPDATE_BATCH = "update_batch"
    TAIL_BATCH = "tail_batch"
    APPLICATION_SPECIFIED = "application_specified"
    RECORRECTION = "recorrection"
    PREDICTION = "prediction"
    BEGINNING_OF_SENTENCE_PREDICTION = "beginning_of_sentence_prediction"

    @property
    def is_gesture(self) -> bool:
        return self in (InputStyle.UPDATE_BATCH, InputStyle.TAIL_BATCH)


class SessionId(Enum):
    """
    Lookup session a request runs in.

    Typing and gesture are distinct sessions, but the lookup collaborator pools
    their resources: both resolve to the same `pool_id`.
    """

    TYPING = "typing"
    GESTURE = "gesture"

    @property
    def pool_id(self) -> int:
        return SHARED_SESSION_POOL


SHARED_SESSION_POOL = 0


@dataclass(frozen=True)
class SuggestionResult:
    suggestions: Tuple[Candidate, ...]
    raw_suggestions: Tuple[Candidate, ...]
    typed_word_valid: bool
    will_auto_correct: bool
    is_obsolete: bool
    input_style: InputStyle
    sequence_number: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "suggestions", tuple(self.suggestions))
        object.__setattr__(self, "raw_suggestions", tuple(self.raw_suggestions))

    def words(self) -> list[str]:
        return [c.text for c in self.suggestions]

    def typed_word(self) -> Optional[Candidate]:
        """Does: Return the synthetic TYPED candidate at index 0, if any."""
        if self.suggestions and self.suggestions[0].is_kind_of(CandidateKind.TYPED):
            return self.suggestions[0]
        return None

    def auto_correction(self) -> Optional[Candidate]:
        """Does: Return the candidate the caller should commit in place of the typed word."""
        if not self.will_auto_correct or len(self.suggestions) < 2:
            return None
        return self.suggestions[1]

    def __len__(self) -> int:
        return len(self.suggestions)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.suggestions)
