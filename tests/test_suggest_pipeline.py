# tests/test_suggest_pipeline.py
from __future__ import annotations

"""
Suggest pipeline tests
======================

Does: End-to-end checks of both request modes against in-memory lookups:
      typed-word insertion, auto-correction flag, prediction styles, quote and
      caps handling, gesture demotion/suppression, callback contract.
"""

import importlib

import pytest

S = importlib.import_module("suggestion_refiner.suggest")
T = importlib.import_module("suggestion_refiner.suggest.types")

EN = T.Locale("en", "US")
DE = T.Locale("de", "DE")
K = T.CandidateKind


def _cand(text, score=1_000_000, kind=K.CORRECTION, locale=EN, dict_type="main"):
    return T.Candidate(text, score, kind, T.SourceDictionary(dict_type, locale))


def _suggest(candidates, *, config=None, **lookup_kwargs):
    lookup = S.StaticLookup(candidates, **lookup_kwargs)
    return S.Suggest(lookup, config or S.SuggestConfig()), lookup


# ──────────────────────────────────────────────────────────────────────────────
# Non-batch: typing
# ──────────────────────────────────────────────────────────────────────────────
def test_teh_auto_corrects_to_the():
    suggest, lookup = _suggest([_cand("the"), _cand("ten", 400_000)])
    result = suggest.get_suggested_words(T.TypedWordState("teh"), sequence_number=11)

    assert result.will_auto_correct is True
    assert result.words() == ["teh", "the", "ten"]
    typed = result.suggestions[0]
    assert typed.kind is K.TYPED
    assert typed.score == T.MAX_SCORE
    assert typed.source == T.USER_TYPED_DICTIONARY and typed.locale is None
    assert result.auto_correction().text == "the"
    assert result.typed_word_valid is False
    assert result.is_obsolete is False
    assert result.input_style is T.InputStyle.TYPING
    assert result.sequence_number == 11
    assert lookup.sessions == [T.SessionId.TYPING]


def test_correction_disabled_keeps_suggestions_but_no_auto_correct():
    suggest, _ = _suggest([_cand("the")])
    result = suggest.get_suggested_words(T.TypedWordState("teh"), is_correction_enabled=False)
    assert result.will_auto_correct is False
    assert result.words() == ["teh", "the"]


@pytest.mark.parametrize(
    "state",
    [
        T.TypedWordState("t3h"),
        T.TypedWordState("HELLO"),
        T.TypedWordState("teh", is_resumed=True),
    ],
)
def test_typed_word_shape_denies_auto_correct(state):
    suggest, _ = _suggest([_cand("the")])
    assert suggest.get_suggested_words(state).will_auto_correct is False


def test_no_main_dictionary_denies_auto_correct():
    suggest, _ = _suggest([_cand("the")], has_main_dictionary=False)
    assert suggest.get_suggested_words(T.TypedWordState("teh")).will_auto_correct is False


def test_shortcut_top_candidate_never_auto_corrects():
    suggest, _ = _suggest([_cand("the", kind=K.SHORTCUT)])
    result = suggest.get_suggested_words(T.TypedWordState("teh"))
    assert result.will_auto_correct is False
    assert result.words() == ["teh", "the"]


def test_threshold_is_settable_between_requests():
    suggest, _ = _suggest([_cand("the", score=300_000)])
    state = T.TypedWordState("teh")
    # 300_000 / 1e6 * 2/3 = 0.2
    assert suggest.get_suggested_words(state).will_auto_correct is True
    suggest.set_auto_correction_threshold(0.25)
    assert suggest.auto_correction_threshold == 0.25
    assert suggest.get_suggested_words(state).will_auto_correct is False


def test_typed_word_found_in_lookup_is_valid_and_not_corrected():
    suggest, _ = _suggest([_cand("the"), _cand("then"), _cand("the", 10)])
    result = suggest.get_suggested_words(T.TypedWordState("the"))
    assert result.words() == ["the", "then"]
    assert result.suggestions[0].kind is K.TYPED
    assert result.will_auto_correct is False
    assert result.typed_word_valid is True


def test_whitelisted_word_auto_corrects_and_reports_typed_word_invalid():
    suggest, _ = _suggest([_cand("I'm", score=10, kind=K.WHITELIST)])
    result = suggest.get_suggested_words(T.TypedWordState("im"))
    assert result.will_auto_correct is True
    assert result.words() == ["im", "I'm"]
    # known wart kept on purpose
    assert result.typed_word_valid is False


def test_empty_lookup_leaves_typed_word_alone():
    suggest, _ = _suggest([])
    result = suggest.get_suggested_words(T.TypedWordState("qzx"))
    assert result.words() == ["qzx"]
    assert result.will_auto_correct is False


def test_capitalized_typed_word_capitalizes_candidates():
    suggest, _ = _suggest([_cand("the"), _cand("ten", 400_000)])
    result = suggest.get_suggested_words(T.TypedWordState("Teh"))
    assert result.words() == ["Teh", "The", "Ten"]
    assert result.will_auto_correct is True
    # raw copy stays untransformed
    assert [c.text for c in result.raw_suggestions] == ["the", "ten"]


def test_all_caps_typed_word_upper_cases_candidates():
    suggest, _ = _suggest([_cand("the")])
    result = suggest.get_suggested_words(T.TypedWordState("TEH"))
    assert result.words() == ["TEH", "THE"]
    assert result.will_auto_correct is False


def test_resumed_all_caps_word_is_not_upper_cased():
    suggest, _ = _suggest([_cand("the")])
    result = suggest.get_suggested_words(T.TypedWordState("TEH", is_resumed=True))
    assert result.words() == ["TEH", "the"]


def test_trailing_quotes_are_repaired():
    suggest, _ = _suggest([_cand("didn't"), _cand("didnt", 500_000)])
    result = suggest.get_suggested_words(T.TypedWordState("didnt''"))
    # "didnt" repairs to the typed word itself and is deduped away
    assert result.words() == ["didnt''", "didn't'"]
    assert len(result) == 2


def test_candidates_without_locale_use_most_probable_locale():
    tr_locale = T.Locale("tr", "TR")
    suggest, _ = _suggest(
        [_cand("istanbul", locale=None, dict_type="contacts")], locale=tr_locale
    )
    result = suggest.get_suggested_words(T.TypedWordState("Istanbul"))
    assert result.words() == ["Istanbul", "İstanbul"]


def test_long_german_multi_word_is_not_auto_corrected():
    suggest, _ = _suggest([_cand("zwei drei vie", locale=DE)], locale=DE)
    result = suggest.get_suggested_words(T.TypedWordState("zweidreivie"))
    assert result.will_auto_correct is False
    assert result.words() == ["zweidreivie", "zwei drei vie"]


# ──────────────────────────────────────────────────────────────────────────────
# Non-batch: predictions
# ──────────────────────────────────────────────────────────────────────────────
def test_prediction_request_has_no_typed_entry():
    suggest, _ = _suggest([_cand("you", kind=K.PREDICTION), _cand("the", kind=K.PREDICTION)])
    result = suggest.get_suggested_words(T.TypedWordState(""), input_style=T.InputStyle.TYPING)
    assert result.words() == ["you", "the"]
    assert result.input_style is T.InputStyle.PREDICTION
    assert result.will_auto_correct is False
    assert result.typed_word_valid is False


def test_beginning_of_sentence_prediction_style():
    suggest, _ = _suggest(
        [_cand("the", kind=K.PREDICTION)], is_beginning_of_sentence=True
    )
    result = suggest.get_suggested_words(T.TypedWordState("", T.CapsMode.SHIFTED))
    assert result.input_style is T.InputStyle.BEGINNING_OF_SENTENCE_PREDICTION
    assert result.words() == ["The"]


# ──────────────────────────────────────────────────────────────────────────────
# Batch (gesture)
# ──────────────────────────────────────────────────────────────────────────────
def _gesture(**kwargs):
    return T.TypedWordState("", is_batch_mode=True, **kwargs)


def test_batch_demotes_rejected_top_suggestion():
    suggest, lookup = _suggest([_cand("cat"), _cand("car"), _cand("can")])
    result = suggest.get_suggested_words(
        _gesture(rejected_batch_suggestion="cat"), input_style=T.InputStyle.TAIL_BATCH
    )
    assert result.words() == ["car", "cat", "can"]
    assert result.typed_word_valid is True
    assert result.will_auto_correct is False
    assert result.input_style is T.InputStyle.TAIL_BATCH
    assert lookup.sessions == [T.SessionId.GESTURE]


def test_batch_single_rejected_candidate_stays():
    suggest, _ = _suggest([_cand("cat")])
    result = suggest.get_suggested_words(_gesture(rejected_batch_suggestion="cat"))
    assert result.words() == ["cat"]


def test_batch_dedups_and_suppresses_distractors():
    suggest, _ = _suggest(
        [
            _cand("go"),
            _cand("to"),
            _cand("go", 5),
            _cand("gp", -2_100_000_000),
            _cand("hi", 3),
        ]
    )
    result = suggest.get_suggested_words(_gesture())
    assert result.words() == ["go", "to", "hi"]
    assert len(result.raw_suggestions) == 5


def test_batch_shift_states():
    suggest, _ = _suggest([_cand("car"), _cand("cat")])
    shifted = suggest.get_suggested_words(_gesture(caps_mode=T.CapsMode.SHIFTED))
    locked = suggest.get_suggested_words(_gesture(caps_mode=T.CapsMode.SHIFT_LOCKED))
    assert shifted.words() == ["Car", "Cat"]
    assert locked.words() == ["CAR", "CAT"]


def test_batch_never_auto_corrects_even_with_whitelist():
    suggest, _ = _suggest([_cand("I'm", kind=K.WHITELIST)])
    result = suggest.get_suggested_words(_gesture())
    assert result.will_auto_correct is False


# ──────────────────────────────────────────────────────────────────────────────
# Callback / config
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("batch", [False, True])
def test_callback_invoked_exactly_once_with_sequence_number(batch):
    suggest, _ = _suggest([_cand("the")])
    seen = []
    state = _gesture() if batch else T.TypedWordState("teh")
    result = suggest.get_suggested_words(state, sequence_number=42, callback=seen.append)
    assert seen == [result]
    assert seen[0].sequence_number == 42


def test_debug_suggestions_annotates_scores():
    config = S.SuggestConfig(debug_suggestions=True)
    suggest, _ = _suggest([_cand("the"), _cand("xyz", 50)], config=config)
    result = suggest.get_suggested_words(T.TypedWordState("teh"))
    debug_strings = [c.debug_string for c in result.suggestions]
    assert debug_strings == ["+", "1000000 (0.67), main", "50"]


def test_suggest_loads_packaged_config_by_default(monkeypatch):
    monkeypatch.delenv("SUGGEST_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    suggest = S.Suggest(S.StaticLookup())
    assert suggest.auto_correction_threshold == pytest.approx(0.185)
    assert dict(suggest.config.max_auto_correct_with_space_length) == {"de": 12}
