# tests/test_suggest_filters.py
from __future__ import annotations

import importlib

"""
dedup / distractor tests
========================

Does: Check first-occurrence dedup, typed-word removal reporting, idempotence,
      and the suppression floor.
"""

dd = importlib.import_module("suggestion_refiner.suggest.dedup")
T = importlib.import_module("suggestion_refiner.suggest.types")


def _c(text: str, score: int = 100) -> T.Candidate:
    return T.Candidate(text, score)


# ──────────────────────────────────────────────────────────────────────────────
# Duplicate filter
# ──────────────────────────────────────────────────────────────────────────────
def test_remove_duplicates_keeps_first_occurrence_in_order():
    first_the = _c("the", 90)
    items = [first_the, _c("then", 80), _c("the", 70), _c("they", 60), _c("then", 50)]
    out, removed = dd.remove_duplicates(None, items)
    assert [c.text for c in out] == ["the", "then", "they"]
    assert out[0] is first_the
    assert removed is False


def test_remove_duplicates_drops_typed_word_and_reports_it():
    out, removed = dd.remove_duplicates("the", [_c("the"), _c("then"), _c("the")])
    assert [c.text for c in out] == ["then"]
    assert removed is True


def test_remove_duplicates_is_case_sensitive():
    out, removed = dd.remove_duplicates("the", [_c("The"), _c("THE"), _c("the")])
    assert [c.text for c in out] == ["The", "THE"]
    assert removed is True


def test_remove_duplicates_empty_typed_word_removes_nothing_extra():
    out, removed = dd.remove_duplicates("", [_c("a"), _c("b")])
    assert [c.text for c in out] == ["a", "b"]
    assert removed is False


def test_remove_duplicates_is_idempotent():
    items = [_c("x"), _c("y"), _c("x"), _c("z"), _c("y")]
    once, _ = dd.remove_duplicates(None, items)
    twice, removed = dd.remove_duplicates(None, once)
    assert once == twice
    assert removed is False


def test_remove_duplicates_empty_list():
    assert dd.remove_duplicates("teh", []) == ((), False)


# ──────────────────────────────────────────────────────────────────────────────
# Distractor suppressor
# ──────────────────────────────────────────────────────────────────────────────
def test_suppress_distractors_drops_floor_and_below():
    floor = dd.SUPPRESS_SUGGEST_THRESHOLD
    items = [_c("go", 10), _c("gp", floor), _c("gi", floor + 1), _c("gk", -(2**31))]
    out = dd.suppress_distractors(items)
    assert [c.text for c in out] == ["go", "gi"]


def test_suppress_distractors_keeps_negative_but_sane_scores():
    items = [_c("a", -5), _c("b", 0)]
    assert dd.suppress_distractors(items) == tuple(items)
