"""Tests for the keyword emotion classifier."""

import pytest

from unsaid.core.emotions import DEFAULT_EMOTIONS, classify_emotions, dedupe


def test_multiple_rules_fire_in_rule_order():
    assert classify_emotions("I am so angry and sad") == ["angry", "frustrated", "sad", "disappointed"]


def test_no_match_returns_generic_labels():
    assert classify_emotions("nothing matches here") == ["emotional", "expressive"]


def test_empty_and_none_fall_back():
    assert classify_emotions("") == list(DEFAULT_EMOTIONS)
    assert classify_emotions(None) == list(DEFAULT_EMOTIONS)


def test_matching_is_case_insensitive():
    assert classify_emotions("I AM FURIOUS") == ["angry", "frustrated"]


def test_phrases_match():
    emotions = classify_emotions("I can't stand this anymore, everything feels so overwhelming")
    assert "overwhelmed" in emotions
    assert "stressed" in emotions


def test_substring_match_hits_embedded_words():
    # "unhappy" contains "happy", so both rules fire.
    assert classify_emotions("I'm unhappy") == ["sad", "disappointed", "happy", "pleased"]


def test_rule_order_not_text_order():
    assert classify_emotions("lonely and then furious") == ["angry", "frustrated", "lonely", "unappreciated"]


@pytest.mark.parametrize("text", [
    "I'm scared, anxious and worried and nervous",
    "tears tears tears, I cry and cry",
    "great, wonderful, joy, just too much and I'm exhausted",
    "mad furious pissed angry sad happy scared lonely stressed",
    "x",
])
def test_result_is_non_empty_and_unique(text):
    emotions = classify_emotions(text)
    assert emotions
    assert len(emotions) == len(set(emotions))


def test_dedupe_keeps_first_occurrence():
    assert dedupe(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
