"""Tests for context analysis and the context-aware validation pool."""

import random

import pytest

from unsaid.core.analyzer import (
    ContextSummary,
    analyze_context,
    contextual_pool,
    generate_contextual_validation,
)
from unsaid.services.orchestrator import TranslationDraft


def draft(emotions, clear):
    return TranslationDraft(raw_text="raw", clear_expression=clear, emotions=emotions)


def test_high_intensity_from_adverb_and_count():
    summary = analyze_context(draft(["angry", "frustrated", "sad", "lonely"], "i feel extremely overwhelmed"))
    assert summary.intensity == "high"
    assert summary.primary_emotion == "angry"


def test_low_intensity_single_emotion():
    summary = analyze_context(draft(["sad"], "i feel down"))
    assert summary.intensity == "low"


def test_medium_intensity():
    assert analyze_context(draft(["sad", "hurt"], "this hurts")).intensity == "medium"


def test_adverb_beats_single_emotion():
    assert analyze_context(draft(["sad"], "I am TOTALLY lost")).intensity == "high"


def test_owning_style():
    summary = analyze_context(draft(["sad"], "I feel down"))
    assert summary.communication_style == "owning"
    assert summary.strengths == ["Uses I-statements"]
    assert summary.needs == []


def test_you_are_blocks_owning():
    summary = analyze_context(draft(["angry", "hurt"], "i feel like you are never here"))
    assert summary.communication_style == "balanced"
    assert summary.strengths == []


def test_last_matching_style_wins():
    summary = analyze_context(draft(["sad", "tired"], "i feel sad, i would like to talk and i need rest"))
    assert summary.communication_style == "needs-expressed"
    assert summary.strengths == ["Uses I-statements", "Seeks resolution"]
    assert summary.needs == ["Recognition", "Understanding"]


def test_solution_focused():
    summary = analyze_context(draft(["hopeful", "nervous"], "could we try again"))
    assert summary.communication_style == "solution-focused"
    assert summary.strengths == ["Seeks resolution"]


def test_missing_fields_degrade_to_defaults():
    for value in (None, {}, draft([], ""), {"emotions": None, "clear_expression": None}):
        summary = analyze_context(value)
        assert summary.primary_emotion == "emotional"
        assert summary.intensity == "low"
        assert summary.communication_style == "balanced"


def test_accepts_mapping():
    summary = analyze_context({"emotions": ["happy", "pleased"], "clear_expression": "I would appreciate a call"})
    assert summary.primary_emotion == "happy"
    assert summary.communication_style == "needs-expressed"


@pytest.mark.parametrize("style", ["owning", "solution-focused", "needs-expressed", "balanced"])
def test_base_templates_embed_primary_emotion(style):
    context = ContextSummary(primary_emotion="bewildered", communication_style=style)
    pool = contextual_pool(context)
    assert len(pool) == 3
    assert all("bewildered" in sentence for sentence in pool)


def test_unknown_style_uses_balanced_pool():
    pool = contextual_pool(ContextSummary(primary_emotion="sad", communication_style="shouting"))
    assert pool == contextual_pool(ContextSummary(primary_emotion="sad"))


def test_pool_extensions_in_order():
    context = ContextSummary(
        primary_emotion="sad",
        intensity="high",
        communication_style="needs-expressed",
        strengths=["Uses I-statements"],
        needs=["Recognition", "Understanding"],
    )
    pool = contextual_pool(context)
    assert len(pool) == 3 + 1 + 2 + 2
    assert pool[3] == "Your uses i-statements in expressing sad is commendable."
    assert pool[4] == "Acknowledging your need for recognition alongside sad is important."
    assert pool[5] == "Acknowledging your need for understanding alongside sad is important."
    assert pool[6] == "Managing high sad with this clarity shows emotional strength."
    assert pool[7] == "Your ability to articulate high sad is a valuable skill."


def test_pool_is_rebuilt_each_call():
    context = ContextSummary(primary_emotion="sad", strengths=["Seeks resolution"])
    assert len(contextual_pool(context)) == len(contextual_pool(context)) == 4


def test_generate_uses_injected_random(scripted_random):
    context = ContextSummary(primary_emotion="angry", communication_style="owning")
    rng = scripted_random(index=-1)
    assert generate_contextual_validation(context, rng=rng) == contextual_pool(context)[-1]
    assert rng.choices == [contextual_pool(context)]


def test_generate_is_reproducible_with_seed():
    context = ContextSummary(primary_emotion="lonely", intensity="high")
    first = [generate_contextual_validation(context, rng=random.Random(7)) for _ in range(3)]
    second = [generate_contextual_validation(context, rng=random.Random(7)) for _ in range(3)]
    assert first == second
    assert all(sentence in contextual_pool(context) for sentence in first)


def test_string_emotions_count_as_one_label():
    summary = analyze_context({"emotions": "angry", "clear_expression": "i feel let down"})
    assert summary.primary_emotion == "angry"
    assert summary.intensity == "low"


@pytest.mark.parametrize("emotions", [5, 3.5, object(), {"angry": True}])
def test_non_list_emotions_fall_back(emotions):
    summary = analyze_context({"emotions": emotions, "clear_expression": 42})
    assert summary.primary_emotion == "emotional"
    assert summary.intensity == "low"
    assert generate_contextual_validation(summary, rng=random.Random(0))
