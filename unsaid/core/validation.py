# File: unsaid/core/validation.py

import random
from typing import List, Protocol

from unsaid.core.analyzer import ContextSummary, analyze_context, generate_contextual_validation, read_field, read_labels

DEFAULT_VALIDATION = "Your feelings are valid and deserve to be expressed respectfully."

SPECIFIC_WEIGHT = 0.7

ANGER_WORDS = ("angry", "frustrated", "annoyed", "rage")
SADNESS_WORDS = ("sad", "depressed", "lonely", "hurt", "grief")
ANXIETY_WORDS = ("anxious", "worried", "scared", "afraid", "nervous")
POSITIVE_WORDS = ("happy", "joy", "excited", "hopeful", "proud")

ANGER_VALIDATIONS = [
    "It's completely normal to feel anger. Acknowledging it is the first step toward constructive communication.",
    "Anger often signals that something important to us feels threatened. Your expression helps identify what matters.",
    "Turning anger into clear communication shows emotional intelligence and strength.",
]

SADNESS_VALIDATIONS = [
    "Sadness deserves space and acknowledgment. You're giving your feelings the respect they need.",
    "Expressing sadness openly creates opportunities for connection and understanding.",
    "Your vulnerability in naming this sadness is a sign of emotional courage.",
]

ANXIETY_VALIDATIONS = [
    "Anxiety often comes from caring deeply. Your clarity helps separate real concerns from worries.",
    "Naming anxiety reduces its power and helps others understand your experience.",
    "You're transforming anxious feelings into clear communication, which is a powerful skill.",
]

POSITIVE_VALIDATIONS = [
    "Celebrating positive emotions strengthens relationships and builds connection.",
    "Sharing joy and happiness invites others to celebrate with you.",
    "Positive emotions deserve expression too, and sharing them builds emotional intimacy.",
]

OWNING_VALIDATIONS = [
    "Using 'I feel' statements creates ownership without blame, an excellent communication technique.",
    "Your 'I feel' approach minimizes defensiveness and maximizes understanding.",
    "This is a healthy communication pattern that focuses on your experience rather than accusing others.",
]

SOLUTION_VALIDATIONS = [
    "Including potential solutions shows you're thinking constructively about the relationship.",
    "Your forward-thinking approach focuses on resolution rather than just stating problems.",
    "This balanced expression of feeling and solution-seeking is relationship-strengthening.",
]

COMPLEXITY_VALIDATIONS = [
    "You're managing complex emotions with impressive clarity and self-awareness.",
    "Navigating multiple emotions simultaneously shows significant emotional intelligence.",
    "This level of emotional complexity handled with such clarity is remarkable.",
]

DEFAULT_VALIDATIONS = [
    DEFAULT_VALIDATION,
    "This expression maintains your dignity while honestly communicating your experience.",
    "You've found words for feelings that can be difficult to articulate, and that's an important skill.",
    "Clear emotional expression like this builds healthier relationships and self-understanding.",
    "You're respecting both your own feelings and the relationship with this communication.",
]

# (substrings, category); first match wins.
CATEGORY_RULES = [
    (("anger", "frustrated"), "anger"),
    (("sad", "hurt"), "sadness"),
    (("anxious", "worried"), "anxiety"),
    (("happy", "joy"), "positive"),
    (("complex", "multiple"), "complex"),
]

CATEGORIES = ("anger", "sadness", "anxiety", "positive", "complex", "general")

ICONS = {
    "anger": "🔥",
    "sadness": "💧",
    "anxiety": "🌀",
    "positive": "✨",
    "complex": "🧩",
    "general": "✅",
}

COLORS = {
    "anger": "from-rose-500 to-orange-500",
    "sadness": "from-blue-500 to-indigo-500",
    "anxiety": "from-amber-500 to-yellow-500",
    "positive": "from-emerald-500 to-green-500",
    "complex": "from-purple-500 to-pink-500",
    "general": "from-gray-500 to-slate-500",
}


def _has_any(labels: List[str], words) -> bool:
    return any(label in words for label in labels)


def candidate_validations(translation) -> List[str]:
    """Sentences triggered by the translation's emotions and wording, in group order."""
    emotions = [label.lower() for label in read_labels(translation)]
    clear_text = str(read_field(translation, "clear_expression", ""))
    text = clear_text.lower()

    has_i_statements = text.startswith("i feel") or "i feel" in text
    has_you_statements = "you make me" in text or "you always" in text
    has_blame = "blame" in text or "fault" in text or has_you_statements
    has_solution = "would like" in text or "could we" in text or "maybe we" in text

    complexity_score = len(emotions) * 0.3 + (0.2 if len(clear_text) > 100 else 0)

    candidates = []
    if _has_any(emotions, ANGER_WORDS):
        candidates.extend(ANGER_VALIDATIONS)
    if _has_any(emotions, SADNESS_WORDS):
        candidates.extend(SADNESS_VALIDATIONS)
    if _has_any(emotions, ANXIETY_WORDS):
        candidates.extend(ANXIETY_VALIDATIONS)
    if _has_any(emotions, POSITIVE_WORDS):
        candidates.extend(POSITIVE_VALIDATIONS)
    if has_i_statements and not has_blame:
        candidates.extend(OWNING_VALIDATIONS)
    if has_solution:
        candidates.extend(SOLUTION_VALIDATIONS)
    if complexity_score > 1:
        candidates.extend(COMPLEXITY_VALIDATIONS)
    return candidates


def generate_validation(translation, rng=None) -> str:
    """
    Keyword-weighted validation. Triggered sentences are preferred 70% of
    the time; otherwise the pick is made from triggered sentences and the
    generic defaults together, so the result is never empty.
    """
    rng = rng or random
    candidates = candidate_validations(translation)

    if candidates and rng.random() < SPECIFIC_WEIGHT:
        return rng.choice(candidates)

    return rng.choice(candidates + DEFAULT_VALIDATIONS)


def category_of(validation: str) -> str:
    # Plain substring test: a sentence naming several themes takes the first.
    text = validation or ""
    for needles, category in CATEGORY_RULES:
        if any(needle in text for needle in needles):
            return category
    return "general"


def icon_of(category: str) -> str:
    return ICONS.get(category, ICONS["general"])


def color_of(category: str) -> str:
    return COLORS.get(category, COLORS["general"])


# -------------------------------
# Interchangeable strategies
# -------------------------------
class ValidationStrategy(Protocol):
    def validate(self, translation) -> str:
        ...


class ContextualValidator:
    """Strategy A: analyze the translation, then pick from the style-keyed pool."""

    def __init__(self, rng=None):
        self.rng = rng or random.Random()

    def summarize(self, translation) -> ContextSummary:
        return analyze_context(translation)

    def validate(self, translation) -> str:
        return generate_contextual_validation(self.summarize(translation), rng=self.rng)


class FallbackValidator:
    """Strategy B: keyword-weighted pick with a generic default pool."""

    def __init__(self, rng=None):
        self.rng = rng or random.Random()

    def validate(self, translation) -> str:
        return generate_validation(translation, rng=self.rng)
