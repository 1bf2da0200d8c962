# File: unsaid/core/analyzer.py

"""
Context-aware validation.

analyze_context() reads a canonical translation (emotion labels plus the
clear expression) and summarizes how the user is communicating.
generate_contextual_validation() turns that summary into one affirming
sentence.
"""

import random
from dataclasses import dataclass, field
from typing import List

INTENSITY_WORDS = ("extremely", "completely", "absolutely", "totally", "utterly")

DEFAULT_PRIMARY_EMOTION = "emotional"


@dataclass
class ContextSummary:
    primary_emotion: str = DEFAULT_PRIMARY_EMOTION
    intensity: str = "medium"
    communication_style: str = "balanced"
    strengths: List[str] = field(default_factory=list)
    needs: List[str] = field(default_factory=list)


def read_field(obj, name, default=None):
    if obj is None:
        return default
    if isinstance(obj, dict):
        value = obj.get(name, default)
    else:
        value = getattr(obj, name, default)
    return default if value is None else value


def read_labels(obj, name="emotions"):
    """Emotion labels as a list of strings; a bare string counts as one label."""
    value = read_field(obj, name, [])
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [str(label) for label in value if label is not None]


def analyze_context(translation) -> ContextSummary:
    emotions = read_labels(translation)
    text = str(read_field(translation, "clear_expression", "")).lower()

    summary = ContextSummary(primary_emotion=emotions[0] if emotions else DEFAULT_PRIMARY_EMOTION)

    # -------------------------------
    # Intensity (high wins over low)
    # -------------------------------
    has_intensity_word = any(word in text for word in INTENSITY_WORDS)
    if has_intensity_word or len(emotions) >= 4:
        summary.intensity = "high"
    elif len(emotions) <= 1:
        summary.intensity = "low"

    # -------------------------------
    # Communication style (last match wins)
    # -------------------------------
    if "i feel" in text and "you are" not in text:
        summary.communication_style = "owning"
        summary.strengths.append("Uses I-statements")

    if "would like" in text or "could we" in text:
        summary.communication_style = "solution-focused"
        summary.strengths.append("Seeks resolution")

    if "i need" in text or "i would appreciate" in text:
        summary.communication_style = "needs-expressed"
        summary.needs.extend(["Recognition", "Understanding"])

    return summary


def _style_templates(emotion: str, intensity: str) -> dict:
    return {
        "owning": [
            f'Using "I feel" statements to express {emotion} shows emotional maturity.',
            f"Owning your {emotion} without blame creates space for understanding.",
            f"This direct expression of {emotion} demonstrates self-awareness.",
        ],
        "solution-focused": [
            f"Combining {emotion} with solution-seeking is a powerful communication approach.",
            f"Your {intensity} {emotion} paired with constructive thinking shows resilience.",
            f"Working through {emotion} while looking for a way forward addresses both feelings and progress.",
        ],
        "needs-expressed": [
            f"Clearly stating needs alongside {emotion} is relationship-healthy.",
            f"Your expression of {emotion} includes important information about what you need.",
            f"Naming {emotion} and needs together creates clarity for everyone.",
        ],
        "balanced": [
            f"Your expression of {emotion} is clear and respectful.",
            f"This balanced communication about {emotion} maintains relationship integrity.",
            f"You've expressed {emotion} in a way that honors both your experience and the relationship.",
        ],
    }


def contextual_pool(context: ContextSummary) -> List[str]:
    """Every sentence generate_contextual_validation() may pick for this context."""
    emotion = context.primary_emotion or DEFAULT_PRIMARY_EMOTION
    intensity = context.intensity
    templates = _style_templates(emotion, intensity)
    pool = list(templates.get(context.communication_style, templates["balanced"]))

    for strength in context.strengths or []:
        pool.append(f"Your {strength.lower()} in expressing {emotion} is commendable.")

    for need in context.needs or []:
        pool.append(f"Acknowledging your need for {need.lower()} alongside {emotion} is important.")

    if intensity == "high":
        pool.append(f"Managing {intensity} {emotion} with this clarity shows emotional strength.")
        pool.append(f"Your ability to articulate {intensity} {emotion} is a valuable skill.")

    return pool


def generate_contextual_validation(context: ContextSummary, rng=None) -> str:
    rng = rng or random
    return rng.choice(contextual_pool(context))
