# File: unsaid/core/emotions.py

from typing import Iterable, List, Optional

# Ordered rules: (keywords, labels). Every rule whose keyword appears in the
# text contributes all of its labels.
EMOTION_RULES = [
    (("angry", "mad", "furious", "pissed"), ("angry", "frustrated")),
    (("sad", "unhappy", "depressed", "cry", "tears"), ("sad", "disappointed")),
    (("happy", "joy", "excited", "great", "wonderful"), ("happy", "pleased")),
    (("scared", "afraid", "anxious", "worried", "nervous"), ("scared", "anxious")),
    (("unloved", "ignored", "lonely", "abandoned", "rejected"), ("lonely", "unappreciated")),
    (("overwhelmed", "stressed", "can't stand", "too much", "exhausted"), ("overwhelmed", "stressed")),
]

DEFAULT_EMOTIONS = ("emotional", "expressive")


def dedupe(labels: Iterable[str]) -> List[str]:
    """Drop repeated labels, keeping the first occurrence of each."""
    seen = set()
    out = []
    for label in labels:
        if label in seen:
            continue
        seen.add(label)
        out.append(label)
    return out


def classify_emotions(text: Optional[str]) -> List[str]:
    """
    Keyword fallback used when the remote translator is unavailable.
    Always returns at least one label.
    """
    lowered = (text or "").lower()
    found = []
    for keywords, labels in EMOTION_RULES:
        if any(keyword in lowered for keyword in keywords):
            found.extend(labels)

    emotions = dedupe(found)
    if not emotions:
        return list(DEFAULT_EMOTIONS)
    return emotions
