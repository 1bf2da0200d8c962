# File: unsaid/services/orchestrator.py

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from unsaid import crud
from unsaid.core.emotions import classify_emotions, dedupe
from unsaid.core.translator import TranslationError
from unsaid.core.validation import (
    DEFAULT_VALIDATION,
    ContextualValidator,
    FallbackValidator,
    ValidationStrategy,
    category_of,
    color_of,
    icon_of,
)
from unsaid.models import utcnow

logger = logging.getLogger(__name__)

# Payload keys accepted for each canonical field, first present wins.
FIELD_ALIASES = {
    "emotions": ("emotions", "emotionTags"),
    "clear_expression": ("clearExpression", "clear_expression", "text"),
    "respectful_expression": ("respectfulExpression", "respectful_expression", "alternative"),
}


@dataclass
class TranslationDraft:
    raw_text: str
    clear_expression: str = ""
    respectful_expression: str = ""
    emotions: List[str] = field(default_factory=list)


@dataclass
class TranslationResult:
    raw_text: str
    clear_expression: str
    respectful_expression: str
    emotions: List[str]
    validation: str
    validation_category: str
    validation_icon: str
    validation_color: str
    source: str
    timestamp: datetime = field(default_factory=utcnow)


def _describe(emotions: List[str]) -> str:
    return " and ".join(emotions[:2]) if emotions else "emotional"


def fallback_expressions(emotions: List[str]):
    feeling = _describe(emotions)
    clear = f"I'm feeling {feeling} about this."
    respectful = f"I want to share that I've been feeling {feeling}, and I hope we can understand each other."
    return clear, respectful


def fallback_translation(text: str) -> TranslationDraft:
    emotions = classify_emotions(text)
    clear, respectful = fallback_expressions(emotions)
    return TranslationDraft(raw_text=text, clear_expression=clear,
                            respectful_expression=respectful, emotions=emotions)


def _pick(payload: dict, keys) -> Optional[object]:
    for key in keys:
        value = payload.get(key)
        if value:
            return value
    return None


def _clean_labels(value) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    labels = [str(v).strip().lower() for v in value if v is not None]
    return dedupe(label for label in labels if label)


def normalize_translation(raw_text: str, payload) -> TranslationDraft:
    """Fold a remote (or legacy) payload into the canonical draft."""
    payload = payload if isinstance(payload, dict) else {}

    emotions = _clean_labels(_pick(payload, FIELD_ALIASES["emotions"]))
    if not emotions:
        emotions = classify_emotions(raw_text)

    clear = _pick(payload, FIELD_ALIASES["clear_expression"])
    respectful = _pick(payload, FIELD_ALIASES["respectful_expression"])
    default_clear, default_respectful = fallback_expressions(emotions)

    return TranslationDraft(
        raw_text=raw_text,
        clear_expression=str(clear).strip() if clear else default_clear,
        respectful_expression=str(respectful).strip() if respectful else default_respectful,
        emotions=emotions,
    )


class TranslationService:
    """
    Remote translation with keyword fallback, plus local validation.

    The contextual validator is tried first; the keyword-weighted one only
    runs if it raises.
    """

    def __init__(self, translator, contextual: Optional[ValidationStrategy] = None,
                 fallback: Optional[ValidationStrategy] = None):
        self.translator = translator
        self.contextual = contextual or ContextualValidator()
        self.fallback = fallback or FallbackValidator()

    async def translate(self, text: str) -> TranslationResult:
        source = "gemini"
        try:
            payload = await self.translator.translate_async(text)
            draft = normalize_translation(text, payload)
        except TranslationError as e:
            logger.warning("Remote translation unavailable, using keyword fallback: %s", e)
            source = "fallback"
            draft = fallback_translation(text)

        validation = self.validate(draft)
        category = category_of(validation)
        return TranslationResult(
            raw_text=draft.raw_text,
            clear_expression=draft.clear_expression,
            respectful_expression=draft.respectful_expression,
            emotions=draft.emotions,
            validation=validation,
            validation_category=category,
            validation_icon=icon_of(category),
            validation_color=color_of(category),
            source=source,
        )

    def validate(self, draft: TranslationDraft) -> str:
        try:
            validation = self.contextual.validate(draft)
        except Exception:
            logger.exception("Contextual validation failed, using keyword validation")
            validation = self.fallback.validate(draft)
        return validation or DEFAULT_VALIDATION

    def save(self, db: Session, session_id: str, result: TranslationResult):
        """Persist the result; a database failure is logged and returns None."""
        try:
            return crud.create_translation(db, session_id, result)
        except SQLAlchemyError:
            logger.exception("Failed to save translation for session %s", session_id)
            db.rollback()
            return None
