
# File: unsaid/api/deps.py

from functools import lru_cache

from unsaid.api.ratelimit import SlidingWindowLimiter
from unsaid.core.config import settings
from unsaid.core.translator import GeminiTranslator
from unsaid.services.orchestrator import TranslationService

translate_limiter = SlidingWindowLimiter(settings.RATE_LIMIT_REQUESTS, settings.RATE_LIMIT_WINDOW_SECONDS)


@lru_cache
def get_translation_service() -> TranslationService:
    translator = GeminiTranslator(
        api_key=settings.GEMINI_API_KEY,
        models=settings.GEMINI_MODELS,
        timeout=settings.GEMINI_TIMEOUT,
        base_url=settings.GEMINI_BASE_URL,
    )
    return TranslationService(translator)
