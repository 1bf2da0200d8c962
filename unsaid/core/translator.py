# File: unsaid/core/translator.py

import asyncio
import json
import logging
import re
from typing import Iterable, List, Optional

import requests

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """
You are UNSAID, an emotional translation engine. Your ONLY task is to translate raw emotional text into clear, respectful language.

STRICT RULES:
1. NO advice, suggestions, or guidance
2. NO diagnosis or clinical terms
3. NO emergency or crisis language
4. NO questions
5. ONLY translate emotions
6. DO NOT include validation messages

FORMAT REQUIREMENTS:
Return ONLY valid JSON with this exact structure:
{
  "clearExpression": "translated text here",
  "respectfulExpression": "translated text here",
  "emotions": ["emotion1", "emotion2"]
}

TONE: Calm, gentle, neutral, respectful, non-judgmental.
"""

SAFETY_SETTINGS = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_NONE"},
]

JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


class TranslationError(Exception):
    """Every configured model failed (or none could be called)."""


def build_prompt(text: str) -> str:
    return f'{SYSTEM_PROMPT}\n\nUser Text: """{text}"""\n\nResponse:'


def extract_json(output: str) -> Optional[dict]:
    match = JSON_OBJECT.search(output or "")
    if not match:
        return None
    try:
        data = json.loads(match.group(0))
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def reply_text(payload) -> str:
    """Text of the first candidate. Raises ValueError when the body has another shape."""
    if not isinstance(payload, dict):
        raise ValueError(f"expected an object, got {type(payload).__name__}")
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    if not isinstance(candidates, list) or not isinstance(candidates[0], dict):
        raise ValueError("malformed candidates")
    content = candidates[0].get("content") or {}
    if not isinstance(content, dict):
        raise ValueError("malformed content")
    parts = content.get("parts") or []
    if not isinstance(parts, list) or not all(isinstance(part, dict) for part in parts):
        raise ValueError("malformed content parts")
    return "".join(str(part.get("text") or "") for part in parts)


class GeminiTranslator:
    """
    Calls the Generative Language REST API, trying models in priority order.

    Models that answered successfully are remembered in `working_models`
    (per instance) and tried first on the next call.
    """

    def __init__(self, api_key: Optional[str], models: Iterable[str], timeout: float = 30.0,
                 base_url: str = "https://generativelanguage.googleapis.com/v1beta"):
        self.api_key = api_key
        self.models = list(models)
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self.working_models = {}  # insertion-ordered set

    def priority_order(self) -> List[str]:
        known = list(self.working_models)
        return known + [m for m in self.models if m not in self.working_models]

    async def translate_async(self, text: str) -> dict:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.translate, text)

    def translate(self, text: str) -> dict:
        if not self.api_key:
            raise TranslationError("GEMINI_API_KEY is not configured")

        last_error = None
        for model_name in self.priority_order():
            logger.info("Trying model %s", model_name)
            try:
                output = self._call_model(model_name, text)
            except requests.RequestException as e:
                last_error = e
                status = getattr(getattr(e, "response", None), "status_code", None)
                if status == 429 or "quota" in str(e).lower():
                    logger.warning("%s quota exceeded, skipping for now", model_name)
                else:
                    logger.warning("%s failed: %s", model_name, str(e).split("\n")[0])
                self.working_models.pop(model_name, None)
                continue
            except ValueError as e:
                last_error = e
                logger.warning("%s sent an unexpected response: %s", model_name, e)
                self.working_models.pop(model_name, None)
                continue

            self.working_models[model_name] = None
            logger.info("%s worked", model_name)

            if not JSON_OBJECT.search(output):
                logger.warning("%s returned non-JSON, trying next model", model_name)
                logger.debug("Raw output: %s", output[:200])
                continue

            result = extract_json(output)
            if result is None:
                logger.warning("%s returned malformed JSON, trying next model", model_name)
                self.working_models.pop(model_name, None)
                continue
            return result

        logger.error("All Gemini models failed")
        reason = str(last_error).split("\n")[0] if last_error else "All models unavailable"
        raise TranslationError(f"Gemini translation failed: {reason}")

    def _call_model(self, model_name: str, text: str) -> str:
        url = f"{self.base_url}/models/{model_name}:generateContent"
        headers = {
            "x-goog-api-key": self.api_key,
            "Content-type": "application/json",
        }
        body = {
            "contents": [{"parts": [{"text": build_prompt(text)}]}],
            "safetySettings": SAFETY_SETTINGS,
        }
        response = requests.post(url, headers=headers, json=body, timeout=self.timeout)
        response.raise_for_status()
        return reply_text(response.json())
