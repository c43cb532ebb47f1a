from __future__ import annotations

import json
import logging
import os
import time
from functools import lru_cache
from typing import Any

from openai import OpenAI

logger = logging.getLogger(__name__)


class CareerLLMError(RuntimeError):
    def __init__(self, message: str, *, code: str = "llm_unavailable"):
        super().__init__(message)
        self.code = code


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def llm_enabled() -> bool:
    if not _env_bool("LLM_ENABLED", True):
        return False
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    if not api_key or _looks_like_placeholder(api_key):
        return False
    return True


@lru_cache(maxsize=1)
def _client() -> OpenAI:
    return OpenAI(
        api_key=(os.getenv("OPENAI_API_KEY") or "").strip(),
        base_url=(os.getenv("OPENAI_BASE_URL") or None),
        timeout=float(os.getenv("LLM_TIMEOUT_S", "30")),
        max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "2")),
    )


def _model() -> str:
    return (os.getenv("AI_MODEL") or os.getenv("OPENAI_MODEL") or "gpt-4o-mini").strip()


def json_completion(
    *,
    system_prompt: str,
    user_prompt: str,
    temperature: float = 0.2,
    max_output_tokens: int = 1200,
    purpose: str = "unknown",
) -> dict[str, Any] | None:
    """Ask the model for a JSON object; ``None`` when disabled or unusable."""
    if not llm_enabled():
        logger.debug("career_llm_skipped purpose=%s reason=llm_disabled", purpose)
        return None

    started = time.perf_counter()
    try:
        response = _client().chat.completions.create(
            model=_model(),
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=temperature,
            response_format={"type": "json_object"},
            max_tokens=max_output_tokens,
        )
        content = response.choices[0].message.content if response.choices else ""
        latency_ms = int((time.perf_counter() - started) * 1000)
        if not content:
            logger.warning("career_llm_empty purpose=%s latency_ms=%s", purpose, latency_ms)
            return None
        parsed = json.loads(content)
        if not isinstance(parsed, dict):
            logger.warning("career_llm_invalid_schema purpose=%s latency_ms=%s", purpose, latency_ms)
            return None
        logger.info("career_llm_success purpose=%s model=%s latency_ms=%s", purpose, _model(), latency_ms)
        return parsed
    except Exception as exc:  # noqa: BLE001 - callers decide between fallback and error
        logger.warning("career_llm_json_failed purpose=%s model=%s prompt_len=%s: %s", purpose, _model(), len(user_prompt), exc)
        return None


def json_completion_required(
    *,
    system_prompt: str,
    user_prompt: str,
    temperature: float = 0.2,
    max_output_tokens: int = 1200,
    purpose: str = "unknown",
) -> dict[str, Any]:
    if not llm_enabled():
        raise CareerLLMError("AI analysis is not configured on this server.", code="llm_disabled")

    payload = json_completion(
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        temperature=temperature,
        max_output_tokens=max_output_tokens,
        purpose=purpose,
    )
    if not payload:
        raise CareerLLMError("AI analysis could not produce a valid response. Try again.", code="llm_invalid")
    return payload
