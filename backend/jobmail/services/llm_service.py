"""
LLM Service — unified interface to all providers via LiteLLM.

Responsibilities:
  • Accept an API key + model identifier per-request (header key, else the server default)
  • Route to the correct provider (Google, Groq, OpenRouter) via LiteLLM

No retries: a failed call is reported to the caller as-is.
"""

from __future__ import annotations

import logging

import litellm
from litellm import acompletion

from jobmail.config import MODELS, PROMPT_CONFIG, settings
from jobmail.errors import GenerationError, InvalidInputError

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs in dev
litellm.suppress_debug_info = True


# ── Helpers ──────────────────────────────────────────────────────────────────

# Maps our provider key → the env var name that LiteLLM expects
PROVIDER_KEY_ENV = {
    "google": "GEMINI_API_KEY",
    "groq": "GROQ_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}


def _resolve_model_id(provider: str, model_key: str) -> str:
    """Look up the LiteLLM model_id from our registry."""
    provider_models = MODELS.get(provider)
    if not provider_models:
        raise InvalidInputError(f"Unknown provider: {provider}")
    model_entry = provider_models.get(model_key)
    if not model_entry:
        raise InvalidInputError(f"Unknown model: {model_key} for provider {provider}")
    return model_entry["model_id"]


def server_api_key(provider: str) -> str | None:
    """The key configured on the server for ``provider``, if any."""
    return {
        "google": settings.gemini_api_key,
        "groq": settings.groq_api_key,
        "openrouter": settings.openrouter_api_key,
    }.get(provider)


# ── Core Completion ──────────────────────────────────────────────────────────


async def complete(
    *,
    provider: str,
    model_key: str,
    api_key: str | None,
    messages: list[dict[str, str]],
    prompt_name: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> str:
    """
    Send a chat completion request via LiteLLM.

    Args:
        provider:    "google" | "groq" | "openrouter"
        model_key:   Key from MODELS registry (e.g. "gemini-2.5-flash")
        api_key:     Key for the provider; None falls back to the server key
        messages:    OpenAI-format message list
        prompt_name: Optional key into PROMPT_CONFIG for default temp/tokens
        temperature: Override temperature (takes precedence over prompt_name)
        max_tokens:  Override max_tokens (takes precedence over prompt_name)

    Returns:
        The assistant's response text, unmodified.

    Raises:
        InvalidInputError: unknown provider or model
        GenerationError:   no key available or provider failure
    """
    model_id = _resolve_model_id(provider, model_key)

    key = api_key or server_api_key(provider)
    if not key:
        raise GenerationError(
            f"No API key configured for provider '{provider}'. "
            f"Set {PROVIDER_KEY_ENV.get(provider, 'the provider key')} on the server."
        )

    # Merge prompt config defaults → explicit overrides
    config = PROMPT_CONFIG.get(prompt_name, {}) if prompt_name else {}
    temp = temperature if temperature is not None else config.get("temperature", 0.7)
    tokens = max_tokens if max_tokens is not None else config.get("max_tokens", 2048)

    logger.info(f"LLM call: provider={provider} model={model_id} temp={temp} tokens={tokens}")

    try:
        response = await acompletion(
            model=model_id,
            messages=messages,
            temperature=temp,
            max_tokens=tokens,
            api_key=key,
        )
        content = response.choices[0].message.content
    except Exception as e:
        logger.error(f"LLM error ({provider}/{model_key}): {e}")
        raise GenerationError(str(e)) from e

    if content is None:
        content = ""
    if not content.strip():
        logger.warning(f"LLM returned an empty response ({provider}/{model_key})")

    logger.info(f"LLM response: {len(content)} chars, usage={getattr(response, 'usage', None)}")
    return content
