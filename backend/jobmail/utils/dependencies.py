"""
Request-scoped helpers — extract API keys and the active model from headers.
"""

from __future__ import annotations

from fastapi import Header
from typing import Optional

from jobmail.config import MODELS, settings


class APIKeys:
    """Container for per-request API keys extracted from headers."""

    def __init__(
        self,
        google: str | None = None,
        groq: str | None = None,
        openrouter: str | None = None,
    ):
        self.google = google
        self.groq = groq
        self.openrouter = openrouter

    def get_key(self, provider: str) -> str | None:
        """Get the key for a specific provider."""
        return getattr(self, provider, None)


class ModelChoice:
    """Provider and model the request wants to generate with."""

    def __init__(self, provider: str, model_key: str):
        self.provider = provider
        self.model_key = model_key


async def get_api_keys(
    x_google_key: Optional[str] = Header(None, alias="X-Google-Key"),
    x_groq_key: Optional[str] = Header(None, alias="X-Groq-Key"),
    x_openrouter_key: Optional[str] = Header(None, alias="X-OpenRouter-Key"),
) -> APIKeys:
    """FastAPI dependency that extracts API keys from request headers."""
    return APIKeys(
        google=x_google_key or None,
        groq=x_groq_key or None,
        openrouter=x_openrouter_key or None,
    )


async def get_model_choice(
    provider: Optional[str] = Header(None, alias="X-LLM-Provider"),
    model_key: Optional[str] = Header(None, alias="X-LLM-Model"),
) -> ModelChoice:
    """FastAPI dependency resolving the model, defaulting to the server's configuration."""
    provider = provider or settings.default_provider
    if not model_key:
        model_key = settings.default_model_key
        if provider != settings.default_provider:
            # First recommended model of the requested provider
            for key, info in MODELS.get(provider, {}).items():
                if info.get("recommended", False):
                    model_key = key
                    break
    return ModelChoice(provider=provider, model_key=model_key)
