from pathlib import Path
from pydantic_settings import BaseSettings
from typing import Optional

# Relative paths in settings resolve against backend/, not the working directory
BACKEND_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Job Mail Generator"
    debug: bool = True
    log_level: str = "INFO"
    port: int = 5000

    # CORS (comma-separated origins, "*" allows any)
    frontend_url: str = "*"

    # LLM API Keys (server defaults, a request may override them via headers)
    gemini_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None

    default_provider: str = "google"
    default_model_key: str = "gemini-2.5-flash"

    # Uploads
    upload_dir: str = "uploads"
    max_upload_bytes: int = 10 * 1024 * 1024

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.frontend_url.split(",") if o.strip()]

    @property
    def upload_path(self) -> Path:
        path = Path(self.upload_dir)
        return path if path.is_absolute() else BACKEND_DIR / path


settings = Settings()


# ── Model Registry ──────────────────────────────────────────────────────────

MODELS = {
    "google": {
        "gemini-2.5-flash": {
            "name": "Gemini 2.5 Flash",
            "model_id": "gemini/gemini-2.5-flash",
            "description": "Default model for application emails",
            "recommended": True,
        },
        "gemini-2.0-flash": {
            "name": "Gemini 2.0 Flash",
            "model_id": "gemini/gemini-2.0-flash",
            "description": "Fallback when 2.5 hits rate limits",
            "recommended": False,
        },
    },
    "groq": {
        "llama-3.3-70b": {
            "name": "LLaMA 3.3 70B",
            "model_id": "groq/llama-3.3-70b-versatile",
            "description": "Fast all-rounder for email writing",
            "recommended": True,
        },
    },
    "openrouter": {
        "deepseek-r1-0528": {
            "name": "DeepSeek R1 0528",
            "model_id": "openrouter/deepseek/deepseek-r1-0528:free",
            "description": "Free reasoning model",
            "recommended": True,
        },
    },
}

# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "job_email": {"temperature": 0.7, "max_tokens": 2048},
}
