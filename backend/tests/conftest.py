"""
Shared fixtures: an isolated upload directory, a fake LiteLLM completion,
and a TestClient over the FastAPI app.
"""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from jobmail.config import settings
from jobmail.main import app
from jobmail.services import llm_service

SAMPLE_EMAIL = """Subject: Application for Senior Python Developer

Dear Hiring Manager,

I am excited to apply for the Senior Python Developer role.

Best regards,
Jane Doe"""


class FakeCompletion:
    """Stands in for ``litellm.acompletion`` and records every call."""

    def __init__(self, reply=SAMPLE_EMAIL):
        self.reply = reply
        self.calls = []

    async def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.reply, Exception):
            raise self.reply
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)], usage=None)

    @property
    def prompt(self) -> str:
        return self.calls[-1]["messages"][-1]["content"]


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "upload_dir", str(path))
    return path


@pytest.fixture
def fake_llm(monkeypatch):
    fake = FakeCompletion()
    monkeypatch.setattr(llm_service, "acompletion", fake)
    monkeypatch.setattr(settings, "gemini_api_key", "test-gemini-key")
    return fake


@pytest.fixture
def client(upload_dir, fake_llm):
    with TestClient(app) as test_client:
        yield test_client
