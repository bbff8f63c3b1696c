"""
Tests for llm_service - key resolution and error mapping.
"""

import asyncio

import pytest

from jobmail.config import settings
from jobmail.errors import GenerationError, InvalidInputError
from jobmail.services.llm_service import complete

MESSAGES = [{"role": "user", "content": "Write an email"}]


def run_complete(**overrides):
    kwargs = dict(provider="google", model_key="gemini-2.5-flash", api_key=None, messages=MESSAGES)
    kwargs.update(overrides)
    return asyncio.run(complete(**kwargs))


class TestComplete:
    def test_falls_back_to_server_key(self, fake_llm):
        run_complete()

        assert fake_llm.calls[-1]["api_key"] == "test-gemini-key"
        assert fake_llm.calls[-1]["model"] == "gemini/gemini-2.5-flash"

    def test_missing_key_is_a_generation_error(self, fake_llm, monkeypatch):
        monkeypatch.setattr(settings, "gemini_api_key", None)

        with pytest.raises(GenerationError) as exc_info:
            run_complete()

        assert "GEMINI_API_KEY" in exc_info.value.details
        assert fake_llm.calls == []

    def test_unknown_model(self, fake_llm):
        with pytest.raises(InvalidInputError, match="Unknown model: gpt-9"):
            run_complete(model_key="gpt-9")

    def test_explicit_overrides_win(self, fake_llm):
        run_complete(prompt_name="job_email", temperature=0.1, max_tokens=50)

        assert fake_llm.calls[-1]["temperature"] == 0.1
        assert fake_llm.calls[-1]["max_tokens"] == 50

    def test_provider_exception_is_wrapped(self, fake_llm):
        fake_llm.reply = ConnectionError("upstream unavailable")

        with pytest.raises(GenerationError) as exc_info:
            run_complete()

        assert exc_info.value.error == "Failed to generate email"
        assert exc_info.value.details == "upstream unavailable"

    @pytest.mark.parametrize("reply", ["", "  \n", None])
    def test_empty_reply_is_returned_as_text(self, fake_llm, reply):
        fake_llm.reply = reply

        assert run_complete() == (reply or "")
