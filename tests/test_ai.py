"""Tests for the AI extraction client."""

from unittest.mock import MagicMock

import pytest
import requests

from ipsift.ai import AIServiceError, GeminiClient, build_prompt, strip_code_fences


def _mock_session(payload=None, error=None):
    session = MagicMock()
    session.headers = {}
    resp = MagicMock(spec=requests.Response)
    resp.json.return_value = payload
    resp.raise_for_status = MagicMock(side_effect=error)
    session.post.return_value = resp
    return session


def _payload(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class TestBuildPrompt:
    def test_includes_text(self):
        prompt = build_prompt("1.1.1.1 US")
        assert "IP,Port,Country" in prompt
        assert prompt.rstrip().endswith("1.1.1.1 US")
        assert "USER INSTRUCTION" not in prompt

    def test_includes_instruction(self):
        prompt = build_prompt("1.1.1.1", "  only German hosts ")
        assert "USER INSTRUCTION (Apply this filter/logic): only German hosts" in prompt

    def test_truncates_input(self):
        prompt = build_prompt("x" * 40000)
        assert "x" * 30000 in prompt
        assert "x" * 30001 not in prompt


class TestStripCodeFences:
    def test_csv_fence(self):
        assert strip_code_fences("```csv\n1.1.1.1,80,US\n```") == "1.1.1.1,80,US"

    def test_case_insensitive(self):
        assert strip_code_fences("```CSV\n1.1.1.1,80,US\n```\n") == "1.1.1.1,80,US"

    def test_plain(self):
        assert strip_code_fences("  1.1.1.1,80,US\n") == "1.1.1.1,80,US"


class TestGeminiClient:
    def test_extract(self):
        session = _mock_session(_payload("```csv\n1.1.1.1,80,US\n```"))
        client = GeminiClient("k3y", model="gemini-test", session=session)

        assert client.extract("1.1.1.1:80 US") == "1.1.1.1,80,US"

        args, kwargs = session.post.call_args
        assert args[0].endswith("/models/gemini-test:generateContent")
        assert kwargs["headers"] == {"x-goog-api-key": "k3y"}
        assert "1.1.1.1:80 US" in kwargs["json"]["contents"][0]["parts"][0]["text"]

    def test_transport_error(self):
        session = MagicMock()
        session.headers = {}
        session.post.side_effect = requests.ConnectionError("boom")
        client = GeminiClient("k", session=session)

        with pytest.raises(AIServiceError, match="boom"):
            client.extract("1.1.1.1")

    def test_http_error(self):
        session = _mock_session(error=requests.HTTPError("403 Forbidden"))
        client = GeminiClient("k", session=session)

        with pytest.raises(AIServiceError):
            client.extract("1.1.1.1")

    def test_no_candidates(self):
        session = _mock_session({"candidates": []})
        client = GeminiClient("k", session=session)

        with pytest.raises(AIServiceError, match="no text"):
            client.extract("1.1.1.1")


class TestFromEnv:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("IPSIFT_API_KEY", "GEMINI_API_KEY", "IPSIFT_AI_MODEL"):
            monkeypatch.delenv(name, raising=False)

    def test_missing_key(self):
        with pytest.raises(AIServiceError, match="No API key"):
            GeminiClient.from_env()

    def test_fallback_key_and_default_model(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "abc")
        client = GeminiClient.from_env()
        assert client.api_key == "abc"
        assert client.model == "gemini-2.5-flash"

    def test_preferred_key_and_model(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "abc")
        monkeypatch.setenv("IPSIFT_API_KEY", "xyz")
        monkeypatch.setenv("IPSIFT_AI_MODEL", "gemini-pro")
        client = GeminiClient.from_env()
        assert client.api_key == "xyz"
        assert client.model == "gemini-pro"
