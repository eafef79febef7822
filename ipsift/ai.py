"""Optional AI-assisted extraction through the Gemini REST API.

The service is asked for bare ``IP,Port,Country`` CSV lines. Its reply is
handed back to the regular parser as plain text; nothing it returns is
trusted as a pre-built record.
"""

from __future__ import annotations

import logging
import os
import re

import requests

from .config import (
    AI_API_KEY_ENVS,
    AI_BASE_URL,
    AI_DEFAULT_MODEL,
    AI_MAX_INPUT_CHARS,
    AI_MODEL_ENV,
    REQUEST_TIMEOUT,
    USER_AGENT,
)

log = logging.getLogger(__name__)

_OPEN_FENCE_RE = re.compile(r"^```csv", re.IGNORECASE)
_FENCE_RE = re.compile(r"^```", re.MULTILINE)

_PROMPT_TEMPLATE = """\
Act as a strict network data extraction tool.

Task:
1. Extract all valid IP addresses (IPv4/IPv6) and their ports from the text below.
2. Identify the 2-letter Country Code (ISO 3166-1 alpha-2) if present. If not found, use 'Unknown'.
3. Format the output strictly as CSV: IP,Port,Country

Constraints:
- Do not include any markdown formatting (no ```).
- Do not include headers.
- Remove duplicates.
- Ignore lines that do not contain valid IPs.
{instruction}
Input Text:
{text}
"""


class AIServiceError(Exception):
    """The AI service could not be reached or returned nothing usable."""


def build_prompt(text: str, instruction: str = "") -> str:
    instruction = instruction.strip()
    extra = (
        f"\nUSER INSTRUCTION (Apply this filter/logic): {instruction}\n"
        if instruction
        else ""
    )
    return _PROMPT_TEMPLATE.format(
        instruction=extra, text=text[:AI_MAX_INPUT_CHARS]
    )


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences the model may add despite instructions."""
    text = _OPEN_FENCE_RE.sub("", text)
    return _FENCE_RE.sub("", text).strip()


class GeminiClient:
    """Thin client for ``models/{model}:generateContent``."""

    def __init__(
        self,
        api_key: str,
        model: str = AI_DEFAULT_MODEL,
        timeout: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    @classmethod
    def from_env(cls) -> GeminiClient:
        """Build a client from IPSIFT_API_KEY / GEMINI_API_KEY."""
        api_key = next(
            (os.environ[name] for name in AI_API_KEY_ENVS if os.environ.get(name)),
            None,
        )
        if not api_key:
            raise AIServiceError(
                "No API key set. Export one of: " + ", ".join(AI_API_KEY_ENVS)
            )
        model = os.environ.get(AI_MODEL_ENV) or AI_DEFAULT_MODEL
        return cls(api_key=api_key, model=model)

    @property
    def url(self) -> str:
        return f"{AI_BASE_URL}/{self.model}:generateContent"

    def extract(self, text: str, instruction: str = "") -> str:
        """Return the model's CSV extraction of *text*, fences removed."""
        payload = {
            "contents": [{"parts": [{"text": build_prompt(text, instruction)}]}]
        }
        log.info("Sending %d chars to %s", min(len(text), AI_MAX_INPUT_CHARS), self.model)

        try:
            resp = self.session.post(
                self.url,
                json=payload,
                headers={"x-goog-api-key": self.api_key},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            raise AIServiceError(f"AI request failed: {exc}") from exc
        except ValueError as exc:
            raise AIServiceError("AI service returned invalid JSON") from exc

        result = strip_code_fences(_response_text(data))
        if not result:
            raise AIServiceError("AI service returned no text")
        return result


def _response_text(data: dict) -> str:
    """Join the text parts of the first candidate, or "" if there are none."""
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts)
