"""LLM adapter using the OpenRouter chat completions API."""

import logging
import os
from urllib.parse import urlparse

import httpx

from ...domain.models import JobMatch, ResumeData
from ...ports.llm import LLMPort
from .parsing import parse_match_response, parse_resume_response
from .prompts import MATCH_SYSTEM_PROMPT, build_match_prompt, build_system_prompt
from .validation import wrap_document

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENROUTER_API_KEY"
APP_HEADERS = {
    "HTTP-Referer": "https://github.com/resumegate/resumegate",
    "X-Title": "resumegate",
}
MATCH_MAX_TOKENS = 500


class OpenRouterAdapter(LLMPort):
    """LLM implementation using OpenRouter (OpenAI-compatible)."""

    def __init__(
        self,
        model: str = "meta-llama/llama-3.3-70b-instruct",
        base_url: str = "https://openrouter.ai/api/v1",
        api_key: str | None = None,
        temperature: float = 0.3,
        max_tokens: int = 4000,
    ) -> None:
        parsed = urlparse(base_url)
        if parsed.scheme != "https":
            raise ValueError(f"Invalid openrouter_url scheme: {parsed.scheme}")
        key = api_key or os.environ.get(API_KEY_ENV, "")
        if not key:
            raise ValueError(f"{API_KEY_ENV} environment variable not set")
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.api_key = key
        self.temperature = temperature
        self.max_tokens = max_tokens

    def structure(self, text: str, job_description: str | None = None) -> ResumeData:
        logger.info(f"Structuring resume with OpenRouter ({self.model})")
        content = self._complete(build_system_prompt(job_description), wrap_document(text))
        return parse_resume_response(content)

    def match(self, text: str, job_description: str) -> JobMatch | None:
        logger.info(f"Checking job match with OpenRouter ({self.model})")
        content = self._complete(
            MATCH_SYSTEM_PROMPT,
            build_match_prompt(text, job_description),
            max_tokens=MATCH_MAX_TOKENS,
        )
        return parse_match_response(content)

    def _complete(self, system: str, user: str, max_tokens: int | None = None) -> str:
        response = httpx.post(
            f"{self.base_url}/chat/completions",
            headers={"Authorization": f"Bearer {self.api_key}", **APP_HEADERS},
            json={
                "model": self.model,
                "messages": [
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                "temperature": self.temperature,
                "max_tokens": max_tokens or self.max_tokens,
            },
            timeout=60.0,
        )
        response.raise_for_status()

        data = response.json()
        usage = data.get("usage") or {}
        if usage:
            logger.debug(f"Token usage: {usage.get('total_tokens')}")
        return data["choices"][0]["message"]["content"]
