"""LLM adapter using Ollama."""

import logging
from urllib.parse import urlparse

import httpx

from ...domain.models import JobMatch, ResumeData
from ...ports.llm import LLMPort
from .parsing import parse_match_response, parse_resume_response
from .prompts import MATCH_SYSTEM_PROMPT, build_match_prompt, build_system_prompt
from .validation import wrap_document

logger = logging.getLogger(__name__)


class OllamaAdapter(LLMPort):
    """LLM implementation using a local Ollama server."""

    def __init__(
        self,
        model: str = "llama3.1:8b",
        base_url: str = "http://localhost:11434",
        temperature: float = 0.3,
    ) -> None:
        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"Invalid ollama_url scheme: {parsed.scheme}")
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.temperature = temperature

    def structure(self, text: str, job_description: str | None = None) -> ResumeData:
        logger.info(f"Structuring resume with Ollama ({self.model})")
        content = self._chat(build_system_prompt(job_description), wrap_document(text))
        return parse_resume_response(content)

    def match(self, text: str, job_description: str) -> JobMatch | None:
        logger.info(f"Checking job match with Ollama ({self.model})")
        content = self._chat(MATCH_SYSTEM_PROMPT, build_match_prompt(text, job_description))
        return parse_match_response(content)

    def _chat(self, system: str, user: str) -> str:
        response = httpx.post(
            f"{self.base_url}/api/chat",
            json={
                "model": self.model,
                "messages": [
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                "stream": False,
                "format": "json",
                "options": {"temperature": self.temperature},
            },
            timeout=120.0,
        )
        response.raise_for_status()
        return response.json()["message"]["content"]
