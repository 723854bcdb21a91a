"""LLM adapter using Claude API."""

import logging

from ...domain.models import JobMatch, ResumeData
from ...ports.llm import LLMPort
from .parsing import parse_match_response, parse_resume_response
from .prompts import MATCH_SYSTEM_PROMPT, build_match_prompt, build_system_prompt
from .validation import wrap_document

logger = logging.getLogger(__name__)

# Verdict is two fields and a short reason
MATCH_MAX_TOKENS = 500


class ClaudeAPIAdapter(LLMPort):
    """LLM implementation using Claude API (pay-as-you-go)."""

    def __init__(
        self,
        model: str = "claude-sonnet-4-20250514",
        temperature: float = 0.3,
        max_tokens: int = 4000,
    ) -> None:
        import anthropic

        self.client = anthropic.Anthropic()
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def structure(self, text: str, job_description: str | None = None) -> ResumeData:
        logger.info("Structuring resume with Claude API")
        content = self._complete(build_system_prompt(job_description), wrap_document(text))
        return parse_resume_response(content)

    def match(self, text: str, job_description: str) -> JobMatch | None:
        logger.info("Checking job match with Claude API")
        content = self._complete(
            MATCH_SYSTEM_PROMPT,
            build_match_prompt(text, job_description),
            max_tokens=MATCH_MAX_TOKENS,
        )
        return parse_match_response(content)

    def _complete(self, system: str, user: str, max_tokens: int | None = None) -> str:
        response = self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens or self.max_tokens,
            temperature=self.temperature,
            system=system,
            messages=[
                {"role": "user", "content": user},
            ],
        )

        # ty: ignore[possibly-missing-attribute]
        return response.content[0].text
