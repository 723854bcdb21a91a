"""LLM adapters."""

from ...config import LLMConfig, LLMProvider
from ...ports.llm import LLMPort
from .claude_api import ClaudeAPIAdapter
from .ollama import OllamaAdapter
from .openrouter import OpenRouterAdapter

__all__ = ["ClaudeAPIAdapter", "OllamaAdapter", "OpenRouterAdapter", "create_llm_adapter"]


def create_llm_adapter(config: LLMConfig) -> LLMPort:
    """Create LLM adapter based on configuration."""
    if config.provider == LLMProvider.OLLAMA:
        return OllamaAdapter(
            model=config.model,
            base_url=config.ollama_url,
            temperature=config.temperature,
        )
    elif config.provider == LLMProvider.CLAUDE_API:
        return ClaudeAPIAdapter(
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    elif config.provider == LLMProvider.OPENROUTER:
        return OpenRouterAdapter(
            model=config.model,
            base_url=config.openrouter_url,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    else:
        raise ValueError(f"Unknown LLM provider: {config.provider}")
