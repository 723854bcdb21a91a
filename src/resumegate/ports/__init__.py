"""Ports - interfaces to external collaborators."""

from .extractor import ExtractorPort
from .llm import LLMPort
from .renderer import RendererPort
from .storage import StoragePort

__all__ = ["ExtractorPort", "LLMPort", "RendererPort", "StoragePort"]
