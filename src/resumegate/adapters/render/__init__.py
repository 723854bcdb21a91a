"""Resume renderers."""

from ...ports.renderer import RendererPort
from .docx import DocxRenderer
from .yaml import YamlRenderer

__all__ = ["DocxRenderer", "YamlRenderer", "create_renderer"]

RENDERERS: dict[str, type[RendererPort]] = {
    "yaml": YamlRenderer,
    "docx": DocxRenderer,
}


def create_renderer(fmt: str) -> RendererPort:
    """Create renderer for an output format name."""
    try:
        return RENDERERS[fmt]()
    except KeyError:
        raise ValueError(f"Unknown output format: {fmt}") from None
