"""Text extraction adapters."""

from pathlib import Path

from ...ports.extractor import ExtractorPort
from ...security.upload import detect_file_type
from .docx import DocxExtractor
from .pdf import PdfExtractor

__all__ = ["DocxExtractor", "PdfExtractor", "create_extractor"]


def create_extractor(path: Path) -> ExtractorPort:
    """Create extractor matching the file type."""
    file_type = detect_file_type(path.name)
    if file_type == "pdf":
        return PdfExtractor()
    elif file_type == "docx":
        return DocxExtractor()
    else:
        raise ValueError(f"Unsupported file type: {path.suffix}")
