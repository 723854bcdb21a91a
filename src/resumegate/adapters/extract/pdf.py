"""Text extraction from PDF using pypdf."""

import logging
from pathlib import Path

from pypdf import PdfReader

from ...domain.models import ExtractedText
from ...ports.extractor import ExtractorPort

logger = logging.getLogger(__name__)


class PdfExtractor(ExtractorPort):
    """Extract text page by page with pypdf."""

    def extract(self, path: Path) -> ExtractedText:
        logger.info(f"Extracting PDF text: {path.name}")

        reader = PdfReader(str(path))
        parts: list[str] = []
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if page_text:
                parts.append(page_text)

        text = "\n".join(parts)
        logger.info(f"Extracted {len(text):,} characters from {len(reader.pages)} page(s)")
        return ExtractedText(text=text, pages=len(reader.pages))
