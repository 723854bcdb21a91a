"""Text extraction from DOCX using python-docx."""

import logging
from pathlib import Path

from docx import Document

from ...domain.models import ExtractedText
from ...ports.extractor import ExtractorPort
from ...security.length import estimate_pages

logger = logging.getLogger(__name__)


class DocxExtractor(ExtractorPort):
    """Extract paragraph and table text with python-docx."""

    def extract(self, path: Path) -> ExtractedText:
        logger.info(f"Extracting DOCX text: {path.name}")

        document = Document(str(path))
        parts = [p.text.strip() for p in document.paragraphs if p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    parts.append(" | ".join(cells))

        text = "\n".join(parts)
        # DOCX has no fixed pagination
        pages = estimate_pages(len(text)) if text else 0
        logger.info(f"Extracted {len(text):,} characters (~{pages} page(s))")
        return ExtractedText(text=text, pages=pages)
