"""Renderer writing structured resumes as DOCX."""

import logging
from pathlib import Path

from docx import Document

from ...domain.models import ResumeData
from ...ports.renderer import RendererPort

logger = logging.getLogger(__name__)


def _join(*parts: str, sep: str = " | ") -> str:
    return sep.join(part for part in parts if part)


class DocxRenderer(RendererPort):
    """Render resume data to a plain Word document (default styles)."""

    suffix = ".docx"

    def render(self, data: ResumeData, dest: Path) -> Path:
        document = Document()

        contact = data.contact
        document.add_heading(contact.name.upper() or "RESUME", level=0)
        line = _join(contact.email, contact.phone, contact.location)
        if line:
            document.add_paragraph(line)

        if data.work_experience:
            document.add_heading("Work Experience", level=1)
            for job in data.work_experience:
                document.add_heading(_join(job.title, job.organization, sep=", "), level=2)
                dates = _join(job.start_date, job.end_date, sep=" - ")
                meta = _join(job.location, dates)
                if meta:
                    document.add_paragraph(meta)
                for item in job.responsibilities:
                    document.add_paragraph(item, style="List Bullet")

        if data.education:
            document.add_heading("Education", level=1)
            for edu in data.education:
                document.add_paragraph(
                    _join(edu.degree, edu.institution, edu.location, edu.graduation_date, sep=", ")
                )

        if data.certifications:
            document.add_heading("Certifications", level=1)
            for cert in data.certifications:
                document.add_paragraph(
                    _join(cert.name, cert.issuer, cert.date_obtained, sep=", "),
                    style="List Bullet",
                )

        if data.skills:
            document.add_heading("Skills", level=1)
            document.add_paragraph(", ".join(data.skills))

        logger.info(f"Writing DOCX: {dest.name}")
        document.save(str(dest))
        return dest
