"""Renderer writing structured resumes as YAML."""

import logging
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

import yaml

from ...domain.models import ResumeData
from ...ports.renderer import RendererPort

logger = logging.getLogger(__name__)


class YamlRenderer(RendererPort):
    """Render resume data to a YAML document."""

    suffix = ".yaml"

    def render(self, data: ResumeData, dest: Path) -> Path:
        payload = asdict(data)
        payload["rendered_at"] = datetime.now().isoformat()

        logger.info(f"Writing YAML: {dest.name}")
        dest.write_text(yaml.dump(payload, default_flow_style=False, allow_unicode=True))
        return dest
