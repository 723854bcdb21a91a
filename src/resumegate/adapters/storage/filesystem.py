"""Storage adapter using local filesystem."""

import logging
import re
import shutil
from datetime import datetime
from pathlib import Path

import yaml

from ...domain.models import ProcessingResult
from ...ports.storage import StoragePort

logger = logging.getLogger(__name__)


def sanitize_filename(name: str, max_length: int = 180) -> str:
    """Remove/replace characters invalid in filenames."""
    # Remove null bytes
    name = name.replace("\x00", "")
    # Replace path traversal attempts
    name = name.replace("..", "_")
    name = re.sub(r'[<>:"/\\|?*]', "_", name)
    name = re.sub(r"[_\s]+", " ", name)
    name = name.strip(". ")
    if len(name) > max_length:
        name = name[:max_length].rsplit(" ", 1)[0]
    return name or "resume"


def _free_path(dest: Path) -> Path:
    """Append " (n)" to the stem until the path is unused."""
    counter = 1
    candidate = dest
    while candidate.exists():
        candidate = dest.with_name(f"{dest.stem} ({counter}){dest.suffix}")
        counter += 1
    return candidate


class FilesystemAdapter(StoragePort):
    """Storage implementation using local filesystem."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path

    def output_path(self, source: Path, suffix: str) -> Path:
        """Build "<stem> - reformatted.<suffix>" under the output directory."""
        self.base_path.mkdir(parents=True, exist_ok=True)
        stem = sanitize_filename(source.stem)
        return _free_path(self.base_path / f"{stem} - reformatted{suffix}")

    def quarantine(self, path: Path, quarantine_dir: Path) -> Path:
        """Move file to quarantine."""
        quarantine_dir.mkdir(parents=True, exist_ok=True)
        dest = _free_path(quarantine_dir / path.name)

        shutil.move(str(path), dest)
        logger.warning(f"Quarantined: {path.name}")

        return dest

    def write_report(self, quarantined: Path, result: ProcessingResult) -> Path:
        """Write the rejection audit trail as YAML beside the file."""
        report_path = quarantined.with_name(quarantined.name + ".rejection.yaml")
        data = {
            "source_file": result.source_path.name,
            "rejection_type": result.rejection_type.value if result.rejection_type else None,
            "errors": result.errors,
            "details": result.details,
            "removed_patterns": result.removed_patterns,
            "text_length": result.text_length,
            "rejected_at": datetime.now().isoformat(),
        }
        report_path.write_text(yaml.dump(data, default_flow_style=False, allow_unicode=True))
        return report_path
