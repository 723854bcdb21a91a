"""Domain services - orchestrate business logic."""

import logging
from pathlib import Path

from ..config import GateConfig, UploadConfig
from ..ports.extractor import ExtractorPort
from ..ports.llm import LLMPort
from ..ports.renderer import RendererPort
from ..ports.storage import StoragePort
from ..security.gate import run_early_rejection_gate
from ..security.sanitizer import sanitize
from ..security.upload import validate_file, validate_job_description
from .models import (
    GateResult,
    JobMatch,
    ProcessingResult,
    RejectionType,
    SanitizationResult,
)

logger = logging.getLogger(__name__)

SANITIZER_ERROR = "Resume validation failed"
MISMATCH_ERROR = "Resume does not match the job description"


def screen_text(
    text: str, gate: GateConfig | None = None
) -> tuple[GateResult, SanitizationResult | None]:
    """Run the rejection gate and, if it passes, the sanitizer.

    The sanitizer result is None when the gate rejected the text.
    """
    gate = gate or GateConfig()
    verdict = run_early_rejection_gate(
        text,
        max_chars=gate.max_chars,
        profanity_limit=gate.profanity_limit,
        placeholder_limit=gate.placeholder_limit,
    )
    if not verdict.passed:
        return verdict, None
    return verdict, sanitize(text)


class ProcessingService:
    """Orchestrates the resume processing pipeline."""

    def __init__(
        self,
        extractor: ExtractorPort,
        llm: LLMPort,
        renderer: RendererPort,
        storage: StoragePort,
        gate: GateConfig | None = None,
        upload: UploadConfig | None = None,
        quarantine_dir: Path | None = None,
    ) -> None:
        self.extractor = extractor
        self.llm = llm
        self.renderer = renderer
        self.storage = storage
        self.gate = gate or GateConfig()
        self.upload = upload or UploadConfig()
        self.quarantine_dir = quarantine_dir

    def process(self, path: Path, job_description: str | None = None) -> ProcessingResult:
        """Process a resume through the full pipeline.

        Pipeline:
            1. Validate upload (type, size)
            2. Extract text
            3. Early rejection gate
            4. Sanitize borderline lines
            5. Validate job description (if given)
            6. Job match pre-screening (if job description given)
            7. LLM structuring
            8. Render output

        Rejected uploads are quarantined with a report (if configured).
        """
        result = ProcessingResult(source_path=path)
        logger.info(f"Processing: {path.name}")

        upload = validate_file(
            path,
            max_size_mb=self.upload.max_file_size_mb,
            allowed_extensions=self.upload.allowed_extensions,
        )
        if not upload.valid:
            result.errors.append(upload.reason or "Invalid upload")
            self._quarantine_on_error(path, result)
            return result

        try:
            # 2. Extract text
            extracted = self.extractor.extract(path)
            text = extracted.text
            result.text_length = len(text)

            if not text.strip():
                result.errors.append("No text extracted from document")
                self._quarantine_on_error(path, result)
                return result

            # 3-4. Gate, then sanitizer
            verdict, sanitized = screen_text(text, self.gate)
            if not verdict.passed:
                self._log_rejection(verdict)
                result.rejection_type = verdict.rejection_type
                result.details = verdict.details
                result.errors.append(verdict.error)
                self._quarantine_on_error(path, result)
                return result

            if sanitized is None or not sanitized.is_safe:
                issue = sanitized.critical_issue if sanitized else None
                logger.warning(f"Sanitizer rejected document after gate: {issue}")
                result.rejection_type = RejectionType.INJECTION
                result.details = [issue or SANITIZER_ERROR]
                result.errors.append(SANITIZER_ERROR)
                self._quarantine_on_error(path, result)
                return result

            result.removed_patterns = sanitized.removed_patterns
            if sanitized.removed_patterns:
                logger.warning(f"Sanitized {len(sanitized.removed_patterns)} borderline line(s)")
                for entry in sanitized.removed_patterns:
                    logger.warning(f"  - {entry}")

            # 5. Job description
            if job_description is not None:
                check = validate_job_description(job_description)
                if not check.valid:
                    result.errors.append(check.reason or "Invalid job description")
                    return result

                # 6. Job match pre-screening
                result.job_match = self._prescreen(sanitized.sanitized, job_description)
                if result.job_match and not result.job_match.can_proceed:
                    logger.info(f"Job mismatch: {result.job_match.reason}")
                    result.errors.append(f"{MISMATCH_ERROR}: {result.job_match.reason}")
                    return result

            # 7. LLM structuring
            resume = self.llm.structure(sanitized.sanitized, job_description=job_description)
            if resume.is_empty:
                result.errors.append("LLM returned no resume data")
                return result
            result.resume = resume

            # 8. Render
            dest = self.storage.output_path(path, self.renderer.suffix)
            result.output_path = self.renderer.render(resume, dest)
            logger.info(f"Stored: {result.output_path}")

        except Exception as e:
            logger.exception(f"Processing failed: {e}")
            result.errors.append(str(e))
            self._quarantine_on_error(path, result)

        return result

    def _prescreen(self, text: str, job_description: str) -> JobMatch | None:
        """Ask the LLM whether the resume fits the job.

        A failed or unparseable check never blocks processing.
        """
        try:
            match = self.llm.match(text, job_description)
        except Exception as e:
            logger.warning(f"Job match pre-screening failed, continuing: {e}")
            return None
        if match is None:
            logger.warning("Job match response unusable, continuing")
        else:
            logger.info(f"Match level: {match.level.value}")
        return match

    def _log_rejection(self, verdict: GateResult) -> None:
        kind = verdict.rejection_type.value if verdict.rejection_type else "unknown"
        logger.warning(f"Early rejection: {kind}")
        logger.warning(f"  Reason: {verdict.error}")
        for detail in verdict.details:
            logger.warning(f"  - {detail}")

    def _quarantine_on_error(self, path: Path, result: ProcessingResult) -> None:
        """Move a rejected upload to quarantine and record why."""
        if self.quarantine_dir and not result.success and path.exists():
            quarantined = self.storage.quarantine(path, self.quarantine_dir)
            self.storage.write_report(quarantined, result)
            result.output_path = quarantined
