"""Unit tests for filesystem storage adapter."""

from pathlib import Path

import yaml

from resumegate.adapters.storage.filesystem import FilesystemAdapter, sanitize_filename
from resumegate.domain.models import ProcessingResult, RejectionType


class TestSanitizeFilename:
    """Tests for sanitize_filename function."""

    def test_normal_filename_unchanged(self) -> None:
        assert sanitize_filename("Jane Doe Resume") == "Jane Doe Resume"

    def test_removes_null_bytes(self) -> None:
        assert sanitize_filename("jane\x00doe") == "janedoe"

    def test_replaces_path_traversal(self) -> None:
        assert sanitize_filename("../../../etc/passwd") == "etc passwd"

    def test_replaces_problematic_chars(self) -> None:
        assert sanitize_filename('cv<>:"/\\|?*final') == "cv final"

    def test_collapses_spaces_and_underscores(self) -> None:
        assert sanitize_filename("jane___doe   cv") == "jane doe cv"

    def test_strips_leading_trailing_dots_spaces(self) -> None:
        assert sanitize_filename("...dots...") == "dots"

    def test_returns_resume_for_empty(self) -> None:
        assert sanitize_filename("") == "resume"
        assert sanitize_filename("...") == "resume"

    def test_truncates_at_word_boundary(self) -> None:
        result = sanitize_filename("Very " * 50)
        assert len(result) <= 180
        assert not result.endswith(" ")

    def test_unicode_preserved(self) -> None:
        assert sanitize_filename("Lebenslauf Jürgen Müller") == "Lebenslauf Jürgen Müller"


class TestOutputPath:
    def test_reformatted_name(self, tmp_path: Path) -> None:
        adapter = FilesystemAdapter(tmp_path / "out")
        dest = adapter.output_path(Path("/uploads/jane_doe.pdf"), ".docx")
        assert dest == tmp_path / "out" / "jane doe - reformatted.docx"
        assert (tmp_path / "out").is_dir()

    def test_avoids_existing_file(self, tmp_path: Path) -> None:
        adapter = FilesystemAdapter(tmp_path)
        (tmp_path / "cv - reformatted.yaml").write_text("taken")
        dest = adapter.output_path(Path("cv.pdf"), ".yaml")
        assert dest.name == "cv - reformatted (1).yaml"


class TestQuarantine:
    def test_moves_file(self, tmp_path: Path) -> None:
        source = tmp_path / "bad.pdf"
        source.write_bytes(b"%PDF-1.4")
        adapter = FilesystemAdapter(tmp_path / "out")

        dest = adapter.quarantine(source, tmp_path / "q")

        assert dest == tmp_path / "q" / "bad.pdf"
        assert dest.exists()
        assert not source.exists()

    def test_does_not_overwrite(self, tmp_path: Path) -> None:
        qdir = tmp_path / "q"
        qdir.mkdir()
        (qdir / "bad.pdf").write_bytes(b"old")
        source = tmp_path / "bad.pdf"
        source.write_bytes(b"new")

        dest = FilesystemAdapter(tmp_path).quarantine(source, qdir)

        assert dest.name == "bad (1).pdf"
        assert (qdir / "bad.pdf").read_bytes() == b"old"


class TestWriteReport:
    def test_report_contents(self, tmp_path: Path) -> None:
        quarantined = tmp_path / "bad.pdf"
        quarantined.write_bytes(b"%PDF-1.4")
        result = ProcessingResult(
            source_path=Path("/uploads/bad.pdf"),
            text_length=1234,
            rejection_type=RejectionType.INJECTION,
            details=["Chat template start marker"],
            errors=["Resume validation failed"],
        )

        report = FilesystemAdapter(tmp_path).write_report(quarantined, result)

        assert report.name == "bad.pdf.rejection.yaml"
        data = yaml.safe_load(report.read_text())
        assert data["source_file"] == "bad.pdf"
        assert data["rejection_type"] == "injection"
        assert data["errors"] == ["Resume validation failed"]
        assert data["details"] == ["Chat template start marker"]
        assert data["removed_patterns"] == []
        assert data["text_length"] == 1234
        assert "rejected_at" in data

    def test_report_without_rejection_type(self, tmp_path: Path) -> None:
        quarantined = tmp_path / "broken.docx"
        result = ProcessingResult(source_path=quarantined, errors=["Extraction failed"])

        report = FilesystemAdapter(tmp_path).write_report(quarantined, result)

        assert yaml.safe_load(report.read_text())["rejection_type"] is None
