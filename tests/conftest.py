"""Shared test fixtures."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from resumegate.domain.models import (
    ContactInfo,
    ExtractedText,
    JobMatch,
    MatchLevel,
    ResumeData,
    WorkExperience,
)
from resumegate.ports.extractor import ExtractorPort
from resumegate.ports.llm import LLMPort
from resumegate.ports.renderer import RendererPort
from resumegate.ports.storage import StoragePort
from resumes import CLEAN_RESUME


@pytest.fixture
def clean_resume() -> str:
    return CLEAN_RESUME


@pytest.fixture
def sample_resume_data() -> ResumeData:
    """Sample structured resume for testing."""
    return ResumeData(
        contact=ContactInfo(
            name="Sarah Williams",
            email="sarah.williams@example.com",
            phone="555-123-4567",
            location="Austin, TX",
        ),
        work_experience=[
            WorkExperience(
                title="Senior Software Engineer",
                organization="Acme Cloud Services",
                location="Austin, TX",
                start_date="03/2019",
                end_date="Present",
                responsibilities=["Led development of a microservices platform"],
            )
        ],
        skills=["Python", "Go"],
    )


@pytest.fixture
def mock_extractor() -> MagicMock:
    """Mock extractor port."""
    mock = MagicMock(spec=ExtractorPort)
    mock.extract.return_value = ExtractedText(text=CLEAN_RESUME, pages=1)
    return mock


@pytest.fixture
def mock_llm(sample_resume_data: ResumeData) -> MagicMock:
    """Mock LLM port."""
    mock = MagicMock(spec=LLMPort)
    mock.structure.return_value = sample_resume_data
    mock.match.return_value = JobMatch(
        level=MatchLevel.GOOD_MATCH, reason="Backend experience matches the role."
    )
    return mock


@pytest.fixture
def mock_renderer() -> MagicMock:
    """Mock renderer port."""
    mock = MagicMock(spec=RendererPort)
    mock.suffix = ".yaml"
    mock.render.side_effect = lambda data, dest: dest
    return mock


@pytest.fixture
def mock_storage() -> MagicMock:
    """Mock storage port."""
    mock = MagicMock(spec=StoragePort)
    mock.output_path.return_value = Path("/output/resume - reformatted.yaml")
    mock.quarantine.side_effect = lambda path, qdir: qdir / path.name
    mock.write_report.side_effect = lambda path, result: path.with_name(
        path.name + ".rejection.yaml"
    )
    return mock
