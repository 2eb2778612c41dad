"""Shared test fixtures for the document analysis test suite."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.analysis.analyzer import DocumentAnalyzer

SAMPLE_TEXT = (
    "This Agreement is entered into by Acme Corp and Beta LLC. "
    "Either party may terminate with 30 days written notice."
)

_CONFIG_ENV_VARS = ("PROJECT_ID", "PROCESSOR_ID", "client_email", "private_key", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep deployment environment variables out of the tests."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root: Path) -> Path:
    """Return the configs directory path."""
    return project_root / "configs"


@pytest.fixture
def mock_extractor() -> MagicMock:
    """OCR backend returning a short agreement."""
    extractor = MagicMock()
    extractor.extract_text.return_value = SAMPLE_TEXT
    return extractor


@pytest.fixture
def mock_generator() -> MagicMock:
    """Generation backend returning one output per task, in call order."""
    generator = MagicMock()
    generator.generate.side_effect = [
        "A termination agreement between Acme and Beta.",
        "- Termination\n- Notice period",
        "- Termination: 30 day notice (Severity: Medium)",
    ]
    return generator


@pytest.fixture
def analyzer(mock_extractor: MagicMock, mock_generator: MagicMock) -> DocumentAnalyzer:
    return DocumentAnalyzer(mock_extractor, mock_generator)

