"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.dwml_extract.dwml import DWMLDocument  # noqa: E402
from src.dwml_extract.reader import parse_xml  # noqa: E402


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_path(fixtures_dir):
    """Path of the sample DWML forecast."""
    return fixtures_dir / "sample_forecast.xml"


@pytest.fixture
def sample_document(sample_path):
    """Parsed sample DWML forecast."""
    return DWMLDocument(parse_xml(sample_path.read_bytes()))


@pytest.fixture
def make_document():
    """Build a document from the inner XML of a <data> element."""
    def _make(data_xml: str) -> DWMLDocument:
        return DWMLDocument(parse_xml(f"<dwml><data>{data_xml}</data></dwml>"))
    return _make


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test reading fixture files"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
