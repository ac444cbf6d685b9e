"""Pytest configuration for minirag tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

SAMPLE_DOCUMENT = "Cats are mammals. Dogs are mammals. Cars are vehicles."
SAMPLE_QUERY = "Which animals are mammals?"


@pytest.fixture
def sample_document():
    return SAMPLE_DOCUMENT


@pytest.fixture
def sample_query():
    return SAMPLE_QUERY
