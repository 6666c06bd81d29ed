"""Shared fixtures for the dashboard tests."""

import sys
from pathlib import Path
from typing import List

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from core.messages import Toast


@pytest.fixture
def toasts() -> List[Toast]:
    return []
