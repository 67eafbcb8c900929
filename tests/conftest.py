"""Root test configuration: restore structlog defaults between tests"""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI commands configure structlog against the runner's stderr; undo that after each test."""
    yield
    structlog.reset_defaults()
