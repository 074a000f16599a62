"""
Pytest configuration and shared fixtures for biweight tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import biweight


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def rng():
    """Seeded random generator so statistical checks are reproducible."""
    return np.random.default_rng(1123)


@pytest.fixture
def outlier_sample():
    """Five values with one clear outlier."""
    return [1.0, 2.0, 3.0, 500.0, 2.0]


@pytest.fixture
def outlier_pair():
    """Paired samples whose outliers sit at different positions."""
    return [1.0, 2.0, 3.0, 500.0, 2.0], [2.0, 500.0, 3.0, 2.0, 1.0]


@pytest.fixture
def small_matrix(rng):
    """A 5x3 matrix of N(50, 10) values."""
    return 10 * rng.standard_normal((5, 3)) + 50


@pytest.fixture(autouse=True)
def reset_config():
    """Restore default configuration after every test."""
    yield
    biweight.config.reset()
