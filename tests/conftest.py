"""
AutoAxis - Pytest Configuration
Shared fixtures and configuration for all tests
"""

import os
import sys
from datetime import datetime
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# Test mode before any project import (no file log sinks)
os.environ.setdefault("TEST_MODE", "true")

# Add project root to path
ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR))

from config.settings import settings
from core.field import Field, FieldKind


# ==================== RANDOM FIXTURES ====================

@pytest.fixture
def rng():
    """Seeded generator for reproducible sampling"""
    return np.random.default_rng(42)


# ==================== FIELD FIXTURES ====================

@pytest.fixture
def numeric_field():
    """Symmetric numeric field 1..100"""
    return Field("value", [float(i) for i in range(1, 101)], FieldKind.NUMERIC)


@pytest.fixture
def skewed_field():
    """Strongly right-skewed, strictly positive field (log candidate)"""
    values = [1.0] * 50 + [2.0] * 20 + [5.0] * 10 + [20.0] * 5 + [500.0, 1000.0]
    return Field("revenue", values, FieldKind.NUMERIC)


@pytest.fixture
def year_strings_field():
    """Raw text field holding calendar years"""
    return Field("year", [str(y) for y in range(1990, 2020)])


@pytest.fixture
def date_field():
    """Daily date field spanning January 2023"""
    values = [datetime(2023, 1, d) for d in range(1, 32)]
    return Field("day", values, FieldKind.DATE)


@pytest.fixture
def sample_df():
    """Mixed DataFrame for profiling"""
    rng = np.random.default_rng(0)
    return pd.DataFrame({
        "amount": rng.normal(100.0, 15.0, 60),
        "year": [str(1990 + i % 30) for i in range(60)],
        "label": rng.choice(["alpha", "beta", "gamma"], 60),
        "when": [f"2023-{1 + i % 12:02d}-{1 + i % 28:02d}" for i in range(60)],
    })


# ==================== CONFIGURATION FIXTURES ====================

@pytest.fixture
def test_settings():
    """Test settings, restored after the test"""
    original = {
        "SCALE_NICE": settings.SCALE_NICE,
        "SCALE_PAD_LOW": settings.SCALE_PAD_LOW,
        "SCALE_PAD_HIGH": settings.SCALE_PAD_HIGH,
        "SCALE_ZERO_TOLERANCE": settings.SCALE_ZERO_TOLERANCE,
        "SCALE_DESIRED_TICKS": settings.SCALE_DESIRED_TICKS,
        "AUTO_RANDOM_SEED": settings.AUTO_RANDOM_SEED,
    }
    settings.AUTO_RANDOM_SEED = 42

    yield settings

    for key, value in original.items():
        setattr(settings, key, value)


# ==================== PYTEST CONFIGURATION ====================

def pytest_configure(config):
    """Configure pytest"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
