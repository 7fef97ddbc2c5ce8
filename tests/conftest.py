"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from src.config.settings import Settings
from src.core.calculator import TollCalculator
from src.models.defaults import DEFAULT_POLICY
from tests.test_fixtures import create_example_policy


@pytest.fixture
def default_policy():
    """The built-in toll policy."""
    return DEFAULT_POLICY


@pytest.fixture
def example_policy():
    """A small custom policy for testing."""
    return create_example_policy()


@pytest.fixture
def legacy_settings():
    """Settings with the default final-day fold and empty-input behaviour."""
    return Settings(final_day_fold="legacy", empty_chargeable_policy="raise", toll_policy_json=None)


@pytest.fixture
def capped_settings():
    """Settings that cap the last day like every other day."""
    return Settings(final_day_fold="capped", empty_chargeable_policy="raise", toll_policy_json=None)


@pytest.fixture
def calculator(legacy_settings):
    """Calculator with the built-in policy and default behaviour."""
    return TollCalculator(DEFAULT_POLICY, legacy_settings)


@pytest.fixture
def capped_calculator(capped_settings):
    """Calculator with the built-in policy and a capped final day."""
    return TollCalculator(DEFAULT_POLICY, capped_settings)
