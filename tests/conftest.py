"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def valid_payload():
    """Provide a well-formed request body."""
    return {"operand1": 10.0, "operand2": 2.0}


@pytest.fixture
def non_finite_values():
    """Provide every non-finite float."""
    return [float("nan"), float("inf"), float("-inf")]
