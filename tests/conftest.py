"""Pytest configuration and fixtures for brace tests."""

import pytest

from brace import Environment


@pytest.fixture
def env():
    """Create a basic brace Environment (runtime embedded)."""
    return Environment()


@pytest.fixture
def env_shared_runtime():
    """Create an Environment whose templates share brace.template.runtime."""
    return Environment(include_runtime=False)


@pytest.fixture(params=[True, False], ids=["embedded-runtime", "shared-runtime"])
def any_env(request):
    """Run a test once per runtime packaging mode."""
    return Environment(include_runtime=request.param)
