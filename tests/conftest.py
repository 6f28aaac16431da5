"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import Verbosity, settings

from vms_schema_utils.remote import client as client_module

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture(autouse=True)
def reset_api_client() -> Iterator[None]:
    """Keep the globally installed API client from leaking between tests."""
    previous = client_module._default_api_client
    client_module._default_api_client = None
    yield
    client_module._default_api_client = previous


@pytest.fixture(autouse=True)
def clear_api_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("VMS_API_BASE_URL", "VMS_API_TIMEOUT", "VMS_API_TOKEN"):
        monkeypatch.delenv(name, raising=False)
