"""
Pytest plugin providing BambooHR client fixtures.

Registered through the ``pytest11`` entry point, so any project that installs
bamboohr-client can request ``bamboohr_client`` in its tests and inspect the
requests it would have sent through ``bamboohr_transport``.
"""

import os

import pytest

from bamboohr_client.bamboohr import BambooHR
from bamboohr_client.client.in_memory_transport import InMemoryTransport
from bamboohr_client.config.settings import SETTINGS_ENV_VARS

TEST_COMPANY_DOMAIN = 'ACME'
TEST_API_KEY = 'secret123'


def pytest_addoption(parser):
    """Add custom command line options for pytest."""
    group = parser.getgroup('bamboohr')
    group.addoption(
        "--bamboohr-company-domain",
        action="store",
        default=TEST_COMPANY_DOMAIN,
        help="Company domain used by the bamboohr_client fixture"
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "bamboohr: test exercises the BambooHR client"
    )


@pytest.fixture
def bamboohr_transport():
    """An InMemoryTransport that records requests and replays queued responses."""
    return InMemoryTransport()


@pytest.fixture
def bamboohr_client(request, bamboohr_transport):
    """A BambooHR client wired to ``bamboohr_transport``."""
    company_domain = request.config.getoption("--bamboohr-company-domain")
    return BambooHR(company_domain, TEST_API_KEY, transport=bamboohr_transport)


@pytest.fixture
def clean_bamboohr_env(monkeypatch):
    """Remove BambooHR settings from the environment for the duration of a test."""
    for env_var in SETTINGS_ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    yield os.environ
