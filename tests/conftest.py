"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest
from unittest.mock import AsyncMock, MagicMock

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def mock_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("URL", "https://jenkins.example.com/")
    monkeypatch.setenv("USERNAME", "ci-bot")
    monkeypatch.setenv("PASSWORD", "api_token_123")
    monkeypatch.setenv("JOB_NAME", "deploy-service")
    monkeypatch.setenv("JOB_TRIGGER_PARAMS", '{"BRANCH": "GIT_MATERIAL_BRANCH", "ENV": "prod"}')
    monkeypatch.setenv("GIT_MATERIAL_REQUEST", "repoA,/src,main,abc123")
    for name in (
        "JENKINS_PLUGIN_TIMEOUT",
        "BUILD_STATUS_POLL_DURATION",
        "REQUEST_TIMEOUT",
        "VERIFY_SSL",
        "QUEUE_POLL_INTERVAL",
        "FAIL_ON_UNSUCCESSFUL",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# Mock Fixtures
# ============================================================================

@pytest.fixture
def build_handle():
    """Create a BuildHandle for a freshly started build."""
    from jenkins_plugin.models.build import BuildHandle
    return BuildHandle(job_name="deploy-service", number=42, queue_id=7)


@pytest.fixture
def mock_jenkins():
    """Create a mock JenkinsClient."""
    client = MagicMock()
    client.connect = AsyncMock(return_value="2.440.1")
    client.trigger = AsyncMock(return_value=7)
    client.resolve_build = AsyncMock()
    client.poll_status = AsyncMock()
    client.fetch_console = AsyncMock()
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    return client


@pytest.fixture
def live_deadline():
    """Deadline far enough away that it never expires during a test."""
    from jenkins_plugin.models.deadline import Deadline
    return Deadline(3600)


@pytest.fixture
def expired_deadline():
    """Deadline that has already passed."""
    from jenkins_plugin.models.deadline import Deadline
    return Deadline(0)


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Create Settings from the test environment."""
    from jenkins_plugin.core.config import Settings
    return Settings()
