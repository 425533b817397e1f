"""
Tests for core.config module.
"""

import pytest
from pydantic import ValidationError


class TestSettings:
    """Tests for Settings class."""

    def test_required_values_loaded(self):
        """Test that Jenkins coordinates are loaded from environment."""
        from jenkins_plugin.core.config import Settings

        settings = Settings()
        assert settings.url == "https://jenkins.example.com/"
        assert settings.username == "ci-bot"
        assert settings.password == "api_token_123"
        assert settings.job_name == "deploy-service"

    def test_default_values(self):
        """Test that default values are set correctly."""
        from jenkins_plugin.core.config import Settings

        settings = Settings()

        assert settings.jenkins_plugin_timeout == 30
        assert settings.build_status_poll_duration == 1
        assert settings.verify_ssl is True
        assert settings.fail_on_unsuccessful is False
        assert settings.log_level == "INFO"

    def test_durations_converted_to_seconds(self, monkeypatch):
        """Test that minute-based settings are exposed in seconds."""
        monkeypatch.setenv("JENKINS_PLUGIN_TIMEOUT", "5")
        monkeypatch.setenv("BUILD_STATUS_POLL_DURATION", "2")

        from jenkins_plugin.core.config import Settings
        settings = Settings()

        assert settings.timeout_seconds == 300.0
        assert settings.poll_interval_seconds == 120.0

    def test_zero_timeout_rejected(self, monkeypatch):
        """Test that the plugin timeout must be at least a minute."""
        monkeypatch.setenv("JENKINS_PLUGIN_TIMEOUT", "0")

        from jenkins_plugin.core.config import Settings
        with pytest.raises(ValidationError):
            Settings()

    def test_blank_job_name_rejected(self, monkeypatch):
        """Test that a whitespace job name is rejected."""
        monkeypatch.setenv("JOB_NAME", "   ")

        from jenkins_plugin.core.config import Settings
        with pytest.raises(ValidationError):
            Settings()

    def test_missing_url_rejected(self, monkeypatch):
        """Test that URL is required."""
        monkeypatch.delenv("URL")

        from jenkins_plugin.core.config import Settings
        with pytest.raises(ValidationError):
            Settings()

    def test_log_level_normalized(self, monkeypatch):
        """Test LOG_LEVEL is upper-cased."""
        monkeypatch.setenv("LOG_LEVEL", " debug ")

        from jenkins_plugin.core.config import Settings
        settings = Settings()

        assert settings.log_level == "DEBUG"

    def test_settings_are_frozen(self):
        """Test that settings can't be modified after loading."""
        from jenkins_plugin.core.config import Settings

        settings = Settings()
        with pytest.raises(ValidationError):
            settings.job_name = "other"

    def test_unknown_log_level_rejected(self, monkeypatch):
        """Test that LOG_LEVEL must name a logging level."""
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        from jenkins_plugin.core.config import Settings
        with pytest.raises(ValidationError):
            Settings()
