"""Unit tests for configuration management."""

import pytest

from profilecheck.config import VerifierConfig, LogFormat


class TestVerifierConfigDefaults:
    """Test default configuration values."""

    def test_default_rate_limit_interval(self):
        config = VerifierConfig()
        assert config.rate_limit_interval_ms == 2000

    def test_default_batch_pause(self):
        config = VerifierConfig()
        assert config.batch_pause_cap_ms == 1500
        assert config.batch_pause_per_profile_ms == 50

    def test_default_scrape_timeout(self):
        config = VerifierConfig()
        assert config.scrape_timeout_seconds == 60.0

    def test_default_max_recent_posts(self):
        config = VerifierConfig()
        assert config.max_recent_posts == 5

    def test_default_browser_settings(self):
        config = VerifierConfig()
        assert config.headless is True
        assert config.browser_timeout_ms == 30000
        assert config.user_agent is None
        assert config.proxy_url is None

    def test_default_log_format(self):
        config = VerifierConfig()
        assert config.log_format == LogFormat.CONSOLE


class TestVerifierConfigEnvOverrides:
    """Test environment variable overrides."""

    def test_env_override_interval(self, monkeypatch):
        monkeypatch.setenv("PROFILECHECK_RATE_LIMIT_INTERVAL_MS", "250")
        config = VerifierConfig()
        assert config.rate_limit_interval_ms == 250

    def test_env_override_headless(self, monkeypatch):
        monkeypatch.setenv("PROFILECHECK_HEADLESS", "false")
        config = VerifierConfig()
        assert config.headless is False

    def test_env_override_log_format(self, monkeypatch):
        monkeypatch.setenv("PROFILECHECK_LOG_FORMAT", "json")
        config = VerifierConfig()
        assert config.log_format == LogFormat.JSON

    def test_env_override_timeout(self, monkeypatch):
        monkeypatch.setenv("PROFILECHECK_SCRAPE_TIMEOUT_SECONDS", "2.5")
        config = VerifierConfig()
        assert config.scrape_timeout_seconds == 2.5

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("RATE_LIMIT_INTERVAL_MS", "1")
        config = VerifierConfig()
        assert config.rate_limit_interval_ms == 2000


class TestVerifierConfigExplicit:
    """Test explicit constructor arguments."""

    def test_explicit_values_win(self):
        config = VerifierConfig(rate_limit_interval_ms=0, max_recent_posts=3)
        assert config.rate_limit_interval_ms == 0
        assert config.max_recent_posts == 3

    def test_invalid_log_format_rejected(self):
        with pytest.raises(ValueError):
            VerifierConfig(log_format="xml")
