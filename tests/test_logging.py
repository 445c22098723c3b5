"""Unit tests for logging setup."""

import json

from profilecheck.config import LogFormat, VerifierConfig
from profilecheck.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_json_to_stderr(self, capsys):
        configure_logging(VerifierConfig(log_format=LogFormat.JSON))
        get_logger("orchestrator").info("batch_complete", batch=1)

        captured = capsys.readouterr()
        assert captured.out == ""
        entry = json.loads(captured.err.strip().splitlines()[-1])
        assert entry["event"] == "batch_complete"
        assert entry["batch"] == 1
        assert entry["logger_name"] == "orchestrator"
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_level_filtering(self, capsys):
        configure_logging(VerifierConfig(log_format=LogFormat.JSON, log_level="WARNING"))
        logger = get_logger()
        logger.info("hidden")
        logger.warning("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_unknown_level_defaults_to_info(self, capsys):
        configure_logging(VerifierConfig(log_format=LogFormat.JSON, log_level="loud"))
        get_logger().info("visible")
        get_logger().debug("invisible")

        err = capsys.readouterr().err
        assert "visible" in err
        assert "invisible" not in err
