"""Structlog configuration for profilecheck."""

import logging
import sys

import structlog

from profilecheck.config import VerifierConfig, LogFormat


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _renderers(log_format: LogFormat) -> list:
    if log_format == LogFormat.JSON:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(config: VerifierConfig | None = None) -> None:
    """
    Configure structlog for the pipeline.

    Everything is written to stderr; stdout is left to report output
    (`profilecheck verify --json`).

    Args:
        config: VerifierConfig instance, uses defaults if None
    """
    if config is None:
        config = VerifierConfig()

    log_level = _level(config.log_level)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderers(config.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a structlog logger, bound to a component name if given.

    Args:
        name: Component name, logged as `logger_name`
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger
