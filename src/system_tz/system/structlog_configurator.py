"""Structlog-based logging configuration for system-tz.

Log records go to stderr so the command-line tools keep stdout for their
results. Records from stdlib loggers and structlog loggers share one
processor chain, rendered by ``structlog.stdlib.ProcessorFormatter`` on the
stderr handler. Output is human-readable on a terminal and JSON otherwise,
unless the configuration or the SYSTEM_TZ_JSON_LOGS environment variable
says otherwise.
"""

import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import structlog

from system_tz import __version__
from system_tz.config.models import SystemTzConfig


def _add_static_context(extra_fields: dict[str, str]) -> Callable:
    """Processor to add static context fields to all log entries."""

    def processor(
        logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(extra_fields)
        return event_dict

    return processor


def _use_json(config: SystemTzConfig) -> bool:
    """Decide between JSON and console rendering."""
    env_value = os.environ.get("SYSTEM_TZ_JSON_LOGS")
    if env_value is not None:
        return env_value.lower() == "true"
    if config.logging.json_logs is not None:
        return config.logging.json_logs
    return not sys.stderr.isatty()


def _configure_processors(config: SystemTzConfig) -> list:
    """Configure the processors shared by structlog and stdlib records."""
    extra_fields = {
        "service": "system-tz",
        "version": __version__,
        **config.logging.extra_fields,
    }

    processors = [
        structlog.contextvars.merge_contextvars,
        _add_static_context(extra_fields),
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    if config.logging.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder())

    return processors


def _configure_renderer(config: SystemTzConfig) -> Any:
    """Pick the final renderer."""
    if _use_json(config):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _configure_handlers(config: SystemTzConfig, shared_processors: list) -> None:
    """Route stdlib logging to stderr through the structlog renderer."""
    root_logger = logging.getLogger()
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    # Clear existing handlers to prevent duplicate logs in re-runs (e.g., in tests)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _configure_renderer(config),
        ],
    )
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(log_level)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)


def configure_structlog(config: SystemTzConfig) -> None:
    """Configure structlog-based logging system.

    Args:
        config: The SystemTzConfig instance containing logging settings.
    """
    shared_processors = _configure_processors(config)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.logging.level.upper(), logging.INFO)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configure_handlers(config, shared_processors)

    logger = structlog.get_logger(__name__)
    logger.debug(
        "Structured logging configured",
        log_level=config.logging.level,
        json_output=config.logging.json_logs,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog BoundLogger instance
    """
    return structlog.get_logger(name)
