"""Logging configuration for honeybadger-api.

Supports two logging formats:
- JSON logging (production): Structured logs for log aggregation systems
- Console logging (development): Human-readable logs with stacktraces

Configure via HONEYBADGER_LOG_FORMAT_JSON environment variable (default: True).
"""

import logging

import structlog

from honeybadger_api.config import Settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog for the client and the application using it.

    Args:
        settings: Settings to read log_level and log_format_json from.
            Defaults to Settings() (environment variables).
    """
    settings = settings or Settings()
    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
    ]
    if settings.log_format_json:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # ConsoleRenderer prints exceptions with their stacktrace itself
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[settings.log_level]
        ),
        cache_logger_on_first_use=False,
    )
