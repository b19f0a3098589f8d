"""Structured logging for the client.

The library itself only calls :func:`get_logger`; events go to whatever
structlog configuration the application has. :func:`setup_logging` is an
opt-in helper for scripts that want console or JSON output on stderr.
"""

import logging
import os

import structlog

LOG_FORMAT_ENV = "LOG_FORMAT"


def setup_logging(log_level: str = "INFO", log_format: str | None = None) -> None:
    """Route structlog events through one stderr handler on the root logger.

    ``log_format`` is ``"json"`` or ``"console"``; when omitted it is read
    from ``LOG_FORMAT`` and defaults to console. Unknown levels fall back to
    INFO.
    """
    fmt = (log_format or os.environ.get(LOG_FORMAT_ENV, "console")).lower()
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if fmt == "json" else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
