"""
Structured Logging Configuration Module

Provides JSON-formatted structured logging for the math primitives and a
TRACE level below DEBUG for per-iteration diagnostics.
"""

import logging
import json
from datetime import datetime, timezone
from typing import Optional


# Below DEBUG: one record per Newton-Raphson iteration
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "message": record.getMessage(),
            "degree": getattr(record, 'degree', None),
            "iteration": getattr(record, 'iteration', None),
            "extra": getattr(record, 'extra', None)
        }

        # Remove None values
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        # Add exception info if present
        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def _resolve_level(level: str) -> int:
    name = level.upper()
    if name == "TRACE":
        return TRACE
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(level: str = "INFO", logger_name: str = "fixed_point_math",
                  log_format: str = "json", stream=None) -> logging.Logger:
    """
    Setup structured logging for the package.

    Args:
        level: Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Name of the logger
        log_format: "json" for structured records, "text" for plain lines
        stream: Output stream, stderr when None

    Returns:
        Configured logger instance
    """
    if log_format not in ("json", "text"):
        raise ValueError(f"Unsupported log format: {log_format}")

    resolved_level = _resolve_level(level)
    logger = logging.getLogger(logger_name)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(resolved_level)

    # Prevent propagation to avoid duplicate logs
    logger.propagate = False

    return logger


def setup_logging_from_config(config=None) -> logging.Logger:
    """Setup logging from the environment driven configuration"""
    if config is None:
        from .config import get_config
        config = get_config()
    return setup_logging(level=config.log_level, log_format=config.log_format)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get logger instance, the package root logger when no name is given"""
    return logging.getLogger(name or "fixed_point_math")
