"""
Custom logging configuration to suppress per-request httpx logs
"""

import logging
import logging.config
from typing import Dict, Any


class HttpxRequestFilter(logging.Filter):
    """Filter to suppress httpx per-request INFO logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter out routine request lines from the httpx logger."""
        # httpx logs every request as 'HTTP Request: POST https://... "HTTP/1.1 200 OK"'
        if record.name.startswith("httpx") and record.levelno < logging.WARNING:
            if record.getMessage().startswith("HTTP Request:"):
                return False  # Suppress, the URL path already tells which auth flow ran
        return True  # Allow all other logs


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with httpx request suppression."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "httpx_request_filter": {
                "()": HttpxRequestFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout"
            },
            "transport": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["httpx_request_filter"]  # Apply filter to transport logs
            }
        },
        "loggers": {
            "httpx": {
                "handlers": ["transport"],
                "level": level,
                "propagate": False
            },
            "codeauth": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": level,
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the SDK logging configuration. Never called on import."""
    logging.config.dictConfig(get_logging_config(level))


def mask_token(token: str) -> str:
    """Shorten a session token so it can be logged safely."""
    if not token:
        return "<empty>"
    return f"{token[:6]}..." if len(token) > 6 else "***"
